"""Abstract interfaces for the grammar shell."""

from .console import Console

__all__ = ["Console"]
