"""Console implementations for the grammar shell."""

from .completer import GrammarCompleter
from .prompt_console import PromptToolkitConsole
from .stream_console import StreamConsole

__all__ = ["GrammarCompleter", "PromptToolkitConsole", "StreamConsole"]
