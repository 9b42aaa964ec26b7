"""Interactive console backed by prompt_toolkit."""

import logging

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.completion import Completer

from ..interfaces import Console

logger = logging.getLogger(__name__)


class PromptToolkitConsole(Console):
    """Console for interactive terminals.

    Line history is kept in memory only and is lost when the session ends.
    """

    def __init__(self, completer: Completer | None = None):
        """
        Initialize the console.

        Args:
            completer: Optional tab completer for the prompt.
        """
        self.completer = completer
        self._session: PromptSession | None = None

    @property
    def session(self) -> PromptSession:
        """The prompt session, created on first use."""
        if self._session is None:
            logger.debug("Creating prompt session")
            self._session = PromptSession(completer=self.completer)
        return self._session

    def read_line(self, prompt: str) -> str:
        return self.session.prompt(prompt)

    def write(self, text: str) -> None:
        print_formatted_text(text)
