"""Abstract interface for operator consoles."""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract interface for reading lines from and writing to the operator."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show the prompt and read one line.

        Args:
            prompt: The prompt text to display.

        Returns:
            The line without its trailing newline.

        Raises:
            EOFError: When the input is exhausted.
            OSError: When the input source fails.
        """
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text to the operator, followed by a newline."""
        pass
