"""Console over plain text streams."""

import sys
from typing import TextIO

from ..interfaces import Console


class StreamConsole(Console):
    """Reads lines from one text stream and writes to another.

    Used when input is piped in rather than typed at a terminal.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        show_prompt: bool = False,
    ):
        """
        Initialize the console.

        Args:
            input_stream: Stream to read lines from (default: stdin).
            output_stream: Stream to write to (default: stdout).
            show_prompt: Whether to write the prompt before each read.
        """
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        self.show_prompt = show_prompt

    def read_line(self, prompt: str) -> str:
        if self.show_prompt:
            self.output.write(prompt)
            self.output.flush()

        line = self.input.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        print(text, file=self.output)
