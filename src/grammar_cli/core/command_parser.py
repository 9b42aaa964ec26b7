"""Command parser for interpreting operator input lines."""

from abc import ABC
from dataclasses import dataclass


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class ExitCommand(Command):
    """Command to end the session."""

    pass


@dataclass(frozen=True)
class EmptyCommand(Command):
    """A blank line; the shell just prompts again."""

    pass


@dataclass(frozen=True)
class ChangeRootCommand(Command):
    """Command to move through the grammar (``cd``)."""

    argument: str = ""


@dataclass(frozen=True)
class SequenceCommand(Command):
    """A command line to validate against the grammar."""

    words: tuple[str, ...]

    def __init__(self, words: list[str] | tuple[str, ...]):
        object.__setattr__(self, "words", tuple(words))


class CommandParser:
    """Parses raw input lines into Command objects."""

    EXIT_COMMANDS = {"exit", "quit"}
    CHANGE_ROOT_KEYWORD = "cd"

    def parse(self, input_str: str) -> Command:
        """
        Parse an input line into a Command object.

        Args:
            input_str: The raw line typed by the operator.

        Returns:
            A Command object representing the parsed input.
        """
        words = input_str.split()

        if not words:
            return EmptyCommand()

        if input_str.strip() in self.EXIT_COMMANDS:
            return ExitCommand()

        if words[0] == self.CHANGE_ROOT_KEYWORD:
            argument = input_str.strip()[len(self.CHANGE_ROOT_KEYWORD):]
            return ChangeRootCommand(argument=argument.strip())

        return SequenceCommand(words)
