"""Core components for the grammar shell."""

from .command_parser import CommandParser, Command, ExitCommand, EmptyCommand, ChangeRootCommand, SequenceCommand
from .importer import import_grammar, load_grammar
from .matcher import GO_UP, MatchResult, SequenceMatcher, Token, tokenize
from .navigation import NavigationController
from .session import Session
from .tree import ANY_DEPTH, Depth, GrammarTree, Node, NodeId
from .usage_renderer import UsageRenderer

__all__ = [
    "CommandParser",
    "Command",
    "ExitCommand",
    "EmptyCommand",
    "ChangeRootCommand",
    "SequenceCommand",
    "import_grammar",
    "load_grammar",
    "GO_UP",
    "MatchResult",
    "SequenceMatcher",
    "Token",
    "tokenize",
    "NavigationController",
    "Session",
    "ANY_DEPTH",
    "Depth",
    "GrammarTree",
    "Node",
    "NodeId",
    "UsageRenderer",
]
