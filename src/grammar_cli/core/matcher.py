"""Match token sequences against the command grammar."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .tree import ANY_DEPTH, Depth, GrammarTree, Node, NodeId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """One word of an input line with the depth it is expected at."""

    name: str
    depth: Depth = field(default_factory=Depth)

    __hash__ = None  # type: ignore[assignment]

    def matches(self, node: Node) -> bool:
        """Check whether this token names the given grammar node."""
        return self.name == node.name and self.depth == node.depth


# Matches ".." at any position in a line
GO_UP = Token("..", ANY_DEPTH)


def tokenize(words: Iterable[str]) -> list[Token]:
    """
    Turn words into tokens.

    The i-th word (1-based) is expected at depth i, wherever the
    walk starts.
    """
    return [Token(word, Depth.at(i)) for i, word in enumerate(words, 1)]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one line.

    Attributes:
        sequence: Tree whose root's children are copies of the matched
            grammar nodes, in match order.
        final_node: Grammar node the walk ended on.
        token_count: Number of tokens in the line.
        remaining: Strict descendants of ``final_node`` in the grammar.
    """

    sequence: GrammarTree
    final_node: NodeId
    token_count: int
    remaining: int

    @property
    def matched_count(self) -> int:
        return self.sequence.subtree_count(self.sequence.root)

    @property
    def matched_names(self) -> list[str]:
        """Names recorded in the sequence tree, root excluded."""
        descendants = self.sequence.descendants(self.sequence.root)
        next(descendants)
        return [self.sequence.get(node_id).name for node_id in descendants]

    @property
    def accepted(self) -> bool:
        """Every token was consumed and the walk ended on a leaf."""
        return self.matched_count == self.token_count and self.remaining == 0


class SequenceMatcher:
    """Walks a grammar tree, consuming one token per level.

    Given the grammar

                        root
                  -------|-------
                 sat            gs
             -----|-----    -----|-----
            cmd        ft radio     config
         ----|-------
        obc  adcs  pay
         |
        ping

    the line ``sat cmd obc ping`` walks from the root down to ``ping``.
    The walk stops at the first token that names no child of the
    current node; everything after it is ignored.
    """

    def __init__(self, grammar: GrammarTree):
        self.grammar = grammar

    def match(self, start: NodeId, tokens: list[Token]) -> MatchResult:
        """
        Match tokens starting below ``start``.

        Args:
            start: Grammar node to start from.
            tokens: Tokens of the line, in order.

        Returns:
            The match result.
        """
        grammar = self.grammar
        current = start
        sequence = GrammarTree()

        for token in tokens:
            if token == GO_UP:
                parent = grammar.parent(current)
                if parent is not None:
                    sequence.append(sequence.root, grammar.get(parent))
                    current = parent

            child = self._find_child(current, token)
            if child is None:
                logger.debug(f"No command {token.name!r} at depth {token.depth.value} below {grammar.get(current).name!r}")
                break

            sequence.append(sequence.root, grammar.get(child))
            current = child

        sequence.freeze()
        logger.debug(f"Matched sequence:\n{sequence.render()}")

        return MatchResult(
            sequence=sequence,
            final_node=current,
            token_count=len(tokens),
            remaining=grammar.subtree_count(current),
        )

    def _find_child(self, node_id: NodeId, token: Token) -> NodeId | None:
        for child in self.grammar.children(node_id):
            if token.matches(self.grammar.get(child)):
                return child
        return None
