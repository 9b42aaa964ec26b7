"""Navigation through the grammar with ``cd``."""

import logging

from .matcher import SequenceMatcher, tokenize
from .session import Session
from .tree import GrammarTree

logger = logging.getLogger(__name__)


class NavigationController:
    """Applies ``cd`` arguments to a session.

    Supported forms:
        cd            stay where we are
        cd -          go back to the previous position
        cd ..         go to the parent command
        cd a/b/c      walk a/b/c from the grammar root
        cd /a/b/c     same as above
    """

    PATH_SEPARATOR = "/"
    PREVIOUS = "-"
    PARENT = ".."

    def __init__(self, grammar: GrammarTree, matcher: SequenceMatcher | None = None):
        self.grammar = grammar
        self.matcher = matcher or SequenceMatcher(grammar)

    def change_root(self, session: Session, argument: str) -> Session:
        """
        Apply a ``cd`` argument.

        Args:
            session: The current session.
            argument: Everything after the ``cd`` keyword.

        Returns:
            The updated session (the same object for no-ops).
        """
        argument = argument.strip()

        if not argument:
            return session

        if argument == self.PREVIOUS:
            logger.debug("Navigating to previous root")
            return session.navigate_previous()

        if argument == self.PARENT:
            parent = self.grammar.parent(session.current_root)
            if parent is None:
                return session
            logger.debug(f"Navigating up from {self.grammar.get(session.current_root).name!r}")
            return session.navigate_to(parent)

        # Absolute and relative paths both resolve from the grammar root
        segments = argument.lstrip(self.PATH_SEPARATOR).rstrip(self.PATH_SEPARATOR)
        if not segments:
            return session.navigate_to(self.grammar.root)

        result = self.matcher.match(
            self.grammar.root, tokenize(segments.split(self.PATH_SEPARATOR))
        )
        if result.matched_count != result.token_count:
            logger.debug(f"Path {argument!r} only partially resolved")
        return session.navigate_to(result.final_node)

    def prompt_path(self, session: Session) -> str:
        """
        Build the prompt prefix for the session's position.

        Returns:
            Names from the grammar root down to the current root, each
            followed by the path separator; empty at the grammar root.
        """
        names = [
            self.grammar.get(node_id).name
            for node_id in self.grammar.ancestors(session.current_root)
            if node_id != self.grammar.root
        ]
        return "".join(f"{name}{self.PATH_SEPARATOR}" for name in reversed(names))
