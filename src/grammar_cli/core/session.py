"""Session state for grammar navigation."""

from dataclasses import dataclass

from .tree import NodeId


@dataclass(frozen=True)
class Session:
    """Position of the operator in the grammar (immutable).

    ``previous_root`` holds one step of history for ``cd -``.
    """

    current_root: NodeId
    previous_root: NodeId | None = None

    def navigate_to(self, node_id: NodeId) -> "Session":
        """Move to a node, remembering where we came from.

        Moving to the node we are already on changes nothing.
        """
        if node_id == self.current_root:
            return self
        return Session(current_root=node_id, previous_root=self.current_root)

    def navigate_previous(self) -> "Session":
        """Swap the current and previous roots, if there is a previous one."""
        if self.previous_root is None:
            return self
        return self.navigate_to(self.previous_root)
