"""Arena-backed command grammar tree."""

from dataclasses import dataclass, field
from typing import Iterator

NodeId = int


class Depth:
    """Expected distance from the grammar root.

    Either an exact non-negative integer or the wildcard, which is equal
    to every depth (including another wildcard).
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None):
        if value is not None and value < 0:
            raise ValueError(f"Depth must be non-negative, got {value}")
        self._value = value

    @classmethod
    def at(cls, value: int) -> "Depth":
        """Create an exact depth."""
        return cls(value)

    @property
    def value(self) -> int | None:
        return self._value

    @property
    def is_any(self) -> bool:
        return self._value is None

    def child(self) -> "Depth":
        """Depth of a child node. Children of a wildcard stay wildcard."""
        if self._value is None:
            return self
        return Depth(self._value + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Depth):
            return NotImplemented
        if self._value is None or other._value is None:
            return True
        return self._value == other._value

    # Wildcard equality is not transitive
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Depth(any)" if self._value is None else f"Depth({self._value})"


ANY_DEPTH = Depth()


@dataclass(frozen=True)
class Node:
    """A named grammar node with optional help text."""

    name: str
    explanation: str | None = None
    depth: Depth = field(default_factory=Depth)

    # Depth equality is not transitive
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        # Empty help text means no help text
        if not self.explanation:
            object.__setattr__(self, "explanation", None)


class GrammarTree:
    """Append-only tree owning all of its nodes.

    Nodes live in one list; ids are indexes into it. Parent and child
    links are stored as index lists, so walking up is a backward walk
    over ``_parents``.
    """

    ROOT_NAME = "root"

    def __init__(self, root_depth: Depth | None = None):
        self._nodes: list[Node] = []
        self._parents: list[NodeId | None] = []
        self._children: list[list[NodeId]] = []
        self._frozen = False
        self.root = self._new_node(
            Node(self.ROOT_NAME, None, root_depth if root_depth is not None else Depth.at(0)),
            None,
        )

    def _new_node(self, node: Node, parent: NodeId | None) -> NodeId:
        node_id = len(self._nodes)
        self._nodes.append(node)
        self._parents.append(parent)
        self._children.append([])
        if parent is not None:
            self._children[parent].append(node_id)
        return node_id

    def _check(self, node_id: NodeId) -> NodeId:
        if not isinstance(node_id, int) or not 0 <= node_id < len(self._nodes):
            raise IndexError(f"Unknown node id: {node_id!r}")
        return node_id

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "GrammarTree":
        """Make the tree read-only. Returns the tree for chaining."""
        self._frozen = True
        return self

    def append(self, parent: NodeId, node: Node) -> NodeId:
        """
        Append a node as the last child of ``parent``.

        Args:
            parent: Id of the parent node.
            node: The node data to store.

        Returns:
            The id of the new node.

        Raises:
            RuntimeError: If the tree has been frozen.
            IndexError: If ``parent`` is not a node of this tree.
        """
        if self._frozen:
            raise RuntimeError("Grammar tree is frozen")
        return self._new_node(node, self._check(parent))

    def get(self, node_id: NodeId) -> Node:
        """Get the node data stored under an id."""
        return self._nodes[self._check(node_id)]

    def parent(self, node_id: NodeId) -> NodeId | None:
        return self._parents[self._check(node_id)]

    def children(self, node_id: NodeId) -> Iterator[NodeId]:
        """Iterate over the children of a node in insertion order."""
        return iter(tuple(self._children[self._check(node_id)]))

    def ancestors(self, node_id: NodeId) -> Iterator[NodeId]:
        """Iterate from the node itself up to the root, nearest first."""
        current: NodeId | None = self._check(node_id)
        while current is not None:
            yield current
            current = self._parents[current]

    def descendants(self, node_id: NodeId) -> Iterator[NodeId]:
        """Iterate over the node and everything below it in pre-order."""
        stack = [self._check(node_id)]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self._children[current]))

    def subtree_count(self, node_id: NodeId) -> int:
        """Count the strict descendants of a node (0 for a leaf)."""
        return sum(1 for _ in self.descendants(node_id)) - 1

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrammarTree):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            self.get(mine) == other.get(theirs)
            for mine, theirs in zip(self.descendants(self.root), other.descendants(other.root))
        )

    __hash__ = None  # type: ignore[assignment]

    def render(self, node_id: NodeId | None = None) -> str:
        """
        Render a subtree as text, one node per line.

        Each line is indented with one tab per depth level followed by
        ``>``; nodes with a wildcard depth are printed without a marker.
        Help text follows the name after a colon.
        """
        lines = []
        start = self.root if node_id is None else node_id
        for current in self.descendants(start):
            node = self.get(current)
            line = node.name
            if not node.depth.is_any:
                line = "\t" * node.depth.value + ">" + line
            if node.explanation:
                line += f": {node.explanation}"
            lines.append(line)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GrammarTree(nodes={len(self)}, frozen={self._frozen})"
