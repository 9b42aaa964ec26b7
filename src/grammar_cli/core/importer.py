"""Import command grammars from parsed YAML documents."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .tree import GrammarTree, Node, NodeId

logger = logging.getLogger(__name__)


def import_grammar(document: Any) -> GrammarTree:
    """
    Build a frozen grammar tree from a parsed document.

    The document maps command names either to a help string or to a
    list of children. List elements are plain names (leaf commands) or
    nested mappings (sub-grammars). Non-string keys and any other kind
    of element are skipped.

    Args:
        document: The parsed document, usually from ``yaml.safe_load``.

    Returns:
        The grammar tree. A document that is not a mapping produces a
        tree holding only the root.
    """
    tree = GrammarTree()

    if not isinstance(document, Mapping):
        if document is not None:
            logger.warning(
                f"Grammar document is a {type(document).__name__}, not a mapping; using an empty grammar"
            )
        return tree.freeze()

    _import_mapping(tree, tree.root, document)
    logger.debug(f"Imported grammar with {tree.subtree_count(tree.root)} commands")
    return tree.freeze()


def _import_mapping(tree: GrammarTree, parent: NodeId, mapping: Mapping) -> None:
    parent_depth = tree.get(parent).depth

    for key, value in mapping.items():
        if not isinstance(key, str):
            logger.debug(f"Skipping non-string key {key!r}")
            continue

        depth = parent_depth.child()
        explanation = str(value) if isinstance(value, str) else None
        node_id = tree.append(parent, Node(str(key), explanation, depth))

        if not isinstance(value, list):
            continue

        for element in value:
            if isinstance(element, str):
                tree.append(node_id, Node(str(element), None, depth.child()))
            elif isinstance(element, Mapping):
                _import_mapping(tree, node_id, element)
            else:
                logger.debug(f"Skipping {type(element).__name__} element under {key!r}")


def load_grammar(path: str | Path) -> GrammarTree:
    """
    Load a grammar from a YAML file.

    Args:
        path: Path to the YAML grammar file.

    Returns:
        The imported grammar tree.

    Raises:
        FileNotFoundError: If the grammar file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
    """
    grammar_path = Path(path)

    if not grammar_path.exists():
        raise FileNotFoundError(f"Grammar file not found: {path}")

    with open(grammar_path) as f:
        document = yaml.safe_load(f)

    return import_grammar(document)
