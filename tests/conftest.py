"""Pytest configuration and fixtures."""

import pytest

from grammar_cli.core import GrammarTree, import_grammar


SAMPLE_GRAMMAR = {
    "sat": [
        {"cmd": [
            {"obc": ["ping", "set"]},
            {"adcs": ["ping", "set"]},
            {"pay": ["ping", {"take_pic": "Take a picture with the payload camera"}]},
        ]},
        {"ft": "File transfer"},
    ],
    "gs": [
        {"radio": ["ping", "set_freq"]},
        {"config": "Ground station configuration"},
    ],
}


SAMPLE_GRAMMAR_YAML = """
sat:
  - cmd:
    - obc:
      - ping
      - set
    - adcs:
      - ping
      - set
    - pay:
      - ping
      - take_pic: Take a picture with the payload camera
  - ft: File transfer
gs:
  - radio:
    - ping
    - set_freq
  - config: Ground station configuration
"""


@pytest.fixture
def grammar_document():
    """Parsed grammar document for a small satellite command set."""
    return SAMPLE_GRAMMAR


@pytest.fixture
def grammar(grammar_document):
    """Grammar imported from the sample document."""
    return import_grammar(grammar_document)


@pytest.fixture
def grammar_file(tmp_path):
    """Sample grammar written to a YAML file."""
    path = tmp_path / "translations.yml"
    path.write_text(SAMPLE_GRAMMAR_YAML)
    return path


@pytest.fixture
def node_at(grammar):
    """Look up a grammar node id by its path of names from the root."""

    def find(*names: str, tree: GrammarTree = grammar) -> int:
        node_id = tree.root
        for name in names:
            node_id = next(
                child for child in tree.children(node_id)
                if tree.get(child).name == name
            )
        return node_id

    return find
