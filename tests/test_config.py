"""Tests for the configuration module."""

import pytest
import tempfile
from pathlib import Path
from grammar_cli.config import Config, ConfigurationError, load_config


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.prompt == "$: "
        assert config.grammar_file == "translations.yml"
        assert config.completion is True

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(
            prompt="> ",
            grammar_file="/custom/grammar.yml",
            completion=False,
        )
        assert config.prompt == "> "
        assert config.grammar_file == "/custom/grammar.yml"
        assert config.completion is False

    def test_empty_prompt_rejected(self):
        """An empty prompt is a configuration error."""
        with pytest.raises(ConfigurationError):
            Config(prompt="")

    def test_configuration_error_is_value_error(self):
        """ConfigurationError can be caught as ValueError."""
        assert issubclass(ConfigurationError, ValueError)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
shell:
  prompt: "cmd> "
  completion: false

grammar:
  file: /tmp/grammar.yml
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.prompt == "cmd> "
            assert config.completion is False
            assert config.grammar_file == "/tmp/grammar.yml"

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
grammar:
  file: /tmp/test.yml
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.grammar_file == "/tmp/test.yml"
            # Rest should be defaults
            assert config.prompt == "$: "
            assert config.completion is True

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config.prompt == "$: "
            assert config.grammar_file == "translations.yml"

    def test_load_empty_prompt_raises(self, tmp_path):
        """An empty prompt in the file is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text('shell:\n  prompt: ""\n')

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    @pytest.mark.parametrize("content", [
        "- shell\n- grammar\n",
        "shell: verbose\n",
        "grammar: translations.yml\n",
    ])
    def test_malformed_sections_raise(self, tmp_path, content):
        """A settings file must be a mapping of mappings."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_completion_must_be_boolean(self, tmp_path):
        """Quoted booleans are not taken as true."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text('shell:\n  completion: "false"\n')

        with pytest.raises(ConfigurationError, match="completion"):
            load_config(config_file)

    def test_completion_disabled(self, tmp_path):
        """A YAML false turns completion off."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("shell:\n  completion: false\n")

        assert load_config(config_file).completion is False

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_expand_home_directory(self):
        """Home directory is expanded in grammar_file."""
        config = Config(grammar_file="~/grammars/sat.yml")
        expanded = config.get_grammar_path()

        assert "~" not in str(expanded)
        assert expanded.name == "sat.yml"

    def test_get_grammar_path_returns_path_object(self):
        """get_grammar_path returns Path object."""
        config = Config(grammar_file="/tmp/test.yml")
        path = config.get_grammar_path()
        assert isinstance(path, Path)
        assert str(path) == "/tmp/test.yml"
