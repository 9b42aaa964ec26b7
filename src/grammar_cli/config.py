"""Configuration handling for the grammar shell."""

from dataclasses import dataclass
from pathlib import Path
import yaml


class ConfigurationError(ValueError):
    """Raised when the settings cannot be used to start a session."""


@dataclass
class Config:
    """Configuration settings for the grammar shell.

    Attributes:
        prompt: Prompt literal shown after the navigation path.
        grammar_file: YAML file holding the command grammar.
        completion: Whether to offer tab completion.
    """

    prompt: str = "$: "
    grammar_file: str = "translations.yml"
    completion: bool = True

    def __post_init__(self):
        if not self.prompt:
            raise ConfigurationError("Empty prompt not allowed")

    def get_grammar_path(self) -> Path:
        """Get grammar file as expanded Path object."""
        return Path(self.grammar_file).expanduser()


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If a section is malformed or the prompt is empty.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")

    # Extract sections
    shell = _section(data, "shell")
    grammar = _section(data, "grammar")

    completion = shell.get("completion", Config.completion)
    if not isinstance(completion, bool):
        raise ConfigurationError(f"shell.completion must be true or false, got {completion!r}")

    return Config(
        prompt=str(shell.get("prompt", Config.prompt) or ""),
        grammar_file=grammar.get("file", Config.grammar_file),
        completion=completion,
    )


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section '{name}' must be a mapping")
    return section
