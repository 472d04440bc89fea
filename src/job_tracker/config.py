"""Configuration handling for the Job Tracker."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for the Job Tracker.

    Attributes:
        applications_file: YAML file with the applications to load at start.
        max_list_entries: Maximum applications shown after a command.
        prompt: Prompt shown in interactive mode.
    """

    applications_file: str | None = None
    max_list_entries: int | None = 50
    prompt: str = "> "

    def get_applications_path(self) -> Path | None:
        """Get applications file as expanded Path object, if configured."""
        if self.applications_file is None:
            return None
        return Path(self.applications_file).expanduser()


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    tracker = data.get("tracker", {})
    cli = data.get("cli", {})

    return Config(
        applications_file=tracker.get("applications_file", Config.applications_file),
        max_list_entries=tracker.get("max_list_entries", Config.max_list_entries),
        prompt=cli.get("prompt", Config.prompt),
    )
