"""Centralized path management for shelflife.

Only configuration lives on disk; the parsing engine itself never reads
or writes files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_DIR_ENV = "SHELFLIFE_CONFIG_DIR"


def _get_config_root() -> Path:
    """Determine the configuration directory."""
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path("~/.config/shelflife").expanduser()


@dataclass
class ProjectPaths:
    """Container for all configuration paths.

    Paths are computed relative to the config root, so every module sees the
    same locations regardless of the current working directory.
    """

    config: Path = field(default_factory=_get_config_root)

    def __post_init__(self) -> None:
        self.config = self.config.resolve()

    @property
    def item_category_rules(self) -> Path:
        """User item category rules TOML file."""
        return self.config / "item_categories.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached paths so the next call re-reads the environment."""
    global _paths
    _paths = None
