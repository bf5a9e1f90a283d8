"""Config path resolution for two-tier config system."""

from pathlib import Path
from typing import Optional


def get_defaults_path() -> Path:
    """Packaged defaults shipped next to this module."""
    return Path(__file__).parent / "defaults.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.modgraph/config.yaml"""
    home = Path.home()
    return home / ".modgraph" / "config.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .modgraph/config.yaml (from current working directory)"""
    cwd = Path.cwd()
    project_config = cwd / ".modgraph" / "config.yaml"
    if project_config.exists():
        return project_config
    return None
