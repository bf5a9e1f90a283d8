"""Configuration module: display and document settings."""

from pathlib import Path
from typing import Dict, Any, Optional
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import load_config, read_yaml_config, deep_merge
from .paths import get_defaults_path, get_user_config_path, get_project_config_path

logger = get_logger("config")


def load_explorer_config(config_path: Optional[str] = None, use_overrides: bool = True) -> Dict[str, Any]:
    """
    Load configuration: packaged defaults, then user/project overrides,
    then an explicit config file.
    
    Args:
        config_path: Optional path to an extra YAML config file
        use_overrides: Whether to merge ~/.modgraph and ./.modgraph configs
        
    Returns:
        Configuration dictionary
        
    Raises:
        ConfigError: If the defaults or the explicit config cannot be loaded
    """
    config = read_yaml_config(get_defaults_path())
    
    if use_overrides:
        deep_merge(config, load_config())
    
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        deep_merge(config, read_yaml_config(path))
        logger.info(f"Loaded configuration from {config_path}")
    
    display = config.get("display")
    if not isinstance(display, dict):
        raise ConfigError("Config 'display' section must be a dictionary")
    if not isinstance(display.get("type_order", []), list):
        raise ConfigError("display.type_order must be a list")
    if not isinstance(display.get("type_colors", {}), dict):
        raise ConfigError("display.type_colors must be a dictionary")
    
    return config


__all__ = [
    "load_explorer_config",
    "load_config",
    "get_defaults_path",
    "get_user_config_path",
    "get_project_config_path",
]
