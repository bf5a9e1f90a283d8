"""CLI utilities package."""

from typing import Any, Dict, Optional
from ...config import load_explorer_config
from ...explorer import GraphExplorer
from ...utils.logging import get_logger

logger = get_logger("cli.utils")


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def load_settings(ctx_obj: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Load configuration using the --config path stored on the click context."""
    config_path = (ctx_obj or {}).get("config_path")
    return load_explorer_config(config_path)


def open_explorer(document: Optional[str], config: Dict[str, Any]) -> GraphExplorer:
    """
    Shared document loading helper - all commands call this.
    
    Args:
        document: Document path from the command line, or None for the configured default
        config: Loaded configuration
        
    Returns:
        GraphExplorer for the document
        
    Raises:
        DocumentLoadError: If the document cannot be found or parsed
    """
    document = document or config.get("document", {}).get("default_path", "mod-data.json")
    type_order = config.get("display", {}).get("type_order")
    return GraphExplorer.from_file(document, type_order=type_order)


def not_found_message(explorer: GraphExplorer, name: str) -> str:
    """Describe an unknown entity name, suggesting similar ones."""
    message = f"Entity '{name}' not found in document."
    suggestions = explorer.suggest_names(name)
    if suggestions:
        message += f"\nSimilar entities: {', '.join(suggestions)}"
    return message


__all__ = ["open_explorer", "load_settings", "format_error", "not_found_message"]
