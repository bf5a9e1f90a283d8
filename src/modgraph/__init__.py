"""modgraph - read-only query engine for JSON-LD entity dependency graphs."""

import logging
from typing import Any, Dict
from .utils.logging import setup_logging, get_logger
from .utils.errors import ModGraphError

__version__ = "0.1.0"

__all__ = ["GraphExplorer", "explore", "ModGraphError"]

setup_logging(logging.WARNING)
logger = get_logger("modgraph")

from .explorer import GraphExplorer  # noqa: E402


def explore(document_path: str) -> Dict[str, Any]:
    """Load a document and return its global stats as a plain dict."""
    try:
        logger.info(f"Exploring document: {document_path}")
        explorer = GraphExplorer.from_file(document_path)
        return explorer.get_global_stats().model_dump()
    except ModGraphError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error while loading document: {e}", exc_info=True)
        raise ModGraphError(f"Exploration failed: {e}") from e
