"""Load and parse JSON-LD entity documents."""

import json
from pathlib import Path
from typing import Any, Dict, Mapping
from pydantic import ValidationError
from .models import EntityDocument
from ..utils.errors import DocumentLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.document_loader")


def load_document_json(document_path: str) -> Dict[str, Any]:
    """
    Read a JSON-LD document from disk.

    Args:
        document_path: Path to the document (typically mod-data.json)

    Returns:
        Raw parsed JSON object

    Raises:
        DocumentLoadError: If the file cannot be read or is not valid JSON
    """
    path = Path(document_path)

    if not path.exists():
        raise DocumentLoadError(
            f"Document not found: {document_path}. "
            "Please check the file path and ensure the file exists."
        )

    if not path.is_file():
        raise DocumentLoadError(
            f"Path is not a file: {document_path}. "
            "Please provide a JSON-LD document file."
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"Invalid JSON in document: {e}. "
            "Please ensure the file is valid JSON."
        )
    except Exception as e:
        raise DocumentLoadError(
            f"Error reading document: {e}. "
            "Please check file permissions and try again."
        )

    if not isinstance(data, dict):
        raise DocumentLoadError(
            f"Document root must be a JSON object, got {type(data).__name__}."
        )

    graph = data.get("@graph")
    logger.info(f"Loaded document from {document_path} ({len(graph) if isinstance(graph, list) else 0} entities)")
    return data


def parse_document(data: Mapping[str, Any]) -> EntityDocument:
    """
    Turn a raw JSON-LD mapping into an EntityDocument.

    Missing ``@graph`` and ``@context`` default to empty. Individual entities
    are not validated beyond tolerating absent optional fields.

    Raises:
        DocumentLoadError: If the document is not structured as expected
    """
    if not isinstance(data, Mapping):
        raise DocumentLoadError(
            f"Document must be a mapping with '@graph' and '@context', got {type(data).__name__}."
        )

    graph = data.get("@graph")
    if graph is None:
        logger.warning("Document has no '@graph' - treating as empty")
        graph = []
    if not isinstance(graph, list):
        raise DocumentLoadError(f"'@graph' must be a list, got {type(graph).__name__}.")

    for index, item in enumerate(graph):
        if not isinstance(item, dict):
            raise DocumentLoadError(
                f"Entity at position {index} in '@graph' is not an object."
            )

    try:
        return EntityDocument.model_validate({
            "@context": data.get("@context") or {},
            "@graph": graph,
        })
    except ValidationError as e:
        raise DocumentLoadError(f"Could not parse entities: {e}") from e
