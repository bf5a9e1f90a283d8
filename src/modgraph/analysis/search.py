"""Case-insensitive entity search grouped by primary type."""

from typing import Dict, List, Optional, Sequence
from ..graph.indices import GraphIndices
from ..ingest.models import Entity

DEFAULT_TYPE_ORDER = ("StatusEffect", "Weapon", "Class", "Trait", "Enchantment")


def matches(entity: Entity, primary_type: str, needle: str) -> bool:
    """True when ``needle`` (already lower-cased) occurs in a searchable field."""
    if not needle:
        return True
    if needle in entity.name.lower() or needle in primary_type.lower():
        return True
    if needle in (entity.element or "").lower():
        return True
    return any(needle in tag.lower() for tag in entity.types)


def ordered_types(indices: GraphIndices, type_order: Optional[Sequence[str]] = None) -> List[str]:
    """Configured types first, then the remaining ones in discovery order."""
    preferred = [t for t in (type_order or DEFAULT_TYPE_ORDER) if t in indices.by_type]
    return preferred + [t for t in indices.by_type if t not in preferred]


def search(
    indices: GraphIndices,
    query: str = "",
    type_order: Optional[Sequence[str]] = None,
) -> Dict[str, List[Entity]]:
    """
    Filter entities by substring and group them by primary type.

    Args:
        indices: Graph indices of the loaded document
        query: Substring to match against name, types and element
        type_order: Preferred group order (defaults to the built-in order)

    Returns:
        Ordered mapping of primary type to name-sorted matching entities.
        Types without matches are omitted.
    """
    needle = (query or "").lower()
    results: Dict[str, List[Entity]] = {}
    for type_tag in ordered_types(indices, type_order):
        found = [e for e in indices.by_type[type_tag] if matches(e, type_tag, needle)]
        if found:
            results[type_tag] = sorted(found, key=lambda e: e.name.casefold())
    return results
