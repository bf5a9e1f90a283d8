"""Entity store: the loaded entity list and its name lookup."""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from ..ingest.document_loader import parse_document
from ..ingest.models import Entity, EntityDocument
from ..utils.logging import get_logger

logger = get_logger("graph.entity_store")


class EntityStore:
    """Read-only holder for one document's entities.

    Names are assumed unique. Duplicates are not rejected; the last entity
    with a given name wins in ``by_name``.
    """

    def __init__(self, entities: Tuple[Entity, ...], context: Optional[Mapping[str, Any]] = None):
        self._entities = tuple(entities)
        self._context = MappingProxyType(dict(context or {}))

        by_name: Dict[str, Entity] = {}
        for entity in self._entities:
            if entity.name in by_name:
                logger.debug(f"Duplicate entity name, last one wins: {entity.name}")
            by_name[entity.name] = entity
        self._by_name = MappingProxyType(by_name)

    @classmethod
    def from_document(cls, document: EntityDocument) -> "EntityStore":
        return cls(tuple(document.entities), document.context)

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return self._entities

    @property
    def by_name(self) -> Mapping[str, Entity]:
        return self._by_name

    @property
    def context(self) -> Mapping[str, Any]:
        return self._context

    def get(self, name: str) -> Optional[Entity]:
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def load(document: Mapping[str, Any]) -> EntityStore:
    """Build an EntityStore from a raw JSON-LD document mapping."""
    store = EntityStore.from_document(parse_document(document))
    logger.info(f"Loaded entity store with {len(store)} entities and {len(store.context)} context terms")
    return store
