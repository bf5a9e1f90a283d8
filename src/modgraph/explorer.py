"""Query surface over one loaded JSON-LD document."""

from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence
from .analysis.chain import build_chain
from .analysis.hub_stats import compute_global_stats
from .analysis.search import DEFAULT_TYPE_ORDER, search
from .contracts.query_output import ChainNode, EntityStats, GlobalStats
from .graph.entity_store import EntityStore, load
from .graph.indices import GraphIndices, build_indices
from .graph.traversal import collect_ancestor_set, transitive_ancestors, transitive_reach
from .ingest.document_loader import load_document_json
from .ingest.models import Entity
from .utils.logging import get_logger

logger = get_logger("explorer")


class GraphExplorer:
    """Read-only explorer: built once per document, queried many times.

    Unknown names are never an error: they yield None, empty lists or
    zero counts.
    """

    def __init__(self, store: EntityStore, type_order: Optional[Sequence[str]] = None):
        self._indices = build_indices(store)
        self._type_order = tuple(type_order) if type_order else DEFAULT_TYPE_ORDER
        self._global_stats = compute_global_stats(self._indices)

    @classmethod
    def from_document(cls, document: Mapping[str, Any], type_order: Optional[Sequence[str]] = None) -> "GraphExplorer":
        """Build an explorer from a parsed JSON-LD mapping."""
        return cls(load(document), type_order=type_order)

    @classmethod
    def from_file(cls, document_path: str, type_order: Optional[Sequence[str]] = None) -> "GraphExplorer":
        """Load a JSON-LD file and build an explorer from it."""
        return cls.from_document(load_document_json(document_path), type_order=type_order)

    @property
    def indices(self) -> GraphIndices:
        return self._indices

    @property
    def type_order(self) -> Sequence[str]:
        return self._type_order

    def get_entity(self, name: str) -> Optional[Entity]:
        return self._indices.get_entity(name)

    def list_by_type(self, primary_type: str) -> List[Entity]:
        return list(self._indices.by_type.get(primary_type, ()))

    def search(self, substring: str = "") -> Dict[str, List[Entity]]:
        return search(self._indices, substring, self._type_order)

    def get_direct_dependencies(self, name: str) -> List[str]:
        return list(self._indices.dependencies_of(name))

    def get_direct_dependents(self, name: str) -> List[str]:
        return list(self._indices.dependents_of(name))

    def transitive_reach(self, name: str) -> int:
        return transitive_reach(self._indices, name)

    def transitive_ancestors(self, name: str) -> int:
        return transitive_ancestors(self._indices, name)

    def collect_ancestor_set(self, name: str) -> FrozenSet[str]:
        return collect_ancestor_set(self._indices, name)

    def get_stats(self, name: str) -> EntityStats:
        """Per-entity metrics; an unknown name gets no type or element."""
        entity = self._indices.get_entity(name)
        return EntityStats(
            name=name,
            primary_type=entity.primary_type if entity else None,
            element=entity.element if entity else None,
            direct_deps=len(self._indices.dependencies_of(name)),
            direct_dependents=len(self._indices.dependents_of(name)),
            transitive_reach=self.transitive_reach(name),
            transitive_ancestors=self.transitive_ancestors(name),
        )

    def get_global_stats(self) -> GlobalStats:
        return self._global_stats.model_copy(deep=True)

    def build_chain(self, name: str) -> List[ChainNode]:
        return build_chain(self._indices, name)

    def entity_properties(self, name: str) -> Dict[str, Any]:
        """Extra attributes for display, without identity metadata."""
        entity = self._indices.get_entity(name)
        return entity.properties() if entity else {}

    def entity_json(self, name: str) -> Optional[Dict[str, Any]]:
        """The entity as a JSON-LD object, or None when unknown."""
        entity = self._indices.get_entity(name)
        return entity.to_jsonld() if entity else None

    def suggest_names(self, name: str, limit: int = 5) -> List[str]:
        """Entity names loosely resembling ``name``, for not-found messages."""
        target = name.lower()
        similar = [
            candidate for candidate in self._indices.by_name
            if target in candidate.lower() or candidate.lower() in target
        ]
        return similar[:limit]
