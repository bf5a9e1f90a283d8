"""Derived read-only indices over the entity store."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
import networkx as nx
from .entity_store import EntityStore
from ..ingest.models import Entity
from ..utils.errors import GraphConstructionError
from ..utils.logging import get_logger

logger = get_logger("graph.indices")

UNKNOWN_TYPE = "Unknown"


class GraphIndices:
    """Immutable index bundle: entity store, dependency graph, reverse edges
    and type groups.

    Every query function takes one of these explicitly; nothing is global.
    """

    def __init__(
        self,
        store: EntityStore,
        graph: nx.DiGraph,
        dependents: Mapping[str, Tuple[str, ...]],
        by_type: Mapping[str, Tuple[Entity, ...]],
    ):
        self._store = store
        self._graph = graph if nx.is_frozen(graph) else nx.freeze(graph)
        self._dependents = MappingProxyType(dict(dependents))
        self._by_type = MappingProxyType(dict(by_type))

    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return self._store.entities

    @property
    def by_name(self) -> Mapping[str, Entity]:
        return self._store.by_name

    @property
    def graph(self) -> nx.DiGraph:
        """Frozen entity -> dependency graph; dangling names are nodes too."""
        return self._graph

    @property
    def dependents(self) -> Mapping[str, Tuple[str, ...]]:
        """name -> names that declare a dependency on it, in discovery order."""
        return self._dependents

    @property
    def by_type(self) -> Mapping[str, Tuple[Entity, ...]]:
        """primary type -> entities in document order."""
        return self._by_type

    def get_entity(self, name: str) -> Optional[Entity]:
        return self._store.get(name)

    def dependents_of(self, name: str) -> Tuple[str, ...]:
        return self._dependents.get(name, ())

    def dependencies_of(self, name: str) -> Tuple[str, ...]:
        entity = self._store.get(name)
        return entity.depends_on if entity else ()


def primary_type_of(entity: Entity) -> str:
    """Primary type tag, defaulting to ``Unknown`` for untyped entities."""
    return entity.primary_type or UNKNOWN_TYPE


def build_indices(store: EntityStore) -> GraphIndices:
    """Derive the dependency graph, dependents and by-type maps.

    The graph follows the last entity per name, like ``EntityStore.by_name``.
    The dependents map keeps every declared edge, duplicates included, in
    discovery order.
    """
    try:
        graph = nx.DiGraph()
        for entity in store.by_name.values():
            graph.add_node(entity.name)
            graph.add_edges_from((entity.name, dep) for dep in entity.depends_on)

        dependents: Dict[str, List[str]] = {}
        by_type: Dict[str, List[Entity]] = {}

        for entity in store.entities:
            for dep in entity.depends_on:
                dependents.setdefault(dep, []).append(entity.name)
                if dep not in store:
                    logger.debug(f"Dangling dependency: {entity.name} -> {dep}")
            by_type.setdefault(primary_type_of(entity), []).append(entity)

        indices = GraphIndices(
            store,
            graph,
            {name: tuple(names) for name, names in dependents.items()},
            {type_tag: tuple(group) for type_tag, group in by_type.items()},
        )
    except Exception as e:
        raise GraphConstructionError(f"Failed to build graph indices: {e}") from e

    logger.info(
        f"Built indices: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges, "
        f"{len(by_type)} types"
    )
    return indices
