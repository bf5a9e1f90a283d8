"""Graph-wide metrics: edge and root counts, type count, top hub."""

from typing import Dict, Iterable, Optional
from ..contracts.query_output import GlobalStats, TopHub
from ..graph.indices import GraphIndices
from ..ingest.models import Entity
from ..utils.logging import get_logger

logger = get_logger("analysis.hub_stats")


def count_references(entities: Iterable[Entity]) -> Dict[str, int]:
    """Reverse in-degree per dependency name, keyed in first-discovery order."""
    counts: Dict[str, int] = {}
    for entity in entities:
        for dep in entity.depends_on:
            counts[dep] = counts.get(dep, 0) + 1
    return counts


def find_top_hub(entities: Iterable[Entity]) -> Optional[TopHub]:
    """Most referenced dependency name; ties go to the earliest referenced."""
    counts = count_references(entities)
    if not counts:
        return None
    # sorted() is stable, so equal counts keep discovery order
    name, count = sorted(counts.items(), key=lambda item: -item[1])[0]
    return TopHub(name=name, count=count)


def compute_global_stats(indices: GraphIndices) -> GlobalStats:
    """Compute whole-graph metrics once for a loaded document."""
    entities = indices.entities
    stats = GlobalStats(
        total_entities=len(entities),
        total_edges=sum(len(entity.depends_on) for entity in entities),
        type_count=len(indices.by_type),
        root_count=sum(1 for entity in entities if not entity.depends_on),
        top_hub=find_top_hub(entities),
        context_term_count=len(indices.store.context),
    )
    logger.info(
        f"Global stats: {stats.total_entities} entities, {stats.total_edges} edges, "
        f"{stats.root_count} roots, top hub {stats.top_hub or '-'}"
    )
    return stats
