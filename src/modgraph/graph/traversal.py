"""Cycle-safe reachability over the dependency graph.

Edges point from an entity to each name it depends on, so dependents are
networkx ancestors and dependencies are descendants. networkx never yields
the start node of a closure, and a name outside the graph is isolated.
"""

from typing import FrozenSet, Set
import networkx as nx
from .indices import GraphIndices


def transitive_reach(indices: GraphIndices, name: str) -> int:
    """Count everything that depends on ``name``, directly or transitively."""
    graph = indices.graph
    if name not in graph:
        return 0
    return len(nx.ancestors(graph, name))


def transitive_ancestors(indices: GraphIndices, name: str) -> int:
    """Count everything ``name`` depends on, directly or transitively.

    Dangling dependency names are graph nodes, so they count toward the
    total but contribute no further edges.
    """
    graph = indices.graph
    if name not in graph:
        return 0
    return len(nx.descendants(graph, name))


def collect_ancestor_set(indices: GraphIndices, name: str) -> FrozenSet[str]:
    """Collect every name reachable from ``name`` through one or more edges.

    Unlike ``nx.descendants`` this keeps the start node when it sits on a
    cycle (including a self-loop), since it is then reached through an edge.
    Dangling names are included.
    """
    graph = indices.graph
    if name not in graph:
        return frozenset()
    ancestors: Set[str] = set()
    for dep in graph.successors(name):
        if dep in ancestors:
            continue
        ancestors.add(dep)
        ancestors |= nx.descendants(graph, dep)
    return frozenset(ancestors)
