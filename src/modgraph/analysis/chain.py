"""Reconstruct the root-to-selection dependency tree."""

from typing import Callable, List
from ..contracts.query_output import ChainNode
from ..graph.indices import GraphIndices
from ..graph.traversal import collect_ancestor_set
from ..utils.logging import get_logger

logger = get_logger("analysis.chain")


def find_roots(indices: GraphIndices) -> List[str]:
    """Names of entities with no dependencies, in document order."""
    return [entity.name for entity in indices.entities if not entity.depends_on]


def build_chain(indices: GraphIndices, name: str) -> List[ChainNode]:
    """
    Build the dependency chain shown for a selected entity.

    Every root that is an ancestor of ``name`` (or ``name`` itself) becomes a
    tree, expanded downward through dependents that are ancestors of
    ``name`` or ``name`` itself. When no root qualifies, ``name`` is
    returned alone as a synthetic root.

    Args:
        indices: Graph indices of the loaded document
        name: Selected entity name

    Returns:
        List of root ChainNodes; empty for names not in the document
    """
    if indices.get_entity(name) is None:
        return []

    ancestors = collect_ancestor_set(indices, name)

    def in_scope(candidate: str) -> bool:
        return candidate in ancestors or candidate == name

    roots = [root for root in find_roots(indices) if in_scope(root)]
    if not roots:
        logger.debug(f"No root reaches {name}; rendering it as a synthetic root")
        return [ChainNode(name=name, depth=0, is_selected=True, is_synthetic_root=True)]

    return [_expand(indices, root, name, in_scope) for root in roots]


def _expand(
    indices: GraphIndices,
    root: str,
    selected: str,
    in_scope: Callable[[str], bool],
) -> ChainNode:
    """Grow one tree from ``root`` without recursion.

    A child already on the path from the root is skipped, so cycles among
    ancestors cannot expand forever.
    """
    root_node = ChainNode(name=root, depth=0, is_selected=root == selected)
    stack = [(root_node, (root,))]
    while stack:
        node, path = stack.pop()
        for child in indices.dependents_of(node.name):
            if child == node.name or not in_scope(child) or child in path:
                continue
            child_node = ChainNode(name=child, depth=node.depth + 1, is_selected=child == selected)
            node.children.append(child_node)
            stack.append((child_node, path + (child,)))
    return root_node
