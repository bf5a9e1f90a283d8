"""Tests for global statistics and hub detection."""

import pytest
from modgraph.analysis.hub_stats import compute_global_stats, count_references, find_top_hub
from modgraph.graph.entity_store import load
from modgraph.graph.indices import build_indices


def _indices(graph, context=None):
    return build_indices(load({"@context": context or {}, "@graph": graph}))


class TestTopHub:
    """Test hub detection and its tie-break."""
    
    def test_highest_in_degree_wins(self):
        indices = _indices([
            {"name": "A", "depends_on": ["X", "Y"]},
            {"name": "B", "depends_on": ["X", "Y"]},
            {"name": "C", "depends_on": ["Y"]},
        ])
        
        hub = find_top_hub(indices.entities)
        
        assert hub.name == "Y"
        assert hub.count == 3
    
    def test_tie_goes_to_first_referenced(self):
        indices = _indices([
            {"name": "A", "depends_on": ["X", "Y"]},
            {"name": "B", "depends_on": ["Y", "X"]},
        ])
        
        assert find_top_hub(indices.entities).name == "X"
    
    def test_tie_break_follows_document_order(self):
        indices = _indices([
            {"name": "A", "depends_on": ["Y", "X"]},
            {"name": "B", "depends_on": ["X", "Y"]},
        ])
        
        assert find_top_hub(indices.entities).name == "Y"
    
    def test_no_edges_no_hub(self):
        indices = _indices([{"name": "Lonely"}])
        
        assert find_top_hub(indices.entities) is None
    
    def test_dangling_names_are_counted(self):
        indices = _indices([
            {"name": "Sword", "depends_on": ["GhostBuff"]},
            {"name": "Axe", "depends_on": ["GhostBuff"]},
        ])
        
        assert count_references(indices.entities) == {"GhostBuff": 2}
        assert str(find_top_hub(indices.entities)) == "GhostBuff (2)"


class TestGlobalStats:
    """Test graph-wide metrics."""
    
    def test_linear_chain(self):
        indices = _indices([
            {"name": "A", "@type": ["Trait"]},
            {"name": "B", "@type": ["Trait"], "depends_on": ["A"]},
            {"name": "C", "@type": ["Weapon"], "depends_on": ["B"]},
        ], context={"name": "schema:name", "depends_on": "mod:dependsOn"})
        
        stats = compute_global_stats(indices)
        
        assert stats.total_entities == 3
        assert stats.total_edges == 2
        assert stats.type_count == 2
        assert stats.root_count == 1
        assert stats.top_hub.name == "A"
        assert stats.context_term_count == 2
    
    def test_edges_count_duplicates_and_dangling(self):
        indices = _indices([
            {"name": "A"},
            {"name": "B", "depends_on": ["A", "A", "Ghost"]},
        ])
        
        stats = compute_global_stats(indices)
        
        assert stats.total_edges == 3
        assert stats.root_count == 1
    
    def test_empty_document(self):
        stats = compute_global_stats(_indices([]))
        
        assert stats.total_entities == 0
        assert stats.total_edges == 0
        assert stats.type_count == 0
        assert stats.root_count == 0
        assert stats.top_hub is None
    
    def test_untyped_entities_count_as_unknown_type(self):
        stats = compute_global_stats(_indices([{"name": "A"}, {"name": "B", "@type": ["Trait"]}]))
        
        assert stats.type_count == 2
