"""Tests for the explorer query surface."""

import json
import pytest
from modgraph import GraphExplorer, explore
from modgraph.utils.errors import DocumentLoadError


@pytest.fixture
def mod_document():
    """A small game mod document."""
    return {
        "@context": {
            "name": "schema:name",
            "depends_on": {"@id": "mod:dependsOn", "@type": "@id"},
            "element": "mod:element",
        },
        "@graph": [
            {"@id": "mod:Burning", "@type": ["StatusEffect", "DoT"], "name": "Burning",
             "element": "Fire", "description": "Deals fire damage over time."},
            {"@id": "mod:Frostbite", "@type": ["StatusEffect", "Debuff"], "name": "Frostbite", "element": "Ice"},
            {"@id": "mod:FlameSword", "@type": ["Weapon", "Melee"], "name": "Flame Sword",
             "depends_on": ["Burning"], "scaling": "STR", "damage": 12},
            {"@id": "mod:Pyromancer", "@type": ["Class", "INT"], "name": "Pyromancer",
             "depends_on": ["Flame Sword", "Burning"]},
            {"@id": "mod:Inferno", "@type": ["Enchantment", "Legendary"], "name": "Inferno",
             "depends_on": ["Pyromancer"], "tiers": [1, 2, 3]},
        ],
    }


@pytest.fixture
def explorer(mod_document):
    return GraphExplorer.from_document(mod_document)


class TestEntityQueries:
    """Test lookups and neighbor queries."""
    
    def test_get_entity(self, explorer):
        entity = explorer.get_entity("Flame Sword")
        
        assert entity.id == "mod:FlameSword"
        assert entity.extra == {"damage": 12}
        assert explorer.get_entity("Nobody") is None
    
    def test_list_by_type(self, explorer):
        assert [e.name for e in explorer.list_by_type("StatusEffect")] == ["Burning", "Frostbite"]
        assert explorer.list_by_type("Trait") == []
    
    def test_direct_neighbors(self, explorer):
        assert explorer.get_direct_dependencies("Pyromancer") == ["Flame Sword", "Burning"]
        assert explorer.get_direct_dependents("Burning") == ["Flame Sword", "Pyromancer"]
        assert explorer.get_direct_dependencies("Nobody") == []
        assert explorer.get_direct_dependents("Nobody") == []
    
    def test_search(self, explorer):
        groups = explorer.search("legendary")
        
        assert {t: [e.name for e in es] for t, es in groups.items()} == {"Enchantment": ["Inferno"]}
    
    def test_entity_properties_and_json(self, explorer):
        assert explorer.entity_properties("Inferno") == {"tiers": [1, 2, 3]}
        assert explorer.entity_properties("Burning") == {"element": "Fire"}
        assert explorer.entity_json("Flame Sword")["depends_on"] == ["Burning"]
        assert explorer.entity_json("Nobody") is None
        json.dumps(explorer.entity_json("Inferno"))
    
    def test_returned_values_do_not_leak_into_explorer(self, explorer):
        """Edits to query results leave later queries unchanged."""
        explorer.entity_properties("Inferno")["tiers"].append(4)
        explorer.entity_json("Flame Sword")["depends_on"].append("Heat")
        with pytest.raises(TypeError):
            explorer.get_entity("Inferno").extra["tiers"] = ()
        
        assert explorer.entity_properties("Inferno") == {"tiers": [1, 2, 3]}
        assert explorer.entity_json("Flame Sword")["depends_on"] == ["Burning"]
        assert explorer.get_direct_dependencies("Flame Sword") == ["Burning"]
        assert hash(explorer.get_entity("Inferno")) == hash(explorer.get_entity("Inferno"))
    
    def test_suggest_names(self, explorer):
        assert explorer.suggest_names("flame") == ["Flame Sword"]


class TestStats:
    """Test per-entity and global stats."""
    
    def test_get_stats(self, explorer):
        stats = explorer.get_stats("Burning")
        
        assert stats.primary_type == "StatusEffect"
        assert stats.element == "Fire"
        assert stats.direct_deps == 0
        assert stats.direct_dependents == 2
        assert stats.transitive_reach == 3
        assert stats.transitive_ancestors == 0
    
    def test_get_stats_for_leaf(self, explorer):
        stats = explorer.get_stats("Inferno")
        
        assert stats.transitive_reach == 0
        assert stats.transitive_ancestors == 3
    
    def test_unknown_entity_is_zero_not_error(self, explorer):
        stats = explorer.get_stats("Nobody")
        
        assert stats.primary_type is None
        assert stats.element is None
        assert stats.direct_deps == 0
        assert stats.direct_dependents == 0
        assert stats.transitive_reach == 0
        assert stats.transitive_ancestors == 0
    
    def test_global_stats(self, explorer):
        stats = explorer.get_global_stats()
        
        assert stats.total_entities == 5
        assert stats.total_edges == 4
        assert stats.type_count == 4
        assert stats.root_count == 2
        assert stats.top_hub.name == "Burning"
        assert stats.top_hub.count == 2
        assert stats.context_term_count == 3
    
    def test_global_stats_copy_is_detached(self, explorer):
        stats = explorer.get_global_stats()
        stats.total_entities = 99
        
        assert explorer.get_global_stats().total_entities == 5


class TestScenarios:
    """End-to-end scenarios on tiny documents."""
    
    def test_linear_end_to_end(self):
        explorer = GraphExplorer.from_document({"@graph": [
            {"name": "A", "depends_on": []},
            {"name": "B", "depends_on": ["A"]},
            {"name": "C", "depends_on": ["B"]},
        ]})
        
        nodes = explorer.build_chain("C")
        
        assert [(n.name, n.depth) for n in nodes[0].walk()] == [("A", 0), ("B", 1), ("C", 2)]
        assert explorer.get_global_stats().root_count == 1
        assert explorer.transitive_reach("A") == 2
    
    def test_dangling_reference(self):
        explorer = GraphExplorer.from_document({"@graph": [
            {"name": "Sword", "depends_on": ["GhostBuff"]},
        ]})
        
        assert explorer.get_direct_dependencies("Sword") == ["GhostBuff"]
        assert explorer.indices.dependents["GhostBuff"] == ("Sword",)
        assert explorer.get_entity("GhostBuff") is None
        assert explorer.transitive_ancestors("Sword") == 1
        assert explorer.get_stats("GhostBuff").transitive_reach == 1
        assert explorer.build_chain("GhostBuff") == []
    
    def test_self_loop(self):
        explorer = GraphExplorer.from_document({"@graph": [
            {"name": "Cursed", "depends_on": ["Cursed"]},
        ]})
        
        assert explorer.transitive_reach("Cursed") == 0
        assert explorer.transitive_ancestors("Cursed") == 0
        assert explorer.collect_ancestor_set("Cursed") == {"Cursed"}
        
        nodes = explorer.build_chain("Cursed")
        assert len(nodes) == 1
        assert nodes[0].is_synthetic_root
    
    def test_queries_are_idempotent(self, explorer):
        for name in ("Burning", "Inferno", "Nobody"):
            assert explorer.get_stats(name) == explorer.get_stats(name)
            assert explorer.build_chain(name) == explorer.build_chain(name)
            assert explorer.search(name) == explorer.search(name)


class TestLoading:
    """Test file-based construction."""
    
    def test_from_file(self, tmp_path, mod_document):
        path = tmp_path / "mod-data.json"
        path.write_text(json.dumps(mod_document), encoding="utf-8")
        
        explorer = GraphExplorer.from_file(str(path))
        
        assert explorer.get_global_stats().total_entities == 5
    
    def test_from_file_failure(self, tmp_path):
        with pytest.raises(DocumentLoadError):
            GraphExplorer.from_file(str(tmp_path / "missing.json"))
    
    def test_explore_returns_plain_stats(self, tmp_path, mod_document):
        path = tmp_path / "mod-data.json"
        path.write_text(json.dumps(mod_document), encoding="utf-8")
        
        result = explore(str(path))
        
        assert result["total_entities"] == 5
        assert result["top_hub"] == {"name": "Burning", "count": 2}
    
    def test_empty_document(self):
        explorer = GraphExplorer.from_document({})
        
        assert explorer.get_global_stats().total_entities == 0
        assert explorer.search("") == {}
