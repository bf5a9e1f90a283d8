"""Pydantic models for query results handed to the presentation layer."""

from typing import List, Optional
from pydantic import BaseModel, Field


class TopHub(BaseModel):
    """The most depended-on name and its reverse in-degree."""
    name: str = Field(..., description="Dependency name referenced most often")
    count: int = Field(..., ge=1, description="Number of depends_on references to it")

    def __str__(self) -> str:
        return f"{self.name} ({self.count})"


class GlobalStats(BaseModel):
    """Graph-wide metrics, computed once per document."""
    total_entities: int = Field(default=0, ge=0)
    total_edges: int = Field(default=0, ge=0, description="Sum of depends_on lengths")
    type_count: int = Field(default=0, ge=0, description="Distinct primary types")
    root_count: int = Field(default=0, ge=0, description="Entities with no dependencies")
    top_hub: Optional[TopHub] = Field(default=None, description="None when the graph has no edges")
    context_term_count: int = Field(default=0, ge=0, description="Number of JSON-LD @context terms")


class EntityStats(BaseModel):
    """Per-entity metrics shown next to a selection."""
    name: str
    primary_type: Optional[str] = Field(default=None)
    element: Optional[str] = Field(default=None)
    direct_deps: int = Field(default=0, ge=0)
    direct_dependents: int = Field(default=0, ge=0)
    transitive_reach: int = Field(default=0, ge=0, description="Entities transitively depending on this one")
    transitive_ancestors: int = Field(default=0, ge=0, description="Names this one transitively depends on")


class ChainNode(BaseModel):
    """One node of a root-to-selection dependency tree."""
    name: str
    depth: int = Field(default=0, ge=0, description="Indentation level, 0 at a root")
    is_selected: bool = Field(default=False, description="Rendering hint for the queried entity")
    is_synthetic_root: bool = Field(default=False, description="Selected entity shown as root for lack of a real one")
    children: List["ChainNode"] = Field(default_factory=list)

    def walk(self):
        """Yield this node and its descendants in display (pre-)order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


ChainNode.model_rebuild()
