"""Pydantic models for JSON-LD entities and documents."""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

KNOWN_FIELDS = ("@id", "@type", "name", "depends_on", "description", "element", "scaling")

# Metadata fields hidden from the property listing
DISPLAY_SKIP_FIELDS = ("@id", "@type", "name", "depends_on", "description")

_ATTRIBUTES = {"@id": "id", "@type": "types"}


def _as_string_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a JSON-LD value into a tuple of strings (single value or list)."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(item for item in value if isinstance(item, str))
    return ()


def freeze_value(value: Any) -> Any:
    """Read-only copy of a JSON value: dicts become mapping proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze_value(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(v) for v in value)
    return value


def thaw_value(value: Any) -> Any:
    """Fresh plain-JSON copy of a frozen value."""
    if isinstance(value, Mapping):
        return {k: thaw_value(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw_value(v) for v in value]
    return value


class Entity(BaseModel):
    """A named node of the dependency graph.

    Known optional fields are typed; every other property of the JSON-LD
    object is kept read-only in ``extra`` for pass-through display.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, alias="@id", description="Entity IRI")
    types: Tuple[str, ...] = Field(default=(), alias="@type", description="Type tags, primary first")
    name: str = Field(..., description="Human-readable unique key")
    depends_on: Tuple[str, ...] = Field(default=(), description="Names this entity depends on")
    description: Optional[str] = Field(default=None)
    element: Optional[str] = Field(default=None)
    scaling: Optional[str] = Field(default=None)
    extra: Mapping[str, Any] = Field(default_factory=dict, description="Open-ended additional attributes")
    source_keys: Tuple[str, ...] = Field(default=(), repr=False, description="Property order in the document")

    @model_validator(mode="before")
    @classmethod
    def _collect_extra(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = {k: v for k, v in data.items() if k in KNOWN_FIELDS}
        known["extra"] = {k: v for k, v in data.items() if k not in KNOWN_FIELDS}
        known["source_keys"] = tuple(data)
        return known

    @field_validator("types", "depends_on", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Tuple[str, ...]:
        return _as_string_tuple(value)

    @field_validator("id", "description", "element", "scaling", mode="before")
    @classmethod
    def _coerce_optional_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("extra", mode="after")
    @classmethod
    def _freeze_extra(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze_value(value)

    @field_serializer("extra")
    def _serialize_extra(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return thaw_value(value)

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.types, self.depends_on))

    @property
    def primary_type(self) -> Optional[str]:
        """First type tag, or None when the entity is untyped."""
        return self.types[0] if self.types else None

    @property
    def secondary_types(self) -> Tuple[str, ...]:
        return self.types[1:]

    def _ordered_items(self):
        """(key, plain value) pairs in document order, absent fields skipped."""
        keys = self.source_keys or KNOWN_FIELDS + tuple(self.extra)
        for key in keys:
            if key in self.extra:
                yield key, thaw_value(self.extra[key])
                continue
            if key not in KNOWN_FIELDS:
                continue
            value = getattr(self, _ATTRIBUTES.get(key, key))
            if value is None or (isinstance(value, tuple) and not value and key not in self.source_keys):
                continue
            yield key, list(value) if isinstance(value, tuple) else value

    def properties(self) -> Dict[str, Any]:
        """Display properties in document order, without identity metadata."""
        return {k: v for k, v in self._ordered_items() if k not in DISPLAY_SKIP_FIELDS}

    def to_jsonld(self) -> Dict[str, Any]:
        """Rebuild the JSON-LD object this entity was loaded from."""
        return dict(self._ordered_items())


class EntityDocument(BaseModel):
    """Parsed JSON-LD document: context plus the entity graph."""
    model_config = ConfigDict(populate_by_name=True)

    context: Dict[str, Any] = Field(default_factory=dict, alias="@context", description="JSON-LD term definitions")
    entities: List[Entity] = Field(default_factory=list, alias="@graph", description="Entities in document order")

    @field_validator("context", mode="before")
    @classmethod
    def _coerce_context(cls, value: Any) -> Dict[str, Any]:
        return value if isinstance(value, dict) else {}
