"""Terminal formatter - renders explorer query results as text."""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple
import click
from ..contracts.query_output import ChainNode, EntityStats, GlobalStats
from ..explorer import GraphExplorer
from ..ingest.models import Entity

DEFAULT_FALLBACK_COLOR = "#6c7086"
SELECTED_COLOR = "#89b4fa"
REACH_COLOR = "#fab387"


def _hex_to_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    """Parse '#rrggbb' into an RGB tuple; None if malformed."""
    value = value.lstrip("#")
    if len(value) != 6:
        return None
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        return None


def type_color(tag: str, display: Dict[str, Any]) -> str:
    """Hex color for a type tag, falling back to the neutral color."""
    colors = display.get("type_colors") or {}
    return colors.get(tag) or display.get("fallback_color") or DEFAULT_FALLBACK_COLOR


def _paint(text: str, hex_color: str, display: Dict[str, Any], bold: bool = False) -> str:
    if not display.get("color", True):
        return text
    rgb = _hex_to_rgb(hex_color)
    return click.style(text, fg=rgb, bold=bold) if rgb else text


def _section(title: str) -> List[str]:
    """Return section heading."""
    return ["", title, "-" * len(title)]


def _stat_rows(rows: Sequence[Tuple[str, Any]]) -> List[str]:
    width = max(len(label) for label, _ in rows) + 2
    return [f"{label + ':':<{width}} {value}" for label, value in rows]


def _display_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def _plural(type_tag: str) -> str:
    return type_tag + ("es" if type_tag.endswith("s") else "s")


def format_entity_list(groups: Dict[str, List[Entity]], display: Dict[str, Any]) -> str:
    """Render search results as type groups, e.g. 'Weapons (3)'."""
    if not groups:
        return "No matching entities."
    lines: List[str] = []
    for type_tag, entities in groups.items():
        if lines:
            lines.append("")
        lines.append(_paint(f"{_plural(type_tag)} ({len(entities)})", type_color(type_tag, display), display, bold=True))
        dot = _paint("●", type_color(type_tag, display), display)
        for entity in entities:
            lines.append(f"  {dot} {entity.name}")
    return "\n".join(lines)


def format_entity_stats(stats: EntityStats, display: Dict[str, Any]) -> List[str]:
    return _stat_rows([
        ("Primary Type", stats.primary_type or "-"),
        ("Element", stats.element or "-"),
        ("Direct Deps", stats.direct_deps),
        ("Direct Dependents", stats.direct_dependents),
        ("Transitive Reach", _paint(str(stats.transitive_reach), REACH_COLOR, display)),
        ("Transitive Ancestors", stats.transitive_ancestors),
    ])


def format_global_stats(stats: GlobalStats) -> str:
    """Render graph-wide metrics."""
    lines = ["Graph Overview", "-" * 14]
    lines.extend(_stat_rows([
        ("Total Entities", stats.total_entities),
        ("Total Edges", stats.total_edges),
        ("Entity Types", stats.type_count),
        ("Root Nodes", stats.root_count),
        ("Top Hub", str(stats.top_hub) if stats.top_hub else "-"),
        ("JSON-LD Terms", stats.context_term_count),
    ]))
    return "\n".join(lines)


def format_chain(nodes: List[ChainNode], display: Dict[str, Any]) -> str:
    """Render chain trees with one indented line per node."""
    indent = int(display.get("chain_indent", 2))
    lines: List[str] = []
    for root in nodes:
        for node in root.walk():
            label = node.name + (" (root)" if node.is_synthetic_root else "")
            if node.is_selected:
                label = _paint(label, SELECTED_COLOR, display, bold=True)
            lines.append(" " * (node.depth * indent) + label)
    return "\n".join(lines)


def format_entity_detail(explorer: GraphExplorer, name: str, display: Dict[str, Any]) -> str:
    """Render the full detail view of one entity: header, properties, links, stats, chain."""
    entity = explorer.get_entity(name)
    if entity is None:
        return f"Entity '{name}' not found."

    lines: List[str] = [_paint(entity.name, SELECTED_COLOR, display, bold=True)]
    if entity.id:
        lines.append(entity.id)

    badges = [_paint(f"[{tag}]", type_color(tag, display), display) for tag in entity.types]
    badges.extend(f"[{value}]" for value in (entity.element, entity.scaling) if value)
    if badges:
        lines.append(" ".join(badges))

    if entity.description:
        lines.append("")
        lines.append(entity.description)

    properties = explorer.entity_properties(name)
    if properties:
        lines.extend(_section("Properties"))
        lines.extend(_stat_rows([
            (key.replace("_", " "), _display_value(value)) for key, value in properties.items()
        ]))

    deps = explorer.get_direct_dependencies(name)
    if deps:
        lines.extend(_section(f"Depends On ({len(deps)})"))
        lines.extend(f"  {dep}" for dep in deps)

    dependents = explorer.get_direct_dependents(name)
    if dependents:
        lines.extend(_section(f"Depended On By ({len(dependents)})"))
        lines.extend(f"  {dep}" for dep in dependents)

    lines.extend(_section("Stats"))
    lines.extend(format_entity_stats(explorer.get_stats(name), display))

    lines.extend(_section("Dependency Chain"))
    lines.append(format_chain(explorer.build_chain(name), display))

    return "\n".join(lines)
