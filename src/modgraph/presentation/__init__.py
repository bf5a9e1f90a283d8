"""Presentation layer - terminal formatting of query results."""

from .text_formatter import (
    format_chain,
    format_entity_detail,
    format_entity_list,
    format_global_stats,
)

__all__ = ["format_chain", "format_entity_detail", "format_entity_list", "format_global_stats"]
