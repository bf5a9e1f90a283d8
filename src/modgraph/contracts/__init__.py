"""Query result contracts."""

from .query_output import ChainNode, EntityStats, GlobalStats, TopHub

__all__ = ["ChainNode", "EntityStats", "GlobalStats", "TopHub"]
