"""Custom exception classes for modgraph."""


class ModGraphError(Exception):
    """Base exception for all modgraph errors."""
    pass


class DocumentLoadError(ModGraphError):
    """Raised when the JSON-LD document cannot be obtained or parsed."""
    pass


class GraphConstructionError(ModGraphError):
    """Raised when index construction fails."""
    pass


class ConfigError(ModGraphError):
    """Raised when configuration is invalid or missing."""
    pass
