class ChargraphError(Exception):
    """Base class for errors raised by chargraph."""


class LayoutError(ChargraphError):
    """Raised by a layered layout provider that cannot position a graph."""


class ConfigError(ChargraphError, ValueError):
    """Raised for unsupported or inconsistent configuration."""
