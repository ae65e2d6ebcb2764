from chargraph.configs.base import GraphConfig

__all__ = ["GraphConfig"]
