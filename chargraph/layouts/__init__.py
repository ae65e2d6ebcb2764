from chargraph.layouts.base import LayeredLayoutBase, LayoutEdgeSpec, LayoutNodeSpec
from chargraph.layouts.configs import LayeredLayoutOptions, LayoutConfig
from chargraph.layouts.engine import LayoutEngine

__all__ = [
    "LayeredLayoutBase",
    "LayeredLayoutOptions",
    "LayoutConfig",
    "LayoutEdgeSpec",
    "LayoutEngine",
    "LayoutNodeSpec",
]
