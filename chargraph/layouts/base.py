from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pydantic import BaseModel

from chargraph.graphs.schemas import Position
from chargraph.layouts.configs import LayeredLayoutOptions


class LayoutNodeSpec(BaseModel):
    id: str
    width: float
    height: float


class LayoutEdgeSpec(BaseModel):
    id: str
    source: str
    target: str


class LayeredLayoutBase(ABC):
    """Base class for layered (hierarchical) graph layout providers.

    :param options: Default layout options, used when a call passes none
    :type options: Optional[LayeredLayoutOptions], optional
    """

    def __init__(self, options: Optional[LayeredLayoutOptions] = None):
        if options is None:
            self.options = LayeredLayoutOptions()
        else:
            self.options = options

    @abstractmethod
    async def compute_layered_positions(
        self,
        nodes: List[LayoutNodeSpec],
        edges: List[LayoutEdgeSpec],
        options: Optional[LayeredLayoutOptions] = None,
    ) -> Dict[str, Position]:
        """
        Compute absolute positions for the given nodes.

        Args:
            nodes (List[LayoutNodeSpec]): Nodes with their box sizes.
            edges (List[LayoutEdgeSpec]): Directed source/target pairs, unweighted.
            options (optional): Layout options. Defaults to the provider's options.
        Returns:
            Dict[str, Position]: Top-left position of each node box, by node id.
        Raises:
            Exception: Any failure; callers are expected to fall back.
        """
        pass
