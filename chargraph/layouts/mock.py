from typing import Dict, List, Optional

from chargraph.graphs.schemas import Position
from chargraph.layouts.base import LayeredLayoutBase, LayoutEdgeSpec, LayoutNodeSpec
from chargraph.layouts.configs import LayeredLayoutOptions


class MockLayeredLayout(LayeredLayoutBase):
    async def compute_layered_positions(
        self,
        nodes: List[LayoutNodeSpec],
        edges: List[LayoutEdgeSpec],
        options: Optional[LayeredLayoutOptions] = None,
    ) -> Dict[str, Position]:
        """
        Place nodes on a single row in input order, ignoring edges.
        """
        options = options or self.options
        positions = {}
        x = options.padding
        for node in nodes:
            positions[node.id] = Position(x=x, y=options.padding)
            x += node.width + options.spacing_node_node
        return positions
