import math
import time
from typing import List, Optional, Sequence

from loguru import logger

from chargraph.graphs.schemas import GraphEdge, GraphNode, Position
from chargraph.layouts.base import LayeredLayoutBase, LayoutEdgeSpec, LayoutNodeSpec
from chargraph.layouts.configs import LayoutConfig
from chargraph.utils.factory import LayoutFactory


class LayoutEngine:
    """
    Assigns positions to graph nodes.

    The layered layout provider is tried first. If it fails for any reason the
    error is logged and a deterministic circular layout is returned instead, so
    ``layout`` always produces a positioned graph. The engine holds no per-call
    state and may serve concurrent calls.
    """

    def __init__(self, layout: Optional[LayeredLayoutBase] = None, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        if layout is None:
            layout = LayoutFactory.create(self.config.provider, self.config.layered_options())
        self.layout_provider = layout

    async def layout(self, nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> List[GraphNode]:
        """
        Lay out the graph (async).

        Args:
            nodes (Sequence[GraphNode]): Nodes to position; order is preserved.
            edges (Sequence[GraphEdge]): Edges between those nodes.
        Returns:
            List[GraphNode]: Copies of the nodes with their positions set.
        """
        nodes = list(nodes)
        edges = list(edges)
        self._check_inputs(nodes, edges)
        if not nodes:
            return []

        node_specs = [
            LayoutNodeSpec(id=node.id, width=self._node_size(node), height=self._node_size(node))
            for node in nodes
        ]
        edge_specs = [LayoutEdgeSpec(id=edge.id, source=edge.source_id, target=edge.target_id) for edge in edges]
        logger.debug(f"Layered layout: {len(node_specs)} nodes, {len(edge_specs)} edges")

        t0 = time.time()
        try:
            positions = await self.layout_provider.compute_layered_positions(
                node_specs, edge_specs, self.config.layered_options()
            )
            layouted = []
            for node in nodes:
                position = positions.get(node.id)
                if position is None:
                    logger.debug(f"Node {node.id} missing from layered layout, keeping its position")
                    layouted.append(node)
                else:
                    layouted.append(node.model_copy(update={"position": Position.model_validate(position)}))
        except Exception as e:
            logger.error(f"Layered layout failed, falling back to circular layout: {e!r}")
            return self.fallback_layout(nodes)

        if self.config.enable_perf_logging:
            logger.info(f"[LayoutEngine.layout 计时] layered layout: {time.time() - t0:.3f}s, nodes={len(nodes)}")
        return layouted

    def fallback_layout(self, nodes: Sequence[GraphNode]) -> List[GraphNode]:
        """
        Deterministic circular layout.

        Center nodes sit on the anchor point. The other nodes are spread evenly
        on a circle around it, starting straight up and going clockwise (screen
        coordinates, y pointing down) in input order.
        """
        anchor_x, anchor_y, radius = self.config.anchor_x, self.config.anchor_y, self.config.radius
        peripheral_count = sum(1 for node in nodes if not node.is_center)
        step = 2 * math.pi / peripheral_count if peripheral_count else 0.0

        layouted = []
        index = 0
        for node in nodes:
            if node.is_center:
                position = Position(x=anchor_x, y=anchor_y)
            else:
                angle = -math.pi / 2 + index * step
                position = Position(x=anchor_x + radius * math.cos(angle), y=anchor_y + radius * math.sin(angle))
                index += 1
            layouted.append(node.model_copy(update={"position": position}))
        return layouted

    def _node_size(self, node: GraphNode) -> float:
        return self.config.center_node_size if node.is_center else self.config.node_size

    @staticmethod
    def _check_inputs(nodes: List[GraphNode], edges: List[GraphEdge]):
        for node in nodes:
            if not isinstance(node, GraphNode):
                raise TypeError(f"Expected GraphNode, got {type(node).__name__}")
        for edge in edges:
            if not isinstance(edge, GraphEdge):
                raise TypeError(f"Expected GraphEdge, got {type(edge).__name__}")
