import asyncio
from typing import Dict, List, Optional

import networkx as nx

from chargraph.exceptions import LayoutError
from chargraph.graphs.schemas import Position
from chargraph.layouts.base import LayeredLayoutBase, LayoutEdgeSpec, LayoutNodeSpec
from chargraph.layouts.configs import LayeredLayoutOptions


class NetworkxLayeredLayout(LayeredLayoutBase):
    """Layered layout on top of networkx.

    Nodes are assigned to layers by their topological generation, ordered
    inside a layer by the barycenter of their predecessors, then packed
    with fixed spacings. Cyclic graphs cannot be layered and raise
    ``networkx.NetworkXUnfeasible``.
    """

    async def compute_layered_positions(
        self,
        nodes: List[LayoutNodeSpec],
        edges: List[LayoutEdgeSpec],
        options: Optional[LayeredLayoutOptions] = None,
    ) -> Dict[str, Position]:
        options = options or self.options
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._compute, list(nodes), list(edges), options)

    def _compute(
        self,
        nodes: List[LayoutNodeSpec],
        edges: List[LayoutEdgeSpec],
        options: LayeredLayoutOptions,
    ) -> Dict[str, Position]:
        if not nodes:
            return {}

        graph = self._build_graph(nodes, edges)
        layers = self._order_layers(graph, list(nx.topological_generations(graph)))
        return self._assign_coordinates(graph, layers, options)

    @staticmethod
    def _build_graph(nodes: List[LayoutNodeSpec], edges: List[LayoutEdgeSpec]) -> nx.DiGraph:
        graph = nx.DiGraph()
        for index, node in enumerate(nodes):
            if node.id in graph:
                raise LayoutError(f"Duplicate node id: {node.id}")
            graph.add_node(node.id, width=node.width, height=node.height, order=index)

        for edge in edges:
            if edge.source not in graph or edge.target not in graph:
                raise LayoutError(f"Edge {edge.id} references an unknown node ({edge.source} -> {edge.target})")
            # Self-loops do not affect layering
            if edge.source != edge.target:
                graph.add_edge(edge.source, edge.target)
        return graph

    @staticmethod
    def _order_layers(graph: nx.DiGraph, generations: List[List[str]]) -> List[List[str]]:
        ranks: Dict[str, int] = {}
        layers: List[List[str]] = []

        for generation in generations:

            def sort_key(node_id):
                predecessor_ranks = [ranks[p] for p in graph.predecessors(node_id) if p in ranks]
                barycenter = sum(predecessor_ranks) / len(predecessor_ranks) if predecessor_ranks else 0.0
                return barycenter, graph.nodes[node_id]["order"]

            layer = sorted(generation, key=sort_key)
            ranks.update({node_id: rank for rank, node_id in enumerate(layer)})
            layers.append(layer)

        return layers

    @staticmethod
    def _assign_coordinates(
        graph: nx.DiGraph,
        layers: List[List[str]],
        options: LayeredLayoutOptions,
    ) -> Dict[str, Position]:
        vertical = options.direction in ("DOWN", "UP")
        reversed_axis = options.direction in ("UP", "LEFT")

        def depth_of(node_id):
            attrs = graph.nodes[node_id]
            return attrs["height"] if vertical else attrs["width"]

        def breadth_of(node_id):
            attrs = graph.nodes[node_id]
            return attrs["width"] if vertical else attrs["height"]

        thicknesses = [max(depth_of(n) for n in layer) for layer in layers]
        extents = [
            sum(breadth_of(n) for n in layer) + options.spacing_node_node * (len(layer) - 1)
            for layer in layers
        ]
        widest = max(extents)
        total_depth = sum(thicknesses) + options.spacing_between_layers * (len(layers) - 1)

        positions: Dict[str, Position] = {}
        layer_offset = 0.0
        for layer, thickness, extent in zip(layers, thicknesses, extents):
            breadth_offset = (widest - extent) / 2
            for node_id in layer:
                depth = layer_offset + (thickness - depth_of(node_id)) / 2
                if reversed_axis:
                    depth = total_depth - depth - depth_of(node_id)

                if vertical:
                    x, y = breadth_offset, depth
                else:
                    x, y = depth, breadth_offset
                positions[node_id] = Position(x=options.padding + x, y=options.padding + y)
                breadth_offset += breadth_of(node_id) + options.spacing_node_node
            layer_offset += thickness + options.spacing_between_layers

        return positions
