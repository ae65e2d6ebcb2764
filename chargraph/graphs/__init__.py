from chargraph.graphs.builder import build_graph
from chargraph.graphs.schemas import CharacterMeta, FocalCharacter, GraphData, GraphEdge, GraphNode, Position

__all__ = ["CharacterMeta", "FocalCharacter", "GraphData", "GraphEdge", "GraphNode", "Position", "build_graph"]
