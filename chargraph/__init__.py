from chargraph.configs.base import GraphConfig
from chargraph.graph import CharacterGraph
from chargraph.graphs.builder import build_graph
from chargraph.graphs.schemas import CharacterMeta, FocalCharacter, GraphData, GraphEdge, GraphNode, Position
from chargraph.layouts.configs import LayoutConfig
from chargraph.layouts.engine import LayoutEngine
from chargraph.relationships.parser import RECORD_NOT_FOUND, parse_relationships
from chargraph.relationships.types import Relationship, RelationshipType

__all__ = [
    "RECORD_NOT_FOUND",
    "CharacterGraph",
    "CharacterMeta",
    "FocalCharacter",
    "GraphConfig",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "LayoutConfig",
    "LayoutEngine",
    "Position",
    "Relationship",
    "RelationshipType",
    "build_graph",
    "parse_relationships",
]
