from typing import Dict, List, Mapping, Set

from chargraph.graphs.schemas import CharacterMeta, FocalCharacter, GraphData, GraphEdge, GraphNode
from chargraph.relationships.types import Relationship

DEFAULT_PLACEHOLDER_COLOR = "#6b7280"


def node_id(character_id: str) -> str:
    return f"node-{character_id}"


def edge_id(source_character_id: str, target_character_id: str) -> str:
    return f"edge-{source_character_id}-{target_character_id}"


def build_graph(
    focal: FocalCharacter,
    relationships: List[Relationship],
    metadata_lookup: Mapping[str, CharacterMeta],
    placeholder_color: str = DEFAULT_PLACEHOLDER_COLOR,
) -> GraphData:
    """
    Build the unpositioned star graph around a focal character.

    A character without relationships yields an empty graph, center node
    included. Peripheral nodes are keyed by target id, so several
    relationships to one character share a node but keep their own edges.

    Args:
        focal (FocalCharacter): The character at the center of the graph.
        relationships (List[Relationship]): Validated relationships of the focal character.
        metadata_lookup (Mapping[str, CharacterMeta]): Display metadata by character id.
            Missing ids are rendered with the raw id and placeholder_color.
        placeholder_color (str): Color for characters without metadata.
    Returns:
        GraphData: Nodes (center first, then peripherals in first-seen order) and edges.
    """
    if not isinstance(focal, FocalCharacter):
        raise TypeError(f"focal must be a FocalCharacter, got {type(focal).__name__}")
    if isinstance(relationships, (str, bytes)) or not all(isinstance(rel, Relationship) for rel in relationships):
        raise TypeError("relationships must be a sequence of Relationship")

    if not relationships:
        return GraphData(nodes=[], edges=[])

    center_id = node_id(focal.id)
    nodes: Dict[str, GraphNode] = {
        center_id: GraphNode(
            id=center_id,
            character_id=focal.id,
            display_name=focal.display_name,
            color=focal.color,
            is_center=True,
        )
    }
    edges: List[GraphEdge] = []
    issued_edge_ids: Set[str] = set()

    for rel in relationships:
        target_node_id = node_id(rel.target_id)
        if target_node_id not in nodes:
            meta = metadata_lookup.get(rel.target_id)
            nodes[target_node_id] = GraphNode(
                id=target_node_id,
                character_id=rel.target_id,
                display_name=meta.display_name if meta else rel.target_id,
                color=meta.color if meta else placeholder_color,
                is_center=False,
            )

        base_edge_id = edge_id(focal.id, rel.target_id)
        # Repeated targets keep unique edge ids: edge-A-B, edge-A-B-2, ...
        current_edge_id = base_edge_id
        suffix = 1
        while current_edge_id in issued_edge_ids:
            suffix += 1
            current_edge_id = f"{base_edge_id}-{suffix}"
        issued_edge_ids.add(current_edge_id)

        edges.append(
            GraphEdge(
                id=current_edge_id,
                source_id=center_id,
                target_id=target_node_id,
                label=rel.label,
                type=rel.type,
                description=rel.description,
            )
        )

    return GraphData(nodes=list(nodes.values()), edges=edges)
