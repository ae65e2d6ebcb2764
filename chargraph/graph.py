import time
from typing import List, Mapping, Optional

from loguru import logger

from chargraph.configs.base import GraphConfig
from chargraph.graphs.builder import build_graph
from chargraph.graphs.schemas import CharacterMeta, FocalCharacter, GraphData
from chargraph.layouts.base import LayeredLayoutBase
from chargraph.layouts.engine import LayoutEngine
from chargraph.relationships.types import Relationship
from chargraph.stores.characters import CharacterMetadataStore
from chargraph.stores.relationships import RelationshipStore


class CharacterGraph:
    def __init__(self, config: Optional[GraphConfig] = None, layout: Optional[LayeredLayoutBase] = None):
        self.config = config or GraphConfig()
        self.relationship_store = RelationshipStore(self.config.data_dir)
        self.character_store = CharacterMetadataStore(self.config.data_dir)
        self.layout_engine = LayoutEngine(layout=layout, config=self.config.layout)

    async def build(self, character_id: str) -> GraphData:
        """
        Build the positioned relationship graph of a character (async).

        Args:
            character_id (str): ID of the focal character.
        Returns:
            GraphData: Positioned nodes and edges; empty when the character
                declares no (valid) relationships.
        """
        t0 = time.time()
        relationships = self.relationship_store.get_relationships(character_id)
        if not relationships:
            return GraphData()

        meta = self.character_store.get(character_id)
        focal = FocalCharacter(
            id=character_id,
            display_name=meta.display_name if meta else character_id,
            color=meta.color if meta else self.config.placeholder_color,
        )
        metadata_lookup = self.character_store.lookup(rel.target_id for rel in relationships)

        graph = await self.build_focal(focal, relationships, metadata_lookup)
        if self.config.enable_perf_logging:
            logger.info(
                f"[CharacterGraph.build 计时] {character_id}: {time.time() - t0:.3f}s, "
                f"nodes={len(graph.nodes)}, edges={len(graph.edges)}"
            )
        return graph

    async def build_focal(
        self,
        focal: FocalCharacter,
        relationships: List[Relationship],
        metadata_lookup: Mapping[str, CharacterMeta],
    ) -> GraphData:
        """
        Build and lay out a graph from in-memory inputs (async).
        """
        graph = build_graph(focal, relationships, metadata_lookup, placeholder_color=self.config.placeholder_color)
        if graph.is_empty:
            return graph

        nodes = await self.layout_engine.layout(graph.nodes, graph.edges)
        return GraphData(nodes=nodes, edges=graph.edges)
