from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Position(_Schema):
    """节点坐标"""
    x: float = 0.0
    y: float = 0.0


class CharacterMeta(_Schema):
    """人物展示信息"""
    display_name: str
    color: str


class FocalCharacter(_Schema):
    """中心人物"""
    id: str
    display_name: str
    color: str


class GraphNode(_Schema):
    """人物节点"""
    id: str
    character_id: str
    display_name: str
    color: str
    is_center: bool = False
    # Placeholder until LayoutEngine assigns a real position
    position: Position = Field(default_factory=Position)


class GraphEdge(_Schema):
    """关系边"""
    id: str
    source_id: str
    target_id: str
    label: str
    type: str
    description: str


class GraphData(_Schema):
    """图数据"""
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes
