from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_serializer, model_validator
from pydantic.alias_generators import to_camel


class RelationshipType(str, Enum):
    CREATOR = "creator"
    FAMILY = "family"
    WORK = "work"
    FRIEND = "friend"
    MENTOR = "mentor"
    RIVAL = "rival"
    UNKNOWN = "unknown"

    @classmethod
    def resolve(cls, value: str) -> "RelationshipType":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class Relationship(BaseModel):
    """单个关系数据"""

    # Unknown keys from the file are kept as extras
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel, extra="allow")

    _key_order: Tuple[str, ...] = PrivateAttr(default=())

    target_id: str = Field(..., description="ID of the character this relationship points to")
    # Kept as the raw string so a validated record serializes back unchanged
    type: str = Field(..., description="Relationship category, see RelationshipType")
    label: str = Field(..., description="Short label shown on the edge")
    description: str = Field(..., description="Longer description shown on hover")

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data, handler):
        relationship = handler(data)
        if isinstance(data, dict):
            relationship._key_order = tuple(data)
        return relationship

    @model_serializer(mode="wrap")
    def _dump_in_key_order(self, handler):
        data = handler(self)
        ordered = {key: data[key] for key in self._key_order if key in data}
        ordered.update((key, value) for key, value in data.items() if key not in ordered)
        return ordered

    @property
    def relationship_type(self) -> RelationshipType:
        return RelationshipType.resolve(self.type)


class CharacterRelationshipData(BaseModel):
    """角色关系数据文件结构"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    character_id: str = Field(..., min_length=1, description="ID of the character the file belongs to")
    relationships: List[Relationship] = Field(..., description="Declared relationships, in display order")


RELATIONSHIP_CONFIG: Dict[RelationshipType, Dict] = {
    RelationshipType.CREATOR: {"color": "#a855f7", "keywords": ["创造", "创建", "制造", "组装"]},
    RelationshipType.FAMILY: {"color": "#ef4444", "keywords": ["家人", "亲人", "父母", "子女", "恋人", "爱人"]},
    RelationshipType.WORK: {"color": "#3b82f6", "keywords": ["同事", "合作", "协作", "共同", "项目", "工作"]},
    RelationshipType.FRIEND: {"color": "#10b981", "keywords": ["朋友", "伙伴", "同好", "平等"]},
    RelationshipType.MENTOR: {"color": "#f59e0b", "keywords": ["导师", "指导", "教导", "学习", "传授"]},
    RelationshipType.RIVAL: {"color": "#f97316", "keywords": ["对立", "竞争", "逆反", "矛盾", "敌对"]},
    RelationshipType.UNKNOWN: {"color": "#6b7280", "keywords": []},
}


def get_relationship_color(relationship_type) -> str:
    """
    Get the edge color for a relationship type.

    Args:
        relationship_type: A RelationshipType or its raw string value.
    Returns:
        str: Hex color; the ``unknown`` color for unrecognised types.
    """
    if not isinstance(relationship_type, RelationshipType):
        relationship_type = RelationshipType.resolve(relationship_type)
    return RELATIONSHIP_CONFIG[relationship_type]["color"]


def get_all_relationship_types() -> Dict[RelationshipType, Dict]:
    return {key: {"color": value["color"], "keywords": list(value["keywords"])} for key, value in RELATIONSHIP_CONFIG.items()}
