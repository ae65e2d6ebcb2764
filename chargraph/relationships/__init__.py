from chargraph.relationships.parser import RECORD_NOT_FOUND, parse_relationships
from chargraph.relationships.types import (
    RELATIONSHIP_CONFIG,
    CharacterRelationshipData,
    Relationship,
    RelationshipType,
    get_all_relationship_types,
    get_relationship_color,
)

__all__ = [
    "RECORD_NOT_FOUND",
    "RELATIONSHIP_CONFIG",
    "CharacterRelationshipData",
    "Relationship",
    "RelationshipType",
    "get_all_relationship_types",
    "get_relationship_color",
    "parse_relationships",
]
