from typing import Any, List

from loguru import logger
from pydantic import ValidationError

from chargraph.relationships.types import CharacterRelationshipData, Relationship


class _RecordNotFound:
    def __repr__(self):
        return "RECORD_NOT_FOUND"


# Returned by stores when a character has no relationship file at all
RECORD_NOT_FOUND = _RecordNotFound()


def parse_relationships(raw: Any, character_id: str) -> List[Relationship]:
    """
    Validate a raw relationship record and return its relationships.

    The record is accepted whole or rejected whole: a single malformed entry
    rejects the file, so the graph never shows a partial set of edges.

    Args:
        raw: Deserialized JSON content of the character's relationship file,
            or RECORD_NOT_FOUND when the store has no file for the character.
        character_id (str): ID of the character, used for diagnostics only.
    Returns:
        List[Relationship]: The declared relationships, or an empty list.
    """
    if raw is RECORD_NOT_FOUND:
        logger.debug(f"No relationship record for character {character_id}")
        return []

    try:
        # Files use the camelCase keys only; snake_case names are for Python callers
        data = CharacterRelationshipData.model_validate(raw, strict=True, by_alias=True, by_name=False)
    except ValidationError as e:
        logger.warning(
            f"Relationship file {character_id}.json is malformed, skipped "
            f"({e.error_count()} validation errors)"
        )
        return []

    return list(data.relationships)
