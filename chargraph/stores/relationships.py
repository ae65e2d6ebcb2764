import json
import os
from typing import Any, List

from loguru import logger

from chargraph.relationships.parser import RECORD_NOT_FOUND, parse_relationships
from chargraph.relationships.types import Relationship


class _UndecodableRecord:
    """Stand-in for a file that exists but is not valid JSON."""

    def __init__(self, error: Exception):
        self.error = error

    def __repr__(self):
        return f"<undecodable record: {self.error}>"


class RelationshipStore:
    """Reads ``<data_dir>/characters/relations/<character_id>.json`` files."""

    def __init__(self, data_dir: str):
        self.relations_dir = os.path.join(data_dir, "characters", "relations")

    def path_for(self, character_id: str) -> str:
        return os.path.join(self.relations_dir, f"{character_id}.json")

    def load_record(self, character_id: str) -> Any:
        path = self.path_for(character_id)
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            return RECORD_NOT_FOUND

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.debug(f"Relationship file {path} is not valid JSON: {e}")
            # Fails validation, so it is reported like any other malformed record
            return _UndecodableRecord(e)

    def get_relationships(self, character_id: str) -> List[Relationship]:
        return parse_relationships(self.load_record(character_id), character_id)
