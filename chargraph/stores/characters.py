import json
import os
from typing import Dict, Iterable, Optional

from loguru import logger

from chargraph.graphs.schemas import CharacterMeta


class CharacterMetadataStore:
    """Reads display metadata from ``<data_dir>/characters/<character_id>.json``.

    Only ``name`` and ``color.primary`` are used; the rest of the character
    file belongs to other parts of the site.
    """

    def __init__(self, data_dir: str):
        self.characters_dir = os.path.join(data_dir, "characters")

    def get(self, character_id: str) -> Optional[CharacterMeta]:
        path = os.path.join(self.characters_dir, f"{character_id}.json")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug(f"No character file for {character_id}")
            return None
        except json.JSONDecodeError as e:
            logger.warning(f"Character file {character_id}.json is not valid JSON: {e}")
            return None

        name = data.get("name") if isinstance(data, dict) else None
        color = data.get("color") if isinstance(data, dict) else None
        primary = color.get("primary") if isinstance(color, dict) else None
        if not isinstance(name, str) or not isinstance(primary, str):
            logger.warning(f"Character file {character_id}.json lacks name or color.primary")
            return None

        return CharacterMeta(display_name=name, color=primary)

    def lookup(self, character_ids: Iterable[str]) -> Dict[str, CharacterMeta]:
        """
        Collect metadata for several characters, skipping those without any.
        """
        result = {}
        for character_id in character_ids:
            if character_id in result:
                continue
            meta = self.get(character_id)
            if meta is not None:
                result[character_id] = meta
        return result
