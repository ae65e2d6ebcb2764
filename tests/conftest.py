import json

import pytest
from loguru import logger

from chargraph.graphs.schemas import GraphEdge, GraphNode


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def messages_at(records, level):
    return [r["message"] for r in records if r["level"].name == level]


def make_node(node_id, is_center=False):
    return GraphNode(
        id=node_id,
        character_id=node_id,
        display_name=node_id,
        color="#000000",
        is_center=is_center,
    )


def make_edge(source, target):
    return GraphEdge(
        id=f"edge-{source}-{target}",
        source_id=source,
        target_id=target,
        label="",
        type="friend",
        description="",
    )


SAMPLE_RELATIONS = {
    "characterId": "1547",
    "relationships": [
        {"targetId": "1548", "type": "creator", "label": "创造者", "description": "1548 assembled 1547"},
        {"targetId": "1549", "type": "friend", "label": "朋友", "description": "Old friends"},
        {"targetId": "9999", "type": "rival", "label": "对手", "description": "Not in the character files"},
    ],
}


@pytest.fixture
def data_dir(tmp_path):
    characters = tmp_path / "characters"
    relations = characters / "relations"
    relations.mkdir(parents=True)

    for character_id, name, color in [
        ("1547", "AptS:1547", "#60a5fa"),
        ("1548", "AptS:1548", "#f472b6"),
        ("1549", "AptS:1549", "#34d399"),
    ]:
        (characters / f"{character_id}.json").write_text(
            json.dumps({"id": character_id, "name": name, "color": {"primary": color, "dark": "#111111"}}),
            encoding="utf-8",
        )

    (relations / "1547.json").write_text(json.dumps(SAMPLE_RELATIONS, ensure_ascii=False), encoding="utf-8")
    (relations / "broken.json").write_text("{not json", encoding="utf-8")
    (relations / "invalid.json").write_text(
        json.dumps({"characterId": "invalid", "relationships": [{"targetId": "1548", "type": "friend", "label": "x"}]}),
        encoding="utf-8",
    )
    return tmp_path
