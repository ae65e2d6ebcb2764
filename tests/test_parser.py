"""Tests for relationship record validation."""

import json

import pytest
from pydantic import ValidationError

from chargraph.relationships.parser import RECORD_NOT_FOUND, parse_relationships
from chargraph.relationships.types import Relationship, RelationshipType
from conftest import SAMPLE_RELATIONS, messages_at

WARNING = "Relationship file invalid.json is malformed, skipped"


class TestWellFormedRecords:

    def test_returns_all_relationships_in_order(self):
        relationships = parse_relationships(SAMPLE_RELATIONS, "1547")

        assert [r.target_id for r in relationships] == ["1548", "1549", "9999"]
        assert all(isinstance(r, Relationship) for r in relationships)
        assert relationships[0].type == "creator"
        assert relationships[0].label == "创造者"

    def test_reserializes_unchanged(self):
        relationships = parse_relationships(SAMPLE_RELATIONS, "1547")

        dumped = json.dumps([r.model_dump(by_alias=True) for r in relationships], ensure_ascii=False)
        assert dumped == json.dumps(SAMPLE_RELATIONS["relationships"], ensure_ascii=False)

    def test_reserializes_extra_keys(self):
        raw = {
            "characterId": "1547",
            "relationships": [
                {"targetId": "1548", "type": "friend", "label": "l", "description": "d", "strength": 3},
            ],
        }

        relationships = parse_relationships(raw, "1547")

        dumped = json.dumps([r.model_dump(by_alias=True) for r in relationships])
        assert dumped == json.dumps(raw["relationships"])

    def test_reserializes_in_file_key_order(self):
        raw = {
            "characterId": "1547",
            "relationships": [
                {"type": "rival", "description": "d", "targetId": "1549", "label": "l"},
                {"label": "l2", "targetId": "1548", "type": "work", "description": "d2"},
            ],
        }

        relationships = parse_relationships(raw, "1547")

        assert relationships[0].target_id == "1549"
        dumped = json.dumps([r.model_dump(by_alias=True) for r in relationships])
        assert dumped == json.dumps(raw["relationships"])

    def test_empty_relationship_list_is_valid(self, log_records):
        assert parse_relationships({"characterId": "1547", "relationships": []}, "1547") == []
        assert messages_at(log_records, "WARNING") == []

    def test_unrecognised_type_is_kept(self):
        raw = {
            "characterId": "1547",
            "relationships": [{"targetId": "1548", "type": "nemesis", "label": "l", "description": "d"}],
        }

        relationships = parse_relationships(raw, "1547")

        assert relationships[0].type == "nemesis"
        assert relationships[0].relationship_type is RelationshipType.UNKNOWN

    def test_relationships_are_immutable(self):
        relationship = parse_relationships(SAMPLE_RELATIONS, "1547")[0]

        with pytest.raises(ValidationError):
            relationship.label = "changed"


class TestMalformedRecords:

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "string data",
            42,
            [],
            {},
            {"relationships": []},
            {"characterId": 123, "relationships": []},
            {"characterId": "", "relationships": []},
            {"characterId": "X", "relationships": "not-array"},
            {"characterId": "X", "relationships": [None]},
            {"characterId": "X", "relationships": ["friend"]},
        ],
    )
    def test_rejected_with_single_warning(self, raw, log_records):
        assert parse_relationships(raw, "invalid") == []
        warnings = messages_at(log_records, "WARNING")
        assert len(warnings) == 1
        assert warnings[0].startswith(WARNING)

    @pytest.mark.parametrize("missing", ["targetId", "type", "label", "description"])
    def test_missing_field_rejects_whole_record(self, missing, log_records):
        good = {"targetId": "1548", "type": "friend", "label": "朋友", "description": "d"}
        bad = {k: v for k, v in good.items() if k != missing}
        raw = {"characterId": "X", "relationships": [good, bad]}

        assert parse_relationships(raw, "invalid") == []
        assert len(messages_at(log_records, "WARNING")) == 1

    def test_snake_case_keys_rejected(self, log_records):
        raw = {
            "character_id": "X",
            "relationships": [{"target_id": "Y", "type": "friend", "label": "l", "description": "d"}],
        }

        assert parse_relationships(raw, "invalid") == []
        warnings = messages_at(log_records, "WARNING")
        assert len(warnings) == 1
        assert warnings[0].startswith(WARNING)

    def test_snake_case_item_keys_rejected(self, log_records):
        raw = {
            "characterId": "X",
            "relationships": [{"target_id": "Y", "type": "friend", "label": "l", "description": "d"}],
        }

        assert parse_relationships(raw, "invalid") == []
        assert len(messages_at(log_records, "WARNING")) == 1

    def test_non_string_field_is_not_coerced(self, log_records):
        raw = {
            "characterId": "X",
            "relationships": [{"targetId": 1548, "type": "friend", "label": "l", "description": "d"}],
        }

        assert parse_relationships(raw, "invalid") == []
        assert messages_at(log_records, "WARNING")[0].startswith(WARNING)


class TestAbsentRecords:

    def test_not_found_is_silent(self, log_records):
        assert parse_relationships(RECORD_NOT_FOUND, "1547") == []
        assert messages_at(log_records, "WARNING") == []
