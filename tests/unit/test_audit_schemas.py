"""Tests for schema validation of audit events and params."""

import json
from collections.abc import Callable
from importlib import resources
from pathlib import Path

import jsonschema
import pytest

from namematch.audit import AuditLogger
from namematch.evaluation import evaluate
from namematch.models import Record
from namematch.scoring import ScoringParams
from namematch.scoring.params import load_params_schema


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    schema_file = resources.files("namematch") / "schemas" / "log_event.schema.json"
    return json.loads(schema_file.read_text(encoding="utf-8"))


@pytest.mark.unit
def test_bundled_schemas_are_valid_draft_2020_12(event_schema: dict) -> None:
    jsonschema.Draft202012Validator.check_schema(event_schema)
    jsonschema.Draft202012Validator.check_schema(load_params_schema())


@pytest.mark.unit
def test_generated_events_validate(
    tmp_path: Path,
    event_schema: dict,
    make_record: Callable[..., Record],
    params: ScoringParams,
) -> None:
    """Test events written during an evaluation validate against schema."""
    train = [make_record(1, collection=5), make_record(2, collection=6, country=2)]
    test = [make_record(3, collection=5)]
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="schema_run", log_path=log_path) as logger:
        logger.run_started(command=["namematch"], parameters=params.to_dict())
        evaluate(train, test, params, logger=logger)
        logger.error("ValueError", "example")
        logger.run_finished("success", 0.1)

    with log_path.open() as f:
        lines = [line for line in f if line.strip()]

    assert len(lines) == 6
    for line in lines:
        jsonschema.validate(instance=json.loads(line), schema=event_schema)


@pytest.mark.unit
def test_invalid_events_rejected_by_schema(event_schema: dict) -> None:
    """Test schema rejects invalid level and missing fields."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance={"ts": "x", "run_id": "x"}, schema=event_schema)

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={
                "ts": "2026-01-01T00:00:00.000001Z",
                "run_id": "r",
                "level": "LOUD",
                "event": "e",
                "data": {},
                "stage": None,
                "record_id": None,
            },
            schema=event_schema,
        )


@pytest.mark.unit
def test_params_to_dict_validates_against_params_schema(params: ScoringParams) -> None:
    jsonschema.validate(instance=params.to_dict(), schema=load_params_schema())
