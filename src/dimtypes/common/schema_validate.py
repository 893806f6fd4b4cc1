from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parents[1] / "schemas"
UNIT_SYSTEM_SCHEMA = SCHEMAS_DIR / "unit_system.schema.json"


@lru_cache(maxsize=None)
def load_schema(schema_path: Path) -> Dict[str, Any]:
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)
    jsonschema.Draft202012Validator.check_schema(schema)
    return schema


def validate_json(instance: Any, schema_path: Path) -> None:
    jsonschema.Draft202012Validator(load_schema(schema_path)).validate(instance)


def validate_unit_system(payload: Any) -> None:
    """Structural check of a unit system document before model validation."""
    validate_json(payload, UNIT_SYSTEM_SCHEMA)
