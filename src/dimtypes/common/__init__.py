from .schema_validate import UNIT_SYSTEM_SCHEMA, load_schema, validate_json, validate_unit_system
