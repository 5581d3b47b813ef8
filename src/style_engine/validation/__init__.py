from style_engine.validation.validator import (
    SchemaValidationError,
    validate_schema,
    validate_schema_or_raise,
)

__all__ = ["SchemaValidationError", "validate_schema", "validate_schema_or_raise"]
