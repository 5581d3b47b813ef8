"""Style engine model layer -- public type re-exports."""

from style_engine.model.definition import (
    Expansion,
    StyleDefinition,
    StyleSchema,
    definition_at,
    freeze_schema,
    iter_definitions,
)
from style_engine.model.diagnostic import Diagnostic, Severity

__all__ = [
    "Diagnostic",
    "Expansion",
    "Severity",
    "StyleDefinition",
    "StyleSchema",
    "definition_at",
    "freeze_schema",
    "iter_definitions",
]
