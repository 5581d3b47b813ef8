"""Schema validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from style_engine.errors import StyleEngineError
from style_engine.expanders import ExpanderRegistry
from style_engine.model.definition import StyleSchema
from style_engine.model.diagnostic import Diagnostic
from style_engine.validation.rules import ALL_RULES


class SchemaValidationError(StyleEngineError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Schema validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[StyleSchema, ExpanderRegistry], list[Diagnostic]]


def validate_schema(
    schema: StyleSchema,
    registry: ExpanderRegistry | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *schema*.

    Returns the full list of diagnostics (errors and warnings).
    """
    if registry is None:
        registry = ExpanderRegistry()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(schema, registry))
    return diagnostics


def validate_schema_or_raise(
    schema: StyleSchema,
    registry: ExpanderRegistry | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`SchemaValidationError` on ERROR diagnostics.

    Returns the warnings when no errors are found.
    """
    diagnostics = validate_schema(schema, registry, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise SchemaValidationError(errors)
    return diagnostics
