"""Validation rules for style schemas.

Each rule is a function taking a schema and an expander registry and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import re

from style_engine.expanders import ExpanderRegistry
from style_engine.model.definition import Expansion, StyleSchema, iter_definitions
from style_engine.model.diagnostic import Diagnostic, Severity

# Any printf-style directive, including the escaped "%%".
_DIRECTIVE_RE = re.compile(r"%(?:%|[-+ #0]*\d*(?:\.\d+)?[a-zA-Z])")


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_property_key(schema: StyleSchema, registry: ExpanderRegistry) -> list[Diagnostic]:
    """Every definition needs a non-empty CSS property key."""
    diagnostics: list[Diagnostic] = []
    for category, attribute, definition in iter_definitions(schema):
        key = definition.property_key
        if not isinstance(key, str) or not key.strip():
            diagnostics.append(
                Diagnostic(
                    rule="check_property_key",
                    severity=Severity.ERROR,
                    message=f"Invalid property key {key!r}.",
                    category=category,
                    attribute=attribute,
                    fix="Set property_key to a CSS property name such as 'margin'.",
                )
            )
    return diagnostics


def check_path(schema: StyleSchema, registry: ExpanderRegistry) -> list[Diagnostic]:
    """Paths must be non-empty tuples of non-empty strings."""
    diagnostics: list[Diagnostic] = []
    for category, attribute, definition in iter_definitions(schema):
        path = definition.path
        valid = (
            isinstance(path, tuple)
            and len(path) > 0
            and all(isinstance(part, str) and part for part in path)
        )
        if not valid:
            diagnostics.append(
                Diagnostic(
                    rule="check_path",
                    severity=Severity.ERROR,
                    message=f"Invalid path {path!r}.",
                    category=category,
                    attribute=attribute,
                    fix="Use a non-empty tuple of keys, e.g. ('spacing', 'padding').",
                )
            )
    return diagnostics


def check_classname_template(
    schema: StyleSchema, registry: ExpanderRegistry
) -> list[Diagnostic]:
    """Classname templates take exactly one ``%s`` and nothing else."""
    diagnostics: list[Diagnostic] = []
    for category, attribute, definition in iter_definitions(schema):
        template = definition.classname_template
        if template is None:
            continue
        directives = _DIRECTIVE_RE.findall(template) if isinstance(template, str) else []
        if directives != ["%s"]:
            diagnostics.append(
                Diagnostic(
                    rule="check_classname_template",
                    severity=Severity.ERROR,
                    message=f"Classname template {template!r} must contain exactly one '%s'.",
                    category=category,
                    attribute=attribute,
                    fix="Use a template like 'has-%s-font-size'.",
                )
            )
    return diagnostics


def check_expander_registered(
    schema: StyleSchema, registry: ExpanderRegistry
) -> list[Diagnostic]:
    """CUSTOM definitions must name a registered expander."""
    diagnostics: list[Diagnostic] = []
    for category, attribute, definition in iter_definitions(schema):
        if definition.expansion is Expansion.CUSTOM:
            if not definition.handler_id or definition.handler_id not in registry:
                diagnostics.append(
                    Diagnostic(
                        rule="check_expander_registered",
                        severity=Severity.ERROR,
                        message=(
                            f"Custom expander {definition.handler_id!r} is not registered."
                        ),
                        category=category,
                        attribute=attribute,
                        fix="Register the expander before building the engine.",
                    )
                )
        elif definition.handler_id is not None:
            diagnostics.append(
                Diagnostic(
                    rule="check_expander_registered",
                    severity=Severity.WARNING,
                    message=(
                        f"handler_id {definition.handler_id!r} is ignored for "
                        f"{definition.expansion.value} expansion."
                    ),
                    category=category,
                    attribute=attribute,
                    fix="Set expansion=Expansion.CUSTOM or drop handler_id.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Consistency rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_path_matches_location(
    schema: StyleSchema, registry: ExpanderRegistry
) -> list[Diagnostic]:
    """A definition's path should match where it sits in the schema."""
    diagnostics: list[Diagnostic] = []
    for category, attribute, definition in iter_definitions(schema):
        if tuple(definition.path) != (category, attribute):
            diagnostics.append(
                Diagnostic(
                    rule="check_path_matches_location",
                    severity=Severity.WARNING,
                    message=(
                        f"Path {definition.path!r} differs from schema location "
                        f"'{category}.{attribute}'."
                    ),
                    category=category,
                    attribute=attribute,
                )
            )
    return diagnostics


def check_duplicate_property_keys(
    schema: StyleSchema, registry: ExpanderRegistry
) -> list[Diagnostic]:
    """Two definitions writing the same property overwrite each other."""
    seen: dict[str, str] = {}
    diagnostics: list[Diagnostic] = []
    for category, attribute, definition in iter_definitions(schema):
        key = definition.property_key
        if key in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_property_keys",
                    severity=Severity.WARNING,
                    message=f"Property key '{key}' is also used by '{seen[key]}'.",
                    category=category,
                    attribute=attribute,
                    fix="Later definitions overwrite earlier ones; use distinct keys.",
                )
            )
        else:
            seen[key] = f"{category}.{attribute}"
    return diagnostics


ALL_RULES = [
    check_property_key,
    check_path,
    check_classname_template,
    check_expander_registered,
    check_path_matches_location,
    check_duplicate_property_keys,
]
