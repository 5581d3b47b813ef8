"""Rule and classname resolution over a style schema.

Both resolvers walk the schema in order, look each definition's value up in
the attribute tree and skip anything empty. They never raise for missing
paths or unexpected shapes; absence simply contributes nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Sequence

from style_engine.expanders import (
    CssRuleset,
    ExpanderRegistry,
    box_model_rules,
    get_css_rules,
)
from style_engine.kebab import to_kebab_case
from style_engine.model.definition import (
    Expansion,
    StyleDefinition,
    StyleSchema,
    iter_definitions,
)
from style_engine.paths import MISSING, is_empty, lookup

__all__ = ["expand_value", "find_value", "resolve_classnames", "resolve_rules"]

logger = logging.getLogger(__name__)

LookupFunc = Callable[[Any, Sequence[str]], Any]
KebabFunc = Callable[[Any], str]


def find_value(tree: Any, path: Sequence[str]) -> Any:
    """Look *path* up in *tree*, returning MISSING when absent."""
    return lookup(tree, path, default=MISSING)


def expand_value(
    definition: StyleDefinition,
    value: Any,
    registry: ExpanderRegistry | None = None,
) -> CssRuleset:
    """Expand *value* according to the definition's expansion strategy."""
    if definition.expansion is Expansion.CUSTOM:
        if registry is None or definition.handler_id not in registry:
            logger.debug("No expander for %s; skipping", definition.property_key)
            return {}
        expander = registry.resolve(definition.handler_id)
        return dict(expander(value, definition.property_key))
    if definition.expansion is Expansion.BOX_MODEL:
        return box_model_rules(value, definition.property_key)
    return get_css_rules(value, definition.property_key)


def resolve_rules(
    schema: StyleSchema,
    tree: Any,
    registry: ExpanderRegistry | None = None,
    *,
    lookup_func: LookupFunc = find_value,
    render_zero: bool = False,
) -> CssRuleset:
    """Return the merged CSS ruleset for every definition found in *tree*.

    Later definitions overwrite earlier ones on property collisions.
    """
    rules: CssRuleset = {}
    if is_empty(tree):
        return rules

    for _category, _attribute, definition in iter_definitions(schema):
        value = lookup_func(tree, definition.path)
        if is_empty(value, render_zero=render_zero):
            continue
        rules.update(expand_value(definition, value, registry))
    return rules


def resolve_classnames(
    schema: StyleSchema,
    tree: Any,
    *,
    lookup_func: LookupFunc = find_value,
    kebab_func: KebabFunc = to_kebab_case,
    render_zero: bool = False,
) -> list[str]:
    """Return a classname for every scalar style value found in *tree*.

    Definitions with a template format the kebab-cased value into it; the
    rest use the kebab-cased value itself. Order follows the schema and
    duplicates are kept.
    """
    classnames: list[str] = []
    if is_empty(tree):
        return classnames

    for _category, _attribute, definition in iter_definitions(schema):
        value = lookup_func(tree, definition.path)
        if is_empty(value, render_zero=render_zero) or isinstance(value, Mapping):
            continue
        slug = kebab_func(value)
        if not slug:
            continue
        classnames.append(definition.format_classname(slug))
    return classnames
