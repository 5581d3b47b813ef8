"""Value expanders: turn one resolved style value into CSS declarations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Callable

from style_engine.errors import UnknownExpanderError
from style_engine.paths import is_empty

__all__ = [
    "BOX_SIDES",
    "ExpanderRegistry",
    "ValueExpander",
    "box_model_rules",
    "css_value",
    "get_css_rules",
]

CssRuleset = dict[str, str]
ValueExpander = Callable[[Any, str], CssRuleset]

BOX_SIDES = ("top", "right", "bottom", "left")


def css_value(value: Any) -> str:
    """Render a scalar style value as CSS text."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_css_rules(value: Any, property_key: str) -> CssRuleset:
    """Default expansion.

    A mapping is treated like a box model: ``{"top": "1em"}`` for
    ``padding`` yields ``{"padding-top": "1em"}``, keeping the mapping's
    key order. Any other value yields a single ``property_key`` rule.
    Whether a numeric zero counts as empty is decided by the resolver, so
    zero is rendered here.
    """
    rules: CssRuleset = {}
    if is_empty(value, render_zero=True):
        return rules

    if isinstance(value, Mapping):
        for key, sub_value in value.items():
            rules[f"{property_key}-{key}"] = css_value(sub_value)
    else:
        rules[property_key] = css_value(value)
    return rules


def box_model_rules(value: Any, property_key: str) -> CssRuleset:
    """Box model expansion that only emits the four box sides.

    Unknown sub-keys of a mapping are ignored. A scalar is emitted as the
    shorthand property.
    """
    if not isinstance(value, Mapping):
        return get_css_rules(value, property_key)
    return get_css_rules(
        {key: sub for key, sub in value.items() if key in BOX_SIDES},
        property_key,
    )


class ExpanderRegistry:
    """Maps custom handler ids to value expander callables."""

    def __init__(self) -> None:
        self._expanders: dict[str, ValueExpander] = {}

    def register(self, handler_id: str, expander: ValueExpander) -> None:
        """Register *expander* under *handler_id*, replacing any previous one."""
        if not callable(expander):
            raise TypeError(f"Expander for {handler_id!r} is not callable")
        self._expanders[handler_id] = expander

    def resolve(self, handler_id: str) -> ValueExpander:
        try:
            return self._expanders[handler_id]
        except KeyError:
            raise UnknownExpanderError(handler_id) from None

    def __contains__(self, handler_id: object) -> bool:
        return handler_id in self._expanders

    def __iter__(self) -> Iterator[str]:
        return iter(self._expanders)

    def __len__(self) -> int:
        return len(self._expanders)
