"""Allow-list filter for single CSS declarations destined for a style attribute.

Property filtering is bleach's :class:`~bleach.css_sanitizer.CSSSanitizer`.
bleach does not look at values, so the parsed value is also checked here:
``url()``, unknown functions, braces and markup characters are refused,
while ``calc()``, ``var()`` and the color functions are tolerated.
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Any

import tinycss2
from bleach.css_sanitizer import CSSSanitizer

__all__ = ["SAFE_CSS_PROPERTIES", "esc_html", "sanitize_css_declaration"]

SAFE_CSS_PROPERTIES = frozenset({
    "background",
    "background-color",
    "border",
    "border-color",
    "border-radius",
    "border-style",
    "border-width",
    "border-top",
    "border-right",
    "border-bottom",
    "border-left",
    "color",
    "column-count",
    "column-gap",
    "columns",
    "direction",
    "display",
    "float",
    "font",
    "font-family",
    "font-size",
    "font-style",
    "font-variant",
    "font-weight",
    "gap",
    "height",
    "letter-spacing",
    "line-height",
    "list-style-type",
    "margin",
    "margin-top",
    "margin-right",
    "margin-bottom",
    "margin-left",
    "max-height",
    "max-width",
    "min-height",
    "min-width",
    "overflow",
    "padding",
    "padding-top",
    "padding-right",
    "padding-bottom",
    "padding-left",
    "text-align",
    "text-decoration",
    "text-indent",
    "text-transform",
    "vertical-align",
    "width",
    "writing-mode",
})

ALLOWED_FUNCTIONS = frozenset({
    "calc", "var", "min", "max", "clamp", "rgb", "rgba", "hsl", "hsla",
})

_UNSAFE_LITERALS = frozenset({"<", ">", "&", "=", ";"})


def esc_html(text: str) -> str:
    """Escape *text* for use inside an HTML attribute value."""
    return html.escape(text, quote=True)


def _has_unsafe_value(tokens: Iterable[Any]) -> bool:
    for token in tokens:
        if token.type in ("url", "error", "{} block"):
            return True
        if token.type == "function":
            if token.lower_name not in ALLOWED_FUNCTIONS:
                return True
            if _has_unsafe_value(token.arguments):
                return True
        elif token.type in ("() block", "[] block"):
            if _has_unsafe_value(token.content):
                return True
        elif token.type == "literal" and token.value in _UNSAFE_LITERALS:
            return True
    return False


def sanitize_css_declaration(
    declaration: str,
    extra_properties: Iterable[str] = frozenset(),
    escape: bool = True,
) -> str:
    """Filter a single ``property: value`` declaration.

    Returns the normalized declaration (HTML-escaped unless *escape* is
    False), or an empty string when the declaration is rejected.
    """
    nodes = tinycss2.parse_declaration_list(
        declaration, skip_comments=True, skip_whitespace=True
    )
    if len(nodes) != 1 or nodes[0].type != "declaration":
        return ""
    parsed = nodes[0]
    if _has_unsafe_value(parsed.value):
        return ""

    allowed = SAFE_CSS_PROPERTIES | frozenset(extra_properties)
    if parsed.lower_name.startswith("--"):
        allowed |= {parsed.lower_name}
    cleaned = CSSSanitizer(
        allowed_css_properties=allowed, allowed_svg_properties=frozenset()
    ).sanitize_css(declaration)
    if not cleaned:
        return ""

    value = tinycss2.serialize(parsed.value).strip()
    if not value:
        return ""
    if parsed.important:
        value += " !important"
    result = f"{parsed.lower_name}: {value}"
    return esc_html(result) if escape else result
