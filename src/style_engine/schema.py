"""Built-in block style definitions.

Each entry tells the engine where a style value lives in a block's style
attributes, which CSS property it maps to, and optionally which utility
classname to derive from it. The table is frozen at import time.
"""

from __future__ import annotations

from style_engine.model.definition import StyleDefinition, freeze_schema

__all__ = ["BLOCK_STYLE_DEFINITIONS"]

BLOCK_STYLE_DEFINITIONS = freeze_schema({
    "spacing": {
        "padding": StyleDefinition(
            property_key="padding",
            path=("spacing", "padding"),
        ),
        "margin": StyleDefinition(
            property_key="margin",
            path=("spacing", "margin"),
        ),
    },
    "typography": {
        "fontSize": StyleDefinition(
            property_key="font-size",
            path=("typography", "fontSize"),
            classname_template="has-%s-font-size",
        ),
        "fontFamily": StyleDefinition(
            property_key="font-family",
            path=("typography", "fontFamily"),
            classname_template="has-%s-font-family",
        ),
        "fontStyle": StyleDefinition(
            property_key="font-style",
            path=("typography", "fontStyle"),
        ),
        "fontWeight": StyleDefinition(
            property_key="font-weight",
            path=("typography", "fontWeight"),
        ),
        "lineHeight": StyleDefinition(
            property_key="line-height",
            path=("typography", "lineHeight"),
        ),
        "textDecoration": StyleDefinition(
            property_key="text-decoration",
            path=("typography", "textDecoration"),
        ),
        "textTransform": StyleDefinition(
            property_key="text-transform",
            path=("typography", "textTransform"),
        ),
        "letterSpacing": StyleDefinition(
            property_key="letter-spacing",
            path=("typography", "letterSpacing"),
        ),
    },
})
