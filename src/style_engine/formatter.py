"""Inline style formatting for resolved CSS rulesets."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable

from style_engine.sanitize import sanitize_css_declaration

__all__ = ["format_inline"]

logger = logging.getLogger(__name__)

Sanitizer = Callable[[str], str]


def format_inline(
    rules: Mapping[str, str],
    sanitizer: Sanitizer = sanitize_css_declaration,
    separator: str = "; ",
) -> str:
    """Render *rules* as a string for an HTML ``style`` attribute.

    Each declaration goes through *sanitizer*; rejected ones are dropped
    without affecting the rest.
    """
    output = ""
    for prop, value in rules.items():
        filtered = sanitizer(f"{prop}: {value}")
        if not filtered:
            logger.debug("Rejected CSS declaration: %r", f"{prop}: {value}")
            continue
        output += filtered + separator
    return output.strip()
