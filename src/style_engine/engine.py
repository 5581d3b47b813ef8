"""StyleEngine: classnames and inline styles from block style attributes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import partial
from typing import Any

from style_engine.config import StyleEngineConfig
from style_engine.expanders import CssRuleset, ExpanderRegistry
from style_engine.formatter import Sanitizer, format_inline
from style_engine.kebab import to_kebab_case
from style_engine.model.definition import StyleSchema, definition_at, freeze_schema
from style_engine.paths import is_empty
from style_engine.resolvers import (
    KebabFunc,
    LookupFunc,
    expand_value,
    find_value,
    resolve_classnames,
    resolve_rules,
)
from style_engine.sanitize import sanitize_css_declaration
from style_engine.schema import BLOCK_STYLE_DEFINITIONS
from style_engine.validation import validate_schema_or_raise

__all__ = ["StyleEngine", "generate", "get_classnames", "get_style_engine"]

logger = logging.getLogger(__name__)


class StyleEngine:
    """Generate classnames and inline CSS from nested style attributes.

    The engine holds no per-call state. The schema is validated once, on
    construction; a misconfigured schema raises
    :class:`~style_engine.validation.SchemaValidationError` here rather than
    during generation. After that every method is total: missing paths,
    empty values and rejected declarations simply contribute nothing.

    The path lookup, kebab-case and sanitizer collaborators can be swapped
    out, mainly for testing.
    """

    def __init__(
        self,
        schema: StyleSchema = BLOCK_STYLE_DEFINITIONS,
        registry: ExpanderRegistry | None = None,
        config: StyleEngineConfig | None = None,
        *,
        lookup: LookupFunc | None = None,
        kebab: KebabFunc | None = None,
        sanitizer: Sanitizer | None = None,
    ) -> None:
        self.registry = registry if registry is not None else ExpanderRegistry()
        self.config = config or StyleEngineConfig()

        for diagnostic in validate_schema_or_raise(schema, self.registry):
            logger.warning("Style schema: %s", diagnostic)
        self.schema = freeze_schema(schema)

        self._lookup = lookup or find_value
        self._kebab = kebab or to_kebab_case
        self._sanitizer = sanitizer or partial(
            sanitize_css_declaration,
            extra_properties=self.config.extra_safe_properties,
            escape=self.config.escape_html,
        )

    # --- rules ----------------------------------------------------------------

    def get_rules(self, block_styles: Any, path: Sequence[str] | None = None) -> CssRuleset:
        """Return the CSS ruleset for *block_styles*.

        With *path*, only the definition stored at that schema location is
        considered.
        """
        schema = self._select(path)
        if schema is None:
            return {}
        return resolve_rules(
            schema,
            block_styles,
            self.registry,
            lookup_func=self._lookup,
            render_zero=self.config.render_zero,
        )

    def get_style_rules(self, style_value: Any, path: Sequence[str]) -> CssRuleset:
        """Expand one raw style value using the definition at *path*."""
        definition = definition_at(self.schema, tuple(path))
        if definition is None or is_empty(style_value, render_zero=self.config.render_zero):
            return {}
        return expand_value(definition, style_value, self.registry)

    # --- classnames -----------------------------------------------------------

    def get_classname_list(self, block_styles: Any) -> list[str]:
        return resolve_classnames(
            self.schema,
            block_styles,
            lookup_func=self._lookup,
            kebab_func=self._kebab,
            render_zero=self.config.render_zero,
        )

    def get_classnames(self, block_styles: Any) -> str:
        """Return the utility classnames for *block_styles* as one string."""
        return self.config.classname_separator.join(self.get_classname_list(block_styles))

    # --- output ---------------------------------------------------------------

    def format_inline(self, rules: Mapping[str, str]) -> str:
        return format_inline(
            rules,
            sanitizer=self._sanitizer,
            separator=self.config.declaration_separator,
        )

    def generate(
        self,
        block_styles: Any,
        inline: bool = False,
        path: Sequence[str] | None = None,
    ) -> str:
        """Return a CSS ruleset formatted for an HTML ``style`` attribute.

        Only inline output exists; without ``inline=True`` the result is an
        empty string. Callers that need the raw ruleset use :meth:`get_rules`.
        """
        if is_empty(block_styles):
            return ""
        rules = self.get_rules(block_styles, path=path)
        if not rules or inline is not True:
            return ""
        return self.format_inline(rules)

    def _select(self, path: Sequence[str] | None) -> StyleSchema | None:
        if path is None:
            return self.schema
        path = tuple(path)
        definition = definition_at(self.schema, path)
        if definition is None:
            logger.debug("No style definition at %r", path)
            return None
        return freeze_schema({path[0]: {path[1]: definition}})


_default_engine = StyleEngine()


def get_style_engine() -> StyleEngine:
    """Return the shared engine built on the block style definitions."""
    return _default_engine


def generate(
    block_styles: Any,
    inline: bool = False,
    path: Sequence[str] | None = None,
) -> str:
    """Shortcut for ``get_style_engine().generate(...)``."""
    return _default_engine.generate(block_styles, inline=inline, path=path)


def get_classnames(block_styles: Any) -> str:
    """Shortcut for ``get_style_engine().get_classnames(...)``."""
    return _default_engine.get_classnames(block_styles)
