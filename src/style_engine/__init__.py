"""Style engine: utility classnames and inline CSS from block style attributes."""

__version__ = "0.1.0"

from style_engine.config import StyleEngineConfig  # noqa: E402
from style_engine.engine import (  # noqa: E402
    StyleEngine,
    generate,
    get_classnames,
    get_style_engine,
)
from style_engine.errors import StyleEngineError, UnknownExpanderError  # noqa: E402
from style_engine.expanders import ExpanderRegistry, get_css_rules  # noqa: E402
from style_engine.formatter import format_inline  # noqa: E402
from style_engine.model import Expansion, StyleDefinition  # noqa: E402
from style_engine.resolvers import resolve_classnames, resolve_rules  # noqa: E402
from style_engine.schema import BLOCK_STYLE_DEFINITIONS  # noqa: E402
from style_engine.validation import SchemaValidationError  # noqa: E402

__all__ = [
    "BLOCK_STYLE_DEFINITIONS",
    "ExpanderRegistry",
    "Expansion",
    "SchemaValidationError",
    "StyleDefinition",
    "StyleEngine",
    "StyleEngineConfig",
    "StyleEngineError",
    "UnknownExpanderError",
    "format_inline",
    "generate",
    "get_classnames",
    "get_css_rules",
    "get_style_engine",
    "resolve_classnames",
    "resolve_rules",
]
