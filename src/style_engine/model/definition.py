"""Style definition model: StyleDefinition, Expansion and schema helpers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Expansion(Enum):
    """How a resolved style value is turned into CSS declarations.

    DEFAULT expands by value shape (mapping -> one rule per key, scalar ->
    one rule). BOX_MODEL only keeps the four box sides from a mapping.
    CUSTOM delegates to an expander registered under ``handler_id``.
    """

    DEFAULT = "default"
    BOX_MODEL = "box_model"
    CUSTOM = "custom"


@dataclass(frozen=True)
class StyleDefinition:
    """One schema entry mapping an attribute path to a CSS property."""

    property_key: str
    path: tuple[str, ...]
    classname_template: str | None = None
    expansion: Expansion = Expansion.DEFAULT
    handler_id: str | None = None

    def format_classname(self, value: str) -> str:
        """Format *value* into the classname template, or return it as-is."""
        if self.classname_template is None:
            return value
        return self.classname_template % value


# category -> attribute name -> definition
StyleSchema = Mapping[str, Mapping[str, StyleDefinition]]


def freeze_schema(groups: Mapping[str, Mapping[str, StyleDefinition]]) -> StyleSchema:
    """Wrap a nested definitions table in read-only mapping proxies."""
    return MappingProxyType(
        {category: MappingProxyType(dict(entries)) for category, entries in groups.items()}
    )


def iter_definitions(schema: StyleSchema) -> Iterator[tuple[str, str, StyleDefinition]]:
    """Yield ``(category, attribute, definition)`` in schema order."""
    for category, entries in schema.items():
        for attribute, definition in entries.items():
            yield category, attribute, definition


def definition_at(schema: StyleSchema, path: Sequence[str]) -> StyleDefinition | None:
    """Return the definition stored at ``(category, attribute)``, if any."""
    if len(path) != 2:
        return None
    category, attribute = path
    entries = schema.get(category)
    if entries is None:
        return None
    return entries.get(attribute)
