from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleEngineConfig:
    classname_separator: str = " "
    declaration_separator: str = "; "
    render_zero: bool = False  # render numeric 0 instead of treating it as unset
    escape_html: bool = True
    extra_safe_properties: frozenset[str] = frozenset()
