"""Diagnostic model: structured validation messages for schema analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a style schema.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        category: The schema category involved, if applicable.
        attribute: The attribute name within the category, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    category: str | None = None
    attribute: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.category and self.attribute:
            location = f" [{self.category}.{self.attribute}]"
        elif self.category:
            location = f" [{self.category}]"
        return f"{self.severity.value}{location}: {self.message}"
