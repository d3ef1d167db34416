"""Error types: configuration defects vs. data defects.

ValidatorError means the schema itself is broken (a programmer error) and is
always raised. ValidationError wraps a failed report for callers that prefer
throw-on-invalid over inspecting the report.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from docschema.models import ValidationReport


class ValidatorError(Exception):
    """Malformed schema or validator usage."""

    def __init__(
        self,
        message: str,
        *,
        validator: Optional[str] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.validator = validator
        self.field = field
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.field:
            parts.append(f"field '{self.field}'")
        if self.validator:
            parts.append(f"validator '{self.validator}'")
        if parts:
            return f"{self.message} ({', '.join(parts)})"
        return self.message


class ValidationError(Exception):
    """A document failed validation. Carries the full report."""

    def __init__(self, report: "ValidationReport", message: Optional[str] = None):
        self.report = report
        if message is None:
            failing = sorted(report.flatten())
            message = f"Document is invalid: {', '.join(failing) or 'no details'}"
        self.message = message
        super().__init__(message)
