"""Format Validator: string values must match a regular expression."""

import re
from typing import Any, Mapping, Optional

from docschema.models import FieldKind
from docschema.validators.base import BaseValidator


class FormatValidator(BaseValidator):
    """Matches string values against `regex` (full match not required)."""

    supported_kinds = frozenset({FieldKind.SCALAR})

    @property
    def name(self) -> str:
        return "format"

    def check_options(self, options: Mapping, kind: FieldKind, field: Optional[str] = None) -> None:
        super().check_options(options, kind, field)
        regex = options.get("regex")
        if isinstance(regex, re.Pattern):
            return
        if not isinstance(regex, str):
            raise self._error("Option 'regex' must be a string or compiled pattern", field)
        try:
            re.compile(regex)
        except re.error as e:
            raise self._error(f"Option 'regex' does not compile: {e}", field) from None

    def normalize_options(self, options: Mapping) -> dict:
        normalized = dict(options)
        normalized["regex"] = re.compile(options["regex"])
        return normalized

    def validate(self, value: Any, options: Mapping, context) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, str) or re.compile(options["regex"]).search(value) is None:
            return [self._message(options)]
        return []
