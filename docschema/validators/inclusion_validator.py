"""Inclusion / Exclusion Validators: membership in a fixed set of values."""

from typing import Any, Mapping, Optional

from docschema.models import FieldKind
from docschema.validators.base import BaseValidator


class InclusionValidator(BaseValidator):
    """Value must be one of `values`."""

    supported_kinds = frozenset({FieldKind.SCALAR})
    default_message = "is not included in the list"

    @property
    def name(self) -> str:
        return "inclusion"

    def check_options(self, options: Mapping, kind: FieldKind, field: Optional[str] = None) -> None:
        super().check_options(options, kind, field)
        values = options.get("values")
        if values is None or isinstance(values, (str, bytes)):
            raise self._error("Option 'values' must be a collection of allowed values", field)
        try:
            iter(values)
        except TypeError:
            raise self._error("Option 'values' must be a collection of allowed values", field) from None

    def normalize_options(self, options: Mapping) -> dict:
        # One-shot iterables (generators) must survive repeated validations
        normalized = dict(options)
        normalized["values"] = tuple(options["values"])
        return normalized

    @staticmethod
    def _contains(values: Any, value: Any) -> bool:
        try:
            return value in values
        except TypeError:
            # Unhashable value checked against a set
            return any(value == allowed for allowed in values)

    def _matches(self, value: Any, options: Mapping) -> bool:
        return self._contains(options["values"], value)

    def validate(self, value: Any, options: Mapping, context) -> list[str]:
        if value is None:
            return []
        if not self._matches(value, options):
            return [self._message(options)]
        return []


class ExclusionValidator(InclusionValidator):
    """Value must not be one of `values`."""

    default_message = "is reserved"

    @property
    def name(self) -> str:
        return "exclusion"

    def _matches(self, value: Any, options: Mapping) -> bool:
        return not self._contains(options["values"], value)
