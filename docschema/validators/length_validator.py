"""Length Validator: bounds the size of strings and collections."""

from typing import Any, Mapping, Optional

from docschema.models import FieldKind
from docschema.validators.base import BaseValidator


class LengthValidator(BaseValidator):
    """Checks len(value) against optional `min` / `max` bounds."""

    supported_kinds = frozenset({FieldKind.SCALAR, FieldKind.MANY})
    default_message = "has invalid length"

    @property
    def name(self) -> str:
        return "length"

    def check_options(self, options: Mapping, kind: FieldKind, field: Optional[str] = None) -> None:
        super().check_options(options, kind, field)

        bounds = {key: options.get(key) for key in ("min", "max") if options.get(key) is not None}
        if not bounds:
            raise self._error("Requires at least one of 'min' or 'max'", field)
        for key, bound in bounds.items():
            if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
                raise self._error(f"Option '{key}' must be a non-negative integer", field)
        if len(bounds) == 2 and bounds["min"] > bounds["max"]:
            raise self._error("Option 'min' is greater than 'max'", field)

    def validate(self, value: Any, options: Mapping, context) -> list[str]:
        if value is None:
            return []

        try:
            size = len(value)
        except TypeError:
            # Only a concrete value reveals the misuse
            raise self._error(
                f"Cannot measure length of {type(value).__name__}",
                context.path if context is not None else None,
            ) from None

        minimum = options.get("min")
        maximum = options.get("max")
        if minimum is not None and size < minimum:
            return [self._message(options)]
        if maximum is not None and size > maximum:
            return [self._message(options)]
        return []
