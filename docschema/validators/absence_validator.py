"""Absence Validator: the field must be left blank."""

from typing import Any, Mapping

from docschema.validators.base import BaseValidator


class AbsenceValidator(BaseValidator):
    """Inverse of presence: fails when a value was supplied."""

    default_message = "must be blank"

    @property
    def name(self) -> str:
        return "absence"

    def validate(self, value: Any, options: Mapping, context) -> list[str]:
        if not self._is_blank(value):
            return [self._message(options)]
        return []
