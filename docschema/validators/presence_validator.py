"""Presence Validator: the field must hold a value.

Missing keys, None and empty strings fail. An empty list is a supplied value
and passes: a present-but-empty collection still has presence.
"""

from typing import Any, Mapping

from docschema.validators.base import BaseValidator


class PresenceValidator(BaseValidator):
    """Fails when the value is blank."""

    default_message = "is required"

    @property
    def name(self) -> str:
        return "presence"

    def validate(self, value: Any, options: Mapping, context) -> list[str]:
        if self._is_blank(value):
            return [self._message(options)]
        return []
