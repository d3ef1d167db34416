"""Validator Registry: resolves validator names to validator instances.

Schemas resolve every declared validator name through a registry when they
are built, so an unknown name fails before any data is validated.

Usage:
    registry = ValidatorRegistry()
    registry.add_validator(MyValidator())
    validator = registry.get("presence")
"""

from typing import Optional

import structlog

from docschema.errors import ValidatorError
from docschema.validators.base import BaseValidator

# Import all validators
from docschema.validators.presence_validator import PresenceValidator
from docschema.validators.absence_validator import AbsenceValidator
from docschema.validators.length_validator import LengthValidator
from docschema.validators.inclusion_validator import InclusionValidator, ExclusionValidator
from docschema.validators.format_validator import FormatValidator
from docschema.validators.block_validator import BlockValidator

logger = structlog.get_logger()


class ValidatorRegistry:
    """Name -> validator mapping.

    Only mutated while schemas are being assembled; validation only reads it.
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self._validators: dict[str, BaseValidator] = {}
        initial = self._default_validators() if validators is None else validators
        for validator in initial:
            self.add_validator(validator)

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the built-in validator catalog."""
        return [
            PresenceValidator(),
            AbsenceValidator(),
            LengthValidator(),
            InclusionValidator(),
            ExclusionValidator(),
            FormatValidator(),
            BlockValidator(),
        ]

    def get(self, name: str) -> BaseValidator:
        """Look up a validator by name.

        Raises:
            ValidatorError: If no validator is registered under `name`
        """
        try:
            return self._validators[name]
        except (KeyError, TypeError):
            raise ValidatorError("Unknown validator", validator=str(name)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def names(self) -> list[str]:
        return list(self._validators)

    def add_validator(self, validator: BaseValidator) -> None:
        """Register a validator, replacing any existing one with the same name."""
        if not isinstance(validator, BaseValidator):
            raise ValidatorError(f"{type(validator).__name__} is not a BaseValidator")
        if validator.name in self._validators:
            logger.debug("validator_replaced", validator=validator.name)
        self._validators[validator.name] = validator

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self._validators.pop(validator_name, None)


# Module-level singleton
validator_registry = ValidatorRegistry()
