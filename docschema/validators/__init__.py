"""Field validators and the registry that names them.

Usage:
    from docschema.validators import validator_registry, BaseValidator

    class UniqueEmail(BaseValidator):
        name = "unique_email"
        async def validate(self, value, options, context): ...

    validator_registry.add_validator(UniqueEmail())
"""

from docschema.validators.base import BaseValidator
from docschema.validators.registry import ValidatorRegistry, validator_registry

__all__ = [
    "BaseValidator",
    "ValidatorRegistry",
    "validator_registry",
]
