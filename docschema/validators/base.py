"""Base validator: abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit registered under
a name. New validators are added to a registry without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Awaitable, Iterable, Mapping, Optional, Union

from docschema.errors import ValidatorError
from docschema.models import FieldKind

if TYPE_CHECKING:
    from docschema.engine import ValidationContext

Messages = Iterable[str]
ValidatorResult = Union[Messages, Awaitable[Messages]]

ALL_KINDS = frozenset(FieldKind)


class BaseValidator(ABC):
    """Abstract base for all field validators.

    Contract:
        - validate() never mutates the value
        - validate() returns zero or more failure messages, or an awaitable
          resolving to them (empty = no issues)
        - check_options() runs once, when the schema is built, and raises
          ValidatorError for an unusable option set
        - normalize_options() returns the options the schema keeps, so
          validate() can be called any number of times against them
    """

    # Field kinds this validator may be declared on
    supported_kinds: frozenset = ALL_KINDS

    default_message: str = "is invalid"

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. "presence"."""
        ...

    @abstractmethod
    def validate(self, value: Any, options: Mapping, context: "ValidationContext") -> ValidatorResult:
        """Check one field value.

        Args:
            value: The field's value (None when the key is missing)
            options: Static options declared on the field
            context: Document, field name and path being validated

        Returns:
            Iterable of failure messages, or an awaitable resolving to one
        """
        ...

    def check_options(self, options: Mapping, kind: FieldKind, field: Optional[str] = None) -> None:
        """Reject misuse at schema construction time."""
        if kind not in self.supported_kinds:
            raise ValidatorError(
                f"Validator cannot be used on a {kind.value} field",
                validator=self.name,
                field=field,
            )
        message = options.get("message")
        if message is not None and not isinstance(message, str):
            raise ValidatorError("Option 'message' must be a string", validator=self.name, field=field)

    def normalize_options(self, options: Mapping) -> dict:
        """Options as stored on the schema. Called once, after check_options()."""
        return dict(options)

    # ── Helper Methods ──

    def _message(self, options: Mapping) -> str:
        """Configured failure message, or the validator's default."""
        message = options.get("message")
        return self.default_message if message is None else message

    def _error(self, message: str, field: Optional[str] = None) -> ValidatorError:
        """Convenience method to create a ValidatorError for this validator."""
        return ValidatorError(message, validator=self.name, field=field)

    @staticmethod
    def _is_blank(value: Any) -> bool:
        """Missing, None, or an empty string. Empty collections are not blank."""
        return value is None or (isinstance(value, str) and value == "")
