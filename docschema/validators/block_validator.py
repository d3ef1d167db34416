"""Block Validator: custom check supplied as a callable.

The callable receives (value, context) and returns a truthy result when the
value is valid. It may be a coroutine function, which is how checks against
an external store (uniqueness, existence) are expressed.
"""

import inspect
from typing import Any, Mapping, Optional

from docschema.models import FieldKind
from docschema.validators.base import BaseValidator


class BlockValidator(BaseValidator):
    """Delegates to the `block` option."""

    @property
    def name(self) -> str:
        return "block"

    def check_options(self, options: Mapping, kind: FieldKind, field: Optional[str] = None) -> None:
        super().check_options(options, kind, field)
        if not callable(options.get("block")):
            raise self._error("Option 'block' must be callable", field)

    async def validate(self, value: Any, options: Mapping, context) -> list[str]:
        result = options["block"](value, context)
        if inspect.isawaitable(result):
            result = await result
        if not result:
            return [self._message(options)]
        return []
