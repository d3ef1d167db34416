"""Document: a schema paired with candidate data.

Usage:
    user = Document(user_schema, {"name": "John"})
    report = await user.validate()
    if not await user.is_valid():
        ...
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from docschema.engine import ValidationEngine, validation_engine
from docschema.errors import ValidationError
from docschema.models import ValidationReport
from docschema.schema import Schema


class Document:
    """The unit the engine validates. Data is read by reference, never copied."""

    def __init__(
        self,
        schema: Schema,
        data: Optional[Mapping[str, Any]] = None,
        *,
        engine: Optional[ValidationEngine] = None,
    ):
        if not isinstance(schema, Schema):
            raise TypeError(f"Expected a Schema, got {type(schema).__name__}")
        if data is None:
            data = MappingProxyType({})
        elif not isinstance(data, Mapping):
            raise TypeError(f"Document data must be a mapping, got {type(data).__name__}")

        self.schema = schema
        self.data = data
        self.engine = engine or validation_engine

    def __repr__(self) -> str:
        return f"Document(fields={list(self.schema)})"

    async def validate(self) -> ValidationReport:
        """Validate every field recursively and return the report."""
        return await self.engine.validate(self)

    async def is_valid(self) -> bool:
        """True when validate() yields no messages at any depth."""
        report = await self.validate()
        return report.is_valid()

    async def validate_or_raise(self) -> ValidationReport:
        """Return the report if valid, otherwise raise ValidationError carrying it."""
        report = await self.validate()
        if not report.is_valid():
            raise ValidationError(report)
        return report
