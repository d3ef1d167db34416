"""docschema: declarative schema validation for nested documents.

Usage:
    from docschema import Schema, Document

    book = Schema({"fields": {"title": {"type": "String", "validate": {"presence": {}}}}})
    user = Document(Schema({"fields": {"book": {"type": book}}}), data)

    report = await user.validate()
    if not await user.is_valid():
        # report.flatten() -> {"book.title": ["is required"]}
"""

from docschema.document import Document
from docschema.errors import ValidationError, ValidatorError
from docschema.models import FieldReport, ValidationReport
from docschema.schema import Schema
from docschema.validators import BaseValidator, ValidatorRegistry, validator_registry

__all__ = [
    "Schema",
    "Document",
    "ValidatorError",
    "ValidationError",
    "ValidationReport",
    "FieldReport",
    "BaseValidator",
    "ValidatorRegistry",
    "validator_registry",
]
