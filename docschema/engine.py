"""Validation Engine: walks a document against its schema and builds the report.

For every declared field the engine runs the field's validator chain, then
recurses into sub-documents (single) or each element of a sub-document list
(many). Sibling fields and sibling list elements are independent, so they are
dispatched together with asyncio.gather; gather returns results positionally,
which keeps messages in validator-declaration order no matter which validator
finishes first.

Usage:
    engine = ValidationEngine()
    report = await engine.validate(document)
    if not report.is_valid():
        ...
"""

import asyncio
import inspect
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Iterable, Optional

import structlog

from docschema.config import get_settings
from docschema.errors import ValidatorError
from docschema.models import FieldKind, FieldReport, ValidationReport
from docschema.schema import FieldDescriptor, ValidatorSpec

if TYPE_CHECKING:
    from docschema.document import Document

logger = structlog.get_logger()


@dataclass(frozen=True)
class ValidationContext:
    """What a validator knows about the value it is checking."""

    document: "Document"
    field: str
    path: str
    depth: int

    @property
    def data(self) -> Mapping:
        return self.document.data


def _is_document_data(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_document_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class ValidationEngine:
    """Recursive, read-only validation pass over a Document.

    Design principles:
        - Read-only: the document's data is never copied or modified
        - Deterministic: the report shape mirrors the schema exactly
        - Configuration defects raise ValidatorError, data defects are reported
        - Exceptions raised by validator logic propagate to the caller
    """

    def __init__(self, max_depth: Optional[int] = None, concurrent: Optional[bool] = None):
        """Initialize from settings, with optional overrides.

        Args:
            max_depth: Deepest sub-document nesting allowed before aborting
            concurrent: Dispatch sibling fields/elements/validators together
        """
        settings = get_settings()
        self.max_depth = settings.MAX_DEPTH if max_depth is None else max_depth
        self.concurrent = settings.CONCURRENT_VALIDATION if concurrent is None else concurrent

    async def validate(self, document: "Document") -> ValidationReport:
        """Run the full recursive validation and return the report.

        Never raises for data defects; raises ValidatorError for schema
        defects that only surface with concrete values.
        """
        start_time = time.perf_counter()

        report = await self._validate_document(document, path="", depth=0)

        total_duration = (time.perf_counter() - start_time) * 1000
        invalid_fields = report.flatten()

        logger.info(
            "validation_complete",
            valid=not invalid_fields,
            fields=len(report),
            invalid_fields=sorted(invalid_fields),
            duration_ms=round(total_duration, 2),
        )

        return report

    # ── Traversal ──

    async def _validate_document(self, document: "Document", path: str, depth: int) -> ValidationReport:
        if depth > self.max_depth:
            raise ValidatorError(
                f"Schema nesting exceeds maximum depth of {self.max_depth}",
                field=path or None,
            )

        descriptors = list(document.schema.fields.values())
        results = await self._gather(
            self._validate_field(document, descriptor, path, depth) for descriptor in descriptors
        )
        return ValidationReport({d.name: result for d, result in zip(descriptors, results)})

    async def _validate_field(
        self,
        document: "Document",
        descriptor: FieldDescriptor,
        path: str,
        depth: int,
    ) -> FieldReport:
        field_path = f"{path}.{descriptor.name}" if path else descriptor.name
        value = document.data.get(descriptor.name)
        context = ValidationContext(document=document, field=descriptor.name, path=field_path, depth=depth)

        batches = await self._gather(
            self._run_validator(spec, value, context) for spec in descriptor.validators
        )
        messages = [message for batch in batches for message in batch]

        if value is None or descriptor.kind == FieldKind.SCALAR:
            return FieldReport(messages=messages)

        sub_schema = descriptor.type.sub_schema

        if descriptor.kind == FieldKind.SINGLE:
            if not _is_document_data(value):
                return FieldReport(messages=messages)
            related = await self._validate_document(
                type(document)(sub_schema, value), field_path, depth + 1
            )
            return FieldReport(messages=messages, related=related)

        if not _is_document_list(value):
            return FieldReport(messages=messages)
        related_list = await self._gather(
            self._validate_element(document, sub_schema, item, f"{field_path}[{i}]", depth + 1)
            for i, item in enumerate(value)
        )
        return FieldReport(messages=messages, related=related_list)

    async def _validate_element(
        self,
        document: "Document",
        schema,
        item: Any,
        path: str,
        depth: int,
    ) -> Optional[ValidationReport]:
        # Non-document slots are skipped, not reported
        if not _is_document_data(item):
            return None
        return await self._validate_document(type(document)(schema, item), path, depth)

    async def _run_validator(self, spec: ValidatorSpec, value: Any, context: ValidationContext) -> list[str]:
        try:
            result = spec.validator.validate(value, spec.options, context)
            if inspect.isawaitable(result):
                result = await result
        except ValidatorError:
            raise
        except Exception as e:
            logger.error(
                "validator_failed",
                validator=spec.name,
                field=context.path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        return [str(message) for message in (result or [])]

    async def _gather(self, coroutines: Iterable[Awaitable]) -> list:
        """Await all coroutines, results in submission order.

        Concurrent mode waits for every sibling before failing, then raises
        the first exception in submission order, as sequential mode would.
        """
        if self.concurrent:
            results = await asyncio.gather(*coroutines, return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            return list(results)
        return [await coroutine for coroutine in coroutines]


# Module-level singleton
validation_engine = ValidationEngine()
