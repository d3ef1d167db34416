"""Validation models: field kinds and the recursive report structure.

A report mirrors its schema: one FieldReport per declared field, with
`related` holding the nested report (single sub-document) or a positional
list of nested reports (collection of sub-documents).
"""

from enum import Enum
from typing import Any, Iterator, Optional, Union

from pydantic import BaseModel, Field, RootModel


class FieldKind(str, Enum):
    """Shape of a schema field's declared type."""

    SCALAR = "scalar"  # Named scalar type, e.g. "String"
    SINGLE = "single"  # At most one sub-document
    MANY = "many"      # Sequence of sub-documents


class FieldReport(BaseModel):
    """Validation outcome for one field."""

    messages: list[str] = Field(default_factory=list)
    related: Optional[Union["ValidationReport", list[Optional["ValidationReport"]]]] = None

    def is_valid(self) -> bool:
        if self.messages:
            return False
        if self.related is None:
            return True
        if isinstance(self.related, list):
            return all(r.is_valid() for r in self.related if r is not None)
        return self.related.is_valid()

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"messages": list(self.messages)}
        if isinstance(self.related, list):
            data["related"] = [r.to_dict() if r is not None else None for r in self.related]
        elif self.related is not None:
            data["related"] = self.related.to_dict()
        return data


class ValidationReport(RootModel[dict[str, FieldReport]]):
    """Complete validation report for one document, keyed by field name."""

    root: dict[str, FieldReport] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> FieldReport:
        return self.root[name]

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def is_valid(self) -> bool:
        """True iff no field at any depth carries a message."""
        return all(field.is_valid() for field in self.root.values())

    def to_dict(self) -> dict:
        """Plain nested dict; `related` omitted where there was nothing to traverse."""
        return {name: field.to_dict() for name, field in self.root.items()}

    def flatten(self, prefix: str = "") -> dict[str, list[str]]:
        """Map dotted/indexed paths to messages, for every field that has any.

        Example: {"book.title": ["is required"], "books[1].title": ["is required"]}
        """
        flat: dict[str, list[str]] = {}
        for name, field in self.root.items():
            path = f"{prefix}.{name}" if prefix else name
            if field.messages:
                flat[path] = list(field.messages)
            if isinstance(field.related, list):
                for i, sub in enumerate(field.related):
                    if sub is not None:
                        flat.update(sub.flatten(f"{path}[{i}]"))
            elif field.related is not None:
                flat.update(field.related.flatten(path))
        return flat


FieldReport.model_rebuild()
ValidationReport.model_rebuild()
