"""Schema: declarative field types and validator chains.

A schema is built once from a configuration mapping and then only read.
Every type reference and validator name is resolved at construction time,
so a malformed schema fails before any data is validated.

Usage:
    book = Schema({
        "fields": {
            "title": {"type": "String", "validate": {"presence": {"message": "is required"}}},
        }
    })
    user = Schema({"fields": {"books": {"type": [book]}}})
"""

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict

from docschema.errors import ValidatorError
from docschema.models import FieldKind
from docschema.scalars import is_scalar_type
from docschema.validators.base import BaseValidator
from docschema.validators.registry import ValidatorRegistry, validator_registry

logger = structlog.get_logger()

FIELD_CONFIG_KEYS = {"type", "validate"}


class TypeRef(BaseModel):
    """Resolved field type: Scalar(name), Single(schema) or Many(schema)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: FieldKind
    name: Optional[str] = None               # Scalar type name
    sub_schema: Optional["Schema"] = None    # Sub-document schema

    @classmethod
    def resolve(cls, raw: Any, field: Optional[str] = None) -> "TypeRef":
        """Classify a raw `type` declaration."""
        if isinstance(raw, str):
            if not is_scalar_type(raw):
                raise ValidatorError(f"Unknown scalar type '{raw}'", field=field)
            return cls(kind=FieldKind.SCALAR, name=raw)
        if isinstance(raw, Schema):
            return cls(kind=FieldKind.SINGLE, sub_schema=raw)
        if isinstance(raw, (list, tuple)):
            if len(raw) != 1 or not isinstance(raw[0], Schema):
                raise ValidatorError("A list type must contain exactly one Schema", field=field)
            return cls(kind=FieldKind.MANY, sub_schema=raw[0])
        raise ValidatorError(f"Invalid type reference {raw!r}", field=field)


class ValidatorSpec(BaseModel):
    """One declared validator: resolved instance plus its static options."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    validator: BaseValidator
    options: Any  # read-only mapping


class FieldDescriptor(BaseModel):
    """Declared shape of one schema field."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type: TypeRef
    validators: tuple[ValidatorSpec, ...] = ()

    @property
    def kind(self) -> FieldKind:
        return self.type.kind

    @classmethod
    def build(cls, name: str, config: Any, registry: ValidatorRegistry) -> "FieldDescriptor":
        if not isinstance(config, Mapping):
            raise ValidatorError("Field configuration must be a mapping", field=name)

        unknown = set(config) - FIELD_CONFIG_KEYS
        if unknown:
            raise ValidatorError(
                f"Unknown field option(s): {', '.join(sorted(map(str, unknown)))}", field=name
            )
        if "type" not in config:
            raise ValidatorError("Field is missing 'type'", field=name)

        type_ref = TypeRef.resolve(config["type"], field=name)

        declared = config.get("validate") or {}
        if not isinstance(declared, Mapping):
            raise ValidatorError("'validate' must map validator names to options", field=name)

        specs = []
        for validator_name, options in declared.items():
            validator = registry.get(validator_name)
            if options is None:
                options = {}
            if not isinstance(options, Mapping):
                raise ValidatorError(
                    "Validator options must be a mapping", validator=validator_name, field=name
                )
            validator.check_options(options, type_ref.kind, field=name)
            options = validator.normalize_options(options)
            specs.append(
                ValidatorSpec(
                    name=validator_name,
                    validator=validator,
                    options=MappingProxyType(options),
                )
            )

        return cls(name=name, type=type_ref, validators=tuple(specs))


class Schema:
    """Ordered, immutable mapping of field name -> FieldDescriptor."""

    def __init__(self, config: Mapping, *, registry: Optional[ValidatorRegistry] = None):
        if not isinstance(config, Mapping):
            raise ValidatorError("Schema configuration must be a mapping")

        fields = config.get("fields") or {}
        if not isinstance(fields, Mapping):
            raise ValidatorError("'fields' must map field names to field configurations")

        registry = registry if registry is not None else validator_registry

        descriptors = {}
        for name, field_config in fields.items():
            if not isinstance(name, str) or not name:
                raise ValidatorError(f"Invalid field name {name!r}")
            descriptors[name] = FieldDescriptor.build(name, field_config, registry)

        self._fields = MappingProxyType(descriptors)

        logger.debug(
            "schema_built",
            fields=len(descriptors),
            nested=sum(1 for d in descriptors.values() if d.kind != FieldKind.SCALAR),
        )

    @property
    def fields(self) -> Mapping[str, FieldDescriptor]:
        """Read-only view of the field descriptors, in declaration order."""
        return self._fields

    def __getitem__(self, name: str) -> FieldDescriptor:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Schema(fields={list(self._fields)})"


TypeRef.model_rebuild()
FieldDescriptor.model_rebuild()
