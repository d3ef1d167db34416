"""Scalar type names a schema field may reference.

Casting and conformance rules live outside the engine; a field declared with
a scalar type is validated only by its own validator chain. This registry
exists so that a misspelled type name is caught when the schema is built.
"""

SCALAR_TYPES: set[str] = {
    "Any",
    "String",
    "Boolean",
    "Integer",
    "Float",
    "Number",
    "Date",
}


def register_type(name: str) -> None:
    """Make a custom scalar type name available to schemas."""
    if not isinstance(name, str) or not name:
        raise ValueError("Scalar type name must be a non-empty string")
    SCALAR_TYPES.add(name)


def is_scalar_type(name: str) -> bool:
    return name in SCALAR_TYPES
