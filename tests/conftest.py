"""Shared pytest fixtures: the book/user schemas used across test modules."""

import pytest

from docschema import Schema

REQUIRED = {"presence": {"message": "is required"}}


@pytest.fixture
def book_schema() -> Schema:
    return Schema(
        {
            "fields": {
                "title": {"type": "String", "validate": REQUIRED},
                "year": {"type": "Integer"},
            }
        }
    )


@pytest.fixture
def user_schema(book_schema: Schema) -> Schema:  # pylint: disable=redefined-outer-name
    return Schema(
        {
            "fields": {
                "name": {"type": "String", "validate": REQUIRED},
                "newBook": {"type": book_schema, "validate": REQUIRED},
                "newBooks": {"type": [book_schema], "validate": REQUIRED},
                "oldBook": {"type": book_schema, "validate": REQUIRED},
                "oldBooks": {"type": [book_schema], "validate": REQUIRED},
            }
        }
    )
