"""Tests for Document.validate(), is_valid() and validate_or_raise()."""

import pytest

from docschema import Document, Schema, ValidationError, ValidationReport

REQUIRED = {"presence": {"message": "is required"}}


@pytest.mark.asyncio
async def test_validate_nested_report(user_schema):
    """Missing fields report messages only; present sub-documents add `related`."""
    data = {
        "oldBook": {"title": ""},
        "oldBooks": [None, {"title": ""}],
    }
    user = Document(user_schema, data)

    report = await user.validate()

    assert isinstance(report, ValidationReport)
    assert report.to_dict() == {
        "name": {"messages": ["is required"]},
        "newBook": {"messages": ["is required"]},
        "newBooks": {"messages": ["is required"]},
        "oldBook": {
            "messages": [],
            "related": {
                "title": {"messages": ["is required"]},
                "year": {"messages": []},
            },
        },
        "oldBooks": {
            "messages": [],
            "related": [
                None,
                {
                    "title": {"messages": ["is required"]},
                    "year": {"messages": []},
                },
            ],
        },
    }


@pytest.mark.asyncio
async def test_is_valid_true_for_complete_document():
    """A fully populated document passes."""
    book = Schema({"fields": {"title": {"type": "String", "validate": REQUIRED}}})
    user_schema = Schema(
        {
            "fields": {
                "name": {"type": "String", "validate": REQUIRED},
                "book": {"type": book, "validate": REQUIRED},
                "books": {"type": [book], "validate": REQUIRED},
            }
        }
    )
    data = {
        "name": "John",
        "book": {"title": "Coding Is Fun"},
        "books": [{"title": "Coding NodeJs"}],
    }

    assert await Document(user_schema, data).is_valid() is True


@pytest.mark.asyncio
async def test_is_valid_false_when_only_nested_field_fails(user_schema):
    """A message deep inside a collection makes the whole document invalid."""
    data = {
        "name": "John",
        "newBook": {"title": "A"},
        "newBooks": [],
        "oldBook": {"title": "B"},
        "oldBooks": [{"title": "C"}, None, {"title": ""}],
    }
    user = Document(user_schema, data)

    report = await user.validate()

    assert report["name"].messages == []
    assert report["oldBooks"].messages == []
    assert await user.is_valid() is False
    assert report.flatten() == {"oldBooks[2].title": ["is required"]}


@pytest.mark.asyncio
async def test_empty_string_is_not_presence():
    schema = Schema({"fields": {"title": {"type": "String", "validate": REQUIRED}}})

    report = await Document(schema, {"title": ""}).validate()

    assert report.to_dict() == {"title": {"messages": ["is required"]}}


@pytest.mark.asyncio
async def test_empty_list_satisfies_presence(user_schema):
    """An empty collection is present; `related` is an empty list."""
    report = await Document(user_schema, {"newBooks": []}).validate()

    assert report["newBooks"].messages == []
    assert report["newBooks"].related == []


@pytest.mark.asyncio
async def test_explicit_none_matches_missing_key(user_schema):
    missing = await Document(user_schema, {}).validate()
    explicit = await Document(user_schema, {key: None for key in user_schema}).validate()

    assert missing.to_dict() == explicit.to_dict()
    assert all(report.related is None for report in explicit.root.values())


@pytest.mark.asyncio
async def test_none_data_is_empty_document(user_schema):
    report = await Document(user_schema).validate()

    assert set(report) == set(user_schema)
    assert report["name"].messages == ["is required"]


@pytest.mark.asyncio
async def test_validate_does_not_mutate_data(user_schema):
    data = {"oldBook": {"title": ""}, "oldBooks": [None, {"title": ""}]}
    snapshot = {"oldBook": {"title": ""}, "oldBooks": [None, {"title": ""}]}

    await Document(user_schema, data).validate()

    assert data == snapshot


@pytest.mark.asyncio
async def test_validate_or_raise_returns_report_when_valid(book_schema):
    report = await Document(book_schema, {"title": "Dune"}).validate_or_raise()

    assert report.is_valid()


@pytest.mark.asyncio
async def test_validate_or_raise_raises_with_report(user_schema):
    with pytest.raises(ValidationError) as exc_info:
        await Document(user_schema, {"oldBook": {"title": ""}}).validate_or_raise()

    error = exc_info.value
    assert error.report["oldBook"].related["title"].messages == ["is required"]
    assert "oldBook.title" in str(error)


def test_document_rejects_non_mapping_data(book_schema):
    with pytest.raises(TypeError):
        Document(book_schema, ["not", "a", "mapping"])


def test_document_requires_schema():
    with pytest.raises(TypeError):
        Document({"fields": {}}, {})
