"""The package exposes its stable entry points at the top level."""

import docschema


def test_exposed_content():
    for name in ("Schema", "Document", "ValidatorError", "ValidationError"):
        assert getattr(docschema, name, None) is not None
        assert name in docschema.__all__
