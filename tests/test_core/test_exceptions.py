"""
Tests for the tagfilter exception hierarchy.
"""

import pytest

from tagfilter.core.exceptions import (
    ConfigurationError,
    DuplicateNameError,
    NotFoundError,
    RegistryError,
    RegistryLoadError,
    SelectionError,
    TagFilterError,
)


class TestHierarchy:
    """Test that every error can be caught as TagFilterError."""

    @pytest.mark.parametrize("error", [
        ConfigurationError("bad"),
        SelectionError("bad", token="+"),
        DuplicateNameError("a"),
        NotFoundError("missing"),
        RegistryLoadError("bad", path="x.json"),
    ])
    def test_base_class(self, error):
        assert isinstance(error, TagFilterError)

    def test_registry_errors(self):
        assert issubclass(DuplicateNameError, RegistryError)
        assert issubclass(NotFoundError, RegistryError)
        assert issubclass(RegistryLoadError, RegistryError)


class TestMessages:
    """Test error messages and details."""

    def test_plain_message(self):
        assert str(TagFilterError("something failed")) == "something failed"

    def test_details_in_message(self):
        error = SelectionError("bad token", token="+", position=0)
        assert error.token == "+"
        assert error.details == {"position": 0}
        assert str(error) == "bad token (details: {'position': 0})"

    def test_duplicate_name(self):
        error = DuplicateNameError("js-1")
        assert "js-1" in str(error)
