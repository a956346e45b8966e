"""
Tests for the cataloger registry.

Tests registration, lookup, universe construction with the name-as-tag
convention, and loading registry documents.
"""

import json

import pytest

from tagfilter.core.exceptions import (
    DuplicateNameError,
    NotFoundError,
    RegistryError,
    RegistryLoadError,
)
from tagfilter.core.registry import (
    DEFAULT_CATALOGERS,
    CatalogerDefinition,
    CatalogerRegistry,
    default_registry,
)
from tagfilter.core.selection import SelectionRequest, filter_values


@pytest.fixture
def registry():
    return CatalogerRegistry([
        CatalogerDefinition("js-1", ["i", "js"]),
        CatalogerDefinition("py-1", ["i", "d", "py"]),
        CatalogerDefinition("sc-1"),
    ])


class TestRegistration:
    """Tests for register() and get()."""

    def test_register_and_get(self, registry):
        """Test registered catalogers can be looked up."""
        definition = registry.get("py-1")
        assert definition.tags == ["i", "d", "py"]

    def test_names_in_registration_order(self, registry):
        """Test names() keeps registration order."""
        assert registry.names() == ["js-1", "py-1", "sc-1"]

    def test_len_and_contains(self, registry):
        assert len(registry) == 3
        assert "sc-1" in registry
        assert "nope" not in registry

    def test_duplicate_name(self, registry):
        """Test registering a name twice fails."""
        with pytest.raises(DuplicateNameError) as exc_info:
            registry.register(CatalogerDefinition("js-1", ["other"]))
        assert exc_info.value.name == "js-1"
        assert isinstance(exc_info.value, RegistryError)

    def test_unknown_name(self, registry):
        """Test looking up an unknown name fails."""
        with pytest.raises(NotFoundError) as exc_info:
            registry.get("go-1")
        assert exc_info.value.resource_id == "go-1"
        assert exc_info.value.resource_type == "cataloger"


class TestUniverse:
    """Tests for universe()."""

    def test_name_is_first_tag(self, registry):
        """Test each cataloger is tagged with its own name first."""
        universe = registry.universe()
        assert universe.values() == ["js-1", "py-1", "sc-1"]
        assert universe[0].tags == ("js-1", "i", "js")
        assert universe[2].tags == ("sc-1",)

    def test_select_by_name(self, registry):
        """Test names can be used as tags."""
        assert registry.universe().select("sc-1").values() == ["sc-1"]

    def test_empty_registry(self):
        """Test an empty registry gives an empty universe."""
        assert CatalogerRegistry().universe().values() == []


class TestFromDict:
    """Tests for building registries from documents."""

    def test_valid_document(self):
        """Test a well-formed document loads in order."""
        registry = CatalogerRegistry.from_dict({
            "catalogers": [
                {"name": "a", "tags": ["x"], "description": "first"},
                {"name": "b"},
            ]
        })
        assert registry.names() == ["a", "b"]
        assert registry.get("a").description == "first"
        assert registry.get("b").tags == []

    @pytest.mark.parametrize("document", [
        [],
        {},
        {"catalogers": "a,b"},
        {"catalogers": ["a"]},
        {"catalogers": [{"tags": ["x"]}]},
        {"catalogers": [{"name": ""}]},
        {"catalogers": [{"name": "a", "tags": "x"}]},
        {"catalogers": [{"name": "a", "tags": ["x", 1]}]},
        {"catalogers": [{"name": "a", "description": 3}]},
        {"catalogers": [{"name": "a", "description": ["text"]}]},
    ])
    def test_malformed_documents(self, document):
        """Test malformed documents are rejected."""
        with pytest.raises(RegistryLoadError):
            CatalogerRegistry.from_dict(document)

    def test_null_description(self):
        """Test a null description becomes an empty string."""
        registry = CatalogerRegistry.from_dict({
            "catalogers": [{"name": "a", "description": None}]
        })
        assert registry.get("a").description == ""

    def test_duplicate_in_document(self):
        """Test duplicate names in a document are rejected."""
        with pytest.raises(DuplicateNameError):
            CatalogerRegistry.from_dict({"catalogers": [{"name": "a"}, {"name": "a"}]})


class TestLoad:
    """Tests for loading registries from files."""

    def test_load_file(self, tmp_path):
        """Test loading a JSON registry file."""
        path = tmp_path / "catalogers.json"
        path.write_text(json.dumps({"catalogers": [{"name": "a", "tags": ["x"]}]}))

        registry = CatalogerRegistry.load(path)
        assert registry.names() == ["a"]

    def test_missing_file(self, tmp_path):
        """Test a missing file raises RegistryLoadError with the path."""
        path = tmp_path / "missing.json"
        with pytest.raises(RegistryLoadError) as exc_info:
            CatalogerRegistry.load(path)
        assert exc_info.value.path == str(path)

    @pytest.mark.parametrize("content", [
        b"\xff",
        b'{"catalogers":[{"name":"\xff\xfe"}]}',
    ])
    def test_invalid_utf8(self, tmp_path, content):
        """Test undecodable bytes raise RegistryLoadError with the path."""
        path = tmp_path / "binary.json"
        path.write_bytes(content)
        with pytest.raises(RegistryLoadError) as exc_info:
            CatalogerRegistry.load(path)
        assert exc_info.value.path == str(path)
        assert "UTF-8" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        """Test invalid JSON raises RegistryLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(RegistryLoadError):
            CatalogerRegistry.load(path)


class TestDefaultRegistry:
    """Tests for the built-in catalogers."""

    def test_all_builtins_registered(self):
        """Test every built-in cataloger is in the default registry."""
        registry = default_registry()
        assert registry.names() == [d.name for d in DEFAULT_CATALOGERS]

    def test_image_selection(self):
        """Test the image default excludes declared-only catalogers."""
        universe = default_registry().universe()
        selected = filter_values(universe, SelectionRequest(base=["image"]))
        assert "python-installed-package-cataloger" in selected
        assert "python-package-cataloger" not in selected
        assert "file-digest-cataloger" not in selected

    def test_name_tags_are_unique(self):
        """Test no built-in name collides with another cataloger's tag."""
        registry = default_registry()
        for name in registry.names():
            assert registry.universe().select(name).values() == [name]
