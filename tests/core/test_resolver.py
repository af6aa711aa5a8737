"""Tests for $ref resolution."""

import logging
from pathlib import Path

from draftval.core.resolver import (
    FileRefResolver,
    RegistryRefResolver,
    resolve_pointer,
    resolve_ref,
    split_ref,
)


class TestResolvePointer:
    """Test '/'-delimited path lookup."""

    def test_empty_pointer_returns_document(self):
        """Test that an empty path is the document itself."""
        doc = {"a": 1}
        assert resolve_pointer(doc, "") is doc
        assert resolve_pointer(doc, "/") is doc

    def test_nested_keys_and_indexes(self):
        """Test walking through objects and arrays."""
        doc = {"definitions": {"list": [{"type": "string"}, {"type": "integer"}]}}
        assert resolve_pointer(doc, "/definitions/list/1") == {"type": "integer"}

    def test_escapes(self):
        """Test that ~1 and ~0 decode to '/' and '~'."""
        doc = {"a/b": {"c~d": 7}}
        assert resolve_pointer(doc, "/a~1b/c~0d") == 7

    def test_missing_segment(self):
        """Test that a missing segment yields None."""
        doc = {"a": [1]}
        assert resolve_pointer(doc, "/b") is None
        assert resolve_pointer(doc, "/a/5") is None
        assert resolve_pointer(doc, "/a/x") is None

    def test_falsy_values_are_found(self):
        """Test that present falsy values are returned, not treated as missing."""
        assert resolve_pointer({"a": 0}, "/a") == 0
        assert resolve_pointer({"a": False}, "/a") is False


def test_split_ref():
    """Test splitting references into document and fragment."""
    assert split_ref("#/definitions/x") == ("", "/definitions/x")
    assert split_ref("#") == ("", "")
    assert split_ref("other.json") == ("other.json", None)
    assert split_ref("other.json#/a") == ("other.json", "/a")


class TestFileRefResolver:
    """Test the default file/fragment resolver."""

    def test_fragment_resolves_in_root(self):
        """Test that fragments resolve against the current root."""
        root = {"definitions": {"x": {"type": "string"}}}
        new_root, schema = FileRefResolver()(root, "#/definitions/x")
        assert new_root is root
        assert schema == {"type": "string"}

    def test_unresolvable_fragment(self):
        """Test that an unknown path resolves to None."""
        assert FileRefResolver()({}, "#/definitions/nope") is None

    def test_file_becomes_new_root(self, data_dir: Path):
        """Test that a loaded file is both schema and new root."""
        resolver = FileRefResolver(data_dir)
        new_root, schema = resolver({}, "address-and-phone.schema.json")
        assert new_root is schema
        assert schema["type"] == "object"

    def test_file_with_fragment(self, data_dir: Path):
        """Test that file#fragment resolves inside the loaded file."""
        resolver = FileRefResolver(data_dir)
        new_root, schema = resolver({}, "definitions.schema.json#/definitions/tag")
        assert schema == {"type": "string"}
        assert "definitions" in new_root

    def test_missing_file(self, tmp_path: Path, caplog):
        """Test that an unreadable file resolves to None and is logged."""
        caplog.set_level(logging.DEBUG, logger="draftval")
        assert FileRefResolver(tmp_path)({}, "missing.json") is None
        assert "missing.json" in caplog.text

    def test_invalid_json_file(self, data_dir: Path):
        """Test that an unparseable file resolves to None."""
        assert FileRefResolver(data_dir)({}, "not-json.txt") is None

    def test_resolve_ref_uses_current_directory(self, data_dir: Path, monkeypatch):
        """Test that resolve_ref reads relative paths from the cwd."""
        monkeypatch.chdir(data_dir)
        resolution = resolve_ref({}, "definitions.schema.json")
        assert resolution is not None
        assert "definitions" in resolution[1]


class TestRegistryRefResolver:
    """Test the in-memory resolver."""

    def test_registered_document(self, registry_resolver):
        """Test resolving a registered document."""
        new_root, schema = registry_resolver({}, "tag.json")
        assert schema == {"type": "string"}
        assert new_root is schema

    def test_registered_fragment(self, registry_resolver):
        """Test resolving a fragment inside a registered document."""
        _, schema = registry_resolver({}, "defs.json#/definitions/count")
        assert schema["type"] == "integer"

    def test_unknown_document(self, registry_resolver):
        """Test that unregistered documents do not resolve."""
        assert registry_resolver({}, "nope.json") is None

    def test_local_fragment(self):
        """Test that fragments still resolve against the current root."""
        resolver = RegistryRefResolver({})
        root = {"definitions": {"x": {"type": "boolean"}}}
        assert resolver(root, "#/definitions/x") == (root, {"type": "boolean"})
