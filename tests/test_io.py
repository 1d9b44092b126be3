"""
Tests for the file store used by StanzaDocument.
"""

import pytest
from stanzafile.io import FileStore, StanzaError, StanzaIOError


def test_read_write_roundtrip(tmp_path):
    store = FileStore()
    path = str(tmp_path / "f")
    store.write_all(path, "a:\n x = 1\n\n")
    assert store.exists(path)
    assert store.read_all(path) == "a:\n x = 1\n\n"


def test_line_endings_are_not_translated(tmp_path):
    store = FileStore()
    path = tmp_path / "f"
    path.write_bytes(b"a:\r\n x = 1\r\n\r\n")
    assert store.read_all(str(path)) == "a:\r\n x = 1\r\n\r\n"


def test_create_empty_does_not_truncate(tmp_path):
    store = FileStore()
    path = tmp_path / "f"
    store.create_empty(str(path))
    assert path.read_text() == ""
    path.write_text("keep me")
    store.create_empty(str(path))
    assert path.read_text() == "keep me"


def test_missing_file_raises(tmp_path):
    with pytest.raises(StanzaIOError) as excinfo:
        FileStore().read_all(str(tmp_path / "nope"))
    assert excinfo.value.path == str(tmp_path / "nope")
    assert isinstance(excinfo.value, StanzaError)


def test_create_in_missing_directory_raises(tmp_path):
    with pytest.raises(StanzaIOError):
        FileStore().create_empty(str(tmp_path / "missing" / "f"))
