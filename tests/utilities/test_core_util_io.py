from __future__ import annotations

import os
import stat

import pytest

from settlement_qif.utilities import (
    default_file_mode,
    is_null_or_whitespace,
    open_for_read,
    read_text,
    write_text_atomic,
)


@pytest.mark.parametrize(
    "value,expected",
    [(None, True), ("", True), ("   \t", True), ("x", False), (" x ", False)],
)
def test_is_null_or_whitespace(value, expected):
    assert is_null_or_whitespace(value) is expected


def test_open_for_read_uses_builtins_open(monkeypatch, tmp_path):
    # Arrange
    opened = {"mode": None}
    expected = "hello world"

    class FakeReadable:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            pass

        def read(self, *_, **__):
            return expected

    def fake_open(file, mode="r", **kwargs):
        opened["mode"] = mode
        return FakeReadable()

    monkeypatch.setattr("builtins.open", fake_open, raising=True)

    # Act
    with open_for_read(tmp_path / "sample.csv") as f:
        data = f.read()

    # Assert
    assert opened["mode"] == "r", "Text mode expected by default"
    assert data == expected


def test_read_text_honours_encoding(tmp_path):
    p = tmp_path / "latin.csv"
    p.write_bytes("café".encode("cp1252"))
    assert read_text(p, encoding="cp1252") == "café"


def test_write_text_atomic_creates_parents_and_leaves_no_temp_files(tmp_path):
    # Arrange
    target = tmp_path / "nested" / "out.qif"

    # Act
    write_text_atomic(target, "!Type:Bank\n")

    # Assert
    assert target.read_text(encoding="utf-8") == "!Type:Bank\n"
    assert os.listdir(target.parent) == ["out.qif"]


def test_write_text_atomic_keeps_newlines_as_lf(tmp_path):
    target = tmp_path / "out.qif"
    write_text_atomic(target, "a\nb\n")
    assert target.read_bytes() == b"a\nb\n"


def test_write_text_atomic_failure_keeps_previous_file_and_cleans_up(
    monkeypatch, tmp_path
):
    # Arrange
    target = tmp_path / "out.qif"
    target.write_text("previous", encoding="utf-8")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", boom)

    # Act
    with pytest.raises(OSError, match="disk full"):
        write_text_atomic(target, "new content")

    # Assert
    assert target.read_text(encoding="utf-8") == "previous"
    assert os.listdir(tmp_path) == ["out.qif"], "Temporary file must be removed"


def test_read_text_keeps_carriage_returns(tmp_path):
    p = tmp_path / "crlf.csv"
    p.write_bytes(b"a,b\r\nc\rd\n")
    assert read_text(p) == "a,b\r\nc\rd\n"


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_write_text_atomic_new_file_follows_umask(tmp_path):
    # Arrange
    target = tmp_path / "out.qif"

    # Act
    write_text_atomic(target, "x\n")

    # Assert
    assert stat.S_IMODE(target.stat().st_mode) == default_file_mode()


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_write_text_atomic_keeps_existing_permissions(tmp_path):
    # Arrange
    target = tmp_path / "out.qif"
    target.write_text("old", encoding="utf-8")
    os.chmod(target, 0o640)

    # Act
    write_text_atomic(target, "new")

    # Assert
    assert stat.S_IMODE(target.stat().st_mode) == 0o640
    assert target.read_text(encoding="utf-8") == "new"


def test_default_file_mode_masks_with_umask(monkeypatch):
    calls = []

    def fake_umask(value):
        calls.append(value)
        return 0o027

    monkeypatch.setattr(os, "umask", fake_umask)
    assert default_file_mode() == 0o640
    assert calls == [0, 0o027], "umask must be restored after reading it"
