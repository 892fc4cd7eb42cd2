# settlement_qif/utilities/core_util.py
from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import IO, Any, Optional

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def open_for_read(path: Path, **kwargs: Any) -> IO[str]:
    return open(path, "r", **kwargs)


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read the whole file at `path` as text, leaving line endings untranslated."""
    with open_for_read(Path(path), encoding=encoding, newline="") as f:
        return f.read()


def default_file_mode() -> int:
    """Permission bits a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return default_file_mode()


def write_text_atomic(path: Path, text: str, encoding: str = "utf-8") -> None:
    """
    Write `text` to `path` in one step.

    The content goes to a temporary file in the destination directory which
    then replaces `path`, so a failed run never leaves a truncated file behind.
    The result keeps the permissions of the file it replaces, or the umask
    default for a new file. On failure the temporary file is removed and the
    exception propagates.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as out:
            out.write(text)
        # mkstemp creates the file owner-only.
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


# endregion Common functions
