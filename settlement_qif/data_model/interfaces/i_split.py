from __future__ import annotations

from typing import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IToDict, Protocol):
    """Structural shape of a split (S/E pair) that can be emitted."""

    category: str
    amount: str

    def qif_lines(self) -> tuple[str, ...]: ...

    def emit_qif(self) -> str: ...
