from __future__ import annotations

from typing import Protocol, runtime_checkable

from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """A bank transaction block: D/T/M lines, its splits, and the ``^`` marker."""

    date: str
    amount: str
    memo: str
    splits: tuple[ISplit, ...]

    def qif_lines(self) -> tuple[str, ...]: ...

    def emit_qif(self) -> str: ...
