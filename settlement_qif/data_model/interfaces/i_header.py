from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IHeader(Protocol):
    """Section header line such as ``!Type:Bank``."""

    code: str
    description: str
    type: str

    def qif_entry(self) -> str: ...
