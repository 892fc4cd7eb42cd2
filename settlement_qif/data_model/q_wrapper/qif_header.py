from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..interfaces import IHeader, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class QifHeader:
    code: str
    description: str = ""
    type: str = ""

    def qif_entry(self) -> str:
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IHeader):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"code": self.code, "description": self.description, "type": self.type}


if TYPE_CHECKING:
    _is_i_header: type[IHeader] = QifHeader
    _is_IToDict: type[IToDict] = QifHeader
