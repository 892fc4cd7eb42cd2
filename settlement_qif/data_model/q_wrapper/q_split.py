from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from . import qif_codes as emit_q
from ..interfaces import ISplit, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class QSplit:
    """
    Represents a single QIF split: a category line followed by its amount line.
    """

    category: str
    amount: str

    def qif_lines(self) -> tuple[str, ...]:
        return (
            f"{emit_q.category_split().code}{self.category}",
            f"{emit_q.amount_split().code}{self.amount}",
        )

    def emit_qif(self) -> str:
        """
        Returns the QIF representation of this split.
        """
        return "\n".join(self.qif_lines())

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"category": self.category, "amount": self.amount}


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
