from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import qif_codes as emit_q
from ..interfaces import ISplit, ITransaction, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class QTransaction:
    """
    One bank transaction block.

    Lines are emitted in a fixed order: date, total, memo, every split's
    category/amount pair, then the end-of-record marker. Date and memo are
    written verbatim.
    """

    date: str
    amount: str
    memo: str
    splits: tuple[ISplit, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of splits but store an immutable tuple.
        object.__setattr__(self, "splits", tuple(self.splits))

    def qif_lines(self) -> tuple[str, ...]:
        lines = [
            f"{emit_q.date().code}{self.date}",
            f"{emit_q.amount_transaction().code}{self.amount}",
            f"{emit_q.memo().code}{self.memo}",
        ]
        for split in self.splits:
            lines.extend(split.qif_lines())
        lines.append(emit_q.end_of_record().code)
        return tuple(lines)

    def emit_qif(self) -> str:
        """
        Returns the QIF representation of this transaction.
        """
        return "\n".join(self.qif_lines())

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "date": self.date,
            "amount": self.amount,
            "memo": self.memo,
            "splits": [s.to_dict() for s in self.splits],
        }


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
