from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from . import qif_codes as emit_q
from ..interfaces import IHeader, ITransaction
from .qif_header import QifHeader


def _bank_header() -> QifHeader:
    code = emit_q.bank_header()
    return QifHeader(code=code.code, description=code.description, type="Bank")


@dataclass(frozen=True)
class QuickenFile:
    """
    A single-section QIF document: one header followed by transaction blocks.

    Output order is exactly the order of `transactions`.
    """

    header: IHeader = field(default_factory=_bank_header)
    transactions: tuple[ITransaction, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "transactions", tuple(self.transactions))

    def iter_lines(self) -> Iterator[str]:
        yield self.header.qif_entry()
        for txn in self.transactions:
            yield from txn.qif_lines()

    def emit_qif(self) -> str:
        """Every line of the document, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self.iter_lines())

    def __len__(self) -> int:
        return len(self.transactions)
