from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Sequence

from settlement_qif.exceptions import MalformedRowError


@dataclass(frozen=True)
class SettlementRow:
    """
    One settlement record from the processor's CSV export.

    Field order here is the column order of the export. Amounts are kept as
    the raw spreadsheet text; normalization happens when the QIF block is built.
    """

    date: str
    memo: str  # deposit identifier
    net_amount: str  # sum deposited
    fee_amount: str
    tax_amount: str
    revenue_amount: str

    FIELD_COUNT: ClassVar[int] = 6

    @classmethod
    def from_fields(cls, values: Sequence[str], line: str = "") -> "SettlementRow":
        """Build a row from already-split columns; columns past the sixth are ignored."""
        if len(values) < cls.FIELD_COUNT:
            raise MalformedRowError(line, len(values), cls.FIELD_COUNT)
        return cls(*values[: cls.FIELD_COUNT])

    @classmethod
    def parse(cls, line: str, delimiter: str = ",") -> "SettlementRow":
        """Split `line` on `delimiter`, trim every column, and build a row."""
        return cls.from_fields([col.strip() for col in line.split(delimiter)], line)

    @classmethod
    def column_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))
