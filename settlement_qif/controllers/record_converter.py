# settlement_qif/controllers/record_converter.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from settlement_qif.data_model import QSplit, QTransaction, SettlementRow
from settlement_qif.exceptions import MalformedRowError
from settlement_qif.utilities import ConverterConfig, NormalizedAmount, normalize_amount

log = logging.getLogger(__name__)

AmountNormalizer = Callable[[Optional[str]], NormalizedAmount]

SKIP_INCOMPLETE = "incomplete"
SKIP_HEADER = "header"


@dataclass(frozen=True)
class SkippedRow:
    """Why an input line produced no transaction."""

    line_number: int  # 1-based, counting only non-empty lines
    line: str
    field_count: int
    reason: str = SKIP_INCOMPLETE

    def describe(self) -> str:
        if self.reason == SKIP_HEADER:
            return f"Skipping header line {self.line_number}: {self.line}"
        return (
            f"Skipping line {self.line_number} due to incomplete data "
            f"(expected {SettlementRow.FIELD_COUNT} columns, got {self.field_count}): "
            f"{self.line}"
        )


@dataclass(frozen=True)
class ConversionResult:
    blocks: Tuple[QTransaction, ...] = field(default_factory=tuple)
    skipped: Tuple[SkippedRow, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        # Allows ``blocks, count, skipped = converter.convert(lines)``.
        return iter((self.blocks, self.count, self.skipped))


def split_lines(text: str) -> List[str]:
    """
    Return the non-blank lines of `text`, in order.

    Only ``\\n`` ends a line; a trailing ``\\r`` stays on the line and is removed
    by the per-field trim.
    """
    return [line for line in text.split("\n") if line.strip()]


class RecordConverter:
    """
    Turns settlement CSV lines into QIF bank transactions with three splits.

    Each row becomes a deposit for the net amount, split into fees, tax and
    revenue under the configured category names. Rows with too few columns
    are reported in ``ConversionResult.skipped`` and never abort the pass.
    Amounts are not reconciled against the total.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        normalizer: AmountNormalizer = normalize_amount,
    ):
        self.config = config or ConverterConfig()
        self._normalize = normalizer

    def to_block(self, row: SettlementRow) -> QTransaction:
        fee_cat, tax_cat, revenue_cat = self.config.split_categories
        return QTransaction(
            date=row.date,
            amount=self._normalize(row.net_amount),
            memo=row.memo,
            splits=(
                QSplit(fee_cat, self._normalize(row.fee_amount)),
                QSplit(tax_cat, self._normalize(row.tax_amount)),
                QSplit(revenue_cat, self._normalize(row.revenue_amount)),
            ),
        )

    def convert(self, lines: Iterable[str]) -> ConversionResult:
        blocks: List[QTransaction] = []
        skipped: List[SkippedRow] = []
        line_number = 0

        for line in lines:
            if not line.strip():
                continue
            line_number += 1

            if self.config.skip_header and line_number == 1:
                header = SkippedRow(
                    line_number,
                    line,
                    len(line.split(self.config.delimiter)),
                    SKIP_HEADER,
                )
                log.debug(header.describe())
                skipped.append(header)
                continue

            try:
                row = SettlementRow.parse(line, self.config.delimiter)
            except MalformedRowError as e:
                diag = SkippedRow(line_number, line, e.field_count)
                log.warning(diag.describe())
                skipped.append(diag)
                continue

            blocks.append(self.to_block(row))

        log.debug("Converted %d rows, skipped %d", len(blocks), len(skipped))
        return ConversionResult(tuple(blocks), tuple(skipped))

    def convert_text(self, text: str) -> ConversionResult:
        return self.convert(split_lines(text))
