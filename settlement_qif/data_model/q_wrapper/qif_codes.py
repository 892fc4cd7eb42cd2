# settlement_qif/data_model/q_wrapper/qif_codes.py
"""Line prefixes of the ``!Type:Bank`` records this package writes."""
from __future__ import annotations

from .qif_code import QifCode


def bank_header() -> QifCode:
    return QifCode("!Type:Bank", "Bank account section header", "Header", "!Type:Bank")


def date() -> QifCode:
    return QifCode("D", "Date", "Banking", "D01/15/2024")


def amount_transaction() -> QifCode:
    return QifCode("T", "Total amount of the transaction", "Banking", "T590.57")


def memo() -> QifCode:
    return QifCode("M", "Memo", "Banking", "MDEP123")


def category_split() -> QifCode:
    return QifCode("S", "Category in split", "Splits", "SExpenses:Square Fees")


def amount_split() -> QifCode:
    # GnuCash's QIF importer reads the amount of a split from this line.
    return QifCode("E", "Amount of split", "Splits", "E-12.50")


def end_of_record() -> QifCode:
    return QifCode("^", "End of the entry", "All", "^")
