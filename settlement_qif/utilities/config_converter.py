# settlement_qif/utilities/config_converter.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Final

from settlement_qif.exceptions import ConfigurationError

from .core_util import is_null_or_whitespace

DEFAULT_INPUT_FILE: Final = "QIF_Source_Data.csv"
DEFAULT_OUTPUT_FILE: Final = "Square_Transactions_Import.qif"
DEFAULT_DELIMITER: Final = ","

# Must match the account names in the target ledger.
DEFAULT_FEE_ACCOUNT: Final = "Expenses:Square Fees"
DEFAULT_TAX_ACCOUNT: Final = "Liabilities:Sales Tax Payable"
DEFAULT_REVENUE_ACCOUNT: Final = "Income:Sales:Card Revenue"


@dataclass(frozen=True)
class ConverterConfig:
    """
    Options for one settlement → QIF run.

    Every text option must be non-empty and the delimiter must be a single
    character; anything else raises ``ConfigurationError`` on construction.
    """

    input_path: Path = Path(DEFAULT_INPUT_FILE)
    output_path: Path = Path(DEFAULT_OUTPUT_FILE)
    delimiter: str = DEFAULT_DELIMITER
    fee_account_name: str = DEFAULT_FEE_ACCOUNT
    tax_account_name: str = DEFAULT_TAX_ACCOUNT
    revenue_account_name: str = DEFAULT_REVENUE_ACCOUNT
    encoding: str = "utf-8"
    skip_header: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))

        for name in (
            "delimiter",
            "fee_account_name",
            "tax_account_name",
            "revenue_account_name",
            "encoding",
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or value == "":
                raise ConfigurationError(
                    f"{name} must be non-empty text", details={name: value}
                )
        if is_null_or_whitespace(str(self.input_path)) or str(self.input_path) == ".":
            raise ConfigurationError("input_path must be non-empty")
        if is_null_or_whitespace(str(self.output_path)) or str(self.output_path) == ".":
            raise ConfigurationError("output_path must be non-empty")
        if len(self.delimiter) != 1:
            raise ConfigurationError(
                f"delimiter must be a single character, got {self.delimiter!r}",
                details={"delimiter": self.delimiter},
            )

    @property
    def split_categories(self) -> tuple[str, str, str]:
        """Category names for the fee, tax and revenue splits, in emission order."""
        return (self.fee_account_name, self.tax_account_name, self.revenue_account_name)

    def with_overrides(self, **overrides: Any) -> "ConverterConfig":
        """Return a copy with the given options replaced; ``None`` values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s): {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
