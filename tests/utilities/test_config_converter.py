from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from settlement_qif.exceptions import ConfigurationError
from settlement_qif.utilities import ConverterConfig


def test_defaults_match_square_settlement_export():
    # Arrange / Act
    cfg = ConverterConfig()

    # Assert
    assert cfg.input_path == Path("QIF_Source_Data.csv")
    assert cfg.output_path == Path("Square_Transactions_Import.qif")
    assert cfg.delimiter == ","
    assert cfg.split_categories == (
        "Expenses:Square Fees",
        "Liabilities:Sales Tax Payable",
        "Income:Sales:Card Revenue",
    )
    assert cfg.encoding == "utf-8"
    assert cfg.skip_header is False


def test_paths_given_as_text_are_coerced_to_path():
    cfg = ConverterConfig(input_path="in.csv", output_path="out/x.qif")
    assert cfg.input_path == Path("in.csv")
    assert cfg.output_path == Path("out/x.qif")


def test_config_is_immutable():
    cfg = ConverterConfig()
    with pytest.raises(FrozenInstanceError):
        setattr(cfg, "delimiter", ";")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"delimiter": ""},
        {"delimiter": ";;"},
        {"fee_account_name": ""},
        {"tax_account_name": ""},
        {"revenue_account_name": ""},
        {"encoding": ""},
        {"input_path": ""},
        {"output_path": ""},
    ],
)
def test_invalid_options_raise_configuration_error(kwargs):
    with pytest.raises(ConfigurationError):
        ConverterConfig(**kwargs)


def test_with_overrides_replaces_only_given_values():
    # Arrange
    base = ConverterConfig()

    # Act
    cfg = base.with_overrides(
        delimiter=";", fee_account_name="Fees", tax_account_name=None
    )

    # Assert
    assert cfg.delimiter == ";"
    assert cfg.fee_account_name == "Fees"
    assert cfg.tax_account_name == base.tax_account_name, "None means 'keep default'"
    assert base.delimiter == ",", "Original config must not change"


def test_with_overrides_rejects_unknown_option():
    with pytest.raises(ConfigurationError) as ei:
        ConverterConfig().with_overrides(inputPath="x.csv")
    assert "inputPath" in ei.value.message


def test_with_overrides_validates_new_values():
    with pytest.raises(ConfigurationError):
        ConverterConfig().with_overrides(delimiter="\t\t")
