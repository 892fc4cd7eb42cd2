#!/usr/bin/env python3
"""
Settlement CSV → QIF converter

Reads a payment-processor settlement export (date, deposit id, net deposit,
fees, tax, revenue) and writes a ``!Type:Bank`` QIF file where every row is a
deposit split across the fee, tax and revenue accounts.

Exit status: 0 on success, 2 when the input file is missing, 1 for any other
failure.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from settlement_qif.controllers import convert_file
from settlement_qif.exceptions import ConversionError, MissingInputFileError
from settlement_qif.utilities import ConverterConfig, configure_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="settlement-qif",
        description="Convert a settlement CSV export into a multi-split QIF bank file.",
    )
    ap.add_argument("-i", "--input", type=Path, dest="input_path",
                    help="Settlement CSV to read (default: QIF_Source_Data.csv)")
    ap.add_argument("-o", "--output", type=Path, dest="output_path",
                    help="QIF file to write (default: Square_Transactions_Import.qif)")
    ap.add_argument("--delimiter", help="Single-character column delimiter (default: ',')")
    ap.add_argument("--fee-account", dest="fee_account_name",
                    help="Category for the fee split")
    ap.add_argument("--tax-account", dest="tax_account_name",
                    help="Category for the tax split")
    ap.add_argument("--revenue-account", dest="revenue_account_name",
                    help="Category for the revenue split")
    ap.add_argument("--encoding",
                    help="Text encoding of input and output (default: utf-8)")
    ap.add_argument("--skip-header", action="store_true", default=None,
                    help="Treat the first non-empty line as a column header")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug detail to the console")
    ap.add_argument("--log-dir", type=Path, help="Directory for the rotating log file (default: logs)")
    return ap


def config_from_args(args: argparse.Namespace) -> ConverterConfig:
    return ConverterConfig().with_overrides(
        input_path=args.input_path,
        output_path=args.output_path,
        delimiter=args.delimiter,
        fee_account_name=args.fee_account_name,
        tax_account_name=args.tax_account_name,
        revenue_account_name=args.revenue_account_name,
        encoding=args.encoding,
        skip_header=args.skip_header,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, log_dir=args.log_dir)

    try:
        config = config_from_args(args)
        result = convert_file(config)
    except MissingInputFileError as e:
        log.error("ERROR: %s", e.message)
        return EXIT_MISSING_INPUT
    except ConversionError as e:
        log.error("An unexpected error occurred: %s", e.message)
        return EXIT_FAILURE

    log.info("Conversion successful! %d transaction(s) converted.", result.count)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
