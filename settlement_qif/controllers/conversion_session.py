# settlement_qif/controllers/conversion_session.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from settlement_qif.data_model import QuickenFile
from settlement_qif.exceptions import MissingInputFileError, UnexpectedFailureError
from settlement_qif.utilities import ConverterConfig, read_text, write_text_atomic

from .record_converter import ConversionResult, RecordConverter

log = logging.getLogger(__name__)


def load_settlement_text(path: Path, *, encoding: str = "utf-8") -> str:
    path = Path(path)
    if not path.exists():
        raise MissingInputFileError(
            f"Input file not found. Ensure '{path}' exists.",
            details={"path": str(path)},
        )
    if not path.is_file():
        raise UnexpectedFailureError(
            f"Input path is not a file: {path}", details={"path": str(path)}
        )
    try:
        return read_text(path, encoding=encoding)
    except FileNotFoundError as e:
        # Removed between the check and the read.
        raise MissingInputFileError(
            f"Input file not found. Ensure '{path}' exists.",
            details={"path": str(path)},
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise UnexpectedFailureError(
            f"Could not read {path}: {e}", details={"path": str(path)}
        ) from e


def build_quicken_file(result: ConversionResult) -> QuickenFile:
    return QuickenFile(transactions=result.blocks)


def save_qif(path: Path, document: QuickenFile, *, encoding: str = "utf-8") -> None:
    try:
        write_text_atomic(Path(path), document.emit_qif(), encoding=encoding)
    except (OSError, UnicodeEncodeError) as e:
        raise UnexpectedFailureError(
            f"Could not write {path}: {e}", details={"path": str(path)}
        ) from e


def convert_file(
    config: Optional[ConverterConfig] = None,
    converter: Optional[RecordConverter] = None,
) -> ConversionResult:
    """
    Read the settlement CSV, convert every row, and write the QIF file once.

    Raises ``MissingInputFileError`` or ``UnexpectedFailureError`` before any
    output exists; the output file is only created after every row has been
    processed.
    """
    config = config or ConverterConfig()
    converter = converter or RecordConverter(config)

    log.info("Starting conversion from %s to %s...", config.input_path, config.output_path)
    text = load_settlement_text(config.input_path, encoding=config.encoding)
    result = converter.convert_text(text)

    save_qif(config.output_path, build_quicken_file(result), encoding=config.encoding)
    log.info(
        "Wrote %d multi-split transactions to %s", result.count, config.output_path
    )
    if result.skipped:
        log.info("Skipped %d line(s)", len(result.skipped))
    return result
