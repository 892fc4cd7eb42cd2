from .conversion_session import (
    build_quicken_file,
    convert_file,
    load_settlement_text,
    save_qif,
)
from .record_converter import (
    SKIP_HEADER,
    SKIP_INCOMPLETE,
    ConversionResult,
    RecordConverter,
    SkippedRow,
    split_lines,
)

__all__ = [
    "build_quicken_file",
    "convert_file",
    "load_settlement_text",
    "save_qif",
    "SKIP_HEADER",
    "SKIP_INCOMPLETE",
    "ConversionResult",
    "RecordConverter",
    "SkippedRow",
    "split_lines",
]
