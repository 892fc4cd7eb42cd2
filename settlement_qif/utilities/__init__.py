from .config_converter import ConverterConfig
from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    ZERO_AMOUNT,
    NormalizedAmount,
    format_cents,
    normalize_amount,
    parse_numeric_prefix,
)
from .core_util import (
    default_file_mode,
    is_null_or_whitespace,
    open_for_read,
    read_text,
    write_text_atomic,
)

__all__ = [
    "ConverterConfig",
    "LOGGING",
    "configure_logging",
    "ZERO_AMOUNT",
    "NormalizedAmount",
    "format_cents",
    "normalize_amount",
    "parse_numeric_prefix",
    "default_file_mode",
    "is_null_or_whitespace",
    "open_for_read",
    "read_text",
    "write_text_atomic",
]
