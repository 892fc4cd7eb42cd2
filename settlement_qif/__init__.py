# settlement_qif/__init__.py
from .controllers import ConversionResult, RecordConverter, SkippedRow, convert_file
from .data_model import QSplit, QTransaction, QuickenFile, SettlementRow
from .utilities import ConverterConfig, normalize_amount

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "RecordConverter",
    "SkippedRow",
    "convert_file",
    "QSplit",
    "QTransaction",
    "QuickenFile",
    "SettlementRow",
    "ConverterConfig",
    "normalize_amount",
]
