# settlement_qif/data_model/__init__.py
from .interfaces import IHeader, ISplit, IToDict, ITransaction, RecursiveDictStr
from .q_wrapper import QifCode, QifHeader, QSplit, QTransaction, QuickenFile, qif_codes
from .settlement import SettlementRow

__all__ = [
    "IHeader", "ISplit", "IToDict", "ITransaction", "RecursiveDictStr",
    "QifCode", "QifHeader", "QSplit", "QTransaction", "QuickenFile",
    "qif_codes", "SettlementRow"]
