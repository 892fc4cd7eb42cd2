# settlement_qif/data_model/q_wrapper/__init__.py

from . import qif_codes
from .q_file import QuickenFile
from .q_split import QSplit
from .q_transaction import QTransaction
from .qif_code import QifCode
from .qif_header import QifHeader

__all__ = [
    "qif_codes",
    "QifCode",
    "QifHeader",
    "QSplit",
    "QTransaction",
    "QuickenFile",
]
