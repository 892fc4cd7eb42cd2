from .i_header import IHeader
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = ["IHeader", "ISplit", "IToDict", "RecursiveDictStr", "ITransaction"]
