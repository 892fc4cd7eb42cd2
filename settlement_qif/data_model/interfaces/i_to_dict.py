# settlement_qif/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import TypeAlias

RecursiveDictStr: TypeAlias = "str | list[RecursiveDictStr] | dict[str, RecursiveDictStr]"


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, RecursiveDictStr]: ...
