from .settlement_row import SettlementRow

__all__ = ["SettlementRow"]
