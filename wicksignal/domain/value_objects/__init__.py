"""Domain value objects."""
from wicksignal.domain.value_objects.trend import Trend
from wicksignal.domain.value_objects.trade_direction import TradeDirection
from wicksignal.domain.value_objects.quote import Quote

__all__ = ["Trend", "TradeDirection", "Quote"]
