"""Domain entities."""

from wicksignal.domain.entities.candlestick import Candlestick
from wicksignal.domain.entities.trade import Trade

__all__ = ["Candlestick", "Trade"]
