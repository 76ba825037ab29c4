"""
WickSignal – Domain Service: Trend Classifier
===============================================
Función total: nunca falla, sin efectos secundarios.
"""

from __future__ import annotations

from wicksignal.domain.entities.candlestick import Candlestick
from wicksignal.domain.value_objects.trend import Trend


def classify(candlestick: Candlestick) -> Trend:
    """UP si close > open, DOWN si close < open, UNKNOWN si son iguales."""
    return candlestick.analyze_trend()
