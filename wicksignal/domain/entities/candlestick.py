"""
WickSignal – Domain Entity: Candlestick
=========================================
Vela OHLC inmutable recibida en cada actualización de mercado.

Decisiones de diseño:
- frozen=True → inmutable; se descarta después de un ciclo de decisión.
- Se usa dataclass por rendimiento (más ligera que Pydantic para hot-path).
- NO se valida high >= max(open, close, low) ni low <= min(...):
  es responsabilidad del emisor del stream.

PREDICADOS DE FORMA (independientes del signo de la tendencia):

  has_long_tail:  (open - low) > (high - close)   → mecha inferior dominante
  has_long_head:  (high - close) > (open - low)   → mecha superior dominante

  Un empate da False en ambos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from wicksignal.domain.value_objects.trend import Trend


@dataclass(frozen=True, slots=True)
class Candlestick:
    """Vela OHLC."""

    open: float
    close: float
    high: float
    low: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Candlestick":
        """Construye desde el vector del broker: [open, close, high, low]."""
        if len(values) < 4:
            raise ValueError(f"Se requieren 4 valores, recibidos {len(values)}")
        return cls(
            open=float(values[0]),
            close=float(values[1]),
            high=float(values[2]),
            low=float(values[3]),
        )

    def analyze_trend(self) -> Trend:
        if self.close > self.open:
            return Trend.UP
        if self.close < self.open:
            return Trend.DOWN
        return Trend.UNKNOWN

    def has_long_tail(self) -> bool:
        return self.open - self.low > self.high - self.close

    def has_long_head(self) -> bool:
        return self.high - self.close > self.open - self.low

    def to_dict(self) -> dict:
        return {
            "open": self.open,
            "close": self.close,
            "high": self.high,
            "low": self.low,
        }
