"""
WickSignal – Domain Service: Trade Rules
==========================================
Regla de entrada: tendencia + forma de la vela.

    trend == UP   AND has_long_tail  → CALL al close
    trend == DOWN AND has_long_head  → PUT al close
    cualquier otro caso              → sin trade

Este servicio contiene SOLO lógica de negocio sin dependencias
externas. Decide QUÉ trade corresponde; enviarlo y registrarlo
es responsabilidad del use case.
"""

from __future__ import annotations

from typing import Optional

from wicksignal.domain.entities.candlestick import Candlestick
from wicksignal.domain.entities.trade import Trade
from wicksignal.domain.value_objects.trend import Trend


class TradeRules:
    """
    Servicio de dominio para decidir trades.

    USO:
        rules = TradeRules()
        trade = rules.evaluate(Trend.UP, candlestick)
    """

    def evaluate(self, trend: Trend, candlestick: Candlestick) -> Optional[Trade]:
        if trend is Trend.UP and candlestick.has_long_tail():
            return Trade.call(candlestick.close)
        if trend is Trend.DOWN and candlestick.has_long_head():
            return Trade.put(candlestick.close)
        return None
