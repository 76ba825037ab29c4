"""
WickSignal – Domain Layer
===========================
Núcleo puro del sistema. CERO dependencias externas.

Este módulo contiene:
- entities/: Entidades de negocio (Candlestick, Trade)
- value_objects/: Objetos inmutables (Trend, TradeDirection, Quote)
- services/: Servicios de dominio puros (clasificador de tendencia, reglas de trade)
- exceptions/: Excepciones de dominio

REGLA DE DEPENDENCIA:
Este módulo NO puede importar de:
- infrastructure/
- application/
- Frameworks externos (websockets, httpx, pydantic, etc.)
"""

from wicksignal.domain.entities.candlestick import Candlestick
from wicksignal.domain.entities.trade import Trade
from wicksignal.domain.value_objects.trend import Trend
from wicksignal.domain.value_objects.trade_direction import TradeDirection
from wicksignal.domain.value_objects.quote import Quote

__all__ = [
    "Candlestick",
    "Trade",
    "Trend",
    "TradeDirection",
    "Quote",
]
