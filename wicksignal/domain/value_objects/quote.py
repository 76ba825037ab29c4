"""
WickSignal – Domain Value Object: Quote
=========================================
Cotización parseada de un frame de TradingView.

- frozen=True → inmutable, segura para pasar entre coroutines.
- slots=True  → menor footprint de memoria en hot-path.
- No se retiene: se reporta al sink apenas se produce.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Quote:
    """Cotización de un símbolo. Campos ausentes en el frame valen 0.0."""

    symbol: str                   # e.g. "BINANCE:BTCUSDT"
    price: float = 0.0            # lp
    change: float = 0.0           # ch
    change_percent: float = 0.0   # chp
    volume: float = 0.0           # volume
