"""
WickSignal – Domain Entity: Trade
===================================
Señal direccional inmutable enviada al broker.

MENSAJE SALIENTE:
    {"action": "trade", "direction": "call" | "put", "price": <close>}

La dirección queda fija al construir; el precio es el close de la vela
que disparó la decisión.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from wicksignal.domain.value_objects.trade_direction import TradeDirection


@dataclass(frozen=True, slots=True)
class Trade:
    """Trade direccional."""

    direction: TradeDirection
    price: float

    @classmethod
    def call(cls, price: float) -> "Trade":
        return cls(direction=TradeDirection.CALL, price=price)

    @classmethod
    def put(cls, price: float) -> "Trade":
        return cls(direction=TradeDirection.PUT, price=price)

    def to_dict(self) -> dict:
        return {
            "action": "trade",
            "direction": self.direction.value,
            "price": self.price,
        }

    def to_json(self) -> str:
        """Serialización para el canal saliente."""
        return json.dumps(self.to_dict())
