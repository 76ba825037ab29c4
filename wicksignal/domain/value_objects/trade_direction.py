"""
WickSignal – Domain Value Object: TradeDirection
==================================================
Dirección de una opción binaria. El valor es el que viaja por el cable.
"""

from __future__ import annotations

from enum import Enum


class TradeDirection(str, Enum):
    CALL = "call"
    PUT = "put"
