"""
WickSignal – Domain Value Object: Trend
=========================================
Clasificación direccional derivada de UNA vela.
"""

from __future__ import annotations

from enum import Enum


class Trend(str, Enum):
    """Tendencia de corto plazo."""
    UP = "UP"            # close > open
    DOWN = "DOWN"        # close < open
    UNKNOWN = "UNKNOWN"  # close == open
