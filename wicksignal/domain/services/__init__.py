"""Domain services (lógica pura)."""
from wicksignal.domain.services.trend_classifier import classify
from wicksignal.domain.services.trade_rules import TradeRules
from wicksignal.domain.services import frame_codec

__all__ = ["classify", "TradeRules", "frame_codec"]
