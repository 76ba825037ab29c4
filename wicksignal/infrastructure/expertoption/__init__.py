"""Adaptador del broker de opciones (canal de velas + trades)."""
from wicksignal.infrastructure.expertoption.gateway import ExpertOptionGateway

__all__ = ["ExpertOptionGateway"]
