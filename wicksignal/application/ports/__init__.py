"""Application ports - Interfaces to infrastructure."""
from wicksignal.application.ports.outbound_channel import IOutboundChannel
from wicksignal.application.ports.quote_sink import IQuoteSink
from wicksignal.application.ports.symbol_resolver import ISymbolResolver

__all__ = [
    "IOutboundChannel",
    "IQuoteSink",
    "ISymbolResolver",
]
