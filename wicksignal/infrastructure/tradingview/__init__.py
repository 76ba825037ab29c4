"""Adaptadores de TradingView (búsqueda de símbolos + stream de cotizaciones)."""
from wicksignal.infrastructure.tradingview.symbol_search import TradingViewSymbolSearch
from wicksignal.infrastructure.tradingview.gateway import TradingViewGateway

__all__ = ["TradingViewSymbolSearch", "TradingViewGateway"]
