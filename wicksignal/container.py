"""
Dependency Injection Container.

Único lugar donde se crean dependencias concretas. Los use cases
reciben puertos; aquí se decide qué adaptador los implementa.
"""

from dataclasses import dataclass, field
from typing import Optional

from wicksignal.application.ports.quote_sink import IQuoteSink
from wicksignal.application.ports.symbol_resolver import ISymbolResolver
from wicksignal.infrastructure.expertoption.gateway import ExpertOptionGateway
from wicksignal.infrastructure.sinks.logging_quote_sink import LoggingQuoteSink
from wicksignal.infrastructure.tradingview.gateway import TradingViewGateway
from wicksignal.infrastructure.tradingview.symbol_search import TradingViewSymbolSearch
from wicksignal.shared.config.settings import Settings


@dataclass
class Container:
    """
    Contenedor de Inyección de Dependencias.

    Las instancias se crean perezosamente y se cachean (singletons
    por contenedor).
    """

    settings: Settings = field(default_factory=Settings)

    _symbol_resolver: Optional[ISymbolResolver] = None
    _quote_sink: Optional[IQuoteSink] = None
    _expertoption_gateway: Optional[ExpertOptionGateway] = None
    _tradingview_gateway: Optional[TradingViewGateway] = None

    # ==================== Ports ====================

    @property
    def symbol_resolver(self) -> ISymbolResolver:
        if self._symbol_resolver is None:
            self._symbol_resolver = TradingViewSymbolSearch(
                self.settings.tradingview_search_url,
                origin=self.settings.tradingview_origin,
                timeout=self.settings.http_timeout,
            )
        return self._symbol_resolver

    @property
    def quote_sink(self) -> IQuoteSink:
        if self._quote_sink is None:
            self._quote_sink = LoggingQuoteSink()
        return self._quote_sink

    # ==================== Gateways ====================

    @property
    def expertoption_gateway(self) -> ExpertOptionGateway:
        if self._expertoption_gateway is None:
            self._expertoption_gateway = ExpertOptionGateway(self.settings)
        return self._expertoption_gateway

    @property
    def tradingview_gateway(self) -> TradingViewGateway:
        if self._tradingview_gateway is None:
            self._tradingview_gateway = TradingViewGateway(
                self.settings,
                resolver=self.symbol_resolver,
                sink=self.quote_sink,
            )
        return self._tradingview_gateway

    # ==================== Overrides (testing) ====================

    def override_quote_sink(self, sink: IQuoteSink) -> None:
        self._quote_sink = sink
        self._tradingview_gateway = None


def init_container(settings: Optional[Settings] = None) -> Container:
    """Crea el contenedor con settings explícitos o cargados del entorno."""
    return Container(settings=settings or Settings())
