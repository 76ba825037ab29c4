"""
WickSignal – TradingView Gateway
==================================
Conecta al WebSocket de cotizaciones y corre la secuencia completa:

  1. Resolver símbolo (HTTP)       → falla = fatal, no se conecta
  2. Conectar WS con Origin
  3. SessionHandshake.start()      → 3 frames en orden
  4. QuoteParseLoop.run()          → hasta TERMINATED o cierre

Sin reconexión ni backoff: cualquier fallo se loguea y se propaga.
"""

from __future__ import annotations

import random
from typing import Optional

from websockets.asyncio.client import connect
from websockets.exceptions import WebSocketException

from wicksignal.application.ports.quote_sink import IQuoteSink
from wicksignal.application.ports.symbol_resolver import ISymbolResolver
from wicksignal.application.use_cases.quote_parse_loop import QuoteParseLoop, QuoteStreamState
from wicksignal.application.use_cases.session_handshake import SessionHandshake
from wicksignal.domain.exceptions.domain_errors import DomainError
from wicksignal.infrastructure.transport.websocket_channel import WebSocketChannel
from wicksignal.shared.config.settings import Settings
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("tradingview")


class TradingViewGateway:

    def __init__(
        self,
        settings: Settings,
        resolver: ISymbolResolver,
        sink: IQuoteSink,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._settings = settings
        self._resolver = resolver
        self._sink = sink
        self._rng = rng
        self._loop: Optional[QuoteParseLoop] = None

    async def run(self, pair: Optional[str] = None, market: Optional[str] = None) -> QuoteStreamState:
        pair = pair or self._settings.quote_pair
        market = market or self._settings.quote_market

        try:
            record = await self._resolver.resolve(pair, market)
            symbol_id = record.symbol_id
            logger.info("Símbolo resuelto: %s", symbol_id)

            logger.info("Conectando a TradingView: %s", self._settings.tradingview_ws_url)
            async with connect(
                self._settings.tradingview_ws_url,
                origin=self._settings.tradingview_origin,
                close_timeout=self._settings.ws_close_timeout,
                max_size=self._settings.ws_max_size,
            ) as ws:
                logger.info("✓ Conectado a TradingView")
                channel = WebSocketChannel(ws, name="tradingview")

                handshake = SessionHandshake(
                    channel, rng=self._rng, fields=self._settings.quote_fields
                )
                await handshake.start(symbol_id)

                self._loop = QuoteParseLoop(
                    channel,
                    self._sink,
                    stop_markers=self._settings.quote_stop_markers,
                    strict_keepalive=self._settings.quote_strict_keepalive,
                )
                return await self._loop.run(channel.messages())

        except DomainError as e:
            logger.error("Loop de cotizaciones detenido [%s]: %s", e.code, e.message)
            raise
        except (OSError, WebSocketException) as e:
            logger.error("Error de red en TradingView: %s", e)
            raise

    @property
    def stats(self) -> dict:
        return self._loop.stats if self._loop else {}
