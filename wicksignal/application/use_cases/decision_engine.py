"""
WickSignal – Decision Engine
==============================
Loop cooperativo que consume actualizaciones de mercado, actualiza la
tendencia y decide si emitir un trade.

═══════════════════════════════════════════════════════════════
            CICLO POR MENSAJE
═══════════════════════════════════════════════════════════════

  texto ──▸ parse_market_message
              │
              ├── action != "candles" ──▸ ignorado (sin cambio de estado)
              ├── mal formado ──────────▸ MalformedUpdateError → se salta
              │
              ▼
          Candlestick ──▸ classify ──▸ trend
                                          │
                         TradeRules.evaluate(trend, vela)
                                          │
                     Trade? ──▸ trade log ──▸ canal saliente

ORDEN:
  Mensajes procesados estrictamente en orden de llegada, uno a la vez.
  La tendencia se muta secuencialmente; no hay locks porque el loop
  es el único dueño de su estado.

ERRORES:
  TransportSendError se propaga: un canal saliente roto invalida
  el propósito del loop.
"""

from __future__ import annotations

from typing import AsyncIterator, List, Optional, Tuple

from wicksignal.application.ports.outbound_channel import IOutboundChannel
from wicksignal.application.schemas.market_messages import parse_market_message
from wicksignal.domain.entities.candlestick import Candlestick
from wicksignal.domain.entities.trade import Trade
from wicksignal.domain.exceptions.domain_errors import MalformedUpdateError
from wicksignal.domain.services.trade_rules import TradeRules
from wicksignal.domain.services.trend_classifier import classify
from wicksignal.domain.value_objects.trend import Trend
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("decision_engine")


class DecisionEngine:
    """
    Máquina de estados {trend, trade_log}.

    Estado inicial: trend = UNKNOWN, trade log vacío.
    """

    def __init__(
        self,
        channel: IOutboundChannel,
        rules: Optional[TradeRules] = None,
    ) -> None:
        self._channel = channel
        self._rules = rules or TradeRules()
        self._trend: Trend = Trend.UNKNOWN
        self._trades: List[Trade] = []

        # Estadísticas de monitoreo
        self._candles_processed: int = 0
        self._malformed_skipped: int = 0

    @property
    def trend(self) -> Trend:
        return self._trend

    @property
    def trades(self) -> Tuple[Trade, ...]:
        """Trade log append-only (copia inmutable)."""
        return tuple(self._trades)

    # ──────────────────────── Loop ──────────────────────────────────────

    async def run(self, inbound: AsyncIterator[str]) -> None:
        """Procesa mensajes hasta que el stream entrante termine."""
        logger.info("Decision engine iniciado")
        async for text in inbound:
            await self.handle_message(text)
        logger.info(
            "Stream entrante terminado. Velas=%d trades=%d",
            self._candles_processed,
            len(self._trades),
        )

    async def handle_message(self, text: str) -> Optional[Trade]:
        """Un ciclo de decisión. Retorna el trade emitido, si lo hubo."""
        try:
            update = parse_market_message(text)
        except MalformedUpdateError as e:
            self._malformed_skipped += 1
            logger.warning("Actualización mal formada, ignorando: %s", e.message)
            return None

        if update is None:
            return None

        return await self.process_candlestick(update.to_candlestick())

    async def process_candlestick(self, candlestick: Candlestick) -> Optional[Trade]:
        self._candles_processed += 1
        self._trend = classify(candlestick)
        logger.debug("Vela %s → trend=%s", candlestick.to_dict(), self._trend.value)

        trade = self._rules.evaluate(self._trend, candlestick)
        if trade is None:
            return None

        self._trades.append(trade)
        logger.info(
            "Trade %s @ %s (trend=%s)",
            trade.direction.value,
            trade.price,
            self._trend.value,
        )
        await self._channel.send(trade.to_json())
        return trade

    # ──────────────────────── Stats ─────────────────────────────────────

    @property
    def stats(self) -> dict:
        """Estadísticas del engine para monitoreo."""
        return {
            "trend": self._trend.value,
            "candles_processed": self._candles_processed,
            "malformed_skipped": self._malformed_skipped,
            "trades_sent": len(self._trades),
        }
