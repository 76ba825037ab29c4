"""
WickSignal – Quote Parse Loop (TradingView)
=============================================
Consume mensajes crudos, distingue pings de cotizaciones y detecta el
fin de la suscripción.

ESTADOS:
  ACTIVE ──(chunk con marcador de control)──▸ TERMINATED

POR CHUNK (en ACTIVE):
  1. Contiene "quote_completed" o "session_id" → TERMINATED, no se lee más.
  2. Contiene objetos JSON balanceados → cada uno se intenta parsear como
     cotización; si la forma no coincide se descarta en silencio.
  3. Sin JSON → ping: se quitan los 7 caracteres del header y, si queda
     texto, se re-enmarca y se devuelve tal cual.

PINGS CON FORMA INESPERADA:
  El recorte de 7 caracteres no valida que el chunk sea un ping. Si el
  resto no tiene forma ~h~<n> se loguea; con strict_keepalive=True
  además no se hace eco.
"""

from __future__ import annotations

from enum import Enum
from typing import AsyncIterator, Optional, Sequence

from wicksignal.application.ports.outbound_channel import IOutboundChannel
from wicksignal.application.ports.quote_sink import IQuoteSink
from wicksignal.application.schemas.quote_messages import parse_quote
from wicksignal.domain.exceptions.domain_errors import ProtocolMismatchError
from wicksignal.domain.services.frame_codec import (
    encode_frame,
    extract_json_objects,
    is_heartbeat,
    keepalive_payload,
)
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("quote_parse_loop")

DEFAULT_STOP_MARKERS = ("quote_completed", "session_id")


class QuoteStreamState(str, Enum):
    ACTIVE = "ACTIVE"
    TERMINATED = "TERMINATED"


class QuoteParseLoop:

    def __init__(
        self,
        channel: IOutboundChannel,
        sink: IQuoteSink,
        stop_markers: Sequence[str] = DEFAULT_STOP_MARKERS,
        strict_keepalive: bool = False,
    ) -> None:
        self._channel = channel
        self._sink = sink
        self._stop_markers = tuple(stop_markers)
        self._strict_keepalive = strict_keepalive
        self._state = QuoteStreamState.ACTIVE

        # Estadísticas de monitoreo
        self._chunks_received: int = 0
        self._quotes_reported: int = 0
        self._keepalives_sent: int = 0
        self._frames_dropped: int = 0

    @property
    def state(self) -> QuoteStreamState:
        return self._state

    # ──────────────────────── Loop ──────────────────────────────────────

    async def run(self, inbound: AsyncIterator[str]) -> QuoteStreamState:
        """
        Lee chunks hasta TERMINATED o hasta que el stream termine.
        Un TransportSendError al responder un ping se propaga.
        """
        async for chunk in inbound:
            if await self.handle_chunk(chunk) is QuoteStreamState.TERMINATED:
                break
        logger.info(
            "Loop de cotizaciones finalizado (estado=%s, quotes=%d)",
            self._state.value,
            self._quotes_reported,
        )
        return self._state

    async def handle_chunk(self, chunk: str) -> QuoteStreamState:
        if self._state is QuoteStreamState.TERMINATED:
            return self._state

        self._chunks_received += 1

        marker = self._find_stop_marker(chunk)
        if marker is not None:
            self._state = QuoteStreamState.TERMINATED
            logger.info("Marcador de control '%s' recibido, terminando", marker)
            return self._state

        objects = extract_json_objects(chunk)
        if not objects:
            await self._reply_keepalive(chunk)
            return self._state

        # Cada frame multiplexado con forma de cotización produce su Quote
        for obj in objects:
            try:
                quote = parse_quote(obj)
            except ProtocolMismatchError as e:
                self._frames_dropped += 1
                logger.debug("Frame de control descartado: %s", e.message)
                continue
            self._quotes_reported += 1
            await self._sink.report(quote)

        return self._state

    # ──────────────────────── Helpers ───────────────────────────────────

    def _find_stop_marker(self, chunk: str) -> Optional[str]:
        for marker in self._stop_markers:
            if marker in chunk:
                return marker
        return None

    async def _reply_keepalive(self, chunk: str) -> None:
        payload = keepalive_payload(chunk)
        if not payload:
            return

        if not is_heartbeat(payload):
            logger.warning("Keepalive con forma inesperada: %r", chunk[:80])
            if self._strict_keepalive:
                self._frames_dropped += 1
                return

        await self._channel.send(encode_frame(payload))
        self._keepalives_sent += 1

    # ──────────────────────── Stats ─────────────────────────────────────

    @property
    def stats(self) -> dict:
        """Estadísticas del loop para monitoreo."""
        return {
            "state": self._state.value,
            "chunks_received": self._chunks_received,
            "quotes_reported": self._quotes_reported,
            "keepalives_sent": self._keepalives_sent,
            "frames_dropped": self._frames_dropped,
        }
