"""
WickSignal – WebSocket Channel
================================
Adapta una ClientConnection de websockets al puerto IOutboundChannel
y expone el stream entrante como async iterator de texto.

SERIALIZACIÓN DE ENVÍOS:
- Un asyncio.Lock garantiza que cada send() sea atómico por mensaje
  aunque el canal se comparta entre coroutines.

FIN DEL STREAM:
- Cierre limpio del servidor → INFO, el iterator termina.
- Cierre anormal / error de red → WARNING, el iterator termina.
- No hay reconexión: detener el loop es decisión del transporte.
"""

from __future__ import annotations

import asyncio
from typing import AsyncIterator

from websockets.asyncio.client import ClientConnection
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, ConnectionClosedOK

from wicksignal.application.ports.outbound_channel import IOutboundChannel
from wicksignal.domain.exceptions.domain_errors import TransportSendError
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("websocket_channel")


class WebSocketChannel(IOutboundChannel):

    def __init__(self, ws: ClientConnection, name: str = "ws") -> None:
        self._ws = ws
        self._name = name
        self._send_lock = asyncio.Lock()
        self._messages_sent: int = 0
        self._messages_received: int = 0

    async def send(self, text: str) -> None:
        async with self._send_lock:
            try:
                await self._ws.send(text)
            except (ConnectionClosed, OSError) as e:
                raise TransportSendError(
                    f"[{self._name}] Fallo al enviar mensaje: {e}", payload=text
                ) from e
        self._messages_sent += 1

    async def messages(self) -> AsyncIterator[str]:
        """Mensajes de texto entrantes. Los frames binarios se ignoran."""
        try:
            async for message in self._ws:
                if isinstance(message, bytes):
                    logger.debug("[%s] Frame binario ignorado (%d bytes)", self._name, len(message))
                    continue
                self._messages_received += 1
                yield message
        except ConnectionClosedOK:
            logger.info("[%s] El servidor cerró la conexión", self._name)
        except ConnectionClosedError as e:
            logger.warning("[%s] Conexión cerrada con error: %s", self._name, e)
        except OSError as e:
            logger.warning("[%s] Error de red: %s", self._name, e)
        else:
            logger.info("[%s] El servidor cerró la conexión", self._name)

    @property
    def stats(self) -> dict:
        return {
            "name": self._name,
            "connected": self._ws.close_code is None,
            "messages_sent": self._messages_sent,
            "messages_received": self._messages_received,
        }
