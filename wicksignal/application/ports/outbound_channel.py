"""
WickSignal – Application Port: Outbound Channel
=================================================
Capacidad de envío de texto, prestada a los use cases.

Los use cases deciden QUÉ enviar; la infraestructura decide
CÓMO (WebSocket TLS, WebSocket plano, memoria en tests).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IOutboundChannel(ABC):
    """
    Canal saliente de mensajes de texto.

    CONTRATO:
    - Un send() es atómico por mensaje: dos envíos concurrentes
      nunca se intercalan a nivel de bytes.
    - Si el envío falla se lanza TransportSendError. No hay reintentos.
    """

    @abstractmethod
    async def send(self, text: str) -> None:
        """
        Envía un mensaje de texto completo.

        Args:
            text: Mensaje ya serializado (JSON o frame)

        Raises:
            TransportSendError: si la escritura falla
        """
        pass
