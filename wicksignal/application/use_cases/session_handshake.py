"""
WickSignal – Session Handshake (TradingView)
==============================================
Genera el id de sesión y emite, EN ORDEN, los tres mensajes de setup:

  1. quote_create_session  [session_id]
  2. quote_set_fields      [session_id, "lp", "volume", "ch", "chp"]
  3. quote_add_symbols     [session_id, symbol_id]

El servidor asocia pushes a la sesión solo después de (1) y solo
para los campos registrados en (2).

ID DE SESIÓN:
  "qs_" + 12 letras minúsculas al azar (con reemplazo). NO es
  criptográficamente seguro: solo debe evitar colisiones en una
  conexión efímera. La fuente aleatoria se inyecta para tests.
"""

from __future__ import annotations

import random
import string
from typing import List, Optional, Sequence

from wicksignal.application.ports.outbound_channel import IOutboundChannel
from wicksignal.domain.services.frame_codec import create_message
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("session_handshake")

SESSION_PREFIX = "qs_"
SESSION_ALPHABET = string.ascii_lowercase
SESSION_LENGTH = 12

DEFAULT_QUOTE_FIELDS = ("lp", "volume", "ch", "chp")


def generate_session(rng: Optional[random.Random] = None) -> str:
    """Id de sesión: qs_ + 12 letras a-z."""
    rng = rng or random.Random()
    suffix = "".join(rng.choice(SESSION_ALPHABET) for _ in range(SESSION_LENGTH))
    return f"{SESSION_PREFIX}{suffix}"


class SessionHandshake:
    """
    Una instancia por conexión: el id se genera al construir y se usa
    como clave de correlación en cada mensaje.
    """

    def __init__(
        self,
        channel: IOutboundChannel,
        rng: Optional[random.Random] = None,
        fields: Sequence[str] = DEFAULT_QUOTE_FIELDS,
    ) -> None:
        self._channel = channel
        self._fields = tuple(fields)
        self.session_id = generate_session(rng)

    def messages(self, symbol_id: str) -> List[str]:
        """Los tres frames de setup, en el orden de envío."""
        return [
            create_message("quote_create_session", [self.session_id]),
            create_message("quote_set_fields", [self.session_id, *self._fields]),
            create_message("quote_add_symbols", [self.session_id, symbol_id]),
        ]

    async def start(self, symbol_id: str) -> None:
        """Envía el setup. Un TransportSendError corta la secuencia."""
        for message in self.messages(symbol_id):
            await self._channel.send(message)
        logger.info("Sesión %s suscrita a %s", self.session_id, symbol_id)
