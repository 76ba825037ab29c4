"""
WickSignal – ExpertOption Gateway
===================================
Conecta al endpoint del broker y alimenta el DecisionEngine con los
mensajes entrantes. El mismo socket es el canal saliente de trades.

Acepta ws:// y wss://. Sin reconexión: el cierre del servidor termina
el loop; un fallo de envío es fatal y se propaga.
"""

from __future__ import annotations

from websockets.asyncio.client import connect
from websockets.exceptions import WebSocketException

from wicksignal.application.use_cases.decision_engine import DecisionEngine
from wicksignal.domain.exceptions.domain_errors import ConfigurationError, DomainError
from wicksignal.infrastructure.transport.websocket_channel import WebSocketChannel
from wicksignal.shared.config.settings import Settings
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("expertoption")


class ExpertOptionGateway:

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def ws_url(self) -> str:
        url = self._settings.eo_websocket_url
        if not url:
            raise ConfigurationError(
                "EO_WEBSOCKET_URL debe estar definido", field="eo_websocket_url"
            )
        return url

    async def run(self) -> None:
        url = self.ws_url

        try:
            logger.info("Conectando al broker: %s", url)
            async with connect(
                url,
                close_timeout=self._settings.ws_close_timeout,
                max_size=self._settings.ws_max_size,
            ) as ws:
                logger.info("✓ Conectado al servidor")
                channel = WebSocketChannel(ws, name="expertoption")
                engine = DecisionEngine(channel)
                await engine.run(channel.messages())

        except DomainError as e:
            logger.error("Decision engine detenido [%s]: %s", e.code, e.message)
            raise
        except (OSError, WebSocketException) as e:
            logger.error("Error de red con el broker: %s", e)
            raise
