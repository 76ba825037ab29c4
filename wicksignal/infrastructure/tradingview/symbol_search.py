"""
WickSignal – TradingView Symbol Search
========================================
GET <search_url>?text=<pair>&type=<category> → lista JSON de resultados.
Se usa el primero. Error de red, status != 2xx o lista vacía son
SymbolResolutionError: sin símbolo no se inicia ninguna sesión.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError

from wicksignal.application.ports.symbol_resolver import ISymbolResolver
from wicksignal.application.schemas.symbol_record import SymbolRecord
from wicksignal.domain.exceptions.domain_errors import SymbolResolutionError
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("symbol_search")


class TradingViewSymbolSearch(ISymbolResolver):

    def __init__(
        self,
        search_url: str,
        origin: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._search_url = search_url
        self._headers = {"Origin": origin} if origin else {}
        self._timeout = timeout
        self._transport = transport

    async def resolve(self, pair: str, category: str) -> SymbolRecord:
        params = {"text": pair, "type": category}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                transport=self._transport,
            ) as client:
                response = await client.get(self._search_url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise SymbolResolutionError(
                f"Búsqueda de '{pair}' ({category}) falló: {exc}",
                query=pair,
                category=category,
            ) from exc

        if not isinstance(data, list) or not data:
            raise SymbolResolutionError(
                f"Nada encontrado para '{pair}' ({category})",
                query=pair,
                category=category,
            )

        try:
            record = SymbolRecord.model_validate(data[0])
        except ValidationError as exc:
            raise SymbolResolutionError(
                f"Resultado inesperado para '{pair}': {exc.error_count()} error(es)",
                query=pair,
                category=category,
            ) from exc

        logger.debug("Resultado de búsqueda: %s", record.model_dump())
        return record
