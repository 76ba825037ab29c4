"""
WickSignal – Application Port: Symbol Resolver
================================================
Búsqueda de símbolos del lado del servidor de cotizaciones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wicksignal.application.schemas.symbol_record import SymbolRecord


class ISymbolResolver(ABC):

    @abstractmethod
    async def resolve(self, pair: str, category: str) -> SymbolRecord:
        """
        Resuelve un par dentro de una categoría.

        Args:
            pair: Texto de búsqueda (e.g. "btcusdt")
            category: Categoría (e.g. "crypto")

        Returns:
            Primer resultado de la búsqueda

        Raises:
            SymbolResolutionError: error de red o resultado vacío
        """
        pass
