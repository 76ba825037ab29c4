"""
WickSignal – Application Port: Quote Sink
===========================================
Destino externo de las cotizaciones parseadas.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wicksignal.domain.value_objects.quote import Quote


class IQuoteSink(ABC):
    """
    IMPLEMENTACIONES POSIBLES:
    - LoggingQuoteSink (consola)
    - Colector en memoria (testing)
    """

    @abstractmethod
    async def report(self, quote: Quote) -> None:
        """Recibe una cotización. No se espera que la retenga el loop."""
        pass
