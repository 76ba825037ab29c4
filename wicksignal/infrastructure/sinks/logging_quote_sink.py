"""
WickSignal – Logging Quote Sink
=================================
Reporta cada cotización como una línea de log.
"""

from __future__ import annotations

from wicksignal.application.ports.quote_sink import IQuoteSink
from wicksignal.domain.value_objects.quote import Quote
from wicksignal.shared.logging.logger import get_logger

logger = get_logger("quotes")


class LoggingQuoteSink(IQuoteSink):

    async def report(self, quote: Quote) -> None:
        logger.info(
            "%s, price=%s, change=%s, change_percentage=%s, volume=%s",
            quote.symbol,
            quote.price,
            quote.change,
            quote.change_percent,
            quote.volume,
        )
