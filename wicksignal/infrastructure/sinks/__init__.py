"""Sinks de cotizaciones."""
from wicksignal.infrastructure.sinks.logging_quote_sink import LoggingQuoteSink

__all__ = ["LoggingQuoteSink"]
