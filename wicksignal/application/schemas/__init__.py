"""Schemas pydantic de los mensajes externos, decodificados una vez en el borde."""
from wicksignal.application.schemas.market_messages import CandlesUpdate, parse_market_message
from wicksignal.application.schemas.quote_messages import (
    QuoteEnvelope,
    QuotePayload,
    QuoteValues,
    parse_quote,
)
from wicksignal.application.schemas.symbol_record import SymbolRecord

__all__ = [
    "CandlesUpdate",
    "parse_market_message",
    "QuoteEnvelope",
    "QuotePayload",
    "QuoteValues",
    "parse_quote",
    "SymbolRecord",
]
