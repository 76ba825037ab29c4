"""Application use cases."""
from wicksignal.application.use_cases.decision_engine import DecisionEngine
from wicksignal.application.use_cases.session_handshake import SessionHandshake, generate_session
from wicksignal.application.use_cases.quote_parse_loop import QuoteParseLoop, QuoteStreamState

__all__ = [
    "DecisionEngine",
    "SessionHandshake",
    "generate_session",
    "QuoteParseLoop",
    "QuoteStreamState",
]
