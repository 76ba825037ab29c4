"""
WickSignal – Schemas: envelopes de cotización (TradingView)
=============================================================
Forma esperada de un push de cotización:

    {"m": "qsd", "p": ["qs_xxx", {"n": "BINANCE:BTCUSDT",
                                   "v": {"lp": ..., "volume": ..., "ch": ..., "chp": ...}}]}

Cualquier otra forma es un frame de control: ProtocolMismatchError
y el loop lo descarta.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError, field_validator

from wicksignal.domain.exceptions.domain_errors import ProtocolMismatchError
from wicksignal.domain.value_objects.quote import Quote


class QuoteEnvelope(BaseModel):
    m: str
    p: List[Any]


class QuoteValues(BaseModel):
    lp: Optional[float] = None
    volume: Optional[float] = None
    ch: Optional[float] = None
    chp: Optional[float] = None

    @field_validator("lp", "volume", "ch", "chp", mode="before")
    @classmethod
    def _numbers_or_absent(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value


class QuotePayload(BaseModel):
    n: str
    v: QuoteValues

    def to_quote(self) -> Quote:
        return Quote(
            symbol=self.n,
            price=self.v.lp if self.v.lp is not None else 0.0,
            change=self.v.ch if self.v.ch is not None else 0.0,
            change_percent=self.v.chp if self.v.chp is not None else 0.0,
            volume=self.v.volume if self.v.volume is not None else 0.0,
        )


def parse_quote(obj: dict) -> Quote:
    """
    Extrae una Quote de un objeto JSON ya decodificado.

    Raises:
        ProtocolMismatchError: si el objeto no tiene forma de cotización.
    """
    try:
        envelope = QuoteEnvelope.model_validate(obj)
    except ValidationError as exc:
        raise ProtocolMismatchError("Envelope sin m/p") from exc

    if len(envelope.p) < 2 or not isinstance(envelope.p[1], dict):
        raise ProtocolMismatchError("Envelope sin payload de símbolo", method=envelope.m)

    try:
        payload = QuotePayload.model_validate(envelope.p[1])
    except ValidationError as exc:
        raise ProtocolMismatchError("Payload sin n/v", method=envelope.m) from exc

    return payload.to_quote()
