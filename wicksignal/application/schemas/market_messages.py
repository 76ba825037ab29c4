"""
WickSignal – Schemas: mensajes de mercado (ExpertOption)
==========================================================
Único mensaje entrante relevante:

    {"action": "candles", "message": [open, close, high, low]}

Cualquier otro action se ignora. Un "candles" sin 4 números finitos
es un MalformedUpdateError.
"""

from __future__ import annotations

import json
import math
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from wicksignal.domain.entities.candlestick import Candlestick
from wicksignal.domain.exceptions.domain_errors import MalformedUpdateError

CANDLES_ACTION = "candles"


class CandlesUpdate(BaseModel):
    action: Literal["candles"]
    message: List[float] = Field(min_length=4)

    @field_validator("message", mode="before")
    @classmethod
    def _only_numbers(cls, value):
        if not isinstance(value, list):
            raise ValueError("message debe ser un arreglo")
        for item in value:
            # bool es subclase de int: se rechaza explícitamente
            if isinstance(item, bool) or not isinstance(item, (int, float)):
                raise ValueError(f"valor no numérico: {item!r}")
            try:
                finite = math.isfinite(item)
            except OverflowError:
                finite = False
            if not finite:
                raise ValueError(f"valor no finito: {item!r}")
        return value

    def to_candlestick(self) -> Candlestick:
        return Candlestick.from_values(self.message)


def parse_market_message(text: str) -> Optional[CandlesUpdate]:
    """
    Decodifica un mensaje entrante del broker.

    Returns:
        CandlesUpdate si action == "candles", None para cualquier otro tipo.

    Raises:
        MalformedUpdateError: texto no-JSON o "candles" mal formado.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        # JSONDecodeError o enteros con demasiados dígitos
        raise MalformedUpdateError(f"Mensaje no-JSON: {exc}", raw=text) from exc

    if not isinstance(data, dict) or data.get("action") != CANDLES_ACTION:
        return None

    try:
        return CandlesUpdate.model_validate(data)
    except ValidationError as exc:
        raise MalformedUpdateError(
            f"Vela inválida: {exc.error_count()} error(es)", raw=text
        ) from exc
