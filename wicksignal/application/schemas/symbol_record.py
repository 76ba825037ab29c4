"""
WickSignal – Schema: resultado de búsqueda de símbolo
=======================================================
El id de suscripción es "<PREFIX|EXCHANGE>:<SYMBOL>" en mayúsculas.
Se prefiere prefix; exchange es el respaldo.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from wicksignal.domain.exceptions.domain_errors import SymbolResolutionError


class SymbolRecord(BaseModel):
    symbol: str
    prefix: Optional[str] = None
    exchange: Optional[str] = None

    @property
    def symbol_id(self) -> str:
        broker = self.prefix or self.exchange
        if not broker:
            raise SymbolResolutionError(
                f"Resultado sin prefix ni exchange para '{self.symbol}'"
            )
        return f"{broker.upper()}:{self.symbol.upper()}"
