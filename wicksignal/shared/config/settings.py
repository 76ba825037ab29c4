"""
WickSignal – Settings (Pydantic BaseSettings)
=============================================
Configuración centralizada cargada desde variables de entorno / .env.
Se usa pydantic-settings para validación estricta al arranque.

El único valor obligatorio es el endpoint del canal de trades
(EO_WEBSOCKET_URL); su ausencia se detecta al arrancar el bot, no aquí,
para que el cliente de cotizaciones pueda correr sin él.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    # ─── Canal de trades (ExpertOption) ─────────────────────────────────
    eo_websocket_url: Optional[str] = Field(
        default=None,
        description="Endpoint WebSocket (ws:// o wss://) que recibe las señales de trade",
    )

    # ─── TradingView ────────────────────────────────────────────────────
    tradingview_ws_url: str = Field(
        default="wss://data.tradingview.com/socket.io/websocket",
        description="Endpoint WebSocket de cotizaciones",
    )
    tradingview_origin: str = Field(
        default="https://data.tradingview.com",
        description="Header Origin exigido por el servidor",
    )
    tradingview_search_url: str = Field(
        default="https://symbol-search.tradingview.com/symbol_search/",
        description="Endpoint HTTP de búsqueda de símbolos",
    )

    # ─── Suscripción de cotizaciones ────────────────────────────────────
    quote_pair: str = Field(default="btcusdt", description="Par a cotizar")
    quote_market: str = Field(default="crypto", description="Categoría del par")
    quote_fields: List[str] = Field(
        default=["lp", "volume", "ch", "chp"],
        description="Campos registrados en quote_set_fields",
    )
    quote_stop_markers: List[str] = Field(
        default=["quote_completed", "session_id"],
        description="Substrings que terminan el loop de cotizaciones",
    )
    quote_strict_keepalive: bool = Field(
        default=False,
        description="Si True, solo se hace eco de pings con forma ~h~<n>",
    )

    # ─── Transporte ─────────────────────────────────────────────────────
    http_timeout: float = Field(default=10.0, description="Timeout (seg) HTTP")
    ws_close_timeout: float = Field(default=10.0, description="Timeout (seg) de cierre WS")
    ws_max_size: int = Field(default=2**20, description="Tamaño máximo por mensaje WS")

    # ─── Logging ────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton global – se importa donde se necesite
settings = Settings()
