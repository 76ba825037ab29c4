"""Transporte WebSocket."""
from wicksignal.infrastructure.transport.websocket_channel import WebSocketChannel

__all__ = ["WebSocketChannel"]
