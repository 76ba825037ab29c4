"""
WickSignal – Domain Exceptions
================================
Excepciones del sistema, agrupadas según quién las recupera.

JERARQUÍA:
    DomainError (base)
    ├── MalformedUpdateError    (recuperable: se salta el mensaje)
    ├── ProtocolMismatchError   (recuperable: se descarta el frame)
    ├── TransportSendError      (fatal para el loop dueño)
    ├── SymbolResolutionError   (fatal para el handshake)
    └── ConfigurationError      (fatal al arranque)
"""

from __future__ import annotations


class DomainError(Exception):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class MalformedUpdateError(DomainError):
    """Mensaje de mercado sin los 4 valores numéricos requeridos."""

    def __init__(self, message: str, raw: str = None):
        super().__init__(message, code="MALFORMED_UPDATE")
        self.raw = raw


class ProtocolMismatchError(DomainError):
    """Envelope de cotización presente pero sin las claves esperadas (n, v)."""

    def __init__(self, message: str, method: str = None):
        super().__init__(message, code="PROTOCOL_MISMATCH")
        self.method = method


class TransportSendError(DomainError):
    """Falló una escritura en el canal saliente. No se reintenta."""

    def __init__(self, message: str, payload: str = None):
        super().__init__(message, code="TRANSPORT_SEND_FAILURE")
        self.payload = payload


class SymbolResolutionError(DomainError):
    """La búsqueda de símbolo falló o no devolvió resultados."""

    def __init__(self, message: str, query: str = None, category: str = None):
        super().__init__(message, code="SYMBOL_RESOLUTION_FAILURE")
        self.query = query
        self.category = category


class ConfigurationError(DomainError):
    """Falta un valor de configuración obligatorio."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message, code="CONFIGURATION_ERROR")
        self.field = field
