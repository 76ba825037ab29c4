"""Domain exceptions."""
from wicksignal.domain.exceptions.domain_errors import (
    DomainError,
    MalformedUpdateError,
    ProtocolMismatchError,
    TransportSendError,
    SymbolResolutionError,
    ConfigurationError,
)

__all__ = [
    "DomainError",
    "MalformedUpdateError",
    "ProtocolMismatchError",
    "TransportSendError",
    "SymbolResolutionError",
    "ConfigurationError",
]
