"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConversionRelayError,
    InvalidAmountError,
    InvalidJsonError,
    InvalidPayloadError,
    MethodNotAllowedError,
    MissingOrderIdError,
    MissingReferralError,
    ServerMisconfigurationError,
    UnauthorizedError,
    UpstreamFailureError,
    UpstreamTransportError,
)

__all__ = [
    "ConversionRelayError",
    "InvalidAmountError",
    "InvalidJsonError",
    "InvalidPayloadError",
    "MethodNotAllowedError",
    "MissingOrderIdError",
    "MissingReferralError",
    "ServerMisconfigurationError",
    "UnauthorizedError",
    "UpstreamFailureError",
    "UpstreamTransportError",
]
