"""Use cases de conversões de afiliados."""

from .relay_conversion import ALLOWED_METHOD, RelayConversionUseCase, RelayOutcome

__all__ = [
    "ALLOWED_METHOD",
    "RelayConversionUseCase",
    "RelayOutcome",
]
