"""Conector Fourthwall — recepção de webhooks de pedidos."""

from .signature import (
    SignatureResult,
    compute_signature,
    verify_fourthwall_signature,
    verify_signature,
)

__all__ = [
    "SignatureResult",
    "compute_signature",
    "verify_fourthwall_signature",
    "verify_signature",
]
