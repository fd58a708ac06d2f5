"""Webhook Fourthwall: assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_fourthwall_signature
from .receive import FourthwallWebhookParser, parse_webhook_request

__all__ = [
    "FourthwallWebhookParser",
    "SignatureResult",
    "parse_webhook_request",
    "verify_fourthwall_signature",
]
