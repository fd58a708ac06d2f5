"""Agregador de settings do relay de conversões.

Re-exporta todas as settings e funções de cada módulo.
Organização por conector para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Webhook inbound (Fourthwall)
from config.settings.fourthwall import (
    DEFAULT_REFERRAL_ALIASES,
    FourthwallSettings,
    ReferralPolicy,
    SignaturePolicy,
    get_fourthwall_settings,
)

# API outbound (Tapfiliate)
from config.settings.tapfiliate import (
    TAPFILIATE_API_BASE_URL,
    TAPFILIATE_API_VERSION,
    OutboundShape,
    TapfiliateSettings,
    get_tapfiliate_settings,
)

__all__ = [
    # Constants
    "DEFAULT_REFERRAL_ALIASES",
    "TAPFILIATE_API_BASE_URL",
    "TAPFILIATE_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Fourthwall
    "FourthwallSettings",
    "OutboundShape",
    "ReferralPolicy",
    "SignaturePolicy",
    # Tapfiliate
    "TapfiliateSettings",
    "get_base_settings",
    "get_fourthwall_settings",
    "get_tapfiliate_settings",
]
