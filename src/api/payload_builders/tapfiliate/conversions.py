"""Builder do endpoint de criação de conversões (`/conversions/`)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.conversion import CanonicalConversion


class ConversionsPayloadBuilder:
    """POST {base}/{version}/conversions/ com header `Api-Key`."""

    path = "conversions/"

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Api-Key": api_key,
        }

    def build_payload(self, conversion: CanonicalConversion) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "program_id": conversion.program_id,
            "external_id": conversion.external_id,
            "amount": conversion.amount_as_number,
            "currency": conversion.currency,
            "customer_email": conversion.customer_email,
        }
        if conversion.referral_code:
            payload["referral_code"] = conversion.referral_code
        return payload
