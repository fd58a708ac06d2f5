"""Testes dos payload builders Tapfiliate."""

from __future__ import annotations

from decimal import Decimal

import pytest

from api.payload_builders.tapfiliate import (
    ConversionsPayloadBuilder,
    PostbackPayloadBuilder,
    get_payload_builder,
)
from app.domain.conversion import CanonicalConversion


def _conversion() -> CanonicalConversion:
    return CanonicalConversion(
        external_id="ord_1",
        amount=Decimal("19.99"),
        currency="USD",
        customer_email="unknown_email@example.com",
        program_id="prog-1",
    )


def test_factory_returns_builder_per_shape() -> None:
    assert isinstance(get_payload_builder("conversions"), ConversionsPayloadBuilder)
    assert isinstance(get_payload_builder("postback"), PostbackPayloadBuilder)


def test_factory_rejects_unknown_shape() -> None:
    with pytest.raises(ValueError, match="não suportado"):
        get_payload_builder("pixel")


def test_conversions_builder_payload_and_headers() -> None:
    builder = ConversionsPayloadBuilder()

    assert builder.path == "conversions/"
    assert builder.build_headers("k") == {"Content-Type": "application/json", "Api-Key": "k"}
    assert builder.build_payload(_conversion()) == {
        "program_id": "prog-1",
        "external_id": "ord_1",
        "amount": 19.99,
        "currency": "USD",
        "customer_email": "unknown_email@example.com",
    }


def test_postback_builder_payload_and_headers() -> None:
    builder = PostbackPayloadBuilder()

    assert builder.path == "postback/"
    assert builder.build_headers("k")["X-Api-Key"] == "k"
    assert builder.build_payload(_conversion()) == {
        "program_id": "prog-1",
        "external_id": "ord_1",
        "amount": 19.99,
        "currency": "USD",
    }
