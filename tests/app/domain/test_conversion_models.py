"""Testes dos modelos de domínio do relay."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.domain.conversion import CanonicalConversion, SubmissionResult


def _conversion(**overrides: object) -> CanonicalConversion:
    values: dict[str, object] = {
        "external_id": "ord_1",
        "amount": Decimal("42.50"),
        "currency": "eur",
        "customer_email": "a@b.com",
        "program_id": "prog-1",
    }
    values.update(overrides)
    return CanonicalConversion(**values)


def test_canonical_conversion_normalizes_currency() -> None:
    conversion = _conversion()

    assert conversion.currency == "EUR"
    assert conversion.amount_as_number == 42.5
    assert conversion.referral_code is None


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1"), Decimal("NaN"), Decimal("Infinity")])
def test_canonical_conversion_rejects_invalid_amount(amount: Decimal) -> None:
    with pytest.raises(ValidationError):
        _conversion(amount=amount)


@pytest.mark.parametrize("field", ["external_id", "customer_email", "program_id"])
def test_canonical_conversion_rejects_blank_required_fields(field: str) -> None:
    with pytest.raises(ValidationError):
        _conversion(**{field: "   "})


def test_canonical_conversion_is_frozen() -> None:
    conversion = _conversion()

    with pytest.raises(ValidationError):
        conversion.amount = Decimal("1")  # type: ignore[misc]


def test_canonical_conversion_forbids_extra_fields() -> None:
    with pytest.raises(ValidationError):
        _conversion(coupon="X")


@pytest.mark.parametrize(("status_code", "ok"), [(200, True), (201, True), (299, True), (422, False)])
def test_submission_result_ok(status_code: int, ok: bool) -> None:
    assert SubmissionResult(status_code=status_code).ok is ok
