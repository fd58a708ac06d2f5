"""Testes para RelayConversionUseCase."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
from decimal import Decimal
from typing import Any

import httpx
import pytest

from app.bootstrap.conversion_factory import create_relay_use_case
from app.domain.conversion import CanonicalConversion, IgnoredEvent, SubmissionResult
from app.use_cases.conversions import RelayConversionUseCase
from config.settings import BaseSettings, FourthwallSettings, TapfiliateSettings
from utils.errors import (
    InvalidAmountError,
    MethodNotAllowedError,
    MissingOrderIdError,
    MissingReferralError,
    UnauthorizedError,
)


class FakeParser:
    """Parser fake: devolve o JSON sem verificar assinatura."""

    def __init__(self, error: Exception | None = None) -> None:
        self._error = error
        self.calls = 0

    def parse(self, raw_body: bytes, headers: Any) -> dict[str, Any]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return json.loads(raw_body)


class FakeNormalizer:
    """Normalizer fake com resultado fixo."""

    def __init__(self, result: CanonicalConversion | IgnoredEvent | Exception) -> None:
        self._result = result
        self.payloads: list[dict[str, Any]] = []

    def normalize(self, payload: dict[str, Any]) -> CanonicalConversion | IgnoredEvent:
        self.payloads.append(payload)
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class FakeSubmitter:
    """Submitter fake que registra conversões enviadas."""

    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self._status_code = status_code
        self._body = body if body is not None else {"id": "conv_1"}
        self.submitted: list[CanonicalConversion] = []

    async def submit(self, conversion: CanonicalConversion) -> SubmissionResult:
        self.submitted.append(conversion)
        return SubmissionResult(status_code=self._status_code, body=self._body)


def _conversion() -> CanonicalConversion:
    return CanonicalConversion(
        external_id="ord_1",
        amount=Decimal("42.50"),
        currency="EUR",
        customer_email="a@b.com",
        referral_code="AFF123",
        program_id="prog-1",
    )


def _use_case(
    normalizer_result: CanonicalConversion | IgnoredEvent | Exception,
    submitter: FakeSubmitter | None = None,
    parser: FakeParser | None = None,
) -> tuple[RelayConversionUseCase, FakeSubmitter]:
    submitter = submitter or FakeSubmitter()
    use_case = RelayConversionUseCase(
        parser=parser or FakeParser(),
        normalizer=FakeNormalizer(normalizer_result),
        submitter=submitter,
    )
    return use_case, submitter


@pytest.mark.asyncio
async def test_execute_submits_conversion() -> None:
    use_case, submitter = _use_case(_conversion())

    outcome = await use_case.execute(method="POST", raw_body=b'{"id": "evt_1"}', headers={})

    assert outcome.kind == "submitted"
    assert outcome.conversion == _conversion()
    assert outcome.submission is not None
    assert outcome.submission.body == {"id": "conv_1"}
    assert len(submitter.submitted) == 1


@pytest.mark.asyncio
async def test_execute_reports_upstream_rejection() -> None:
    use_case, _ = _use_case(_conversion(), FakeSubmitter(422, {"error": "duplicate"}))

    outcome = await use_case.execute(method="post", raw_body=b"{}", headers={})

    assert outcome.kind == "upstream_rejected"
    assert outcome.submission is not None
    assert outcome.submission.status_code == 422


@pytest.mark.asyncio
async def test_execute_ignored_event_makes_no_outbound_call() -> None:
    use_case, submitter = _use_case(IgnoredEvent(reason="status_not_allowed"))

    outcome = await use_case.execute(method="POST", raw_body=b"{}", headers={})

    assert outcome.kind == "ignored"
    assert outcome.ignored is not None
    assert outcome.ignored.reason == "status_not_allowed"
    assert submitter.submitted == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        InvalidAmountError(field="amount"),
        MissingOrderIdError(field="external_id"),
        MissingReferralError(field="referral_code"),
    ],
)
async def test_execute_payload_errors_make_no_outbound_call(error: Exception) -> None:
    use_case, submitter = _use_case(error)

    with pytest.raises(type(error)):
        await use_case.execute(method="POST", raw_body=b"{}", headers={})

    assert submitter.submitted == []


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "OPTIONS"])
async def test_execute_rejects_non_post_before_parsing(method: str) -> None:
    parser = FakeParser()
    use_case, submitter = _use_case(_conversion(), parser=parser)

    with pytest.raises(MethodNotAllowedError):
        await use_case.execute(method=method, raw_body=b"{}", headers={})

    assert parser.calls == 0
    assert submitter.submitted == []


@pytest.mark.asyncio
async def test_execute_unauthorized_makes_no_outbound_call() -> None:
    use_case, submitter = _use_case(
        _conversion(), parser=FakeParser(error=UnauthorizedError("signature_mismatch"))
    )

    with pytest.raises(UnauthorizedError):
        await use_case.execute(method="POST", raw_body=b"{}", headers={})

    assert submitter.submitted == []


class TestWiredUseCase:
    """Use case montado pela factory com MockTransport no outbound."""

    SECRET = "whsec"

    def _sign(self, body: bytes) -> str:
        digest = hmac.new(self.SECRET.encode("utf-8"), body, hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def _wired(
        self, handler: Any, **fourthwall: Any
    ) -> RelayConversionUseCase:
        return create_relay_use_case(
            base=BaseSettings(),
            fourthwall=FourthwallSettings(webhook_secret=self.SECRET, **fourthwall),
            tapfiliate=TapfiliateSettings(api_key="tap-key", program_id="prog-1"),
            transport=httpx.MockTransport(handler),
        )

    @pytest.mark.asyncio
    async def test_worked_example_end_to_end(self) -> None:
        sent: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content))
            return httpx.Response(200, json={"id": "conv_1"})

        body = json.dumps(
            {
                "data": {
                    "amounts": {"total": {"value": "42.50", "currency": "EUR"}},
                    "id": "ord_1",
                    "email": "a@b.com",
                    "trackingParams": {"ref": "AFF123"},
                }
            }
        ).encode("utf-8")

        outcome = await self._wired(handler).execute(
            method="POST",
            raw_body=body,
            headers={"X-Fourthwall-Hmac-Sha256": self._sign(body)},
        )

        assert outcome.kind == "submitted"
        assert sent == [
            {
                "program_id": "prog-1",
                "external_id": "ord_1",
                "amount": 42.5,
                "currency": "EUR",
                "customer_email": "a@b.com",
                "referral_code": "AFF123",
            }
        ]

    @pytest.mark.asyncio
    async def test_missing_amount_never_reaches_outbound(self) -> None:
        sent: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(200)

        body = b'{"data": {"id": "ord_1"}}'

        with pytest.raises(InvalidAmountError):
            await self._wired(handler).execute(
                method="POST",
                raw_body=body,
                headers={"x-fourthwall-hmac-sha256": self._sign(body)},
            )

        assert sent == []

    @pytest.mark.asyncio
    async def test_overflowing_amount_is_invalid_amount(self) -> None:
        sent: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(200)

        body = b'{"id": "o1", "amount": "1e400"}'

        with pytest.raises(InvalidAmountError):
            await self._wired(handler).execute(
                method="POST",
                raw_body=body,
                headers={"x-fourthwall-hmac-sha256": self._sign(body)},
            )

        assert sent == []

    @pytest.mark.asyncio
    async def test_malformed_currency_is_submitted_with_default(self) -> None:
        sent: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content))
            return httpx.Response(200, json={"id": "conv_2"})

        body = json.dumps(
            {"data": {"id": "o1", "amounts": {"total": {"value": "10", "currency": "EURO"}}}}
        ).encode("utf-8")

        outcome = await self._wired(handler).execute(
            method="POST",
            raw_body=body,
            headers={"x-fourthwall-hmac-sha256": self._sign(body)},
        )

        assert outcome.kind == "submitted"
        assert len(sent) == 1
        assert sent[0]["external_id"] == "o1"
        assert sent[0]["currency"] == "USD"
