"""Validação de assinatura HMAC-SHA256 (base64) dos webhooks Fourthwall."""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação de assinatura.

    Attributes:
        valid: True se a request pode seguir para normalização
        skipped: True se a política dispensou a verificação
        error: Código do motivo (missing_secret, missing_signature, ...)
    """

    valid: bool
    skipped: bool = False
    error: str | None = None


def compute_signature(secret: str, body: bytes | str) -> str:
    """Calcula base64(HMAC-SHA256(secret, body))."""
    raw = body.encode("utf-8") if isinstance(body, str) else body
    digest = hmac.new(secret.encode("utf-8"), raw, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_signature(secret: str, body: bytes | str, signature: str | None) -> bool:
    """Compara a assinatura recebida com a esperada em tempo constante.

    Args:
        secret: Secret compartilhado (não vazio)
        body: Corpo bruto exatamente como recebido
        signature: Valor do header de assinatura

    Returns:
        True se a assinatura confere.

    Raises:
        ValueError: Se secret estiver vazio
    """
    if not secret:
        raise ValueError("secret é obrigatório para verificar assinatura")
    if not signature:
        return False
    supplied = signature.strip()
    # Base64 é ASCII; qualquer outro caractere já é divergência
    if not supplied.isascii():
        return False
    expected = compute_signature(secret, body)
    return hmac.compare_digest(expected.encode("ascii"), supplied.encode("ascii"))


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Busca header ignorando maiúsculas/minúsculas."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def verify_fourthwall_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    header_name: str,
    policy: str = "required",
    test_mode: bool = False,
) -> SignatureResult:
    """Aplica a política de verificação e valida a assinatura.

    Políticas:
    - required: sempre verifica; sem secret retorna error="missing_secret"
    - skip-if-unconfigured: sem secret, dispensa a verificação
    - skip-if-test-mode-flag: payload com testMode dispensa a verificação

    Returns:
        SignatureResult (nunca contém o secret).
    """
    if policy == "skip-if-unconfigured" and not secret:
        return SignatureResult(valid=True, skipped=True, error="secret_not_configured")

    if policy == "skip-if-test-mode-flag" and test_mode:
        return SignatureResult(valid=True, skipped=True, error="test_mode")

    if not secret:
        return SignatureResult(valid=False, error="missing_secret")

    signature = get_header(headers, header_name)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    if not verify_signature(secret, raw_body, signature):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
