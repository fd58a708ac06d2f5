"""Mascaramento de PII para logs."""

from __future__ import annotations


def mask_email(email: str | None) -> str:
    """Mascara email mantendo primeira letra e domínio.

    Exemplos:
        >>> mask_email("alice@example.com")
        'a***@example.com'

        >>> mask_email("sem-arroba")
        '***'
    """
    if not email or "@" not in email:
        return "***"
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"
