"""Helpers de extração de campos do payload Fourthwall.

Separado de extractor.py para manter SRP. Cada função trata um tipo
de valor (texto, número, mapping) sem conhecer o significado do campo.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

Path = tuple[str, ...]

_AMOUNT_VALUE_KEYS = ("value", "amount")


def dig(payload: Mapping[str, Any], path: Path) -> Any:
    """Percorre o payload por chaves aninhadas; None se qualquer nível faltar."""
    current: Any = payload
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def as_text(value: Any) -> str | None:
    """Converte str/int em texto não vazio; outros tipos retornam None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def as_amount(value: Any) -> Decimal | None:
    """Converte número, string numérica ou {"value"|"amount": ...} em Decimal.

    Retorna None para ausentes, bool, não numéricos e não finitos, inclusive
    valores que estouram o float usado na serialização JSON.
    """
    if isinstance(value, Mapping):
        for key in _AMOUNT_VALUE_KEYS:
            if value.get(key) is not None:
                return as_amount(value[key])
        return None
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        candidate = Decimal(str(value))
    elif isinstance(value, str):
        try:
            candidate = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not candidate.is_finite() or not math.isfinite(float(candidate)):
        return None
    return candidate


def as_mapping(value: Any) -> Mapping[str, Any] | None:
    """Retorna o valor se for mapping não vazio."""
    if isinstance(value, Mapping) and value:
        return value
    return None


def first_text(payload: Mapping[str, Any], paths: tuple[Path, ...]) -> str | None:
    """Primeiro texto não vazio entre os paths, na ordem dada."""
    for path in paths:
        text = as_text(dig(payload, path))
        if text:
            return text
    return None


def first_amount(payload: Mapping[str, Any], paths: tuple[Path, ...]) -> Decimal | None:
    """Primeiro valor numérico não zero entre os paths.

    Um candidato zero não vence: a busca continua nos próximos paths.
    Se só houver zeros/negativos, retorna o primeiro encontrado para
    que o chamador reporte o valor inválido.
    """
    fallback: Decimal | None = None
    for path in paths:
        amount = as_amount(dig(payload, path))
        if amount is None:
            continue
        if amount != 0:
            return amount
        if fallback is None:
            fallback = amount
    return fallback


def first_mapping(
    payload: Mapping[str, Any], paths: tuple[Path, ...]
) -> Mapping[str, Any] | None:
    """Primeiro mapping não vazio entre os paths."""
    for path in paths:
        mapping = as_mapping(dig(payload, path))
        if mapping is not None:
            return mapping
    return None


def find_alias(
    params: Mapping[str, Any] | None, aliases: tuple[str, ...]
) -> tuple[str, str] | tuple[None, None]:
    """Primeira chave de alias presente com valor não vazio.

    Returns:
        (alias, valor) ou (None, None)
    """
    if not params:
        return None, None
    for alias in aliases:
        text = as_text(params.get(alias))
        if text:
            return alias, text
    return None, None
