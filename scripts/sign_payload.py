#!/usr/bin/env python3
"""Assina um payload JSON como a Fourthwall e imprime o header.

Uso (após `pip install -e .`):
    python scripts/sign_payload.py payload.json --secret meu-secret

    curl -X POST http://localhost:8080/webhooks/fourthwall \
        -H "Content-Type: application/json" \
        -H "X-Fourthwall-Hmac-SHA256: <assinatura>" \
        --data-binary @payload.json

O arquivo é assinado byte a byte; não reformatar o JSON depois de assinar.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from api.connectors.fourthwall.signature import compute_signature
from config.settings.fourthwall import DEFAULT_SIGNATURE_HEADER


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("payload", type=Path, help="Arquivo JSON a assinar")
    parser.add_argument(
        "--secret",
        default=os.getenv("FOURTHWALL_WEBHOOK_SECRET", ""),
        help="Secret HMAC (default: FOURTHWALL_WEBHOOK_SECRET)",
    )
    args = parser.parse_args()

    if not args.secret:
        parser.error("secret ausente: use --secret ou FOURTHWALL_WEBHOOK_SECRET")

    body = args.payload.read_bytes()
    print(f"{DEFAULT_SIGNATURE_HEADER}: {compute_signature(args.secret, body)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
