"""Conector Tapfiliate — envio de conversões de afiliados."""

from .http_client import TapfiliateHttpClient, create_tapfiliate_client

__all__ = [
    "TapfiliateHttpClient",
    "create_tapfiliate_client",
]
