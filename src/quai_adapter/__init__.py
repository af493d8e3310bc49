"""
Quai adapter package.

Decodes Quai Network JSON-RPC blocks and transactions into canonical
records and renames the RPC methods Quai serves under its own namespace.
"""

from .chain import QUAI_CHAIN, ChainDescriptor
from .client import QuaiClient
from .config import ClientConfig
from .errors import HexDecodeError
from .formatter import (
    format_block,
    format_header,
    format_outbound_etx,
    format_transaction,
    formatters,
)
from .models import QuaiBlock, QuaiHeader, QuaiOutboundEtx, QuaiTransaction
from .transport import QuaiMethodMiddleware, QuaiTransport, rename_method

__all__ = [
    "QUAI_CHAIN",
    "ChainDescriptor",
    "ClientConfig",
    "HexDecodeError",
    "QuaiBlock",
    "QuaiClient",
    "QuaiHeader",
    "QuaiMethodMiddleware",
    "QuaiOutboundEtx",
    "QuaiTransaction",
    "QuaiTransport",
    "format_block",
    "format_header",
    "format_outbound_etx",
    "format_transaction",
    "formatters",
    "rename_method",
]
__version__ = "0.1.0"
