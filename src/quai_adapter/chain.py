"""
Static network descriptor for Quai Network.

The descriptor mirrors the chain definition a wallet client is configured
with: numeric chain id, display name, native currency and RPC endpoints,
plus the formatters used to decode the chain's blocks and transactions.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .formatter import formatters


@dataclass(frozen=True, slots=True)
class NativeCurrency:
    """Native currency metadata."""

    name: str
    symbol: str
    decimals: int = 18


@dataclass(frozen=True, slots=True)
class RpcUrls:
    """Default and public HTTP endpoints for the chain."""

    default: tuple[str, ...]
    public: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ChainDescriptor:
    """Immutable description of a chain for wallet-client configuration.

    Attributes:
        id: Numeric chain ID
        name: Display name
        native_currency: Native currency metadata
        rpc_urls: Default and public RPC endpoints
        formatters: Record formatters keyed by kind ("block", "transaction")
    """

    id: int
    name: str
    native_currency: NativeCurrency
    rpc_urls: RpcUrls
    formatters: Mapping[str, Callable[[Mapping[str, Any]], Any]] = field(default_factory=dict)

    @property
    def default_rpc_url(self) -> str:
        """First default HTTP endpoint."""
        return self.rpc_urls.default[0]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization (formatters excluded)."""
        return {
            "id": self.id,
            "name": self.name,
            "nativeCurrency": {
                "decimals": self.native_currency.decimals,
                "name": self.native_currency.name,
                "symbol": self.native_currency.symbol,
            },
            "rpcUrls": {
                "default": {"http": list(self.rpc_urls.default)},
                "public": {"http": list(self.rpc_urls.public)},
            },
        }


QUAI_CHAIN: ChainDescriptor = ChainDescriptor(
    id=9000,
    name="Quai Network",
    native_currency=NativeCurrency(name="QUAI", symbol="QUAI", decimals=18),
    rpc_urls=RpcUrls(
        default=("http://localhost:9200",),
        public=("https://rpc.quai.network/cyprus1",),
    ),
    formatters=formatters,
)
