import logging
from collections.abc import Mapping
from typing import Any

from hexbytes import HexBytes
from web3 import Web3
from web3.types import RPCEndpoint

from .config import ClientConfig
from .formatter import format_block, format_transaction
from .models import QuaiBlock, QuaiTransaction
from .transport import QuaiMethodMiddleware, QuaiTransport
from .utils.hex_utility import hex_to_int, int_to_hex

# Get logger for this module
logger = logging.getLogger(__name__)

BLOCK_TAGS: frozenset[str] = frozenset({"latest", "earliest", "pending", "safe", "finalized"})

BlockIdentifier = int | str | bytes


class QuaiClient:
    """
    Client for a Quai node that returns canonical blocks and transactions.

    Requests are sent straight to the provider of a web3.py ``Web3``
    instance through a ``QuaiTransport``, so no middleware sees the standard
    method names. The rename middleware is also installed on the instance
    for callers that use ``w3.eth`` directly. Raw results are decoded by the
    formatters.
    """

    def __init__(self, config: ClientConfig, w3: Web3 | None = None) -> None:
        """
        Initialize the client.

        :param config: Client configuration
        :param w3: Existing Web3 instance to use instead of an HTTP provider
        """
        self.config = config

        if w3 is None:
            logger.debug(f"Connecting to Quai node at {config.rpc_url}")
            # The default middleware fetch and format standard Ethereum
            # blocks, which a Quai node does not serve
            w3 = Web3(Web3.HTTPProvider(
                config.rpc_url,
                request_kwargs={'timeout': config.request_timeout}
            ), middleware=[])

        if "quai_methods" not in w3.middleware_onion:
            w3.middleware_onion.inject(QuaiMethodMiddleware, name="quai_methods", layer=0)
        self.w3 = w3
        self.transport = QuaiTransport(w3.provider.make_request)

        logger.info(f"QuaiClient initialized (rpc: {config.rpc_url})")

    @classmethod
    def from_env(cls) -> "QuaiClient":
        """Create a client from environment configuration."""
        return cls(ClientConfig.from_env())

    def _request(self, method: str, params: list[Any]) -> Any:
        logger.debug(f"RPC request {method} {params}")
        response = self.transport.request(RPCEndpoint(method), params)
        # Raises Web3RPCError for a JSON-RPC error response
        return self.w3.manager.formatted_response(response, params)

    def get_chain_id(self) -> int:
        """
        Fetch the node's chain ID.

        :return: Chain ID as an integer
        """
        return hex_to_int(self._request("eth_chainId", []), "chainId")

    def get_block(self, block_identifier: BlockIdentifier = "latest", full_transactions: bool = False) -> QuaiBlock | None:
        """
        Fetch a block by number, tag or hash.

        :param block_identifier: Block number, tag ("latest", ...), hex number or 32-byte hash
        :param full_transactions: Embed full transactions instead of hashes
        :return: Canonical block, or None if the node has no such block
        """
        match block_identifier:
            case bool():
                raise TypeError("Block identifier must not be a bool")
            case int() as number:
                method, ident = "eth_getBlockByNumber", int_to_hex(number)
            case str() as tag if tag in BLOCK_TAGS:
                method, ident = "eth_getBlockByNumber", tag
            case bytes() | str() if len(HexBytes(block_identifier)) == 32:
                method, ident = "eth_getBlockByHash", HexBytes(block_identifier).to_0x_hex()
            case str() as hex_number:
                method, ident = "eth_getBlockByNumber", int_to_hex(hex_to_int(hex_number, "block"))
            case _:
                raise TypeError(f"Unsupported block identifier: {block_identifier!r}")

        raw = self._request(method, [ident, full_transactions])
        if raw is None:
            logger.warning(f"Block {block_identifier} not found")
            return None

        return format_block(raw)

    def get_transaction(self, tx_hash: str | bytes) -> QuaiTransaction | None:
        """
        Fetch a transaction by hash.

        :param tx_hash: Transaction hash (hex string or bytes)
        :return: Canonical transaction, or None if unknown to the node
        """
        raw = self._request("eth_getTransactionByHash", [HexBytes(tx_hash).to_0x_hex()])
        if raw is None:
            logger.warning(f"Transaction {tx_hash!r} not found")
            return None

        return format_transaction(raw)

    def send_transaction(self, tx: Mapping[str, Any]) -> str:
        """
        Submit a transaction for the node to sign and send.

        Integer values are encoded as hex quantities before sending; the
        request goes out as ``quai_sendTransaction``.

        :param tx: Transaction parameters (from, to, value, gas, data, ...)
        :return: Transaction hash returned by the node
        """
        params = {
            key: int_to_hex(value) if isinstance(value, int) and not isinstance(value, bool) else value
            for key, value in tx.items()
        }
        tx_hash = self._request("eth_sendTransaction", [params])
        logger.info(f"Transaction submitted: {tx_hash}")
        return tx_hash
