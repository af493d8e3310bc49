"""Shared fixtures for Quai adapter tests."""

from typing import Any

import pytest
from web3.providers import BaseProvider


BLOCK_HASH = "0x8f1b3c6d0e2a4f5b7c9d1e3f5a7b9c1d3e5f7a9b1c3d5e7f9a1b3c5d7e9f1a2b"
TX_HASH = "0x0011aabbccddeeff00112233445566778899aabbccddeeff0011223344556677"
ADDRESS_FROM = "0x0047E1ef7b3D4E5a2c6B1d9E8F0a3B4c5D6e7F80"
ADDRESS_TO = "0x00a3e45aa16163F2663015b6695894D918866d19"


class RecordingProvider(BaseProvider):
    """Provider that answers from a fixed result table and records every call.

    Methods missing from the table get a JSON-RPC "method not found" error,
    the way a Quai node answers the standard names it does not serve.
    """

    def __init__(self, results: dict[str, Any] | None = None) -> None:
        super().__init__()
        self.results = dict(results or {})
        self.requests: list[tuple[str, Any]] = []

    @property
    def methods(self) -> list[str]:
        return [method for method, _ in self.requests]

    def make_request(self, method, params):
        self.requests.append((method, params))
        if method not in self.results:
            return {
                "jsonrpc": "2.0",
                "id": len(self.requests),
                "error": {"code": -32601, "message": f"the method {method} does not exist"},
            }
        return {"jsonrpc": "2.0", "id": len(self.requests), "result": self.results[method]}

    def is_connected(self, show_traceback: bool = False) -> bool:
        return True


@pytest.fixture
def raw_header():
    """A fully populated raw Quai header."""
    return {
        "baseFeePerGas": "0x3b9aca00",
        "efficiencyScore": "0x2a",
        "etxEligibleSlices": "0x0000000000000000000000000000000000000000000000000000000000000001",
        "etxRollupRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "etxSetRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "evmRoot": "0xd7f8974fb5ac78d9ac099b9ad5018bedc2ce0a72dad1827a1709da30580f0544",
        "exchangeRate": "0x1bc16d674ec80000",
        "expansionNumber": "0x0",
        "extraData": "0xd88301000083676f88676f312e32322e30856c696e7578",
        "gasLimit": "0x1c9c380",
        "gasUsed": "0x5208",
        "interlinkRootHash": "0x1111111111111111111111111111111111111111111111111111111111111111",
        "manifestHash": [
            "0xaaaa000000000000000000000000000000000000000000000000000000000000",
            "0xbbbb000000000000000000000000000000000000000000000000000000000000",
            "0xcccc000000000000000000000000000000000000000000000000000000000000",
        ],
        "number": ["0x64", "0xc8"],
        "outboundEtxsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "parentDeltaEntropy": ["0x1", "0x2", "0x3"],
        "parentEntropy": ["0x10", "0x20", "0x30"],
        "parentHash": [
            "0x1000000000000000000000000000000000000000000000000000000000000001",
            "0x2000000000000000000000000000000000000000000000000000000000000002",
        ],
        "parentUncledDeltaEntropy": ["0x0", "0x0", "0x4"],
        "primeTerminusHash": "0x3333333333333333333333333333333333333333333333333333333333333333",
        "qiToQuai": "0x3e8",
        "quaiStateSize": "0x1000",
        "quaiToQi": "0x7d0",
        "receiptsRoot": "0x4444444444444444444444444444444444444444444444444444444444444444",
        "secondaryCoinbase": "0x0000000000000000000000000000000000000000",
        "size": "0x2b4",
        "stateLimit": "0x100000",
        "stateUsed": "0x8000",
        "thresholdCount": "0x5",
        "transactionsRoot": "0x5555555555555555555555555555555555555555555555555555555555555555",
        "uncleHash": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "uncledEntropy": "0x0",
        "utxoRoot": "0x6666666666666666666666666666666666666666666666666666666666666666",
    }


@pytest.fixture
def raw_wo_header():
    """A raw work-order header."""
    return {
        "difficulty": "0x2d79883d2000",
        "headerHash": "0x7777777777777777777777777777777777777777777777777777777777777777",
        "location": "0x0000",
        "lock": "0x0",
        "mixHash": "0x8888888888888888888888888888888888888888888888888888888888888888",
        "nonce": "0x0000000000001234",
        "number": "0x1f4",
        "parentHash": "0x1000000000000000000000000000000000000000000000000000000000000001",
        "primaryCoinbase": "0x00537F2b5e10D1C0D1fC89b7A5e9a3B9D2D5c8f1",
        "primeTerminusNumber": "0x10",
        "timestamp": "0x6745f3a0",
        "txHash": "0x9999999999999999999999999999999999999999999999999999999999999999",
    }


@pytest.fixture
def raw_transaction():
    """A raw mined Quai transaction."""
    return {
        "blockHash": BLOCK_HASH,
        "blockNumber": "0x1f4",
        "from": ADDRESS_FROM,
        "gas": "0x5208",
        "minerTip": "0x3b9aca00",
        "gasPrice": "0x4a817c800",
        "hash": TX_HASH,
        "input": "0x",
        "nonce": "0x7",
        "to": ADDRESS_TO,
        "transactionIndex": "0x2",
        "value": "0xde0b6b3a7640000",
        "type": "0x0",
        "chainId": "0x2328",
        "v": "0x1",
        "r": "0x1b5e176d927f8e9ab405058b2d2457392da3e20f328b16ddabcebc33eaac5fea",
        "s": "0x4ba69724e8f69de52f0125ad8b3c5c2cef33019bac3249e2c0a2192766d1721c",
        "accessList": [],
    }


@pytest.fixture
def raw_etx():
    """A raw outbound ETX."""
    return {
        "blockHash": BLOCK_HASH,
        "from": ADDRESS_FROM,
        "hash": "0xe7e7000000000000000000000000000000000000000000000000000000000001",
        "input": "0x",
        "to": "0x0147E1ef7b3D4E5a2c6B1d9E8F0a3B4c5D6e7F80",
        "type": "0x1",
        "accessList": [],
        "originatingTxHash": TX_HASH,
        "etxType": "0x0",
        "blockNumber": "0x1f4",
        "gas": "0x7530",
        "value": "0x2386f26fc10000",
        "transactionIndex": "0x3",
        "etxIndex": "0x1",
    }


@pytest.fixture
def raw_block(raw_header, raw_wo_header, raw_transaction, raw_etx):
    """A raw block mixing a bare transaction hash with an embedded transaction."""
    return {
        "hash": BLOCK_HASH,
        "header": raw_header,
        "woHeader": raw_wo_header,
        "totalEntropy": "0x1d4c0",
        "outboundEtxs": [raw_etx],
        "transactions": [
            "0xabc0000000000000000000000000000000000000000000000000000000000abc",
            raw_transaction,
        ],
        "size": "0x2b4",
        "uncles": [],
    }
