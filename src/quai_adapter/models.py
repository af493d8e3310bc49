#!/usr/bin/env python3
"""Canonical data models for Quai RPC records.

This module provides immutable data classes for the decoded form of blocks,
headers, transactions and outbound cross-chain transactions (ETXs). Numeric
wire fields are plain Python integers; hashes, addresses and byte blobs stay
as the 0x-prefixed strings the node sent.

Attributes are snake_case. ``to_dict()`` produces the camelCase shape that
code written against a conventional Ethereum client expects.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias


@dataclass(frozen=True, slots=True)
class QuaiOutboundEtx:
    """An outbound cross-chain transaction emitted by a block.

    Attributes:
        hash: ETX hash
        from_address: Sender address (``from`` on the wire)
        to: Recipient address
        input: Call data
        type: Raw type tag, unchanged
        access_list: Raw access list, unchanged
        originating_tx_hash: Hash of the transaction that emitted the ETX
        etx_type: Raw ETX type tag, unchanged
        block_hash: Hash of the emitting block
        block_number: Emitting block number
        gas: Gas limit
        value: Transferred value
        transaction_index: Index of the ETX within the block
        etx_index: Index within the originating transaction's ETXs
    """

    hash: str | None
    from_address: str | None
    to: str | None
    input: str | None
    type: str | None
    access_list: Any
    originating_tx_hash: str | None
    etx_type: str | None
    block_hash: str | None
    block_number: int
    gas: int
    value: int
    transaction_index: int
    etx_index: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "hash": self.hash,
            "from": self.from_address,
            "to": self.to,
            "input": self.input,
            "type": self.type,
            "accessList": self.access_list,
            "originatingTxHash": self.originating_tx_hash,
            "etxType": self.etx_type,
            "blockHash": self.block_hash,
            "blockNumber": self.block_number,
            "gas": self.gas,
            "value": self.value,
            "transactionIndex": self.transaction_index,
            "etxIndex": self.etx_index,
        }


@dataclass(frozen=True, slots=True)
class QuaiTransaction:
    """A transaction in canonical form.

    The ``type`` tag is always ``"legacy"``; the raw wire type is kept
    verbatim in ``type_hex``.
    """

    hash: str | None
    block_hash: str | None
    block_number: int | None
    from_address: str | None
    to: str | None
    input: str | None
    gas: int
    gas_price: int
    nonce: int
    value: int
    v: int
    r: str | None
    s: str | None
    chain_id: int
    transaction_index: int | None
    type_hex: str | None
    type: Literal["legacy", "quai"] = "legacy"
    miner_tip: int | None = None

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"QuaiTransaction(hash={(self.hash or '')[:10]}..., "
            f"block={self.block_number}, "
            f"nonce={self.nonce})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        ``minerTip`` is omitted when the node did not send it.
        """
        data: dict[str, Any] = {
            "blockHash": self.block_hash,
            "blockNumber": self.block_number,
            "from": self.from_address,
            "gas": self.gas,
            "hash": self.hash,
            "input": self.input,
            "nonce": self.nonce,
            "r": self.r,
            "s": self.s,
            "to": self.to,
            "transactionIndex": self.transaction_index,
            "typeHex": self.type_hex,
            "type": self.type,
            "value": self.value,
            "v": self.v,
            "gasPrice": self.gas_price,
            "chainId": self.chain_id,
        }
        if self.miner_tip is not None:
            data["minerTip"] = self.miner_tip
        return data


# Block transaction lists carry either bare hashes or full records
BlockTransaction: TypeAlias = str | QuaiTransaction


@dataclass(frozen=True, slots=True)
class QuaiHeader:
    """The nested Quai header of a block.

    Numeric fields are decoded; the two-element block number tuple is exposed
    as ``quai_number`` to keep it apart from the canonical block number.
    Hash and root fields are kept as received; fields the node sends that
    are not modelled here are carried in ``extra``.
    """

    # Decoded scalars
    base_fee_per_gas: int = 0
    efficiency_score: int = 0
    exchange_rate: int = 0
    qi_to_quai: int = 0
    quai_state_size: int = 0
    quai_to_qi: int = 0
    size: int = 0
    state_limit: int = 0
    state_used: int = 0
    threshold_count: int = 0
    gas_limit: int = 0
    gas_used: int = 0
    expansion_number: int = 0
    uncled_entropy: int = 0

    # Decoded tuples
    quai_number: tuple[int, int] = (0, 0)
    parent_entropy: tuple[int, int, int] = (0, 0, 0)
    parent_delta_entropy: tuple[int, int, int] = (0, 0, 0)
    parent_uncled_delta_entropy: tuple[int, int, int] = (0, 0, 0)

    # Passed through unchanged
    parent_hash: tuple[str, ...] = ()
    manifest_hash: tuple[str, ...] = ()
    etx_eligible_slices: str | None = None
    etx_rollup_root: str | None = None
    etx_set_root: str | None = None
    evm_root: str | None = None
    extra_data: str | None = None
    interlink_root_hash: str | None = None
    outbound_etxs_root: str | None = None
    prime_terminus_hash: str | None = None
    receipts_root: str | None = None
    secondary_coinbase: str | None = None
    transactions_root: str | None = None
    uncle_hash: str | None = None
    utxo_root: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            **self.extra,
            "baseFeePerGas": self.base_fee_per_gas,
            "efficiencyScore": self.efficiency_score,
            "exchangeRate": self.exchange_rate,
            "quaiNumber": list(self.quai_number),
            "qiToQuai": self.qi_to_quai,
            "quaiStateSize": self.quai_state_size,
            "quaiToQi": self.quai_to_qi,
            "size": self.size,
            "stateLimit": self.state_limit,
            "stateUsed": self.state_used,
            "thresholdCount": self.threshold_count,
            "gasLimit": self.gas_limit,
            "gasUsed": self.gas_used,
            "expansionNumber": self.expansion_number,
            "uncledEntropy": self.uncled_entropy,
            "parentEntropy": list(self.parent_entropy),
            "parentDeltaEntropy": list(self.parent_delta_entropy),
            "parentUncledDeltaEntropy": list(self.parent_uncled_delta_entropy),
            "parentHash": list(self.parent_hash),
            "manifestHash": list(self.manifest_hash),
            "etxEligibleSlices": self.etx_eligible_slices,
            "etxRollupRoot": self.etx_rollup_root,
            "etxSetRoot": self.etx_set_root,
            "evmRoot": self.evm_root,
            "extraData": self.extra_data,
            "interlinkRootHash": self.interlink_root_hash,
            "outboundEtxsRoot": self.outbound_etxs_root,
            "primeTerminusHash": self.prime_terminus_hash,
            "receiptsRoot": self.receipts_root,
            "secondaryCoinbase": self.secondary_coinbase,
            "transactionsRoot": self.transactions_root,
            "uncleHash": self.uncle_hash,
            "utxoRoot": self.utxo_root,
        }


@dataclass(frozen=True, slots=True)
class QuaiBlock:
    """A block in canonical form.

    Conventional block fields are derived from the work-order header and the
    Quai header; the chain-specific parts stay available under ``header``,
    ``wo_header``, ``total_entropy`` and ``outbound_etxs``.

    Attributes:
        hash: Block hash
        number: Block number, from the work-order header
        timestamp: Block timestamp, from the work-order header
        parent_hash: First element of the header's parent hash tuple
        nonce: Work-order nonce, as received
        difficulty: Work-order difficulty
        total_difficulty: Same value as ``difficulty``
        gas_limit: Header gas limit
        gas_used: Header gas used
        miner: Work-order primary coinbase
        mix_hash: Work-order mix hash
        extra_data: Header extra data
        receipts_root: Header receipts root
        state_root: Header EVM root
        transactions_root: Header transactions root
        base_fee_per_gas: Always None at the top level
        header: Decoded Quai header
        wo_header: Raw work-order header as received
        total_entropy: Total entropy of the block
        outbound_etxs: Decoded outbound ETXs, in node order
        transactions: Hashes or decoded transactions, in node order
        extra: Any other top-level fields the node sent
    """

    hash: str | None
    number: int
    timestamp: int
    parent_hash: str | None
    nonce: str | None
    difficulty: int
    total_difficulty: int
    gas_limit: int
    gas_used: int
    miner: str | None
    mix_hash: str | None
    extra_data: str | None
    receipts_root: str | None
    state_root: str | None
    transactions_root: str | None
    header: QuaiHeader
    wo_header: Mapping[str, Any]
    total_entropy: int
    outbound_etxs: tuple[QuaiOutboundEtx, ...] = ()
    transactions: tuple[BlockTransaction, ...] = ()
    base_fee_per_gas: None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"QuaiBlock(number={self.number}, "
            f"hash={(self.hash or '')[:10]}..., "
            f"txs={len(self.transactions)}, "
            f"etxs={len(self.outbound_etxs)})"
        )

    @property
    def transaction_hashes(self) -> list[str | None]:
        """Hashes of all transactions, whether or not they were embedded."""
        return [
            tx if isinstance(tx, str) else tx.hash
            for tx in self.transactions
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            **self.extra,
            "hash": self.hash,
            "number": self.number,
            "timestamp": self.timestamp,
            "parentHash": self.parent_hash,
            "nonce": self.nonce,
            "difficulty": self.difficulty,
            "gasLimit": self.gas_limit,
            "gasUsed": self.gas_used,
            "miner": self.miner,
            "mixHash": self.mix_hash,
            "totalDifficulty": self.total_difficulty,
            "extraData": self.extra_data,
            "baseFeePerGas": self.base_fee_per_gas,
            "receiptsRoot": self.receipts_root,
            "stateRoot": self.state_root,
            "transactionsRoot": self.transactions_root,
            "header": self.header.to_dict(),
            "woHeader": dict(self.wo_header),
            "totalEntropy": self.total_entropy,
            "outboundEtxs": [etx.to_dict() for etx in self.outbound_etxs],
            "transactions": [
                tx if isinstance(tx, str) else tx.to_dict()
                for tx in self.transactions
            ],
        }
