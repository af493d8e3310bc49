"""
RPC formatters for Quai Network blocks and transactions.

This module turns the raw JSON-RPC records returned by a Quai node into the
canonical models in ``models``. Formatting is pure and total: missing fields
decode to fixed defaults, and only a malformed hex value raises.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .models import (
    BlockTransaction,
    QuaiBlock,
    QuaiHeader,
    QuaiOutboundEtx,
    QuaiTransaction,
)
from .utils.hex_utility import hex_to_int, hex_to_optional_int, hex_tuple_to_ints

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]

# Top-level block keys consumed by format_block; anything else is carried in QuaiBlock.extra
BLOCK_KEYS: frozenset[str] = frozenset({
    "hash",
    "header",
    "woHeader",
    "totalEntropy",
    "outboundEtxs",
    "transactions",
    # Superseded by the derived canonical fields
    "number",
    "timestamp",
    "parentHash",
    "nonce",
    "difficulty",
    "totalDifficulty",
    "gasLimit",
    "gasUsed",
    "miner",
    "mixHash",
    "extraData",
    "baseFeePerGas",
    "receiptsRoot",
    "stateRoot",
    "transactionsRoot",
})

# Header keys consumed by format_header; anything else is carried in QuaiHeader.extra
HEADER_KEYS: frozenset[str] = frozenset({
    "baseFeePerGas",
    "efficiencyScore",
    "exchangeRate",
    "qiToQuai",
    "quaiStateSize",
    "quaiToQi",
    "size",
    "stateLimit",
    "stateUsed",
    "thresholdCount",
    "gasLimit",
    "gasUsed",
    "expansionNumber",
    "uncledEntropy",
    "number",
    "parentEntropy",
    "parentDeltaEntropy",
    "parentUncledDeltaEntropy",
    "parentHash",
    "manifestHash",
    "etxEligibleSlices",
    "etxRollupRoot",
    "etxSetRoot",
    "evmRoot",
    "extraData",
    "interlinkRootHash",
    "outboundEtxsRoot",
    "primeTerminusHash",
    "receiptsRoot",
    "secondaryCoinbase",
    "transactionsRoot",
    "uncleHash",
    "utxoRoot",
})


def _record(value: RawRecord | None) -> RawRecord:
    """Treat a missing or null sub-record as empty."""
    return value if value is not None else {}


def format_header(raw: RawRecord | None) -> QuaiHeader:
    """
    Decode a raw Quai header.

    Args:
        raw: Header record as returned by the node (may be None)

    Returns:
        QuaiHeader with numeric fields decoded, hash fields unchanged and
        unrecognised fields kept in ``extra``

    Raises:
        HexDecodeError: If a numeric field holds malformed hex
    """
    raw = _record(raw)

    def scalar(name: str) -> int:
        return hex_to_int(raw.get(name), f"header.{name}")

    def triple(name: str) -> tuple[int, int, int]:
        return hex_tuple_to_ints(raw.get(name), f"header.{name}", 3)

    return QuaiHeader(
        base_fee_per_gas=scalar("baseFeePerGas"),
        efficiency_score=scalar("efficiencyScore"),
        exchange_rate=scalar("exchangeRate"),
        qi_to_quai=scalar("qiToQuai"),
        quai_state_size=scalar("quaiStateSize"),
        quai_to_qi=scalar("quaiToQi"),
        size=scalar("size"),
        state_limit=scalar("stateLimit"),
        state_used=scalar("stateUsed"),
        threshold_count=scalar("thresholdCount"),
        gas_limit=scalar("gasLimit"),
        gas_used=scalar("gasUsed"),
        expansion_number=scalar("expansionNumber"),
        uncled_entropy=scalar("uncledEntropy"),
        quai_number=hex_tuple_to_ints(raw.get("number"), "header.number", 2),
        parent_entropy=triple("parentEntropy"),
        parent_delta_entropy=triple("parentDeltaEntropy"),
        parent_uncled_delta_entropy=triple("parentUncledDeltaEntropy"),
        parent_hash=tuple(raw.get("parentHash") or ()),
        manifest_hash=tuple(raw.get("manifestHash") or ()),
        etx_eligible_slices=raw.get("etxEligibleSlices"),
        etx_rollup_root=raw.get("etxRollupRoot"),
        etx_set_root=raw.get("etxSetRoot"),
        evm_root=raw.get("evmRoot"),
        extra_data=raw.get("extraData"),
        interlink_root_hash=raw.get("interlinkRootHash"),
        outbound_etxs_root=raw.get("outboundEtxsRoot"),
        prime_terminus_hash=raw.get("primeTerminusHash"),
        receipts_root=raw.get("receiptsRoot"),
        secondary_coinbase=raw.get("secondaryCoinbase"),
        transactions_root=raw.get("transactionsRoot"),
        uncle_hash=raw.get("uncleHash"),
        utxo_root=raw.get("utxoRoot"),
        extra=MappingProxyType({k: v for k, v in raw.items() if k not in HEADER_KEYS}),
    )


def format_outbound_etx(raw: RawRecord | None) -> QuaiOutboundEtx:
    """
    Decode a raw outbound ETX.

    Indices default to 0 when absent, unlike a transaction's
    ``transactionIndex`` which defaults to None.
    """
    raw = _record(raw)
    return QuaiOutboundEtx(
        hash=raw.get("hash"),
        from_address=raw.get("from"),
        to=raw.get("to"),
        input=raw.get("input"),
        type=raw.get("type"),
        access_list=raw.get("accessList"),
        originating_tx_hash=raw.get("originatingTxHash"),
        etx_type=raw.get("etxType"),
        block_hash=raw.get("blockHash"),
        block_number=hex_to_int(raw.get("blockNumber"), "etx.blockNumber"),
        gas=hex_to_int(raw.get("gas"), "etx.gas"),
        value=hex_to_int(raw.get("value"), "etx.value"),
        transaction_index=hex_to_int(raw.get("transactionIndex"), "etx.transactionIndex"),
        etx_index=hex_to_int(raw.get("etxIndex"), "etx.etxIndex"),
    )


def format_transaction(raw: RawRecord) -> QuaiTransaction:
    """
    Decode a raw Quai transaction.

    The canonical type is always ``"legacy"``; the wire type is kept in
    ``type_hex``. Access lists are not carried over.

    Args:
        raw: Transaction record as returned by the node

    Returns:
        QuaiTransaction with numeric fields decoded

    Raises:
        HexDecodeError: If a numeric field holds malformed hex
    """
    if raw.get("accessList"):
        logger.debug(f"Dropping access list of transaction {raw.get('hash')}")

    return QuaiTransaction(
        hash=raw.get("hash"),
        block_hash=raw.get("blockHash"),
        block_number=hex_to_optional_int(raw.get("blockNumber"), "tx.blockNumber"),
        from_address=raw.get("from"),
        to=raw.get("to"),
        input=raw.get("input"),
        gas=hex_to_int(raw.get("gas"), "tx.gas"),
        gas_price=hex_to_int(raw.get("gasPrice"), "tx.gasPrice"),
        nonce=hex_to_int(raw.get("nonce"), "tx.nonce"),
        value=hex_to_int(raw.get("value"), "tx.value"),
        v=hex_to_int(raw.get("v"), "tx.v"),
        r=raw.get("r"),
        s=raw.get("s"),
        chain_id=hex_to_int(raw.get("chainId"), "tx.chainId"),
        transaction_index=hex_to_optional_int(raw.get("transactionIndex"), "tx.transactionIndex"),
        type_hex=raw.get("type"),
        type="legacy",
        miner_tip=hex_to_optional_int(raw.get("minerTip"), "tx.minerTip"),
    )


def format_block_transaction(raw: str | RawRecord) -> BlockTransaction:
    """Pass a transaction hash through, or decode an embedded transaction."""
    match raw:
        case str() as tx_hash:
            return tx_hash
        case Mapping():
            return format_transaction(raw)
        case _:
            raise TypeError(f"Unexpected block transaction entry: {type(raw).__name__}")


def format_block(raw: RawRecord) -> QuaiBlock:
    """
    Assemble a canonical block from a raw Quai block.

    The conventional block number and timestamp come from the work-order
    header, never from the Quai header's number tuple.

    Args:
        raw: Block record as returned by the node

    Returns:
        QuaiBlock with all derived fields applied

    Raises:
        HexDecodeError: If a numeric field holds malformed hex
    """
    header_raw: RawRecord = _record(raw.get("header"))
    wo_header: RawRecord = _record(raw.get("woHeader"))

    header = format_header(header_raw)
    difficulty = hex_to_int(wo_header.get("difficulty"), "woHeader.difficulty")

    outbound_etxs: Sequence[RawRecord] = raw.get("outboundEtxs") or ()
    transactions: Sequence[str | RawRecord] = raw.get("transactions") or ()

    block = QuaiBlock(
        hash=raw.get("hash"),
        number=hex_to_int(wo_header.get("number"), "woHeader.number"),
        timestamp=hex_to_int(wo_header.get("timestamp"), "woHeader.timestamp"),
        parent_hash=header.parent_hash[0] if header.parent_hash else None,
        nonce=wo_header.get("nonce"),
        difficulty=difficulty,
        total_difficulty=difficulty,
        gas_limit=header.gas_limit,
        gas_used=header.gas_used,
        miner=wo_header.get("primaryCoinbase"),
        mix_hash=wo_header.get("mixHash"),
        extra_data=header.extra_data,
        receipts_root=header.receipts_root,
        state_root=header.evm_root,
        transactions_root=header.transactions_root,
        header=header,
        wo_header=MappingProxyType(dict(wo_header)),
        total_entropy=hex_to_int(raw.get("totalEntropy"), "totalEntropy"),
        outbound_etxs=tuple(format_outbound_etx(etx) for etx in outbound_etxs),
        transactions=tuple(format_block_transaction(tx) for tx in transactions),
        extra=MappingProxyType({k: v for k, v in raw.items() if k not in BLOCK_KEYS}),
    )

    logger.debug(f"Formatted {block}")
    return block


# Formatters by record kind, attached to the chain descriptor
formatters: Mapping[str, Callable[[RawRecord], Any]] = MappingProxyType({
    "block": format_block,
    "transaction": format_transaction,
})
