"""
Receipt Normalization

Turns protocol receipts (token bridge, CCTP, NTT) into ``TransferInfo``.

Usage:
    from transit.core.receipts import ReceiptNormalizer, RouteKind

    normalizer = ReceiptNormalizer(bridge, catalog, get_solana_client())
    info = await normalizer.parse(RouteKind.MANUAL_CCTP, receipt)
"""

from .models import (
    AttestationKind,
    AttestationVariant,
    AutomaticRelayPayload,
    ChainAddress,
    CircleAttestation,
    CircleBurnMessage,
    CircleMessage,
    NativeTokenTransfer,
    NttAutomaticAttestation,
    NttContracts,
    NttManagerMessage,
    NttManualAttestation,
    NttNormalizedParams,
    NttRelayedPayload,
    NttTransferPayload,
    NttValidatedParams,
    ReceiptState,
    RelayerFee,
    RouteKind,
    TokenBridgeAttestation,
    TokenBridgeToken,
    TokenBridgeTransferPayload,
    TransactionId,
    TransferInfo,
    TransferReceipt,
    TrimmedAmount,
    WORMHOLE_TRANSFER,
)
from .normalizer import ReceiptNormalizer

__all__ = [
    "AttestationKind",
    "AttestationVariant",
    "AutomaticRelayPayload",
    "ChainAddress",
    "CircleAttestation",
    "CircleBurnMessage",
    "CircleMessage",
    "NativeTokenTransfer",
    "NttAutomaticAttestation",
    "NttContracts",
    "NttManagerMessage",
    "NttManualAttestation",
    "NttNormalizedParams",
    "NttRelayedPayload",
    "NttTransferPayload",
    "NttValidatedParams",
    "ReceiptState",
    "RelayerFee",
    "RouteKind",
    "TokenBridgeAttestation",
    "TokenBridgeToken",
    "TokenBridgeTransferPayload",
    "TransactionId",
    "TransferInfo",
    "TransferReceipt",
    "TrimmedAmount",
    "WORMHOLE_TRANSFER",
    "ReceiptNormalizer",
]
