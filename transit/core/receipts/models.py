"""
Receipt and attestation models consumed by the receipt normalizer, and the
canonical ``TransferInfo`` record it produces.

Each attestation class carries a class-level ``kind`` tag so the normalizer
checks the variant explicitly instead of probing for fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from ..addresses import UniversalAddress
from ..amounts import plain


class RouteKind(str, Enum):
    """Route discriminators whose receipts can be normalized."""

    MANUAL_TOKEN_BRIDGE = "ManualTokenBridge"
    MANUAL_CCTP = "ManualCCTP"
    MANUAL_NTT = "ManualNtt"
    AUTOMATIC_NTT = "AutomaticNtt"


class AttestationKind(str, Enum):
    TOKEN_BRIDGE = "token_bridge"
    CIRCLE = "circle"
    NTT_MANUAL = "ntt_manual"
    NTT_AUTOMATIC = "ntt_automatic"


class ReceiptState(str, Enum):
    SOURCE_INITIATED = "source_initiated"
    SOURCE_FINALIZED = "source_finalized"
    ATTESTED = "attested"
    DESTINATION_QUEUED = "destination_queued"
    REDEEMED = "redeemed"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TransactionId:
    chain: str
    txid: str


# ─────────────────────────────────────────────────────────────────────────────
# Token bridge
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class TokenBridgeToken:
    """Token descriptor of a transfer VAA; ``amount`` is at most 8 decimals."""

    chain: str
    address: UniversalAddress
    amount: int


@dataclass
class ChainAddress:
    chain: str
    address: UniversalAddress


@dataclass
class AutomaticRelayPayload:
    """Extension fields present on automatically relayed token bridge transfers."""

    target_relayer_fee: int = 0
    to_native_token_amount: int = 0
    target_recipient: Optional[UniversalAddress] = None


@dataclass
class TokenBridgeTransferPayload:
    token: Optional[TokenBridgeToken] = None
    to: Optional[ChainAddress] = None
    fee: int = 0
    sender: Optional[ChainAddress] = None
    payload: Optional[AutomaticRelayPayload] = None


@dataclass
class TokenBridgeAttestation:
    kind: ClassVar[AttestationKind] = AttestationKind.TOKEN_BRIDGE

    payload: Optional[TokenBridgeTransferPayload]
    emitter_chain: Optional[str] = None
    sequence: Optional[int] = None


# ─────────────────────────────────────────────────────────────────────────────
# Circle / CCTP
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class CircleBurnMessage:
    burn_token: UniversalAddress
    mint_recipient: UniversalAddress
    amount: int
    message_sender: UniversalAddress


@dataclass
class CircleMessage:
    source_domain: int
    destination_domain: int
    nonce: int
    payload: CircleBurnMessage


@dataclass
class CircleAttestation:
    kind: ClassVar[AttestationKind] = AttestationKind.CIRCLE

    message: Optional[CircleMessage]
    attestation: Optional[str] = None  # circle signature, hex


# ─────────────────────────────────────────────────────────────────────────────
# NTT
# ─────────────────────────────────────────────────────────────────────────────

WORMHOLE_TRANSFER = "WormholeTransfer"


@dataclass
class TrimmedAmount:
    """Amount as carried by NTT, with the precision it was trimmed to."""

    amount: int
    decimals: int


@dataclass
class NativeTokenTransfer:
    trimmed_amount: TrimmedAmount
    source_token: UniversalAddress
    recipient_address: UniversalAddress
    recipient_chain: str


@dataclass
class NttManagerMessage:
    sender: UniversalAddress
    payload: NativeTokenTransfer
    id: bytes = b""


@dataclass
class NttTransferPayload:
    """Plain ``WormholeTransfer`` payload."""

    ntt_manager_payload: NttManagerMessage
    source_ntt_manager: Optional[UniversalAddress] = None
    recipient_ntt_manager: Optional[UniversalAddress] = None


@dataclass
class NttRelayedPayload:
    """Relayer delivery payload wrapping a transfer payload."""

    payload: NttTransferPayload
    target_chain: Optional[str] = None


@dataclass
class NttAttestation:
    payload_name: str
    payload: Union[NttTransferPayload, NttRelayedPayload]

    @property
    def transfer(self) -> NttTransferPayload:
        """The transfer payload, whichever shape the attestation has."""
        if self.payload_name == WORMHOLE_TRANSFER:
            return self.payload  # type: ignore[return-value]
        return self.payload.payload  # type: ignore[union-attr]


@dataclass
class NttManualAttestation(NttAttestation):
    kind: ClassVar[AttestationKind] = AttestationKind.NTT_MANUAL


@dataclass
class NttAutomaticAttestation(NttAttestation):
    kind: ClassVar[AttestationKind] = AttestationKind.NTT_AUTOMATIC


@dataclass
class NttContracts:
    token: str
    manager: str = ""
    transceiver: Dict[str, str] = field(default_factory=dict)


@dataclass
class NttNormalizedParams:
    source_contracts: NttContracts
    destination_contracts: NttContracts


@dataclass
class NttValidatedParams:
    """Transfer parameters already validated by the NTT route."""

    normalized_params: NttNormalizedParams
    amount: Optional[str] = None


AttestationVariant = Union[
    TokenBridgeAttestation,
    CircleAttestation,
    NttManualAttestation,
    NttAutomaticAttestation,
]


@dataclass
class TransferReceipt:
    """A protocol client's view of an in-flight or settled transfer."""

    from_chain: str
    to_chain: str
    origin_txs: List[TransactionId] = field(default_factory=list)
    attestation: Optional[AttestationVariant] = None
    state: ReceiptState = ReceiptState.ATTESTED
    params: Optional[NttValidatedParams] = None


# ─────────────────────────────────────────────────────────────────────────────
# Output
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class RelayerFee:
    fee: Decimal
    token_key: str


@dataclass
class TransferInfo:
    """Canonical record of an initiated transfer.

    Amounts are decimal strings already scaled to token units.
    """

    send_tx: str
    recipient: str
    amount: str
    from_chain: str
    to_chain: str
    token_address: str
    token_key: str
    token_decimals: int
    received_token_key: str
    sender: Optional[str] = None
    receive_amount: Optional[str] = None
    relayer_fee: Optional[RelayerFee] = None
    # In destination gas token units (1.0 is 1 ETH, not 1 wei)
    receive_native_amount: Optional[Decimal] = None
    eta: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sendTx": self.send_tx,
            "sender": self.sender,
            "recipient": self.recipient,
            "amount": self.amount,
            "fromChain": self.from_chain,
            "toChain": self.to_chain,
            "tokenAddress": self.token_address,
            "tokenKey": self.token_key,
            "tokenDecimals": self.token_decimals,
            "receivedTokenKey": self.received_token_key,
            "receiveAmount": self.receive_amount,
            "relayerFee": (
                {"fee": plain(self.relayer_fee.fee), "tokenKey": self.relayer_fee.token_key}
                if self.relayer_fee
                else None
            ),
            "receiveNativeAmount": (
                plain(self.receive_native_amount) if self.receive_native_amount is not None else None
            ),
            "eta": self.eta,
        }
