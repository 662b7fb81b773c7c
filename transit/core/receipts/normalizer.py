"""
Receipt normalization.

Used when a transfer is resumed: each protocol puts different data in its
attestation, and ``ReceiptNormalizer.parse`` turns whichever one it is given
into the common ``TransferInfo`` record.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ...config import settings
from ...logging_config import bind_transfer_context, clear_transfer_context
from ..addresses import UniversalAddress
from ..amounts import display, fmt, truncated_decimals
from ..bridge.chain_registry import ChainRegistry
from ..bridge.client import BridgeContext, TokenAccountLookup
from ..chain_types import is_solana_context
from ..errors import (
    MissingAttestationFieldError,
    MissingSourceTransactionError,
    UnknownDestinationTokenError,
    UnknownReceiptChainError,
    UnknownRouteError,
    UnknownTokenError,
)
from ..tokens import TokenCatalog, TokenId
from .models import (
    AttestationKind,
    CircleAttestation,
    NttAttestation,
    RelayerFee,
    RouteKind,
    TokenBridgeAttestation,
    TransferInfo,
    TransferReceipt,
)

_ROUTE_ATTESTATIONS = {
    RouteKind.MANUAL_TOKEN_BRIDGE: (AttestationKind.TOKEN_BRIDGE,),
    RouteKind.MANUAL_CCTP: (AttestationKind.CIRCLE,),
    RouteKind.MANUAL_NTT: (AttestationKind.NTT_MANUAL,),
    RouteKind.AUTOMATIC_NTT: (AttestationKind.NTT_AUTOMATIC,),
}


class ReceiptNormalizer:
    """Parses protocol-specific receipts into ``TransferInfo``.

    Structural and token-mapping failures raise ``ParseError`` subclasses.
    Solana token account owner lookups fail soft: the token account address
    is reported as the recipient instead.
    """

    def __init__(
        self,
        bridge: BridgeContext,
        catalog: TokenCatalog,
        token_accounts: TokenAccountLookup,
        *,
        cctp_symbol: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._bridge = bridge
        self._catalog = catalog
        self._chains: ChainRegistry = catalog.chains
        self._token_accounts = token_accounts
        self._cctp_symbol = cctp_symbol or settings.cctp_token_symbol
        self._logger = logger or logging.getLogger(__name__)

    async def parse(self, route: Union[RouteKind, str], receipt: TransferReceipt) -> TransferInfo:
        try:
            kind = RouteKind(route)
        except ValueError:
            raise UnknownRouteError(str(route)) from None

        for chain in (receipt.from_chain, receipt.to_chain):
            if not self._chains.is_chain_supported(chain):
                raise UnknownReceiptChainError(chain, route=kind.value)

        bind_transfer_context(route=kind.value, from_chain=receipt.from_chain, to_chain=receipt.to_chain)
        try:
            if kind == RouteKind.MANUAL_TOKEN_BRIDGE:
                return await self._parse_token_bridge(kind, receipt)
            if kind == RouteKind.MANUAL_CCTP:
                return await self._parse_cctp(kind, receipt)
            return self._parse_ntt(kind, receipt)
        finally:
            clear_transfer_context("route", "from_chain", "to_chain")

    # ─────────────────────────────────────────────────────────────────────────
    # Shared helpers
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _send_tx(route: RouteKind, receipt: TransferReceipt) -> str:
        if not receipt.origin_txs:
            raise MissingSourceTransactionError(route=route.value)
        return receipt.origin_txs[-1].txid

    @staticmethod
    def _attestation(route: RouteKind, receipt: TransferReceipt):
        attestation = receipt.attestation
        if attestation is None or attestation.kind not in _ROUTE_ATTESTATIONS[route]:
            raise MissingAttestationFieldError(
                f"Receipt is missing a {route.value} attestation",
                route=route.value,
                field_name="attestation",
            )
        return attestation

    def _native_address(self, address: UniversalAddress, chain: str) -> str:
        return address.to_native(self._chains.context_of(chain))

    async def _resolve_recipient(self, address: UniversalAddress, chain: str) -> str:
        """Native recipient address; on Solana, the owner of the token account."""
        native = self._native_address(address, chain)
        if not is_solana_context(self._chains.context_of(chain)):
            return native

        # the recipient on the attestation is the ATA
        try:
            return await self._token_accounts.get_token_account_owner(native)
        except Exception as exc:
            self._logger.warning(
                "Could not resolve owner of token account %s, using it as recipient: %s",
                native,
                exc,
            )
            return native

    # ─────────────────────────────────────────────────────────────────────────
    # Token bridge
    # ─────────────────────────────────────────────────────────────────────────

    async def _parse_token_bridge(self, route: RouteKind, receipt: TransferReceipt) -> TransferInfo:
        send_tx = self._send_tx(route, receipt)
        attestation: TokenBridgeAttestation = self._attestation(route, receipt)

        payload = attestation.payload
        if payload is None or payload.token is None:
            raise MissingAttestationFieldError(
                "Attestation is missing token.", route=route.value, field_name="token"
            )
        wire_token = payload.token

        token_bridge = await self._bridge.get_token_bridge(wire_token.chain)
        token_address = await token_bridge.get_token_native_address(
            wire_token.chain, wire_token.address
        )
        token = self._catalog.find_token_config(TokenId(wire_token.chain, token_address))
        if token is None:
            raise UnknownTokenError(chain=wire_token.chain, address=token_address)

        decimals = self._catalog.get_token_decimals(
            receipt.from_chain, self._catalog.get_wrapped_token(token)
        )
        wire_decimals = truncated_decimals(decimals)
        amount = display(wire_token.amount, wire_decimals)

        receive_native_amount = None
        relayer_fee = None
        extension = payload.payload
        if extension is not None:
            if extension.to_native_token_amount:
                receive_native_amount = fmt(extension.to_native_token_amount, wire_decimals)
            if extension.target_relayer_fee:
                relayer_fee = RelayerFee(
                    fee=fmt(extension.target_relayer_fee, wire_decimals),
                    token_key=token.key,
                )

        recipient = ""
        if payload.to is not None:
            recipient = await self._resolve_recipient(payload.to.address, receipt.to_chain)

        return TransferInfo(
            send_tx=send_tx,
            recipient=recipient,
            amount=amount,
            from_chain=receipt.from_chain,
            to_chain=receipt.to_chain,
            token_address=token_address,
            token_key=token.key,
            token_decimals=decimals,
            received_token_key=token.key,
            receive_amount=amount,
            relayer_fee=relayer_fee,
            receive_native_amount=receive_native_amount,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Circle / CCTP
    # ─────────────────────────────────────────────────────────────────────────

    async def _parse_cctp(self, route: RouteKind, receipt: TransferReceipt) -> TransferInfo:
        send_tx = self._send_tx(route, receipt)
        attestation: CircleAttestation = self._attestation(route, receipt)

        if attestation.message is None:
            raise MissingAttestationFieldError(
                "Missing Circle attestation", route=route.value, field_name="message"
            )
        burn = attestation.message.payload

        source_token_id = TokenId(
            receipt.from_chain, self._native_address(burn.burn_token, receipt.from_chain)
        )
        source_token = self._catalog.find_token_config(source_token_id)
        if source_token is None or source_token.symbol != self._cctp_symbol:
            raise UnknownTokenError(
                f"Couldn't find {self._cctp_symbol} for source chain",
                chain=receipt.from_chain,
                address=source_token_id.address,
            )

        decimals = self._catalog.get_token_decimals(
            receipt.from_chain, self._catalog.get_wrapped_token(source_token)
        )
        amount = display(burn.amount, decimals)

        sender = self._native_address(burn.message_sender, receipt.from_chain)
        recipient = await self._resolve_recipient(burn.mint_recipient, receipt.to_chain)

        # The attestation doesn't carry the destination token address; it is
        # the designated asset native to the destination chain.
        destination_token = self._catalog.find_by_symbol_on_chain(self._cctp_symbol, receipt.to_chain)
        if destination_token is None:
            raise UnknownDestinationTokenError(
                f"Couldn't find {self._cctp_symbol} for destination chain",
                chain=receipt.to_chain,
            )

        return TransferInfo(
            send_tx=send_tx,
            sender=sender,
            recipient=recipient,
            amount=amount,
            from_chain=receipt.from_chain,
            to_chain=receipt.to_chain,
            token_address=source_token_id.address,
            token_key=source_token.key,
            token_decimals=decimals,
            received_token_key=destination_token.key,
            receive_amount=amount,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # NTT (manual and automatic)
    # ─────────────────────────────────────────────────────────────────────────

    def _parse_ntt(self, route: RouteKind, receipt: TransferReceipt) -> TransferInfo:
        send_tx = self._send_tx(route, receipt)

        if receipt.params is None:
            raise MissingAttestationFieldError(
                "Receipt is missing validated NTT params", route=route.value, field_name="params"
            )
        normalized = receipt.params.normalized_params

        source_token = self._catalog.find_token_config(
            TokenId(receipt.from_chain, normalized.source_contracts.token)
        )
        if source_token is None or source_token.token_id is None:
            raise UnknownTokenError(
                "Unknown src token", chain=receipt.from_chain, address=normalized.source_contracts.token
            )

        destination_token = self._catalog.find_token_config(
            TokenId(receipt.to_chain, normalized.destination_contracts.token)
        )
        if destination_token is None:
            raise UnknownTokenError(
                "Unknown dst token", chain=receipt.to_chain, address=normalized.destination_contracts.token
            )

        attestation: NttAttestation = self._attestation(route, receipt)
        manager_message = attestation.transfer.ntt_manager_payload
        trimmed = manager_message.payload.trimmed_amount
        amount = display(trimmed.amount, trimmed.decimals)

        return TransferInfo(
            send_tx=send_tx,
            sender=self._native_address(manager_message.sender, receipt.from_chain),
            recipient=self._native_address(manager_message.payload.recipient_address, receipt.to_chain),
            amount=amount,
            from_chain=receipt.from_chain,
            to_chain=receipt.to_chain,
            token_address=source_token.token_id.address,
            token_key=source_token.key,
            token_decimals=trimmed.decimals,
            received_token_key=destination_token.key,
            receive_amount=amount,
            # No mechanism supplies the NTT relayer fee yet.
            relayer_fee=None,
        )
