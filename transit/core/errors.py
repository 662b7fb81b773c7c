"""
Error Classification

Defines the structured errors raised by the settlement core.
Every error carries an explicit kind tag decided at construction time, so
callers branch on ``error.kind`` instead of inspecting the error's shape.

- ParseError: a receipt could not be normalized; fatal to resume/redeem.
- DispatchError: a wallet operation could not be routed; fatal unless the
  dispatcher reclassifies it (unsupported chain switching).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ParseErrorKind(str, Enum):
    """Why a receipt could not be turned into a TransferInfo."""

    MISSING_SOURCE_TRANSACTION = "missing_source_transaction"
    MISSING_ATTESTATION_FIELD = "missing_attestation_field"
    UNKNOWN_TOKEN = "unknown_token"
    UNKNOWN_DESTINATION_TOKEN = "unknown_destination_token"
    UNKNOWN_ROUTE = "unknown_route"
    UNKNOWN_RECEIPT_CHAIN = "unknown_receipt_chain"


class DispatchErrorKind(str, Enum):
    """Why a chain operation could not be dispatched."""

    UNIMPLEMENTED_CONTEXT = "unimplemented_context"
    WALLET_NOT_CONNECTED = "wallet_not_connected"
    UNKNOWN_CHAIN = "unknown_chain"
    INVALID_CONTEXT = "invalid_context"


@dataclass
class ErrorContext:
    """Additional context about an error."""

    fatal: bool = True
    route: Optional[str] = None
    chain: Optional[str] = None
    role: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)


class ParseError(Exception):
    """
    Base class for receipt parsing failures.

    All parse failures are fatal: the resume/redeem flow cannot continue and
    must surface a blocking error to the user.
    """

    kind: ParseErrorKind = ParseErrorKind.MISSING_ATTESTATION_FIELD

    def __init__(
        self,
        message: str,
        kind: Optional[ParseErrorKind] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.context = context or ErrorContext()

    @property
    def fatal(self) -> bool:
        return self.context.fatal


class MissingSourceTransactionError(ParseError):
    """Receipt carries no origin transaction."""

    kind = ParseErrorKind.MISSING_SOURCE_TRANSACTION

    def __init__(self, message: str = "Can't find txid in receipt", route: Optional[str] = None):
        super().__init__(message, context=ErrorContext(route=route))


class MissingAttestationFieldError(ParseError):
    """Attestation or a required attestation field is absent."""

    kind = ParseErrorKind.MISSING_ATTESTATION_FIELD

    def __init__(self, message: str, route: Optional[str] = None, field_name: Optional[str] = None):
        super().__init__(
            message,
            context=ErrorContext(route=route, details={"field": field_name} if field_name else {}),
        )


class UnknownTokenError(ParseError):
    """The attested token does not map to a locally configured token."""

    kind = ParseErrorKind.UNKNOWN_TOKEN

    def __init__(
        self,
        message: str = "Unknown token",
        chain: Optional[str] = None,
        address: Optional[str] = None,
    ):
        super().__init__(
            message,
            context=ErrorContext(chain=chain, details={"address": address} if address else {}),
        )


class UnknownDestinationTokenError(ParseError):
    """No local token matches the destination side of the transfer."""

    kind = ParseErrorKind.UNKNOWN_DESTINATION_TOKEN

    def __init__(self, message: str, chain: Optional[str] = None):
        super().__init__(message, context=ErrorContext(chain=chain))


class UnknownRouteError(ParseError):
    """Route discriminator is not one of the supported receipt formats."""

    kind = ParseErrorKind.UNKNOWN_ROUTE

    def __init__(self, route: str):
        super().__init__(f"Unknown route type {route}", context=ErrorContext(route=route))


class UnknownReceiptChainError(ParseError):
    """A receipt names a source or destination chain that is not configured."""

    kind = ParseErrorKind.UNKNOWN_RECEIPT_CHAIN

    def __init__(self, chain: str, route: Optional[str] = None):
        super().__init__(
            f"Unsupported chain in receipt: {chain}", context=ErrorContext(route=route, chain=chain)
        )


class DispatchError(Exception):
    """Base class for errors raised while routing a wallet operation."""

    kind: DispatchErrorKind = DispatchErrorKind.UNIMPLEMENTED_CONTEXT

    def __init__(
        self,
        message: str,
        kind: Optional[DispatchErrorKind] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.context = context or ErrorContext()

    @property
    def fatal(self) -> bool:
        return self.context.fatal


class UnimplementedContextError(DispatchError):
    """The chain's execution context has no adapter for this operation."""

    kind = DispatchErrorKind.UNIMPLEMENTED_CONTEXT

    def __init__(self, context_name: str, operation: str = "signAndSend"):
        super().__init__(
            f"{operation} is not implemented for {context_name} chains",
            context=ErrorContext(details={"context": context_name, "operation": operation}),
        )


class WalletNotConnectedError(DispatchError):
    """No wallet is bound to the requested role."""

    kind = DispatchErrorKind.WALLET_NOT_CONNECTED

    def __init__(self, role: str):
        super().__init__(f"No wallet connected for {role}", context=ErrorContext(role=role))


class UnknownChainError(DispatchError):
    """Chain key or chain id is not configured."""

    kind = DispatchErrorKind.UNKNOWN_CHAIN

    def __init__(self, chain: Any):
        super().__init__(f"Unable to find chain config for {chain!r}", context=ErrorContext(chain=str(chain)))


class InvalidContextError(DispatchError):
    """Operation requires a different execution context than the bound wallet's."""

    kind = DispatchErrorKind.INVALID_CONTEXT

    def __init__(self, operation: str, expected: str, actual: str, role: Optional[str] = None):
        super().__init__(
            f"{operation} requires a {expected} wallet, {role or 'wallet'} is connected under {actual}",
            context=ErrorContext(role=role, details={"expected": expected, "actual": actual}),
        )


class WalletNotSupportedError(Exception):
    """A wallet (or its adapter) lacks the requested capability."""

    def __init__(self, message: str = "Operation not supported by wallet", operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


__all__ = [
    "ParseErrorKind",
    "DispatchErrorKind",
    "ErrorContext",
    "ParseError",
    "MissingSourceTransactionError",
    "MissingAttestationFieldError",
    "UnknownTokenError",
    "UnknownDestinationTokenError",
    "UnknownRouteError",
    "UnknownReceiptChainError",
    "DispatchError",
    "UnimplementedContextError",
    "WalletNotConnectedError",
    "UnknownChainError",
    "InvalidContextError",
    "WalletNotSupportedError",
]
