"""Bridge protocol components: chains, clients and wrapped-token resolution."""

from typing import TYPE_CHECKING

from .models import ChainConfig, NetworkInfo

if TYPE_CHECKING:  # pragma: no cover
    from .chain_registry import ChainRegistry
    from .wrapped import WrappedTokenAddressCache, WrappedTokenResolver

__all__ = [
    "ChainConfig",
    "NetworkInfo",
    "ChainRegistry",
    "WrappedTokenAddressCache",
    "WrappedTokenResolver",
]


def __getattr__(name: str):  # pragma: no cover - simple thunk
    if name == "ChainRegistry":
        from .chain_registry import ChainRegistry as _ChainRegistry

        return _ChainRegistry
    if name in ("WrappedTokenAddressCache", "WrappedTokenResolver"):
        from . import wrapped

        return getattr(wrapped, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
