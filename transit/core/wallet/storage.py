"""Durable last-used-wallet markers.

Markers are restore hints only, never authoritative: a missing, stale or
unreadable marker just means no silent reconnect.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ...config import settings
from ..chain_types import ChainContext

logger = logging.getLogger(__name__)


def wallet_marker_key(prefix: str, context: ChainContext) -> str:
    return f"{prefix}:wallet:{context.value}"


class WalletMarkerStore(ABC):
    """Key/value storage for wallet markers."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class InMemoryWalletMarkerStore(WalletMarkerStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._values)


class JsonFileWalletMarkerStore(WalletMarkerStore):
    """Markers persisted as a flat JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable wallet marker file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, values: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(values, indent=2, sort_keys=True), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._save(values)

    def remove(self, key: str) -> None:
        values = self._load()
        if values.pop(key, None) is not None:
            self._save(values)


def create_marker_store() -> WalletMarkerStore:
    """Store selected by settings: a JSON file when a path is configured."""
    if settings.has_marker_path:
        return JsonFileWalletMarkerStore(Path(settings.wallet_marker_path))
    return InMemoryWalletMarkerStore()
