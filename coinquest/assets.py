"""Named asset registries, one per asset kind."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Hashable, TypeVar

T = TypeVar("T")


class AssetRegistry(Generic[T]):
    """Holds loaded assets by name."""

    def __init__(self) -> None:
        self._assets: dict[str, T] = {}

    def get(self, name: str) -> T | None:
        """Return the asset with this name, or None if there is none."""
        return self._assets.get(name)

    def register(self, name: str, asset: T) -> None:
        """Store an asset under a name, replacing any previous one."""
        self._assets[name] = asset

    def clear(self) -> None:
        """Forget every asset."""
        self._assets.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._assets)


_REGISTRIES: dict[Hashable, AssetRegistry] = {}


def registry(kind: Hashable) -> AssetRegistry:
    """Return the shared registry for an asset kind, creating it on first use."""
    return _REGISTRIES.setdefault(kind, AssetRegistry())