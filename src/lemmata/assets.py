"""
Dictionary asset accessors.

An asset source hands out compressed dictionary blobs by virtual path
(e.g. "data/it.gz").  What the bytes mean is someone else's problem; a
source only has to return them or raise AssetNotFound.

Usage:
    from lemmata.assets import PackageAssets, DirectoryAssets

    blob = PackageAssets().asset("data/it.gz")          # bundled sample
    blob = DirectoryAssets("/srv/dicts").asset("data/it.gz")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path, PurePosixPath
from typing import Protocol

from lemmata.errors import AssetError, AssetNotFound

logger = logging.getLogger(__name__)


class AssetSource(Protocol):
    """Anything that can return asset bytes for a virtual path."""

    def asset(self, virtual_path: str) -> bytes:
        ...  # pragma: no cover


def _split_virtual_path(virtual_path: str) -> tuple[str, ...]:
    """Split a virtual path into parts, refusing anything that escapes the root."""
    parts = PurePosixPath(virtual_path).parts
    if not parts or parts[0] == "/" or any(p in ("..", "") for p in parts):
        raise AssetNotFound(virtual_path, "invalid virtual path")
    return parts


class PackageAssets:
    """Assets bundled as package data (default: inside lemmata itself)."""

    def __init__(self, package: str = "lemmata"):
        self.package = package

    def asset(self, virtual_path: str) -> bytes:
        parts = _split_virtual_path(virtual_path)
        resource = resources.files(self.package)
        for part in parts:
            resource = resource / part
        if not resource.is_file():
            raise AssetNotFound(virtual_path, f"not bundled in {self.package}")
        logger.debug("Reading bundled asset %s from %s", virtual_path, self.package)
        try:
            return resource.read_bytes()
        except OSError as exc:
            raise AssetError(f"{virtual_path}: cannot read bundled asset: {exc}") from exc

    def __repr__(self) -> str:
        return f"PackageAssets({self.package!r})"


class DirectoryAssets:
    """Assets read from a directory on disk, laid out by virtual path."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def asset(self, virtual_path: str) -> bytes:
        parts = _split_virtual_path(virtual_path)
        path = self.root.joinpath(*parts)
        try:
            data = path.read_bytes()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as exc:
            raise AssetNotFound(virtual_path, f"{path}: {exc.strerror}") from exc
        except OSError as exc:
            raise AssetError(f"{virtual_path}: cannot read {path}: {exc.strerror}") from exc
        logger.debug("Read asset %s (%d bytes) from %s", virtual_path, len(data), path)
        return data

    def __repr__(self) -> str:
        return f"DirectoryAssets({str(self.root)!r})"


class MemoryAssets:
    """Assets held in memory; mostly for tests and embedding."""

    def __init__(self, blobs: Mapping[str, bytes] | None = None):
        self._blobs: dict[str, bytes] = dict(blobs or {})

    def asset(self, virtual_path: str) -> bytes:
        try:
            return self._blobs[virtual_path]
        except KeyError:
            raise AssetNotFound(virtual_path) from None

    def __repr__(self) -> str:
        return f"MemoryAssets({sorted(self._blobs)!r})"
