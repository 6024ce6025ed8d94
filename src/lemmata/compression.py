"""
Gzip container handling for dictionary assets.

decompress() checks the container header before inflating, so "this was
never a gzip stream" and "this stream is truncated" both surface as
AssetCorrupt instead of an arbitrary zlib/EOF error.
"""

from __future__ import annotations

import gzip
import logging
import zlib

from lemmata.errors import AssetCorrupt

logger = logging.getLogger(__name__)

# RFC 1952: ID1 ID2 CM (8 = deflate)
_GZIP_MAGIC = b"\x1f\x8b"
_DEFLATE = 8
_BOM = "\ufeff"


def decompress(blob: bytes, name: str = "<asset>") -> str:
    """Inflate a gzip asset and decode it as strict UTF-8."""
    if len(blob) < 3 or blob[:2] != _GZIP_MAGIC:
        raise AssetCorrupt(name, "not a gzip stream")
    if blob[2] != _DEFLATE:
        raise AssetCorrupt(name, f"unsupported compression method {blob[2]}")

    try:
        raw = gzip.decompress(blob)
    except EOFError as exc:
        raise AssetCorrupt(name, "stream is truncated") from exc
    except (gzip.BadGzipFile, zlib.error) as exc:
        raise AssetCorrupt(name, str(exc)) from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise AssetCorrupt(name, f"invalid UTF-8 at byte {exc.start}") from exc

    if text.startswith(_BOM):
        text = text[1:]
    logger.debug("Decompressed %s: %d -> %d bytes", name, len(blob), len(raw))
    return text


def compress(text: str) -> bytes:
    """Build an asset blob from dictionary text.

    mtime is pinned to 0 so the same text always yields the same bytes.
    """
    return gzip.compress(text.encode("utf-8"), compresslevel=9, mtime=0)
