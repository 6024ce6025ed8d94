"""lemmata: dictionary-based lemmatization from bundled per-language dictionaries."""

from lemmata.errors import (
    LemmataError, UnsupportedLanguage, AssetError, AssetNotFound,
    AssetCorrupt, ParseError, ConfigError,
)
from lemmata.languages import Language
from lemmata.assets import AssetSource, PackageAssets, DirectoryAssets, MemoryAssets
from lemmata.compression import compress, decompress
from lemmata.dictionary import Dictionary, MalformedLinePolicy, parse
from lemmata.lemmatizer import Lemmatizer, LookupResult
from lemmata.config import Settings, find_config
from lemmata.registry import Registry, new

__all__ = [
    "LemmataError", "UnsupportedLanguage", "AssetError", "AssetNotFound",
    "AssetCorrupt", "ParseError", "ConfigError",
    "Language",
    "AssetSource", "PackageAssets", "DirectoryAssets", "MemoryAssets",
    "compress", "decompress",
    "Dictionary", "MalformedLinePolicy", "parse",
    "Lemmatizer", "LookupResult",
    "Settings", "find_config",
    "Registry", "new",
]
