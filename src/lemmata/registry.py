"""
Language registry: Language → asset → Lemmatizer.

A Registry is built once (usually at process start) and handed to
whatever needs lemmatizers.  Every new() call runs the full pipeline
(read → decompress → parse → index), so two lemmatizers never share
state.

Usage:
    from lemmata.registry import Registry
    from lemmata.assets import DirectoryAssets

    registry = Registry.default()                        # bundled samples
    registry = Registry(DirectoryAssets("/srv/dicts"))   # full dictionaries
    registry = Registry.from_config("lemmata.toml")

    lem = registry.new("italian")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from lemmata.assets import AssetSource, DirectoryAssets, PackageAssets
from lemmata.compression import decompress
from lemmata.config import Settings
from lemmata.dictionary import DEFAULT_SEPARATOR, MalformedLinePolicy, parse
from lemmata.errors import UnsupportedLanguage
from lemmata.languages import Language
from lemmata.lemmatizer import Lemmatizer

logger = logging.getLogger(__name__)


def default_paths() -> dict[Language, str]:
    """The conventional virtual path for every supported language."""
    return {lang: lang.asset_path for lang in Language}


class Registry:
    """Maps each supported Language to its asset and builds Lemmatizers on demand."""

    def __init__(
        self,
        assets: AssetSource,
        *,
        paths: Mapping[Language, str] | None = None,
        separator: str = DEFAULT_SEPARATOR,
        on_malformed: MalformedLinePolicy | str = MalformedLinePolicy.STRICT,
        index_lemmas: bool = True,
    ):
        paths = default_paths() if paths is None else dict(paths)
        owners: dict[str, Language] = {}
        for lang, path in paths.items():
            if not isinstance(lang, Language):
                raise TypeError(f"registry keys must be Language members, got {lang!r}")
            if path in owners:
                raise ValueError(f"{lang.label} and {owners[path].label} share asset {path!r}")
            owners[path] = lang

        self.assets = assets
        self.paths = MappingProxyType(paths)
        self.separator = separator
        self.on_malformed = MalformedLinePolicy(on_malformed)
        self.index_lemmas = index_lemmas

    # ── Construction helpers ────────────────────────────────────────────────

    @classmethod
    def default(cls) -> Registry:
        """Registry over the dictionaries bundled with the package."""
        return cls(PackageAssets())

    @classmethod
    def from_settings(cls, settings: Settings) -> Registry:
        assets: AssetSource
        if settings.asset_dir is not None:
            assets = DirectoryAssets(settings.asset_dir)
        else:
            assets = PackageAssets()
        return cls(
            assets,
            separator=settings.separator,
            on_malformed=settings.on_malformed,
            index_lemmas=settings.index_lemmas,
        )

    @classmethod
    def from_config(cls, config_path: str | Path) -> Registry:
        """Build a Registry from a lemmata.toml file."""
        return cls.from_settings(Settings.from_file(config_path))

    # ── Lookup ──────────────────────────────────────────────────────────────

    def supported(self) -> tuple[Language, ...]:
        return tuple(lang for lang in Language if lang in self.paths)

    def __contains__(self, language: object) -> bool:
        try:
            return Language.parse(language) in self.paths  # type: ignore[arg-type]
        except UnsupportedLanguage:
            return False

    def new(self, language: Language | str) -> Lemmatizer:
        """Load `language` and return a fresh Lemmatizer.

        Raises UnsupportedLanguage, AssetNotFound, AssetCorrupt or ParseError;
        no Lemmatizer is produced on failure.
        """
        lang = Language.parse(language)
        path = self.paths.get(lang)
        if path is None:
            raise UnsupportedLanguage(language)

        blob = self.assets.asset(path)
        text = decompress(blob, name=path)
        dictionary = parse(
            text,
            separator=self.separator,
            on_malformed=self.on_malformed,
            index_lemmas=self.index_lemmas,
            name=path,
        )
        logger.info(
            "Loaded %s from %s: %d forms, %d lemmas",
            lang.label, path, len(dictionary), dictionary.num_lemmas,
        )
        return Lemmatizer(dictionary, language=lang)

    def summary(self) -> str:
        lines = [f"Registry over {self.assets!r}:"]
        for lang in self.supported():
            lines.append(f"  {lang.label:10s} {self.paths[lang]}")
        return "\n".join(lines)


# ── Module-level convenience ─────────────────────────────────────────────────

_default_registry: Registry | None = None


def new(language: Language | str) -> Lemmatizer:
    """Load `language` from the bundled dictionaries."""
    global _default_registry
    if _default_registry is None:
        _default_registry = Registry.default()
    return _default_registry.new(language)
