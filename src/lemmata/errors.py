"""
Error taxonomy for lemmata.

Only construction can fail.  Once a Lemmatizer exists every query is a
total function, so nothing here is raised at lookup time.
"""

from __future__ import annotations


class LemmataError(Exception):
    """Base class for every error raised by lemmata."""


class UnsupportedLanguage(LemmataError, ValueError):
    """The requested language has no dictionary asset."""

    def __init__(self, language: object):
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class AssetError(LemmataError):
    """Base class for problems with a dictionary asset."""


class AssetNotFound(AssetError, LookupError):
    """No asset exists under the given virtual path."""

    def __init__(self, path: str, reason: str = "no such asset"):
        self.path = path
        super().__init__(f"{path}: {reason}")


class AssetCorrupt(AssetError):
    """The asset is not a valid compressed stream or did not decode to text."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"{name}: corrupt asset ({reason})")


class ParseError(LemmataError, ValueError):
    """Decompressed dictionary text violates the line format."""

    def __init__(self, name: str, line_number: int | None, line: str | None, reason: str):
        self.name = name
        self.line_number = line_number
        self.line = line
        if line_number is None:
            msg = f"{name}: {reason}"
        else:
            msg = f"{name}:{line_number}: {reason}: {line!r}"
        super().__init__(msg)


class ConfigError(LemmataError, ValueError):
    """A configuration value is missing or invalid."""
