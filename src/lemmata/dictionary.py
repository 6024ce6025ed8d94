"""
Parse decompressed dictionary text and build the lookup indexes.

Source format is one pair per line, lemma first:

    go<TAB>goes
    go<TAB>went
    wolf<TAB>wolves

Usage:
    from lemmata.dictionary import parse, MalformedLinePolicy

    d = parse(text, on_malformed=MalformedLinePolicy.SKIP)
    d.get("goes")          # ("go",)
    d.get_lower("goes")    # ("go",)
    d.skipped_lines        # malformed lines dropped under SKIP
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from lemmata.errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "\t"


class MalformedLinePolicy(str, Enum):
    """What to do with a line that is not exactly two non-empty fields."""

    STRICT = "strict"  # abort the whole load with ParseError
    SKIP = "skip"  # drop the line, count it, log a warning


class Dictionary:
    """
    Immutable inflected-form → lemma-set index for one language.

    Two indexes, built together in one pass:
    - exact:  form → lemmas                 (case-preserving)
    - lower:  form.lower() → lemmas         (union over case variants)

    Lemma sets are tuples in first-seen order, so the first element is
    a reproducible tie-break.
    """

    __slots__ = ("_exact", "_lower", "_lemma_count", "_skipped_lines")

    def __init__(
        self,
        exact: Mapping[str, tuple[str, ...]],
        lower: Mapping[str, tuple[str, ...]],
        *,
        lemma_count: int,
        skipped_lines: int = 0,
    ):
        for index in (exact, lower):
            for form, candidates in index.items():
                if not candidates:
                    raise ValueError(f"empty lemma set for form {form!r}")
        self._exact = MappingProxyType({k: tuple(v) for k, v in exact.items()})
        self._lower = MappingProxyType({k: tuple(v) for k, v in lower.items()})
        self._lemma_count = lemma_count
        self._skipped_lines = skipped_lines

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str]],
        *,
        skipped_lines: int = 0,
    ) -> Dictionary:
        """Build both indexes from (form, lemma) pairs, in order."""
        exact, lower, lemma_count = _build_indexes(pairs)
        return cls(exact, lower, lemma_count=lemma_count, skipped_lines=skipped_lines)

    @property
    def skipped_lines(self) -> int:
        """Malformed source lines dropped while parsing (SKIP policy only)."""
        return self._skipped_lines

    # ── Lookup ──────────────────────────────────────────────────────────────

    def get(self, form: str) -> tuple[str, ...] | None:
        """Lemma set for an exact-case form, or None."""
        return self._exact.get(form)

    def get_lower(self, form: str) -> tuple[str, ...] | None:
        """Lemma set for an already lower-cased form, or None."""
        return self._lower.get(form)

    def __contains__(self, form: object) -> bool:
        return form in self._exact

    def __len__(self) -> int:
        return len(self._exact)

    # ── Iteration / stats ───────────────────────────────────────────────────

    def forms(self) -> Iterator[str]:
        """Iterate over all exact-case forms."""
        yield from self._exact.keys()

    def lemmas(self) -> Iterator[str]:
        """Iterate over distinct lemmas in first-seen order."""
        seen: set[str] = set()
        for candidates in self._exact.values():
            for lemma in candidates:
                if lemma not in seen:
                    seen.add(lemma)
                    yield lemma

    @property
    def num_lemmas(self) -> int:
        return self._lemma_count

    @property
    def num_lower_forms(self) -> int:
        return len(self._lower)

    def summary(self) -> str:
        ambiguous = sum(1 for c in self._exact.values() if len(c) > 1)
        lines = [
            f"Forms:          {len(self._exact):,}",
            f"Lower-cased:    {len(self._lower):,}",
            f"Lemmas:         {self._lemma_count:,}",
            f"Ambiguous:      {ambiguous:,}",
        ]
        if self.skipped_lines:
            lines.append(f"Skipped lines:  {self.skipped_lines:,}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._exact)} forms, {self._lemma_count} lemmas)"


def _build_indexes(
    pairs: Iterable[tuple[str, str]],
) -> tuple[dict[str, tuple[str, ...]], dict[str, tuple[str, ...]], int]:
    """Single pass over (form, lemma) pairs → (exact, lower, distinct lemma count)."""
    exact: dict[str, list[str]] = {}
    lower: dict[str, list[str]] = {}
    lemmas_seen: set[str] = set()

    for form, lemma in pairs:
        candidates = exact.setdefault(form, [])
        if lemma in candidates:
            continue
        candidates.append(lemma)
        lemmas_seen.add(lemma)

        folded = lower.setdefault(form.lower(), [])
        if lemma not in folded:
            folded.append(lemma)

    logger.debug(
        "Indexed %d forms (%d lower-cased keys, %d lemmas)",
        len(exact), len(lower), len(lemmas_seen),
    )
    return (
        {k: tuple(v) for k, v in exact.items()},
        {k: tuple(v) for k, v in lower.items()},
        len(lemmas_seen),
    )


# ── Parsing ─────────────────────────────────────────────────────────────────


def _iter_pairs(
    text: str,
    separator: str,
    policy: MalformedLinePolicy,
    index_lemmas: bool,
    name: str,
    skipped: list[int],
) -> Iterator[tuple[str, str]]:
    """Yield (form, lemma) pairs; record skipped line numbers in `skipped`."""
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue

        fields = [f.strip() for f in line.split(separator)]
        if len(fields) != 2:
            reason = f"expected 2 fields, got {len(fields)}"
        elif not fields[0]:
            reason = "empty lemma"
        elif not fields[1]:
            reason = "empty form"
        else:
            lemma, form = fields
            yield form, lemma
            if index_lemmas:
                yield lemma, lemma
            continue

        if policy is MalformedLinePolicy.STRICT:
            raise ParseError(name, line_number, line, reason)
        logger.warning("%s:%d: skipping malformed line (%s): %r", name, line_number, reason, line)
        skipped.append(line_number)


def parse(
    text: str,
    *,
    separator: str = DEFAULT_SEPARATOR,
    on_malformed: MalformedLinePolicy | str = MalformedLinePolicy.STRICT,
    index_lemmas: bool = True,
    name: str = "<asset>",
) -> Dictionary:
    """
    Parse dictionary text into a Dictionary.

    Duplicate forms merge into one entry; later lemmas are appended unless
    already present.  Casing is kept in both columns.  With index_lemmas,
    every lemma is also recorded as a form of itself (after the line's form).

    Raises ParseError on a malformed line under STRICT, or when no entry
    survives at all.
    """
    policy = MalformedLinePolicy(on_malformed)
    if not separator or "\n" in separator or "\r" in separator:
        raise ValueError(f"invalid field separator: {separator!r}")

    skipped: list[int] = []
    pairs = _iter_pairs(text, separator, policy, index_lemmas, name, skipped)
    exact, lower, lemma_count = _build_indexes(pairs)

    if skipped:
        logger.warning("%s: skipped %d malformed line(s)", name, len(skipped))
    if not exact:
        raise ParseError(name, None, None, "no dictionary entries")
    return Dictionary(exact, lower, lemma_count=lemma_count, skipped_lines=len(skipped))
