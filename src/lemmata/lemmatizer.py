"""
Lemmatizer: the query surface over one loaded Dictionary.

Every query is total.  A word that is not in the dictionary is assumed to
be canonical already and comes back unchanged (identity fallback); use
in_dict() or lookup() to tell a hit from a guess.

Usage:
    from lemmata import new

    lem = new("english")
    lem.lemma("goes")            # "go"
    lem.lemma("Edward")          # "Edward" (not in dictionary)
    lem.lemmas("soli")           # every candidate, first-seen order
    lem.lemma_lower("avtalet")   # caller already lower-cased the word
    lem.lookup("Edward").guessed # True
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lemmata.dictionary import Dictionary
from lemmata.languages import Language


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of a lookup: the candidates and whether they came from the dictionary."""

    word: str  # the word that was looked up
    lemmas: tuple[str, ...]  # never empty; (word,) on a miss
    found: bool

    @property
    def lemma(self) -> str:
        """The preferred (first-seen) candidate."""
        return self.lemmas[0]

    @property
    def guessed(self) -> bool:
        return not self.found

    def __repr__(self) -> str:
        tag = "found" if self.found else "guessed"
        return f"LookupResult({self.word!r} → {self.lemma!r} [{tag}])"


class Lemmatizer:
    """
    Immutable lemma lookup bound to one Dictionary.

    Holds no mutable state after construction, so one instance can be
    shared freely between threads.
    """

    __slots__ = ("_dictionary", "_language")

    def __init__(self, dictionary: Dictionary, language: Language | None = None):
        self._dictionary = dictionary
        self._language = language

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def language(self) -> Language | None:
        return self._language

    # ── Exact-case queries ──────────────────────────────────────────────────

    def lemma(self, word: str) -> str:
        """First-seen lemma of `word`, or `word` itself if unknown."""
        candidates = self._dictionary.get(word)
        return candidates[0] if candidates else word

    def lemmas(self, word: str) -> tuple[str, ...]:
        """All candidate lemmas of `word` in first-seen order, or (word,)."""
        return self._dictionary.get(word) or (word,)

    def in_dict(self, word: str) -> bool:
        """True iff `word` is an exact-case form in the dictionary."""
        return word in self._dictionary

    def lookup(self, word: str) -> LookupResult:
        candidates = self._dictionary.get(word)
        if candidates:
            return LookupResult(word, candidates, True)
        return LookupResult(word, (word,), False)

    # ── Lower-cased queries ─────────────────────────────────────────────────
    # The input is NOT lower-cased here; that is the caller's job.

    def lemma_lower(self, word: str) -> str:
        """Like lemma(), but against the lower-cased index."""
        candidates = self._dictionary.get_lower(word)
        return candidates[0] if candidates else word

    def lemmas_lower(self, word: str) -> tuple[str, ...]:
        return self._dictionary.get_lower(word) or (word,)

    def lookup_lower(self, word: str) -> LookupResult:
        candidates = self._dictionary.get_lower(word)
        if candidates:
            return LookupResult(word, candidates, True)
        return LookupResult(word, (word,), False)

    # ── Batch ───────────────────────────────────────────────────────────────

    def lemmatize(self, words: Iterable[str], *, lower: bool = False) -> list[str]:
        """Lemmatize a sequence of words.

        With lower=True each word is lower-cased and resolved against the
        lower-cased index.
        """
        if lower:
            return [self.lemma_lower(w.lower()) for w in words]
        return [self.lemma(w) for w in words]

    # ── Introspection ───────────────────────────────────────────────────────

    def __contains__(self, word: object) -> bool:
        return word in self._dictionary

    def summary(self) -> str:
        title = f"Lemmatizer ({self.language})" if self.language else "Lemmatizer"
        lines = [title]
        for sub_line in self._dictionary.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        lang = self.language.label if self.language else None
        return f"Lemmatizer(language={lang!r}, forms={len(self._dictionary)})"
