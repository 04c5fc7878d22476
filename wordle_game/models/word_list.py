"""
Word List Model

The immutable dictionary a session is played against.
"""

from typing import FrozenSet, Iterable, Optional, Tuple, Union

WordEntry = Union[str, Tuple[str, bool]]


class EmptyWordListError(ValueError):
    """Raised when a session is requested from a word list with no targets."""


class WordList:
    """
    Case-normalised set of (word, is_target) entries.

    Plain strings are accepted as shorthand for ``(word, True)``. ``words``
    holds every acceptable guess and ``targets`` the subset that may be
    drawn as the secret word.
    """

    def __init__(self, entries: Iterable[WordEntry]):
        pairs = set()
        for entry in entries:
            if isinstance(entry, str):
                word, is_target = entry, True
            else:
                word, is_target = entry
            pairs.add((word.upper(), bool(is_target)))

        self._entries: FrozenSet[Tuple[str, bool]] = frozenset(pairs)
        self._words: FrozenSet[str] = frozenset(word for word, _ in pairs)
        self._targets: FrozenSet[str] = frozenset(word for word, is_target in pairs if is_target)

    @classmethod
    def from_words(cls, words: Iterable[str], targets: Optional[Iterable[str]] = None) -> "WordList":
        """
        Build a word list from valid guesses plus an optional target list.

        When ``targets`` is omitted every word is target-eligible. Targets
        missing from ``words`` are still added as valid guesses.
        """
        if targets is None:
            return cls(words)
        entries = [(word, False) for word in words]
        entries.extend((word, True) for word in targets)
        return cls(entries)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    @property
    def targets(self) -> FrozenSet[str]:
        return self._targets

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordList):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"WordList(words={len(self._words)}, targets={len(self._targets)})"
