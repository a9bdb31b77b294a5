from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import EmptyTableError


@dataclass
class CharData:
    """One observed next-character and its statistics.

    `probability` and `cumulative_probability` stay at 0.0 until the
    owning table is finalized.
    """

    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character!r} {self.count} {self.probability:g} {self.cumulative_probability:g})"


class CharacterFrequencyTable:
    """Next-character counts for a single window.

    Entries are kept in first-occurrence order. That order is used both
    to build cumulative probabilities and to sample from them.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CharData] = {}
        self._finalized = False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._entries.values())

    def __contains__(self, character: object) -> bool:
        return character in self._entries

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self) + ")"

    @property
    def finalized(self) -> bool:
        return self._finalized

    def get(self, character: str) -> CharData | None:
        return self._entries.get(character)

    def update(self, character: str) -> None:
        """Count one more occurrence of `character` after this window."""

        if len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")

        entry = self._entries.get(character)
        if entry is None:
            self._entries[character] = CharData(character)
        else:
            entry.count += 1
        self._finalized = False

    def total_count(self) -> int:
        return sum(entry.count for entry in self)

    def counts(self) -> dict[str, int]:
        return {entry.character: entry.count for entry in self}

    def finalize(self) -> None:
        """Compute probabilities and their running sum in traversal order."""

        if not self._entries:
            raise EmptyTableError("Cannot compute probabilities of an empty table")

        total = self.total_count()
        running = 0.0
        for entry in self:
            entry.probability = entry.count / total
            running += entry.probability
            entry.cumulative_probability = running

        # Rounding can leave the sum a hair below 1.0; pin it.
        entry.cumulative_probability = 1.0
        self._finalized = True
