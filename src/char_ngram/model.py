from __future__ import annotations

import logging
from typing import Iterator

import pandas as pd

from .errors import FrozenModelError
from .frequency import CharacterFrequencyTable

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["window", "character", "count", "probability", "cumulative_probability"]


class ModelStore:
    """Mapping from window strings to their next-character tables.

    The store grows during training and is read-only once `finalize()`
    has run, so one trained store can be shared by any number of
    generation calls.
    """

    def __init__(self, window_length: int):
        if window_length < 1:
            raise ValueError("window_length must be >= 1")
        self.window_length = window_length
        self._tables: dict[str, CharacterFrequencyTable] = {}
        self._finalized = False

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, window: object) -> bool:
        return window in self._tables

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __str__(self) -> str:
        return "".join(f"{window} : {table}\n" for window, table in self._tables.items())

    @property
    def finalized(self) -> bool:
        return self._finalized

    def get(self, window: str) -> CharacterFrequencyTable | None:
        return self._tables.get(window)

    def items(self) -> Iterator[tuple[str, CharacterFrequencyTable]]:
        return iter(self._tables.items())

    def table_for(self, window: str) -> CharacterFrequencyTable:
        """Return the table for `window`, creating an empty one if needed."""

        if self._finalized:
            raise FrozenModelError("Model is finalized and can no longer be updated")
        if len(window) != self.window_length:
            raise ValueError(
                f"Window {window!r} has length {len(window)}, expected {self.window_length}"
            )

        table = self._tables.get(window)
        if table is None:
            table = CharacterFrequencyTable()
            self._tables[window] = table
        return table

    def record(self, window: str, character: str) -> None:
        self.table_for(window).update(character)

    def finalize(self) -> None:
        for table in self._tables.values():
            table.finalize()
        self._finalized = True
        logger.debug(f"Finalized probabilities for {len(self._tables)} windows")

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, character) entry, in traversal order."""

        rows = [
            (
                window,
                entry.character,
                entry.count,
                entry.probability,
                entry.cumulative_probability,
            )
            for window, table in self._tables.items()
            for entry in table
        ]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)
