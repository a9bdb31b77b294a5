from __future__ import annotations

from .errors import EmptyTableError, UnfinalizedModelError
from .frequency import CharacterFrequencyTable
from .random_source import RandomSource


def sample(table: CharacterFrequencyTable, random_fraction: float) -> str:
    """Inverse-CDF draw: the first entry whose cumulative probability
    reaches `random_fraction`.

    A finalized table always ends at exactly 1.0, so any fraction in
    [0, 1) finds a match.
    """

    if not 0.0 <= random_fraction < 1.0:
        raise ValueError(f"random_fraction must be in [0, 1), got {random_fraction}")
    if len(table) == 0:
        raise EmptyTableError("Cannot sample from an empty table")
    if not table.finalized:
        raise UnfinalizedModelError("Table probabilities have not been computed")

    for entry in table:
        if entry.cumulative_probability >= random_fraction:
            return entry.character

    raise AssertionError("Finalized table did not cover the unit interval")


def get_random_char(table: CharacterFrequencyTable, random_source: RandomSource) -> str:
    return sample(table, float(random_source.random()))
