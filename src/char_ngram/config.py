"""
Run configuration for text generation.

A run trains on one corpus file and generates one text from one seed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .random_source import FIXED_SEED

RANDOM_MODE = "random"


@dataclass
class GenerationConfig:
    """
    Settings for a single train-and-generate run.

    Attributes:
        window_length: Number of characters of context per prediction
        initial_text: Seed text; its last window_length characters start generation
        output_length: Maximum number of characters to append
        random_generation: Draw from an OS-seeded generator instead of a fixed seed
        corpus_path: Path to the training corpus
        seed: Seed used when random_generation is False
    """

    window_length: int
    initial_text: str
    output_length: int
    random_generation: bool = False
    corpus_path: str = ""
    seed: int = FIXED_SEED

    def __post_init__(self):
        """Reject lengths the model cannot work with."""
        if self.window_length < 1:
            raise ValueError("window_length must be >= 1")
        if self.output_length < 0:
            raise ValueError("output_length must be >= 0")

    def resolved_seed(self) -> Optional[int]:
        """Seed to hand the random source, None for non-deterministic runs."""
        return None if self.random_generation else self.seed

    @classmethod
    def from_mode(
        cls,
        window_length: int,
        initial_text: str,
        output_length: int,
        mode: str,
        corpus_path: str,
    ) -> "GenerationConfig":
        """Build a config from the command-line mode word ("random" or anything else)."""
        return cls(
            window_length=window_length,
            initial_text=initial_text,
            output_length=output_length,
            random_generation=mode == RANDOM_MODE,
            corpus_path=corpus_path,
        )
