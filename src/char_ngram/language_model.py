from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .corpus import CorpusConfig
from .errors import UnfinalizedModelError
from .generator import generate
from .model import ModelStore
from .random_source import RandomSource, make_random_source
from .trainer import train, train_file


class LanguageModel:
    """A window length, a random source and the model trained with them.

    With a seed, repeated runs over the same corpus produce the same
    text. Without one, every run differs.
    """

    def __init__(
        self,
        window_length: int,
        seed: int | None = None,
        *,
        random_source: RandomSource | None = None,
    ):
        if window_length < 1:
            raise ValueError("window_length must be >= 1")
        self.window_length = window_length
        self.random_source = random_source if random_source is not None else make_random_source(seed)
        self.store: ModelStore | None = None

    def train(self, corpus: Iterable[str]) -> ModelStore:
        self.store = train(corpus, self.window_length)
        return self.store

    def train_file(self, path: str | Path, config: CorpusConfig | None = None) -> ModelStore:
        self.store = train_file(path, self.window_length, config)
        return self.store

    def generate(self, initial_text: str, output_length: int) -> str:
        if self.store is None:
            raise UnfinalizedModelError("Call train() before generate()")
        return generate(self.store, initial_text, output_length, self.random_source)

    def __str__(self) -> str:
        return str(self.store) if self.store is not None else ""
