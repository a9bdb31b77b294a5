from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .corpus import CorpusConfig, read_corpus
from .errors import InsufficientCorpusError
from .model import ModelStore

logger = logging.getLogger(__name__)


def _characters(corpus: Iterable[str]) -> Iterable[str]:
    # Accepts a plain string, an iterator of characters, or of text chunks.
    for chunk in corpus:
        yield from chunk


def train(corpus: Iterable[str], window_length: int) -> ModelStore:
    """Build a finalized model from a stream of characters.

    Every window of `window_length` consecutive characters records the
    character that follows it. Raises `InsufficientCorpusError` when the
    corpus cannot fill the first window.
    """

    if window_length < 1:
        raise ValueError("window_length must be >= 1")

    store = ModelStore(window_length)
    stream = iter(_characters(corpus))

    window = ""
    for c in stream:
        window += c
        if len(window) == window_length:
            break
    if len(window) < window_length:
        raise InsufficientCorpusError(window_length, len(window))

    consumed = window_length
    for c in stream:
        store.record(window, c)
        window = window[1:] + c
        consumed += 1

    store.finalize()
    logger.info(f"Trained on {consumed} characters: {len(store)} distinct windows of length {window_length}")
    return store


def train_file(
    path: str | Path,
    window_length: int,
    config: CorpusConfig | None = None,
) -> ModelStore:
    return train(read_corpus(path, config), window_length)
