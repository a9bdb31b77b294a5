from __future__ import annotations


class LanguageModelError(Exception):
    """Base class for errors raised by the char_ngram package."""


class InsufficientCorpusError(LanguageModelError):
    """The corpus has fewer characters than one window."""

    def __init__(self, window_length: int, corpus_length: int):
        self.window_length = window_length
        self.corpus_length = corpus_length
        super().__init__(
            f"Corpus has {corpus_length} characters, "
            f"need at least {window_length} to form the first window"
        )


class EmptyTableError(LanguageModelError):
    """A frequency table with no entries was asked for a character."""


class UnfinalizedModelError(LanguageModelError):
    """Probabilities were read before training finalized them."""


class FrozenModelError(LanguageModelError):
    """Counts were added to a model after it was finalized."""


class CorpusDecodeError(LanguageModelError):
    """The corpus file is not valid text in the configured encoding."""

    def __init__(self, path, encoding: str, reason: str):
        self.path = path
        self.encoding = encoding
        super().__init__(f"Cannot decode corpus {path} as {encoding}: {reason}")
