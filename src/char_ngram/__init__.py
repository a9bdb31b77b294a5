"""Character-level n-gram language model.

Train a model on a corpus, then grow a seed text one sampled character
at a time. The command-line entry point lives in `char_ngram.cli`.
"""

from .errors import (
    CorpusDecodeError,
    EmptyTableError,
    FrozenModelError,
    InsufficientCorpusError,
    LanguageModelError,
    UnfinalizedModelError,
)
from .frequency import CharacterFrequencyTable, CharData
from .generator import generate
from .language_model import LanguageModel
from .model import ModelStore
from .random_source import make_random_source
from .sampler import sample
from .trainer import train, train_file

__all__ = [
    "CorpusDecodeError",
    "CharData",
    "CharacterFrequencyTable",
    "EmptyTableError",
    "FrozenModelError",
    "InsufficientCorpusError",
    "LanguageModel",
    "LanguageModelError",
    "ModelStore",
    "UnfinalizedModelError",
    "generate",
    "make_random_source",
    "sample",
    "train",
    "train_file",
]
