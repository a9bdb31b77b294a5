from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import regex  # type: ignore

from .errors import CorpusDecodeError

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F]")


@dataclass(frozen=True)
class CorpusConfig:
    """How a corpus file is turned into characters.

    Everything is off by default: the model sees the file exactly as
    written, line terminators included.
    """

    encoding: str = "utf-8"
    lowercase: bool = False
    strip_accents: bool = False
    remove_control_chars: bool = False
    chunk_size: int = 65_536


def normalize_chunk(text: str, config: CorpusConfig | None = None) -> str:
    """Apply the normalizations enabled in `config` to one chunk of text."""

    cfg = config or CorpusConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    # Tabs and newlines are kept, they carry layout.
    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub("", s)

    return s


def read_corpus(path: str | Path, config: CorpusConfig | None = None) -> Iterator[str]:
    """Yield the corpus as text chunks of at most `chunk_size` characters."""

    cfg = config or CorpusConfig()
    if cfg.chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    path = Path(path)
    logger.info(f"Reading corpus from {path}")
    with path.open("r", encoding=cfg.encoding, newline="") as f:
        while True:
            try:
                chunk = f.read(cfg.chunk_size)
            except UnicodeDecodeError as e:
                raise CorpusDecodeError(path, cfg.encoding, str(e)) from e
            if not chunk:
                break
            yield normalize_chunk(chunk, cfg)
