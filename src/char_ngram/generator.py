from __future__ import annotations

import logging

from .errors import UnfinalizedModelError
from .model import ModelStore
from .random_source import RandomSource, make_random_source
from .sampler import get_random_char

logger = logging.getLogger(__name__)


def generate(
    model: ModelStore,
    initial_text: str,
    output_length: int,
    random_source: RandomSource | None = None,
) -> str:
    """Extend `initial_text` by up to `output_length` sampled characters.

    The seed window is the last `window_length` characters of
    `initial_text`; a seed shorter than that is returned as is.
    Generation stops early, without error, on a window the model never
    saw during training.
    """

    if output_length < 0:
        raise ValueError("output_length must be >= 0")
    if not model.finalized:
        raise UnfinalizedModelError("Model must be trained before generating text")

    n = model.window_length
    if len(initial_text) < n:
        return initial_text

    rng = random_source if random_source is not None else make_random_source()
    window = initial_text[len(initial_text) - n :]
    out = list(initial_text)

    for step in range(output_length):
        table = model.get(window)
        if table is None:
            logger.debug(f"Unseen window {window!r} after {step} characters, stopping")
            break
        c = get_random_char(table, rng)
        out.append(c)
        window = window[1:] + c

    return "".join(out)
