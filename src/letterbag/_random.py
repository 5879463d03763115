"""Random letter pools for demos and benchmarks."""

from __future__ import annotations

import random
import string

DEFAULT_LENGTH: int = 20
MAX_RANDOM_LENGTH: int = 200


def generate_random_letters(
    length: int | None = None, *, rng: random.Random | None = None
) -> str:
    """Return length random lowercase letters.

    If length is None, a length between 1 and MAX_RANDOM_LENGTH is drawn.
    """
    if rng is None:
        rng = random.Random()
    if length is None:
        length = rng.randint(1, MAX_RANDOM_LENGTH)
    elif length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return "".join(rng.choices(string.ascii_lowercase, k=length))
