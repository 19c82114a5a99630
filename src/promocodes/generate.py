"""Unique three-word code generation by rejection sampling."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Sequence

from promocodes.errors import (
    GenerationStalled,
    InsufficientPool,
    InvalidArgument,
    RequestExceedsCapacity,
)

logger = logging.getLogger(__name__)

SEPARATOR = "-"
WORDS_PER_CODE = 3

# Draws allowed per requested code before giving up. Drawing every one of n
# codes takes about n * ln(n) draws, far below this for any reachable n.
ATTEMPT_FACTOR = 1000


def capacity(pool: Sequence[str]) -> int:
    """Number of distinct slot combinations: pool_size ** 3.

    Duplicate words in the pool are counted as separate slots, so the number
    of distinct code strings can be lower than this.
    """
    return len(pool) ** WORDS_PER_CODE


def make_rng(seed: int | None = None) -> random.Random:
    """Return a PRNG seeded with seed, or with the current time in nanoseconds."""
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed)


def generate_codes(
    pool: Sequence[str],
    count: int,
    rng: random.Random | None = None,
) -> list[str]:
    """Return count distinct codes of three pool words joined by '-'.

    Words are drawn independently and with replacement, so a code may repeat a
    word. Candidates already produced are discarded and drawn again; the order
    of the result is generation order.

    The loop terminates with near certainty because count never exceeds
    capacity(pool), but draws per new code grow sharply as count approaches
    that ceiling. ATTEMPT_FACTOR * count draws without finishing raises
    GenerationStalled, which only happens with a broken random source or a
    pool whose duplicates leave fewer distinct codes than requested.
    """
    if len(pool) < WORDS_PER_CODE:
        raise InsufficientPool(
            f"Need at least {WORDS_PER_CODE} words in the pool, got {len(pool)}."
        )
    if count < 1:
        raise InvalidArgument(f"count must be a positive integer, got {count}.")
    ceiling = capacity(pool)
    if count > ceiling:
        raise RequestExceedsCapacity(
            f"Requested count ({count}) exceeds maximum possible combinations ({ceiling})."
        )
    if rng is None:
        rng = make_rng()

    size = len(pool)
    max_draws = ATTEMPT_FACTOR * count
    seen: set[str] = set()
    codes: list[str] = []
    draws = 0
    while len(codes) < count:
        if draws >= max_draws:
            raise GenerationStalled(
                f"Only {len(codes)} of {count} distinct codes found after {draws} draws."
            )
        draws += 1
        code = SEPARATOR.join(pool[rng.randrange(size)] for _ in range(WORDS_PER_CODE))
        if code in seen:
            continue
        seen.add(code)
        codes.append(code)

    logger.debug(
        "Generated %d codes from %d words (capacity %d, %d duplicates rejected)",
        count, size, ceiling, draws - count,
    )
    return codes
