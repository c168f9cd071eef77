"""Retry delay calculation."""

import random

MAX_BACKOFF = 24 * 3600.0  # 1 day, in seconds


def backoff(retries: int, rng: random.Random | None = None) -> float:
    """Calculate how many seconds to back off for a given retry attempt.

    The base delay doubles per attempt starting at 4s, plus a whole-second
    jitter drawn from ``[0, base/2)``, capped at one day.

    Args:
        retries: Zero-indexed retry attempt
        rng: Random source, defaults to the module-level generator

    Returns:
        Delay in seconds
    """
    rng = rng or random
    expo = 2 ** (retries + 2)
    half = expo // 2

    jitter = 0
    if half >= 1:
        jitter = rng.randrange(half)

    return min(float(expo + jitter), MAX_BACKOFF)
