# primefilter/config.py
import os

MILLER_RABIN_ROUNDS = 4
ROUNDS_ENV = "PRIMEFILTER_MR_ROUNDS"


def miller_rabin_rounds() -> int:
    """Round count for the Miller-Rabin screen; the environment overrides the default."""
    raw = os.environ.get(ROUNDS_ENV)
    if raw is None or not raw.strip():
        return MILLER_RABIN_ROUNDS
    try:
        rounds = int(raw)
    except ValueError:
        raise ValueError(f"{ROUNDS_ENV} must be an integer, got {raw!r}") from None
    if rounds < 1:
        raise ValueError(f"{ROUNDS_ENV} must be >= 1, got {rounds}")
    return rounds
