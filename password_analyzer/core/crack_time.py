"""
Brute-force crack time estimation for the Password Analyzer.
"""

import math

# Offline attacker on modern hardware
GUESSES_PER_SECOND = 10_000_000_000

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000

INSTANT = "Instantly"
HEAT_DEATH = "Heat death of the universe"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)"""
    return int(math.floor(value + 0.5))


def seconds_to_crack(entropy: float) -> float:
    """Average seconds to exhaust a search space of ``2 ** entropy``

    Spaces too large for a float come back as infinity.
    """
    try:
        return 2.0 ** entropy / GUESSES_PER_SECOND
    except OverflowError:
        return math.inf


def estimate_crack_time(entropy: float) -> str:
    """Bucket the brute-force time for an entropy value into a label

    Args:
        entropy: Entropy in bits

    Returns:
        A label such as "Instantly", "5 minutes" or "3 centuries"
    """
    seconds = seconds_to_crack(entropy)

    if seconds < 1:
        return INSTANT
    if seconds < SECONDS_PER_MINUTE:
        return f"{round_half_up(seconds)} seconds"
    if seconds < SECONDS_PER_HOUR:
        return f"{round_half_up(seconds / SECONDS_PER_MINUTE)} minutes"
    if seconds < SECONDS_PER_DAY:
        return f"{round_half_up(seconds / SECONDS_PER_HOUR)} hours"
    if seconds < SECONDS_PER_YEAR:
        return f"{round_half_up(seconds / SECONDS_PER_DAY)} days"
    if seconds < SECONDS_PER_YEAR * 100:
        return f"{round_half_up(seconds / SECONDS_PER_YEAR)} years"
    if seconds < SECONDS_PER_YEAR * 1000:
        return f"{round_half_up(seconds / SECONDS_PER_YEAR / 100)} centuries"
    if seconds < SECONDS_PER_YEAR * 1000000:
        return f"{round_half_up(seconds / SECONDS_PER_YEAR / 1000)} millennia"
    return HEAT_DEATH
