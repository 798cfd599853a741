import math
import random
from typing import Optional

from luckdraw.errors import InvalidArgument
from luckdraw.luck_rules import DEFAULT_ODDS_CAP, ODDS_PRECISION
from luckdraw.models.candidate_models import MultiplierCurve
from luckdraw.rng import resolve_rng

DEFAULT_CURVE = MultiplierCurve()


def multiplier(luck_level: float, curve: Optional[MultiplierCurve] = None) -> float:
    """
    Maps a luck level to its multiplier.
    Luck levels below 1 count as 1, and the result never drops below 1.
    """
    curve = curve or DEFAULT_CURVE

    x = max(luck_level, 1)
    y = curve.a * math.log(curve.c * x)

    return max(y, 1.0)


def odds_with_luck(
    luck_level: float,
    base_odds: float,
    cap: float = DEFAULT_ODDS_CAP,
    curve: Optional[MultiplierCurve] = None,
) -> float:
    """
    Boosts base odds (as a decimal, e.g. .1666) by the luck multiplier.
    The result is never higher than cap.
    """
    return min(base_odds * multiplier(luck_level, curve), cap)


def roll_odds(probability: float, rng: Optional[random.Random] = None) -> bool:
    """Returns True probability percent of the time. Luck plays no part here."""
    if not math.isfinite(probability):
        raise InvalidArgument(f"probability must be a finite number, got {probability}")
    rng = resolve_rng(rng)

    scale = 10 ** ODDS_PRECISION
    threshold = round(probability * scale)

    return rng.randint(0, scale - 1) < threshold
