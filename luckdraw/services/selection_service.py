import logging
import random
from typing import Any, Iterable, List, Optional, Union

from luckdraw.errors import InvalidArgument
from luckdraw.luck_rules import RAND_DEFAULT_MAX, RAND_DEFAULT_MIN
from luckdraw.models.candidate_models import Candidate, MultiplierCurve, to_candidates
from luckdraw.rng import resolve_rng
from luckdraw.sampler import fetch_weighted
from luckdraw.weighting import calc_weights

logger = logging.getLogger(__name__)


def pick_lucky(
    luck_level: float,
    candidates: Iterable[Any],
    num: int = 1,
    rng: Optional[random.Random] = None,
    curve: Optional[MultiplierCurve] = None,
) -> Union[Any, List[Any]]:
    """
    Picks num payloads, favoring luckier candidates as luck_level grows.
    Returns a single payload when num == 1, otherwise a list in draw order.
    """
    if num < 0:
        raise InvalidArgument("num cannot be negative")

    candidates = to_candidates(candidates)
    if num == 0:
        return []
    if not candidates:
        raise InvalidArgument("Candidate set is empty")

    rng = resolve_rng(rng)
    weighted = calc_weights(luck_level, candidates, rng, curve)

    weights = {w.identifier: w.effective_weight for w in weighted}
    values = {w.identifier: w.candidate.value for w in weighted}

    picked = fetch_weighted(weights, num, rng)
    logger.debug("Luck %s picked %s", luck_level, picked)

    if num == 1:
        return values[picked]
    return [values[key] for key in picked]


def lucky_rand_int(
    luck_level: float,
    min_value: int = RAND_DEFAULT_MIN,
    max_value: int = RAND_DEFAULT_MAX,
    rng: Optional[random.Random] = None,
) -> int:
    """Same as random.randint, but higher numbers win more often with luck."""
    if min_value > max_value:
        raise InvalidArgument(f"min ({min_value}) cannot exceed max ({max_value})")

    candidates = [
        Candidate(identifier=v, luckiness=v, payload=v)
        for v in range(max_value, min_value - 1, -1)
    ]
    return pick_lucky(luck_level, candidates, rng=rng)
