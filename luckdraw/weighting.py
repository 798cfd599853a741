import logging
import math
import random
from typing import Any, Iterable, List, Optional

from luckdraw.luck_engine import multiplier
from luckdraw.luck_rules import LUCK_DECAY_DIVISOR, WEIGHT_SCALE
from luckdraw.models.candidate_models import MultiplierCurve, WeightedCandidate, to_candidates
from luckdraw.rng import resolve_rng

logger = logging.getLogger(__name__)


def sort_by_luckiness(candidates, rng: random.Random):
    """
    Shuffles, then stable-sorts by luckiness (descending).
    The shuffle gives tied candidates a fair relative order on every call.
    """
    ordered = list(candidates)
    rng.shuffle(ordered)
    ordered.sort(key=lambda c: c.luckiness, reverse=True)
    return ordered


def calc_weights(
    luck_level: float,
    candidates: Iterable[Any],
    rng: Optional[random.Random] = None,
    curve: Optional[MultiplierCurve] = None,
) -> List[WeightedCandidate]:
    """
    Derives a sampling weight for every candidate.

    Candidates are walked from most to least lucky. Each one gets its base
    weight times the scaled multiplier of the running luck. The running luck
    drops by luck_level / 10 whenever the walk steps down into a lower
    luckiness tier, so ties share the same multiplier. The step is taken
    from the unclamped luck level.
    """
    rng = resolve_rng(rng)
    ordered = sort_by_luckiness(to_candidates(candidates), rng)

    step = luck_level / LUCK_DECAY_DIVISOR
    luck_running = luck_level
    weighted: List[WeightedCandidate] = []

    for index, candidate in enumerate(ordered):
        m = multiplier(luck_running, curve)
        effective = candidate.base_weight * math.floor(m * WEIGHT_SCALE)

        weighted.append(WeightedCandidate(candidate=candidate, effective_weight=effective))

        # decay only when crossing into a lower tier
        nxt = ordered[index + 1] if index + 1 < len(ordered) else None
        if nxt is not None and nxt.luckiness < candidate.luckiness:
            luck_running -= step

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Derived weights for luck %s: %s",
            luck_level,
            [(w.identifier, w.effective_weight) for w in weighted],
        )
    return weighted
