import logging
from collections import Counter
from typing import Any, Dict, Iterable, Optional

from luckdraw.errors import InvalidArgument
from luckdraw.luck_rules import MAX_SIMULATIONS
from luckdraw.models.candidate_models import Candidate, MultiplierCurve, to_candidates
from luckdraw.rng import get_rng
from luckdraw.services.selection_service import pick_lucky
from luckdraw.weighting import calc_weights

logger = logging.getLogger(__name__)

# Fixed shuffle so repeated previews list ties in the same order
PREVIEW_SEED = 0


def _check_simulations(simulations: int) -> None:
    if simulations < 1 or simulations > MAX_SIMULATIONS:
        raise InvalidArgument(f"simulations must be between 1 and {MAX_SIMULATIONS}")


def simulate_picks(
    luck_level: float,
    candidates: Iterable[Any],
    simulations: int,
    seed: Optional[int] = None,
    curve: Optional[MultiplierCurve] = None,
) -> Dict[Any, int]:
    """Runs repeated single picks and returns how often each identifier came up."""
    _check_simulations(simulations)
    keyed = [
        Candidate(identifier=c.identifier, luckiness=c.luckiness, weight=c.weight, payload=c.identifier)
        for c in to_candidates(candidates)
    ]
    rng = get_rng(seed)

    counts = Counter(
        pick_lucky(luck_level, keyed, rng=rng, curve=curve)
        for _ in range(simulations)
    )
    logger.debug("Simulated %s picks at luck %s: %s", simulations, luck_level, dict(counts))
    return dict(counts)


def distribution(counts: Dict[Any, int]) -> Dict[Any, float]:
    """Percentage share of each identifier, rounded to 2 digits."""
    total = sum(counts.values())
    if total == 0:
        return {}
    return {
        value: round((count / total) * 100, 2)
        for value, count in counts.items()
    }


def compare_luck(
    candidates: Iterable[Any],
    luck_level: float,
    simulations: int,
    seed: Optional[int] = None,
) -> Dict[str, Dict[Any, float]]:
    """
    Runs a luck 0 baseline and a lucky run from identically seeded sources.
    Used to check what a luck level does to a table before shipping it.
    """
    candidates = to_candidates(candidates)

    base_dist = distribution(simulate_picks(0, candidates, simulations, seed))
    luck_dist = distribution(simulate_picks(luck_level, candidates, simulations, seed))

    delta = {
        value: round(luck_dist.get(value, 0) - base_dist.get(value, 0), 2)
        for value in set(base_dist) | set(luck_dist)
    }

    return {
        "base": base_dist,
        "with_luck": luck_dist,
        "delta": delta,
    }


def weight_preview(
    luck_level: float,
    candidates: Iterable[Any],
    curve: Optional[MultiplierCurve] = None,
) -> Dict[Any, float]:
    """Chance of each identifier winning a single pick, as a decimal."""
    weighted = calc_weights(luck_level, candidates, get_rng(PREVIEW_SEED), curve)
    total = sum(w.effective_weight for w in weighted)
    if total <= 0:
        return {w.identifier: 0.0 for w in weighted}
    return {w.identifier: w.effective_weight / total for w in weighted}
