import logging
import random
from typing import Any, Dict, Hashable, List, Optional, Union

from luckdraw.errors import InvalidArgument, InvalidWeight, SelectionExhausted
from luckdraw.luck_rules import ATTEMPTS_PER_CANDIDATE
from luckdraw.rng import resolve_rng

logger = logging.getLogger(__name__)


def _draw(pool: Dict[Hashable, Union[int, float]], total, rng: random.Random):
    """
    One pass over the pool. Returns the selected key, or None when rounding
    left the running value above zero after the last entry.
    """
    if isinstance(total, int):
        r = rng.randint(1, total)
    else:
        # (0, total]
        r = total - rng.random() * total

    for key, weight in pool.items():
        r -= weight
        if r <= 0:
            return key

    return None


def fetch_weighted(
    weights_by_key: Dict[Hashable, Union[int, float]],
    num: int = 1,
    rng: Optional[random.Random] = None,
) -> Union[Any, List[Any]]:
    """
    Draws num keys without replacement, each with probability proportional
    to its weight among the keys still in the pool.

    Returns the bare key when num == 1, otherwise a list in draw order.
    """
    if num < 0:
        raise InvalidArgument("num cannot be negative")
    if num == 0:
        return []
    if not weights_by_key:
        raise InvalidArgument("Cannot draw from an empty pool")

    for key, weight in weights_by_key.items():
        if weight < 0:
            raise InvalidWeight(f"Negative weight {weight} for key={key!r}")

    if sum(weights_by_key.values()) <= 0:
        raise InvalidWeight("Sum of weights must be > 0")

    rng = resolve_rng(rng)
    wanted = min(num, len(weights_by_key))
    pool = dict(weights_by_key)
    result: List[Any] = []

    max_attempts = ATTEMPTS_PER_CANDIDATE * len(weights_by_key)
    attempts = 0

    while len(result) < wanted:
        total = sum(pool.values())
        if total <= 0:
            raise InvalidWeight(
                f"Only {len(result)} of {wanted} keys carry weight; the rest cannot be drawn"
            )

        if attempts >= max_attempts:
            logger.warning(
                "Sampler gave up after %s draws with %s of %s keys chosen",
                attempts, len(result), wanted,
            )
            raise SelectionExhausted(f"No selection after {attempts} draws")
        attempts += 1

        key = _draw(pool, total, rng)
        if key is None:
            continue

        del pool[key]
        result.append(key)

    logger.debug("Drew %s after %s attempts", result, attempts)

    if num == 1:
        return result[0]
    return result
