import random
from typing import Optional


def get_rng(seed: Optional[int] = None) -> random.Random:
    """
    Returns a fresh entropy source.
    Same seed always produces the same draw order.
    """
    return random.Random(seed)


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else get_rng()
