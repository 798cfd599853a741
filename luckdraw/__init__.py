"""
Luck-weighted random selection for loot tables, dice rolls and other
randomized game events.
"""

__version__ = "1.0.0"

from luckdraw.errors import InvalidArgument, InvalidWeight, LuckError, SelectionExhausted
from luckdraw.luck_engine import multiplier, odds_with_luck, roll_odds
from luckdraw.models.candidate_models import Candidate, MultiplierCurve, WeightedCandidate
from luckdraw.rng import get_rng
from luckdraw.sampler import fetch_weighted
from luckdraw.services.selection_service import lucky_rand_int, pick_lucky
from luckdraw.services.simulation_service import (
    compare_luck,
    distribution,
    simulate_picks,
    weight_preview,
)
from luckdraw.weighting import calc_weights

__all__ = [
    "Candidate",
    "InvalidArgument",
    "InvalidWeight",
    "LuckError",
    "MultiplierCurve",
    "SelectionExhausted",
    "WeightedCandidate",
    "calc_weights",
    "compare_luck",
    "distribution",
    "fetch_weighted",
    "get_rng",
    "lucky_rand_int",
    "multiplier",
    "odds_with_luck",
    "pick_lucky",
    "roll_odds",
    "simulate_picks",
    "weight_preview",
]
