from pydantic import BaseModel, Field, field_validator
from typing import Optional, List

from luckdraw.luck_rules import (
    DEFAULT_ODDS_CAP,
    MAX_SIMULATIONS,
    RAND_DEFAULT_MAX,
    RAND_DEFAULT_MIN,
)
from luckdraw.models.candidate_models import Candidate

# -----------------------------
# BASE REQUEST
# -----------------------------

class SeededRequest(BaseModel):
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed for deterministic results. "
                    "Same seed always produces same pick order."
    )


# -----------------------------
# ODDS
# -----------------------------

class OddsRequest(BaseModel):
    luck: float = Field(
        default=0.0,
        description="Luck level applied to the base odds"
    )
    base_odds: float = Field(
        ge=0.0,
        le=1.0,
        description="Odds before luck, as a decimal (0.25 = 25%)"
    )
    cap: float = Field(
        default=DEFAULT_ODDS_CAP,
        ge=0.0,
        le=1.0,
        description="Boosted odds never go above this"
    )


class RollRequest(SeededRequest):
    probability: float = Field(
        ge=0.0,
        le=1.0,
        description="Chance of success as a decimal"
    )


# -----------------------------
# PICKS
# -----------------------------

class PickRequest(SeededRequest):
    luck: float = Field(
        default=0.0,
        description="Luck level. Higher favors luckier candidates"
    )
    candidates: List[Candidate] = Field(
        description="Entries to pick from"
    )
    num: int = Field(
        default=1,
        ge=0,
        description="How many distinct entries to pick"
    )

    @field_validator("candidates")
    def non_empty(cls, v):
        if len(v) == 0:
            raise ValueError("candidates list cannot be empty")
        return v


class RandRequest(SeededRequest):
    luck: float = Field(default=0.0)
    min: int = Field(default=RAND_DEFAULT_MIN)
    max: int = Field(default=RAND_DEFAULT_MAX)


class WeightsRequest(BaseModel):
    luck: float = Field(default=0.0)
    candidates: List[Candidate]


# -----------------------------
# SIMULATION
# -----------------------------

class SimulationRequest(SeededRequest):
    luck: float = Field(default=0.0)
    candidates: List[Candidate]
    simulations: int = Field(
        default=1000,
        ge=1,
        le=MAX_SIMULATIONS,
        description="Number of simulated picks. Max: 100,000"
    )


class CompareSimulationRequest(SimulationRequest):
    luck: float = Field(
        default=50.0,
        description="Luck applied to the second simulation set"
    )
