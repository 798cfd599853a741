from fastapi import FastAPI, HTTPException

from luckdraw import __version__
from luckdraw.errors import LuckError
from luckdraw.luck_engine import multiplier, odds_with_luck, roll_odds
from luckdraw.rng import get_rng
from luckdraw.services.selection_service import lucky_rand_int, pick_lucky
from luckdraw.services.simulation_service import (
    compare_luck,
    distribution,
    simulate_picks,
    weight_preview,
)

from luckdraw.schemas import (
    OddsRequest,
    RollRequest,
    PickRequest,
    RandRequest,
    WeightsRequest,
    SimulationRequest,
    CompareSimulationRequest,
)


app = FastAPI(
    title="Luck Draw API",
    description="Luck-weighted picks, dice rolls and odds for game simulations.",
    version=__version__,
)

# ============================================================
# HEALTH CHECK
# ============================================================

@app.get("/health", tags=["Health"], response_model=dict)
def health_check():
    return {"status": "ok"}


@app.get("/info", tags=["Metadata"], response_model=dict)
def info():
    return {
        "name": "Luck Draw API",
        "version": __version__,
        "formula": "max(1, a * ln(c * max(luck, 1)))",
    }


# ============================================================
# ODDS
# ============================================================

@app.get(
    "/multiplier",
    tags=["Odds"],
    summary="Luck multiplier for a luck level",
    response_model=dict
)
def get_multiplier(luck: float = 0.0):
    return {"luck": luck, "multiplier": multiplier(luck)}


@app.post(
    "/odds",
    tags=["Odds"],
    summary="Base odds boosted by luck",
    description="Result never exceeds cap.",
    response_model=dict
)
def boosted_odds(req: OddsRequest):
    return {
        "luck": req.luck,
        "odds": odds_with_luck(req.luck, req.base_odds, req.cap),
    }


@app.post("/roll", tags=["Odds"], response_model=dict)
def roll(req: RollRequest):
    rng = get_rng(req.seed)
    return {"probability": req.probability, "success": roll_odds(req.probability, rng)}


# ============================================================
# PICKS
# ============================================================

@app.post(
    "/pick",
    tags=["Picks"],
    summary="Pick entries favoring luckiness",
    description="Picks num distinct entries. Higher luck favors luckier entries.",
    response_model=dict
)
def pick(req: PickRequest):
    rng = get_rng(req.seed)
    try:
        result = pick_lucky(req.luck, req.candidates, req.num, rng)
    except LuckError as e:
        raise HTTPException(400, str(e))
    return {"luck": req.luck, "num": req.num, "pick": result}


@app.post(
    "/rand",
    tags=["Picks"],
    summary="Random integer biased toward max",
    response_model=dict
)
def rand(req: RandRequest):
    rng = get_rng(req.seed)
    try:
        result = lucky_rand_int(req.luck, req.min, req.max, rng)
    except LuckError as e:
        raise HTTPException(400, str(e))
    return {"luck": req.luck, "min": req.min, "max": req.max, "value": result}


@app.post(
    "/weights",
    tags=["Picks"],
    summary="Preview single-pick chances",
    response_model=dict
)
def weights(req: WeightsRequest):
    try:
        chances = weight_preview(req.luck, req.candidates)
    except LuckError as e:
        raise HTTPException(400, str(e))
    return {
        "luck": req.luck,
        "chances": [
            {"identifier": key, "chance": round(value, 5)}
            for key, value in chances.items()
        ],
    }


# ============================================================
# SIMULATION
# ============================================================

@app.post(
    "/simulate",
    tags=["Simulation"],
    summary="Run pick simulation",
    description="Returns how often each entry came up, as % of all picks.",
    response_model=dict
)
def simulate(req: SimulationRequest):
    try:
        counts = simulate_picks(req.luck, req.candidates, req.simulations, req.seed)
    except LuckError as e:
        raise HTTPException(400, str(e))

    return {
        "luck": req.luck,
        "simulations": req.simulations,
        "distribution": [
            {"value": value, "percent": percent}
            for value, percent in sorted(
                distribution(counts).items(),
                key=lambda x: x[1],
                reverse=True
            )
        ],
    }


@app.post(
    "/simulate/compare",
    tags=["Simulation"],
    summary="Compare luck 0 vs luck simulation",
    description="Used to evaluate the impact of a luck level before shipping it.",
    response_model=dict
)
def simulate_compare(req: CompareSimulationRequest):
    try:
        result = compare_luck(req.candidates, req.luck, req.simulations, req.seed)
    except LuckError as e:
        raise HTTPException(400, str(e))

    return {
        "simulations": req.simulations,
        "luck": req.luck,
        "distribution": {
            name: [{"value": value, "percent": percent} for value, percent in dist.items()]
            for name, dist in result.items()
        },
    }
