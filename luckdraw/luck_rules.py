# Multiplier curve: log fit of (20, 2), (50, 4), (100, 7), (200, 10)
LOG_FIT_A = 2.92573
LOG_FIT_C = 0.0726566

# Integer weights keep three decimal digits of the multiplier
WEIGHT_SCALE = 1000

# Luck lost each time the walk drops into a lower luckiness tier
LUCK_DECAY_DIVISOR = 10

DEFAULT_ODDS_CAP = 0.9

# roll_odds truncates probabilities to this many decimal digits
ODDS_PRECISION = 5

# Sampler gives up after this many draws per pool entry
ATTEMPTS_PER_CANDIDATE = 10

RAND_DEFAULT_MIN = 0
RAND_DEFAULT_MAX = 50

MAX_SIMULATIONS = 100_000
