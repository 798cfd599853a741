"""
Exception types raised by the selection engine.
"""


class LuckError(ValueError):
    """Base class for every error raised by luckdraw."""
    pass


class InvalidArgument(LuckError):
    """Raised for bad counts, empty or malformed candidate sets."""
    pass


class InvalidWeight(LuckError):
    """Raised when a sampling pool has no positive weight left."""
    pass


class SelectionExhausted(LuckError):
    """Raised when the sampler runs out of draw attempts."""
    pass
