class RandomnessError(Exception):
    """Base exception for the randomness package."""


class InvalidArgument(RandomnessError, TypeError):
    """Raised when a generator is not a zero-argument callable or is built with bad parameters."""


class WeightError(RandomnessError, ValueError):
    """Raised when a weight mapping holds a negative or NaN weight."""


class SelectionError(RandomnessError, ValueError):
    """Raised when a weighted choice runs out of items (weights not normalized?)."""


class ConfigError(RandomnessError, ValueError):
    """Raised for unreadable or invalid generator configuration."""
