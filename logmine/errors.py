"""
Exception types raised by LogMine.
"""


class LogMineError(Exception):
    """Base class for LogMine errors."""


class PatternLengthError(LogMineError, ValueError):
    """A token sequence and a pattern of different lengths were compared or merged."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Length mismatch: pattern has {expected} slots, got {actual}")


class ConfigurationError(LogMineError, ValueError):
    """Invalid clusterer configuration."""
