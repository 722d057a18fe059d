"""
Clusterer configuration.

Settings can be given as keyword arguments, loaded from a settings dict, or
filled in from CLI options:

    config = ClustererConfig.from_dict({'max_distance': 0.6, 'min_members': 2})
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any

from .errors import ConfigurationError

DEFAULT_MAX_DISTANCE = 0.5
DEFAULT_MIN_MEMBERS = 1
DEFAULT_DELIMITERS = ' \t'
DEFAULT_WILDCARD_MARKER = '*'


@dataclass(frozen=True)
class ClustererConfig:
    """
    Args:
        max_distance: Admission threshold T in [0, 1]. A line joins its
            nearest cluster when the distance is <= T.
        min_members: Clusters with fewer members are dropped from read-out
        delimiters: Characters that separate tokens
        wildcard_marker: String printed for wildcard slots
    """
    max_distance: float = DEFAULT_MAX_DISTANCE
    min_members: int = DEFAULT_MIN_MEMBERS
    delimiters: str = DEFAULT_DELIMITERS
    wildcard_marker: str = DEFAULT_WILDCARD_MARKER

    def __post_init__(self):
        if isinstance(self.max_distance, bool) or not isinstance(self.max_distance, (int, float)):
            raise ConfigurationError(f"max_distance must be a number, got {self.max_distance!r}")
        if not 0.0 <= self.max_distance <= 1.0:
            raise ConfigurationError(f"max_distance must be within [0, 1], got {self.max_distance}")
        if isinstance(self.min_members, bool) or not isinstance(self.min_members, int):
            raise ConfigurationError(f"min_members must be an integer, got {self.min_members!r}")
        if self.min_members < 1:
            raise ConfigurationError(f"min_members must be >= 1, got {self.min_members}")
        if not self.delimiters:
            raise ConfigurationError("delimiters must contain at least one character")
        if not self.wildcard_marker:
            raise ConfigurationError("wildcard_marker must not be empty")

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> 'ClustererConfig':
        """Build a config from a settings dict, ignoring unrelated keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in settings.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
