"""
Data models for LogMine.

This module contains pure data structures with no clustering logic.
"""

from dataclasses import dataclass
from typing import List, Dict, Optional, Tuple, Any

__all__ = [
    'Token',
    'TokenSequence',
    'WILDCARD',
    'Slot',
    'Pattern',
    'Cluster',
    'ClusterSummary',
    'ClusteringStats',
]

Token = str
TokenSequence = Tuple[str, ...]

# Wildcard slot marker. Rendering uses a configurable string instead.
WILDCARD = None
Slot = Optional[str]


@dataclass(frozen=True)
class Pattern:
    """Token template where each slot is a fixed token or a wildcard."""
    slots: Tuple[Slot, ...]

    @classmethod
    def from_tokens(cls, tokens) -> 'Pattern':
        """Build an all-fixed pattern from a token sequence."""
        return cls(tuple(tokens))

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[index]

    def is_wildcard(self, index: int) -> bool:
        return self.slots[index] is WILDCARD

    @property
    def wildcard_count(self) -> int:
        return sum(1 for slot in self.slots if slot is WILDCARD)

    @property
    def wildcard_positions(self) -> List[int]:
        return [i for i, slot in enumerate(self.slots) if slot is WILDCARD]

    def to_tokens(self, marker: str = '*') -> List[str]:
        return [marker if slot is WILDCARD else slot for slot in self.slots]

    def render(self, marker: str = '*') -> str:
        """Render as a space separated template, e.g. ``a * c``."""
        return ' '.join(self.to_tokens(marker))

    def __repr__(self):
        return f"Pattern({self.render()!r})"


@dataclass
class Cluster:
    """
    A group of log lines sharing one evolving pattern.

    Owned by a ClusterIndex. ``representative`` is the token sequence that
    created the cluster and is kept as its sample line.
    """
    cluster_id: int
    pattern: Pattern
    count: int
    representative: TokenSequence

    def __repr__(self):
        return f"Cluster({self.cluster_id}, count={self.count}, pattern={self.pattern.render()!r})"


@dataclass(frozen=True)
class ClusterSummary:
    """Detached read-out record for one cluster."""
    cluster_id: int
    pattern: Pattern
    count: int
    representative: TokenSequence

    @classmethod
    def from_cluster(cls, cluster: Cluster) -> 'ClusterSummary':
        return cls(
            cluster_id=cluster.cluster_id,
            pattern=cluster.pattern,
            count=cluster.count,
            representative=cluster.representative,
        )

    def to_string(self, marker: str = '*') -> str:
        return f"{self.count} {self.pattern.render(marker)}"

    def to_dict(self, marker: str = '*') -> Dict[str, Any]:
        return {
            'id': self.cluster_id,
            'count': self.count,
            'pattern': self.pattern.render(marker),
            'tokens': self.pattern.to_tokens(marker),
            'wildcards': self.pattern.wildcard_positions,
            'sample': ' '.join(self.representative),
        }


@dataclass
class ClusteringStats:
    """Statistics for one batch of ingested lines."""
    line_count: int = 0
    cluster_count: int = 0
    created: int = 0
    merged: int = 0
    elapsed: float = 0.0

    @property
    def lines_per_second(self) -> float:
        return self.line_count / self.elapsed if self.elapsed > 0 else 0.0
