"""
Cluster Index: length-partitioned cluster storage

Only sequences with the same token count can merge, so clusters live in one
bucket per length. Each bucket is a list in creation order, which makes
tie-breaking deterministic: when two clusters are equally close, the one
created first wins.

    length 3 -> [Cluster 0 "a b *", Cluster 2 "x y z"]
    length 5 -> [Cluster 1 "GET /index * 200 *"]

The index owns every cluster. Read-out returns (pattern, count) pairs or
detached ClusterSummary records; nothing is ever evicted.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from logmine.context.merging import merge, merge_patterns
from logmine.context.scoring import distance
from logmine.models import Cluster, ClusterSummary, Pattern, TokenSequence


class ClusterIndex:
    """Run-scoped, in-memory cluster storage bucketed by sequence length"""

    def __init__(self):
        self._buckets: Dict[int, List[Cluster]] = {}
        self._clusters: List[Cluster] = []  # creation order

    def __len__(self) -> int:
        return len(self._clusters)

    def candidates(self, length: int) -> Tuple[Cluster, ...]:
        """Clusters of the given length in creation order (empty if none)."""
        return tuple(self._buckets.get(length, ()))

    def nearest(self, seq: TokenSequence, within: Optional[float] = None) -> Tuple[Optional[Cluster], float]:
        """
        Find the closest cluster for a token sequence

        Candidates are scanned in creation order; a later candidate replaces
        the current best only when strictly closer. Once a best is known its
        distance becomes the scan limit, so hopeless candidates are abandoned
        after a few positions.

        Args:
            seq: Token sequence
            within: Only consider clusters at distance <= within

        Returns:
            (cluster, distance), or (None, 1.0) when nothing qualifies
        """
        bound = 1.0 if within is None else within
        best: Optional[Cluster] = None
        best_distance = 1.0

        for cluster in self._buckets.get(len(seq), ()):
            d = distance(seq, cluster.pattern, limit=bound)
            if d > bound:
                continue
            if best is None or d < best_distance:
                best, best_distance = cluster, d
                bound = d
                if d == 0.0:
                    break

        return best, best_distance

    def insert_new(self, seq: TokenSequence) -> Cluster:
        """Create a cluster whose pattern is ``seq`` with every slot fixed."""
        tokens = tuple(seq)
        return self.absorb(Pattern.from_tokens(tokens), 1, tokens)

    def absorb(self, pattern: Pattern, count: int, representative: TokenSequence) -> Cluster:
        """Insert a pre-built cluster, e.g. one produced by another index."""
        cluster = Cluster(
            cluster_id=len(self._clusters),
            pattern=pattern,
            count=count,
            representative=tuple(representative),
        )
        self._buckets.setdefault(len(pattern), []).append(cluster)
        self._clusters.append(cluster)
        return cluster

    def update(self, cluster: Cluster, seq: TokenSequence) -> None:
        """Absorb one more line into ``cluster``."""
        cluster.pattern = merge(cluster.pattern, seq)
        cluster.count += 1

    def combine(self, cluster: Cluster, pattern: Pattern, count: int) -> None:
        """Fold another cluster's pattern and members into ``cluster``."""
        cluster.pattern = merge_patterns(cluster.pattern, pattern)
        cluster.count += count

    def clusters(self) -> Iterator[Cluster]:
        return iter(self._clusters)

    def lengths(self) -> List[int]:
        return sorted(self._buckets)

    def all(self) -> List[Tuple[Pattern, int]]:
        """Every cluster exactly once as (pattern, count), in creation order."""
        return [(cluster.pattern, cluster.count) for cluster in self._clusters]

    def summaries(self, min_members: int = 1) -> List[ClusterSummary]:
        return [
            ClusterSummary.from_cluster(cluster)
            for cluster in self._clusters
            if cluster.count >= min_members
        ]
