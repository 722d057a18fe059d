"""
Clusterer: single-pass online clustering of log lines

For every incoming line:
1. Tokenize (process_line only)
2. Look up clusters with the same token count
3. Pick the closest one (first created wins ties)
4. Distance <= max_distance -> merge the line into that cluster
5. Otherwise -> start a new cluster from the line

Clusters are never merged with each other and never removed, so the outcome
depends on arrival order: replaying the same lines in the same order always
gives the same clusters, a different order may not.

Example:
    engine = ClusteringEngine(ClustererConfig(max_distance=0.5))
    engine.process_lines(["a b c", "a b d", "a x c"])
    engine.result()  ->  [3 a * *]
"""

import time
from typing import Iterable, List, Optional, Tuple

from logmine.config import ClustererConfig
from logmine.context.indexing import ClusterIndex
from logmine.context.tokenization import LogTokenizer
from logmine.models import ClusterSummary, ClusteringStats, Pattern, TokenSequence
from logmine.protocols import TokenizerProtocol


class ClusteringEngine:
    """
    Online log clusterer owning one ClusterIndex

    Single writer: one engine must not be fed from several threads at once.
    Use ShardedClusterer to spread work over independent engines.
    """

    PROGRESS_EVERY = 100_000

    def __init__(self, config: Optional[ClustererConfig] = None,
                 tokenizer: Optional[TokenizerProtocol] = None):
        """
        Args:
            config: Threshold and read-out settings (defaults if omitted)
            tokenizer: Line tokenizer; defaults to a LogTokenizer built from
                config.delimiters
        """
        self.config = config or ClustererConfig()
        self.tokenizer = tokenizer or LogTokenizer(self.config.delimiters)
        self.index = ClusterIndex()

    @property
    def max_distance(self) -> float:
        return self.config.max_distance

    @property
    def cluster_count(self) -> int:
        return len(self.index)

    def process_tokens(self, tokens: TokenSequence) -> int:
        """
        Ingest one tokenized line

        Returns:
            Id of the cluster that absorbed the line
        """
        return self._ingest(tuple(tokens))[0]

    def process_line(self, line: str) -> int:
        """Tokenize and ingest one raw log line; returns the cluster id."""
        return self.process_tokens(self.tokenizer.tokenize(line))

    def process_lines(self, lines: Iterable[str], verbose: bool = False) -> ClusteringStats:
        """
        Ingest a batch of raw log lines

        Args:
            lines: Raw log lines (any iterable, consumed once)
            verbose: Print progress information

        Returns:
            ClusteringStats for this batch
        """
        stats = ClusteringStats()
        start = time.time()

        if verbose:
            print(f"Clustering with max_distance={self.max_distance}...")

        for line in lines:
            _, created = self._ingest(self.tokenizer.tokenize(line))
            stats.line_count += 1
            if created:
                stats.created += 1
            else:
                stats.merged += 1

            if verbose and stats.line_count % self.PROGRESS_EVERY == 0:
                print(f"  {stats.line_count} lines, {self.cluster_count} clusters")

        stats.elapsed = time.time() - start
        stats.cluster_count = self.cluster_count

        if verbose:
            print(f"  ✓ {stats.line_count} lines -> {stats.cluster_count} clusters "
                  f"({stats.created} new, {stats.merged} merged) in {stats.elapsed:.2f}s")

        return stats

    def _ingest(self, seq: TokenSequence) -> Tuple[int, bool]:
        best, _ = self.index.nearest(seq, within=self.max_distance)
        if best is None:
            return self.index.insert_new(seq).cluster_id, True

        self.index.update(best, seq)
        return best.cluster_id, False

    def all(self) -> List[Tuple[Pattern, int]]:
        """(pattern, count) for every cluster, in creation order."""
        return self.index.all()

    def result(self, min_members: Optional[int] = None) -> List[ClusterSummary]:
        """
        Read out clusters in creation order

        Args:
            min_members: Drop clusters with fewer members
                (defaults to config.min_members)
        """
        if min_members is None:
            min_members = self.config.min_members
        return self.index.summaries(min_members)
