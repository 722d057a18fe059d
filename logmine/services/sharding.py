"""
Sharded clustering: spread one stream over independent engines

A single ClusteringEngine is single-writer. For throughput, lines are
partitioned into shards, each shard is clustered by its own engine (in a
process pool when workers > 1), and the shard results are merged.

Shard strategies:
- length:      token count modulo shard count. Lengths never mix, so the
               merged result equals per-shard results side by side.
- first_token: CRC32 of the first token modulo shard count. Clusters of the
               same length from different shards are reconciled by pattern
               distance during the merge.

Arrival order is preserved inside each shard, and shards are merged in
index order, so a fixed input always yields the same clusters.
"""

import time
import zlib
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Optional, Sequence, Set

from logmine.config import ClustererConfig
from logmine.context.indexing import ClusterIndex
from logmine.context.scoring import pattern_distance
from logmine.context.tokenization import LogTokenizer
from logmine.errors import ConfigurationError
from logmine.models import ClusterSummary, TokenSequence
from logmine.protocols import TokenizerProtocol
from logmine.services.clusterer import ClusteringEngine

SHARD_STRATEGIES = ('length', 'first_token')


def _cluster_shard(config: ClustererConfig, shard: Sequence[TokenSequence]) -> List[ClusterSummary]:
    """Cluster one shard in a fresh engine; runs inside worker processes."""
    engine = ClusteringEngine(config)
    for tokens in shard:
        engine.process_tokens(tokens)
    return engine.result(min_members=1)


def merge_results(shard_results: Iterable[Sequence[ClusterSummary]], max_distance: float) -> ClusterIndex:
    """
    Merge per-shard cluster lists into one index

    Each shard cluster joins the closest already merged cluster of the same
    length when their pattern distance is <= max_distance (first merged
    wins ties); otherwise it is added as a new cluster. A merged cluster
    that already holds a cluster from the same shard is never a candidate,
    so clusters one engine kept apart stay apart.
    """
    index = ClusterIndex()
    sources: Dict[int, Set[int]] = {}  # merged cluster id -> contributing shards

    for shard_id, summaries in enumerate(shard_results):
        for summary in summaries:
            best = None
            best_distance = max_distance
            for cluster in index.candidates(len(summary.pattern)):
                if shard_id in sources[cluster.cluster_id]:
                    continue
                d = pattern_distance(cluster.pattern, summary.pattern)
                if d <= max_distance and (best is None or d < best_distance):
                    best, best_distance = cluster, d

            if best is None:
                best = index.absorb(summary.pattern, summary.count, summary.representative)
                sources[best.cluster_id] = {shard_id}
            else:
                index.combine(best, summary.pattern, summary.count)
                sources[best.cluster_id].add(shard_id)

    return index


class ShardedClusterer:
    """
    Partition lines over independent ClusteringEngines and merge the results

    Args:
        config: Shared engine configuration
        shards: Number of partitions
        strategy: 'length' or 'first_token'
        workers: Worker processes; 1 clusters every shard in-process
        tokenizer: Line tokenizer (defaults to config.delimiters)
    """

    def __init__(self, config: Optional[ClustererConfig] = None, shards: int = 4,
                 strategy: str = 'length', workers: int = 1,
                 tokenizer: Optional[TokenizerProtocol] = None):
        if shards < 1:
            raise ConfigurationError(f"shards must be >= 1, got {shards}")
        if workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {workers}")
        if strategy not in SHARD_STRATEGIES:
            raise ConfigurationError(
                f"Unknown shard strategy {strategy!r} (expected one of {', '.join(SHARD_STRATEGIES)})"
            )
        self.config = config or ClustererConfig()
        self.shards = shards
        self.strategy = strategy
        self.workers = workers
        self.tokenizer = tokenizer or LogTokenizer(self.config.delimiters)

    def shard_for(self, tokens: TokenSequence) -> int:
        if self.strategy == 'length':
            return len(tokens) % self.shards
        if not tokens:
            return 0
        return zlib.crc32(tokens[0].encode('utf-8')) % self.shards

    def partition(self, lines: Iterable[str]) -> List[List[TokenSequence]]:
        partitions: List[List[TokenSequence]] = [[] for _ in range(self.shards)]
        for line in lines:
            tokens = self.tokenizer.tokenize(line)
            partitions[self.shard_for(tokens)].append(tokens)
        return partitions

    def run(self, lines: Iterable[str], verbose: bool = False) -> List[ClusterSummary]:
        """
        Cluster all lines and return merged clusters

        Args:
            lines: Raw log lines
            verbose: Print progress information

        Returns:
            Merged clusters filtered by config.min_members
        """
        start = time.time()
        partitions = self.partition(lines)

        if verbose:
            sizes = ', '.join(str(len(p)) for p in partitions)
            print(f"Partitioned {sum(len(p) for p in partitions)} lines into "
                  f"{self.shards} shards by {self.strategy} ({sizes})")

        configs = [self.config] * self.shards
        if self.workers > 1:
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                shard_results = list(executor.map(_cluster_shard, configs, partitions))
        else:
            shard_results = list(map(_cluster_shard, configs, partitions))

        index = merge_results(shard_results, self.config.max_distance)

        if verbose:
            shard_total = sum(len(r) for r in shard_results)
            print(f"  ✓ Merged {shard_total} shard clusters into {len(index)} "
                  f"in {time.time() - start:.2f}s")

        return index.summaries(self.config.min_members)
