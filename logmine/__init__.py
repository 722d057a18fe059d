"""
LogMine - Single-pass clustering of unstructured log lines

Groups structurally similar log lines and keeps one pattern per group, with
wildcards where the lines differ:

    a b c
    a b d   ->  a * *  (3 lines)
    a x c

Architecture:
- Models: Pure data structures (Pattern, Cluster, ClusterSummary)
- Protocols: Interface contracts (TokenizerProtocol)
- Context: Domain implementations (Tokenization, Scoring, Merging, Indexing)
- Services: Application orchestration (ClusteringEngine, ShardedClusterer)
- CLI: User interface (cluster command)
"""

__version__ = "1.0.0"
__license__ = "MIT"

from logmine import models, protocols
from logmine.config import ClustererConfig
from logmine.errors import LogMineError, PatternLengthError, ConfigurationError
from logmine.models import Pattern, Cluster, ClusterSummary, ClusteringStats, WILDCARD
from logmine.context import LogTokenizer, Tokenizer, ClusterIndex, distance, merge
from logmine.services import ClusteringEngine, Clusterer, ShardedClusterer

__all__ = [
    'models',
    'protocols',
    'ClustererConfig',
    'LogMineError',
    'PatternLengthError',
    'ConfigurationError',
    'Pattern',
    'Cluster',
    'ClusterSummary',
    'ClusteringStats',
    'WILDCARD',
    'LogTokenizer',
    'Tokenizer',
    'ClusterIndex',
    'distance',
    'merge',
    'ClusteringEngine',
    'Clusterer',
    'ShardedClusterer',
]
