"""
Context layer - domain-specific implementations.
"""

from logmine.context.tokenization import LogTokenizer, Tokenizer
from logmine.context.scoring import distance, pattern_distance
from logmine.context.merging import merge, merge_patterns
from logmine.context.indexing import ClusterIndex

__all__ = [
    'LogTokenizer',
    'Tokenizer',
    'distance',
    'pattern_distance',
    'merge',
    'merge_patterns',
    'ClusterIndex',
]
