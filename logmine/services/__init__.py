"""
Services layer - application orchestration.
"""

from logmine.services.clusterer import ClusteringEngine
from logmine.services.sharding import ShardedClusterer, merge_results

# Provide consistent naming
Clusterer = ClusteringEngine

__all__ = [
    'ClusteringEngine',
    'ShardedClusterer',
    'merge_results',
    # Aliases
    'Clusterer',
]
