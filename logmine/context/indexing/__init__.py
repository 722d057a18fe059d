"""
Indexing context: length-bucketed cluster storage.
"""

from logmine.context.indexing.cluster_index import ClusterIndex

__all__ = ['ClusterIndex']
