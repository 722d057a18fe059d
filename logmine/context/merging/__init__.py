"""
Merging context: incremental pattern generation.
"""

from logmine.context.merging.merger import merge, merge_patterns

__all__ = ['merge', 'merge_patterns']
