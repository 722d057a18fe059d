"""
Scoring context: sequence/pattern distance.
"""

from logmine.context.scoring.distance import distance, pattern_distance

__all__ = ['distance', 'pattern_distance']
