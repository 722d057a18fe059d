"""
Distance: positional dissimilarity between a token sequence and a pattern

    distance = mismatching fixed slots / length

A wildcard slot matches any token. Comparison is exact string equality per
position, O(length), with no edit distance. Lengths must be equal; the
cluster index only ever compares sequences from the same length bucket.

Example:
    seq     = ('a', 'x', 'c')
    pattern = ('a', 'b', *)
    distance = 1/3  (position 1 differs, position 2 is a wildcard)
"""

from typing import Optional, Sequence

from logmine.errors import PatternLengthError
from logmine.models import Pattern, WILDCARD


def distance(seq: Sequence[str], pattern: Pattern, limit: Optional[float] = None) -> float:
    """
    Fraction of fixed pattern slots that differ from ``seq``.

    Args:
        seq: Token sequence of the same length as ``pattern``
        pattern: Cluster pattern
        limit: Stop scanning once the running distance exceeds this value.
            The partial result is then returned; it is always > limit.

    Returns:
        Distance in [0, 1]; 0.0 for zero-length input

    Raises:
        PatternLengthError: if the lengths differ
    """
    length = len(pattern)
    if len(seq) != length:
        raise PatternLengthError(length, len(seq))
    if length == 0:
        return 0.0

    mismatches = 0
    for token, slot in zip(seq, pattern.slots):
        if slot is not WILDCARD and slot != token:
            mismatches += 1
            if limit is not None and mismatches / length > limit:
                return mismatches / length

    return mismatches / length


def pattern_distance(first: Pattern, second: Pattern) -> float:
    """
    Distance between two patterns of equal length.

    A position matches when either side is a wildcard or both fixed tokens
    are equal. Used to reconcile clusters produced by separate shards.
    """
    length = len(first)
    if len(second) != length:
        raise PatternLengthError(length, len(second))
    if length == 0:
        return 0.0

    mismatches = sum(
        1 for a, b in zip(first.slots, second.slots)
        if a is not WILDCARD and b is not WILDCARD and a != b
    )
    return mismatches / length
