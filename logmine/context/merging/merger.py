"""
Pattern Merger: fold a new line into a cluster pattern

Position by position:
1. Wildcard slot -> stays wildcard
2. Fixed slot equal to the token -> stays fixed
3. Fixed slot that differs -> becomes wildcard

Slots only ever move from fixed to wildcard, so merging the same line twice
gives the same pattern as merging it once.

Example:
    pattern: a b c
    line:    a b d
    result:  a b *
"""

from typing import Sequence

from logmine.errors import PatternLengthError
from logmine.models import Pattern, WILDCARD


def merge(pattern: Pattern, seq: Sequence[str]) -> Pattern:
    """
    Merge a token sequence into a pattern of the same length.

    Returns ``pattern`` itself when no slot changes.

    Raises:
        PatternLengthError: if the lengths differ
    """
    if len(seq) != len(pattern):
        raise PatternLengthError(len(pattern), len(seq))

    changed = False
    slots = []
    for slot, token in zip(pattern.slots, seq):
        if slot is not WILDCARD and slot != token:
            slots.append(WILDCARD)
            changed = True
        else:
            slots.append(slot)

    return Pattern(tuple(slots)) if changed else pattern


def merge_patterns(first: Pattern, second: Pattern) -> Pattern:
    """Slot-wise merge of two patterns; used when combining shard results."""
    if len(second) != len(first):
        raise PatternLengthError(len(first), len(second))

    return Pattern(tuple(
        a if a is not WILDCARD and a == b else WILDCARD
        for a, b in zip(first.slots, second.slots)
    ))
