"""Runs of equal symbols in a sequence."""

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import groupby


@dataclass(frozen=True)
class Segment:
    """A maximal run of one symbol over the half-open range [begin, end)."""

    symbol: int
    begin: int
    end: int


def read_segments(sequence: Sequence[int]) -> list[Segment]:
    """Split a sequence into its runs of equal consecutive symbols."""
    if len(sequence) == 0:
        raise ValueError("cannot read segments from an empty sequence")
    segments = []
    begin = 0
    for symbol, run in groupby(sequence):
        end = begin + sum(1 for _ in run)
        segments.append(Segment(symbol, begin, end))
        begin = end
    return segments