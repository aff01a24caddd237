"""Duration distributions for states that emit a fixed number of symbols."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class SingleValueRange:
    """A range of durations holding exactly one value."""

    value: int

    def __iter__(self) -> Iterator[int]:
        yield self.value


@dataclass(frozen=True)
class SignalDuration:
    """A duration that is always exactly duration_size."""

    duration_size: int

    def range(self) -> SingleValueRange:
        """Return the durations this distribution can take."""
        return SingleValueRange(self.duration_size)

    def maximum_size(self) -> int:
        """Return the largest duration this distribution can take."""
        return self.duration_size

    def probability_of_length(self, length: int) -> float:
        """Return 1 for the fixed duration and 0 for any other length."""
        if length == self.duration_size:
            return 1.0
        return 0.0