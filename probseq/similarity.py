"""Scoring sequences by their similarity to a weighted set of patterns."""

from collections import Counter
from collections.abc import Mapping, Sequence

from probseq.evaluation import ProbabilisticModel
from probseq.training import Trainer
from probseq.util import close

_NEAR_MATCH_WEIGHT = 0.001
_MAX_UNSIGNED = 2**32 - 1


def calculate_normalizer(
    skip_length: int,
    skip_offset: int,
    max_length: int,
    counter: Mapping[tuple[int, ...], int],
    alphabet_size: int,
) -> float:
    """Return the total weight used to normalize similarity scores."""
    patterns_differ_one = (alphabet_size - 1) * (max_length - skip_length)
    patterns = sorted(counter.items())
    total = 0.0
    for first, count in patterns:
        total += count
        # The mismatch count is deliberately carried over from pattern to pattern.
        diff = 0
        near_matches = 0
        for second, _ in patterns:
            for i in range(max_length):
                if skip_offset <= i <= skip_offset + skip_length:
                    if first[i] != second[i]:
                        diff += 2
                elif first[i] != second[i]:
                    diff += 1
            if diff == 1:
                near_matches += 1
        total += _NEAR_MATCH_WEIGHT * count * (patterns_differ_one - near_matches)
    return total


class SimilarityBasedSequenceWeighting(ProbabilisticModel):
    """Scores a window by exact and one-mismatch matches to known patterns."""

    def __init__(
        self,
        counter: Mapping[Sequence[int], int],
        normalizer: float,
        skip_offset: int,
        skip_length: int,
        skip_sequence: Sequence[int],
    ) -> None:
        self.counter: dict[tuple[int, ...], int] = dict(
            sorted((tuple(pattern), count) for pattern, count in counter.items())
        )
        self.normalizer = normalizer
        self.skip_offset = skip_offset
        self.skip_length = skip_length
        self.skip_sequence = tuple(skip_sequence)

    @classmethod
    def train(
        cls,
        trainer: Trainer,
        alphabet_size: int,
        skip_offset: int,
        skip_length: int,
        skip_sequence: Sequence[int],
    ) -> "SimilarityBasedSequenceWeighting":
        """Count the training sequences and compute their normalizer."""
        counter = Counter(tuple(sequence) for sequence in trainer.training_set)
        min_length = min((len(p) for p in counter), default=_MAX_UNSIGNED)
        normalizer = calculate_normalizer(
            skip_length, skip_offset, min_length, counter, alphabet_size
        )
        return cls(counter, normalizer, skip_offset, skip_length, skip_sequence)

    def _in_skip(self, i: int) -> bool:
        return self.skip_offset <= i < self.skip_offset + self.skip_length

    def evaluate_sequence(
        self, sequence: Sequence[int], begin: int, end: int, phase: int = 0
    ) -> float:
        if end > len(sequence) or not self.counter:
            return 0.0
        length = len(next(iter(self.counter)))
        window = tuple(sequence[begin:min(end, begin + length)])

        total = 0.0
        for pattern, count in self.counter.items():
            if len(window) != len(pattern):
                return 0.0
            diff = 0
            for i, (observed, expected) in enumerate(zip(window, pattern)):
                if self._in_skip(i):
                    if observed != self.skip_sequence[i - self.skip_offset]:
                        return 0.0
                elif observed != expected:
                    diff += 1
            if diff == 1:
                total += _NEAR_MATCH_WEIGHT * count
            elif diff == 0:
                total += count

        if close(total, 0.0, 1e-10):
            return 0.0
        return total / self.normalizer

    def initialize_cache(self, sequence: Sequence[int], phase: int = 0) -> list[float]:
        size = len(sequence)
        return [self.evaluate_sequence(sequence, i, size, phase) for i in range(size)]

    def evaluate_sequence_cached(
        self,
        cache: list[float],
        sequence: Sequence[int],
        begin: int,
        end: int,
        phase: int = 0,
    ) -> float:
        if begin < len(cache):
            return cache[begin]
        return 0.0