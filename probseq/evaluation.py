"""Base probabilistic model with evaluators and generators."""

import math
from collections.abc import Sequence
from typing import Any

from probseq.errors import NotYetImplemented

_MASK32 = 0xFFFFFFFF
_DEFAULT_SEED = 5489
_STATE_SIZE = 624
_SHIFT_SIZE = 397


class _MersenneTwister:
    """32-bit Mersenne Twister, seeded like the standard mt19937 engine."""

    def __init__(self, seed: int = _DEFAULT_SEED) -> None:
        self.seed(seed)

    def seed(self, value: int) -> None:
        state = [value & _MASK32]
        for i in range(1, _STATE_SIZE):
            previous = state[-1]
            state.append((1812433253 * (previous ^ (previous >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _STATE_SIZE

    def _twist(self) -> None:
        state = self._state
        for i in range(_STATE_SIZE):
            y = (state[i] & 0x80000000) | (state[(i + 1) % _STATE_SIZE] & 0x7FFFFFFF)
            value = state[(i + _SHIFT_SIZE) % _STATE_SIZE] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= _STATE_SIZE:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def discard(self, count: int) -> None:
        for _ in range(count):
            self()

    def random(self) -> float:
        """Return a double in [0, 1) built from two 32-bit outputs."""
        low = self()
        high = self()
        value = (low + high * 2**32) / 2**64
        if value >= 1.0:
            return math.nextafter(1.0, 0.0)
        return value


class ProbabilisticModel:
    """Model of symbol sequences; subclasses supply symbol probabilities."""

    def evaluate_symbol(self, sequence: Sequence[int], pos: int, phase: int = 0) -> float:
        """Return the probability of the symbol at pos."""
        raise NotYetImplemented()

    def evaluate_sequence(
        self, sequence: Sequence[int], begin: int, end: int, phase: int = 0
    ) -> float:
        """Return the probability of the symbols in [begin, end)."""
        return math.prod(
            self.evaluate_symbol(sequence, pos, phase) for pos in range(begin, end)
        )

    def initialize_cache(self, sequence: Sequence[int], phase: int = 0) -> Any:
        """Precompute what cached evaluation needs for a sequence."""
        return [self.evaluate_symbol(sequence, pos, phase) for pos in range(len(sequence))]

    def evaluate_sequence_cached(
        self, cache: Any, sequence: Sequence[int], begin: int, end: int, phase: int = 0
    ) -> float:
        """Return the probability of [begin, end) using a precomputed cache."""
        return math.prod(cache[begin:end])

    def draw_symbol(
        self, rng: Any, pos: int, phase: int = 0, context: Sequence[int] = ()
    ) -> int:
        """Draw one symbol at pos given the symbols drawn before it."""
        raise NotYetImplemented()

    def draw_sequence(self, rng: Any, size: int, phase: int = 0) -> list[int]:
        """Draw a sequence of the given size, one symbol at a time."""
        drawn: list[int] = []
        for pos in range(size):
            drawn.append(self.draw_symbol(rng, pos, phase, drawn))
        return drawn

    def evaluator(self, sequence: Sequence[int], cached: bool = False) -> "Evaluator":
        """Return an evaluator of this model bound to a sequence."""
        return Evaluator(self, sequence, cached)

    def generator(self, rng: Any = None) -> "Generator":
        """Return a generator drawing from this model."""
        return Generator(self, rng)


class Evaluator:
    """Evaluate a model over one fixed sequence, optionally with a cache."""

    def __init__(
        self, model: ProbabilisticModel, sequence: Sequence[int], cached: bool = False
    ) -> None:
        self.model = model
        self.sequence = tuple(sequence)
        self.cached = cached
        self.cache: Any = None
        self._initialized = False

    def _ensure_cache(self, phase: int) -> None:
        if not self._initialized:
            self._initialized = True
            self.cache = self.model.initialize_cache(self.sequence, phase)

    def evaluate_symbol(self, pos: int, phase: int = 0) -> float:
        """Return the probability of the symbol at pos."""
        if self.cached:
            self._ensure_cache(phase)
        return self.model.evaluate_symbol(self.sequence, pos, phase)

    def evaluate_sequence(self, begin: int, end: int, phase: int = 0) -> float:
        """Return the probability of the symbols in [begin, end)."""
        if self.cached:
            self._ensure_cache(phase)
            return self.model.evaluate_sequence_cached(
                self.cache, self.sequence, begin, end, phase
            )
        return self.model.evaluate_sequence(self.sequence, begin, end, phase)


class Generator:
    """Draw symbols and sequences from a model with a random source."""

    def __init__(self, model: ProbabilisticModel, rng: Any = None) -> None:
        self.model = model
        self.rng = rng if rng is not None else _MersenneTwister()

    def draw_symbol(
        self, pos: int, phase: int = 0, context: Sequence[int] = ()
    ) -> int:
        """Draw one symbol at pos given a context."""
        return self.model.draw_symbol(self.rng, pos, phase, context)

    def draw_sequence(self, size: int, phase: int = 0) -> list[int]:
        """Draw a sequence of the given size."""
        return self.model.draw_sequence(self.rng, size, phase)