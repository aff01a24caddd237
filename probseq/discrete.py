"""Independent, identically distributed models over a finite alphabet."""

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

from probseq.errors import InvalidModelDefinition
from probseq.evaluation import ProbabilisticModel
from probseq.training import Trainer
from probseq.util import mod


class DiscreteIIDModel(ProbabilisticModel):
    """Every position is drawn independently from one discrete distribution."""

    def __init__(self, probabilities: Iterable[float]) -> None:
        self.probabilities: tuple[float, ...] = tuple(float(p) for p in probabilities)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.probabilities)!r})"

    def alphabet_size(self) -> int:
        """Return the number of symbols in the alphabet."""
        return len(self.probabilities)

    def probability_of(self, symbol: int) -> float:
        """Return the probability of a symbol, 0 for symbols outside the alphabet."""
        if 0 <= symbol < len(self.probabilities):
            return self.probabilities[symbol]
        return 0.0

    def draw(self, rng: Any) -> int:
        """Draw one symbol using a source of doubles in [0, 1)."""
        if not self.probabilities:
            raise InvalidModelDefinition("cannot draw from an empty alphabet")
        value = rng.random()
        cumulative = 0.0
        for symbol, probability in enumerate(self.probabilities):
            cumulative += probability
            if value < cumulative:
                return symbol
        return len(self.probabilities) - 1

    @classmethod
    def train(cls, trainer: Trainer, alphabet_size: int) -> "DiscreteIIDModel":
        """Estimate symbol frequencies by maximum likelihood."""
        counts = Counter(
            symbol
            for sequence in trainer.training_set
            for symbol in sequence
            if 0 <= symbol < alphabet_size
        )
        total = sum(counts.values())
        if total == 0:
            return DiscreteIIDModel([0.0] * alphabet_size)
        return DiscreteIIDModel(counts[symbol] / total for symbol in range(alphabet_size))

    def evaluate_symbol(self, sequence: Sequence[int], pos: int, phase: int = 0) -> float:
        return self.probability_of(sequence[pos])

    def draw_symbol(
        self, rng: Any, pos: int, phase: int = 0, context: Sequence[int] = ()
    ) -> int:
        return self.draw(rng)


class PhasedRunLengthDistribution(DiscreteIIDModel):
    """Length distribution restricted to lengths that end in a given phase."""

    def __init__(
        self,
        probabilities: Iterable[float],
        delta: int,
        input_phase: int,
        output_phase: int,
        nphase: int,
    ) -> None:
        super().__init__(probabilities)
        self.delta = delta
        self.input_phase = input_phase
        self.output_phase = output_phase
        self.nphase = nphase
        self.normfactor = sum(
            super(PhasedRunLengthDistribution, self).probability_of(i)
            for i in range(self.alphabet_size())
            if self._in_phase(i + delta)
        )

    def _in_phase(self, length: int) -> bool:
        return mod(length + self.input_phase - 1, self.nphase) == self.output_phase

    @classmethod
    def from_discrete_iid_model(
        cls,
        model: DiscreteIIDModel,
        delta: int,
        input_phase: int,
        output_phase: int,
        nphase: int,
    ) -> "PhasedRunLengthDistribution":
        """Build a phased distribution from the probabilities of another model."""
        return cls(model.probabilities, delta, input_phase, output_phase, nphase)

    def probability_of(self, symbol: int) -> float:
        length = symbol + self.delta
        if not self._in_phase(length):
            return 0.0
        if self.normfactor == 0:
            raise InvalidModelDefinition("no length of this distribution is in phase")
        return super().probability_of(length) / self.normfactor

    def draw(self, rng: Any) -> int:
        length = super().draw(rng)
        while not self._in_phase(length):
            length += 1
        duration = length - self.delta
        if duration < 1:
            length = self.delta + 1
            while not self._in_phase(length):
                length += 1
            duration = length - self.delta
        return duration


class TargetModel(DiscreteIIDModel):
    """Evaluates a sequence by the symbol frequencies of that same sequence."""

    def __init__(self, alphabet_size: int) -> None:
        uniform = [1.0 / alphabet_size] * alphabet_size if alphabet_size > 0 else []
        super().__init__(uniform)

    def sequence_distribution(self, sequence: Sequence[int]) -> DiscreteIIDModel:
        """Return the maximum-likelihood distribution of the given sequence."""
        trainer = Trainer(DiscreteIIDModel)
        trainer.add_training_sequence(sequence)
        return trainer.train(self.alphabet_size())

    def evaluate_symbol(self, sequence: Sequence[int], pos: int, phase: int = 0) -> float:
        return self.sequence_distribution(sequence).evaluate_symbol(sequence, pos)