# probseq

`probseq` holds probabilistic models for sequences whose symbols come from a
user-defined alphabet. A symbol is a non-negative integer, and a sequence is a
list or tuple of symbols.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Models

- `probseq.discrete.DiscreteIIDModel`: independent, identically distributed
  symbols drawn from a fixed probability vector. `probability_of` returns 0
  for symbols outside the alphabet. The classmethod `train` estimates the
  probabilities by maximum likelihood from a `Trainer`. With no usable
  training symbols, every probability is 0.
- `probseq.discrete.PhasedRunLengthDistribution`: a length distribution with
  phase constraints, built from a probability vector and `delta`,
  `input_phase`, `output_phase` and `nphase`. Probabilities are renormalised
  over the lengths whose phase matches, and lengths out of phase have
  probability 0. `from_discrete_iid_model` builds one from an existing
  `DiscreteIIDModel`.
- `probseq.discrete.TargetModel`: a uniform distribution over the alphabet.
  When it evaluates a sequence, it scores each symbol by the symbol's
  frequency in that same sequence (see `sequence_distribution`).
- `probseq.similarity.SimilarityBasedSequenceWeighting`: trained on a set of
  patterns. It scores a window of a sequence by its exact matches and
  one-mismatch matches to those patterns, with a fixed sequence required
  inside a skip region. `calculate_normalizer` computes the normalising total
  that `train` uses. This model evaluates whole windows only.
  `evaluate_symbol` and drawing raise `NotYetImplemented`.

## Evaluating and drawing

Every model derives from `probseq.evaluation.ProbabilisticModel`:

- `model.evaluator(sequence, cached=False)` returns an `Evaluator` with
  `evaluate_symbol(pos)` and `evaluate_sequence(begin, end)`. With
  `cached=True`, the model's cache is built on first use and sequence
  probabilities are read from it.
- `model.generator(rng=None)` returns a `Generator` with `draw_symbol` and
  `draw_sequence(size)`. Without an `rng`, it uses a built-in Mersenne Twister
  with the fixed default seed 5489, so draws are repeatable. Any object with a
  `random()` method that returns floats in [0, 1) can be passed instead.

## Training

`probseq.training.Trainer(model_class, *params)` collects sequences through
`add_training_set` and `add_training_sequence`. `train(*params)` calls
`model_class.train(trainer, *params)`. Parameters given to `train` take
precedence over those given when the trainer was created. With neither,
`train` raises `TypeError`.

## Example

```python
from probseq.discrete import DiscreteIIDModel
from probseq.training import Trainer

coin = DiscreteIIDModel([0.2, 0.8])
coin.alphabet_size()                            # 2
coin.probability_of(1)                          # 0.8

evaluator = coin.evaluator([0, 1, 0], cached=True)
evaluator.evaluate_sequence(0, 3)               # 0.2 * 0.8 * 0.2

coin.generator().draw_sequence(5)               # same five symbols on every run

trainer = Trainer(DiscreteIIDModel)
trainer.add_training_set([[0, 0, 0, 1, 1], [0, 0, 1]])
trained = trainer.train(2)
trained.probability_of(0)                       # 5/8
```

## Helpers

- `probseq.util`: `log_sum`, `close`, `safe_division` and `mod`. The `mod`
  function always returns a non-negative remainder and raises
  `ZeroDivisionError` for a zero divisor. `INVALID_SYMBOL` marks a symbol that
  could not be produced.
- `probseq.segment`: `read_segments` splits a non-empty sequence into runs of
  equal symbols, returned as `Segment(symbol, begin, end)` objects. An empty
  sequence raises `ValueError`.
- `probseq.duration`: `SignalDuration`, a duration of a single fixed length,
  and `SingleValueRange`, the one-value range that such a duration spans.
- `probseq.errors`: `ModelError` is the base class of the package's own
  errors. The others are `InvalidModelDefinition`, `NotYetImplemented` and
  `OutOfRange`.

## What it does not do

`probseq` is a library only. It has no command-line program. It does not read
or write model definitions in any file format, and it does not serialize
models. Hidden Markov models, Markov chains and other composite models are
not part of this package.

## Running the tests

```
pytest
```