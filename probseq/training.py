"""Collecting training sequences and building models from them."""

from collections.abc import Iterable, Sequence
from typing import Any


class Trainer:
    """Gather training sequences and hand them to a model class to train.

    Parameters given when the trainer is created are kept and used by
    ``train`` when it is called without parameters of its own.
    """

    def __init__(self, model_class: Any, *args: Any) -> None:
        self.model_class = model_class
        self.params: tuple[Any, ...] = args
        self.training_set: list[tuple[int, ...]] = []

    def add_training_set(self, sequences: Iterable[Sequence[int]]) -> None:
        """Append every sequence of an iterable to the training set."""
        self.training_set.extend(tuple(sequence) for sequence in sequences)

    def add_training_sequence(self, sequence: Sequence[int]) -> None:
        """Append one sequence to the training set."""
        self.training_set.append(tuple(sequence))

    def train(self, *args: Any) -> Any:
        """Build a model from the training set.

        Explicit parameters take precedence over those given at creation.
        """
        params = args or self.params
        if not params:
            raise TypeError("cannot create a model without parameters")
        return self.model_class.train(self, *params)