import pytest

from probseq.training import Trainer


class CountingModel:
    def __init__(self, sequences, scale):
        self.sequences = sequences
        self.scale = scale

    @classmethod
    def train(cls, trainer, scale):
        return cls(list(trainer.training_set), scale)


def test_sequences_are_collected_in_order():
    trainer = Trainer(CountingModel)
    trainer.add_training_sequence([0, 1])
    trainer.add_training_set([[1, 1], (0,)])
    assert trainer.training_set == [(0, 1), (1, 1), (0,)]


def test_train_with_explicit_parameters():
    trainer = Trainer(CountingModel)
    trainer.add_training_set([[0, 0, 1]])
    model = trainer.train(3)
    assert model.sequences == [(0, 0, 1)]
    assert model.scale == 3


def test_train_uses_stored_parameters():
    trainer = Trainer(CountingModel, 7)
    trainer.add_training_sequence([2, 2])
    model = trainer.train()
    assert model.scale == 7
    assert model.sequences == [(2, 2)]


def test_explicit_parameters_override_stored_ones():
    trainer = Trainer(CountingModel, 7)
    assert trainer.train(9).scale == 9


def test_train_without_any_parameters_fails():
    trainer = Trainer(CountingModel)
    trainer.add_training_sequence([0])
    with pytest.raises(TypeError):
        trainer.train()


def test_training_with_empty_set():
    model = Trainer(CountingModel, 1).train()
    assert model.sequences == []


def test_stored_sequences_are_independent_of_input():
    source = [0, 1, 0]
    trainer = Trainer(CountingModel)
    trainer.add_training_sequence(source)
    source.append(1)
    assert trainer.training_set == [(0, 1, 0)]