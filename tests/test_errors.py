import pytest

from probseq.errors import (
    InvalidModelDefinition,
    ModelError,
    NotYetImplemented,
    OutOfRange,
)


@pytest.mark.parametrize(
    "error_class", [InvalidModelDefinition, NotYetImplemented, OutOfRange]
)
def test_subclasses_are_caught_as_model_error(error_class):
    with pytest.raises(ModelError) as info:
        raise error_class()
    assert info.value.message == error_class.default_message


@pytest.mark.parametrize(
    "error_class", [ModelError, InvalidModelDefinition, NotYetImplemented, OutOfRange]
)
def test_custom_message_is_kept(error_class):
    error = error_class("position 7 is past the end")
    assert str(error) == "position 7 is past the end"
    assert error.message == "position 7 is past the end"


@pytest.mark.parametrize(
    "error_class", [InvalidModelDefinition, NotYetImplemented, OutOfRange]
)
def test_default_message_matches_class(error_class):
    assert str(error_class()) == error_class.default_message


def test_distinct_classes_do_not_catch_each_other():
    error = OutOfRange("index 3 is out of range")
    assert not isinstance(error, NotYetImplemented)
    assert not isinstance(error, InvalidModelDefinition)
    assert isinstance(error, ModelError)
    assert error.message == "index 3 is out of range"
    assert str(error) == "index 3 is out of range"


def test_not_yet_implemented_message():
    assert str(NotYetImplemented()) == "not yet implemented"