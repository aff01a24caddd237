"""Exceptions raised by probabilistic models."""


class ModelError(Exception):
    """Base class of every error raised by the models in this package."""

    default_message = "model error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidModelDefinition(ModelError):
    """A model was defined with inconsistent or invalid parameters."""

    default_message = "invalid model definition"


class NotYetImplemented(ModelError):
    """The requested operation is not available for this model."""

    default_message = "not yet implemented"


class OutOfRange(ModelError):
    """A position or value lies outside the range a model accepts."""

    default_message = "out of range"