class BrainError(Exception):
    """Base class for every error raised by the brain core."""


class LayerShapeError(BrainError, ValueError):
    """
    Raised when layers are composed with mismatched vector counts or lengths,
    or when a layer receives vectors that do not match its declared sizes.
    """


class EncodingError(BrainError, ValueError):
    """Raised when an event cannot be represented as a vector, or a vector as an event."""
