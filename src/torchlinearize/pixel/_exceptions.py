"""Exceptions for pixel linearization."""


class PixelError(Exception):
    """Base exception for all pixel linearization errors."""

    pass


class ComponentRangeError(PixelError, ValueError):
    """Raised when an encoded component exceeds its encoding's range.

    This is a broken contract with whatever produced the pixels (usually a
    decoder), not a condition worth retrying.

    Attributes
    ----------
    index : tuple of int
        Index of the first offending element in the input tensor.
    value : int
        The offending component value.
    max_value : int
        Largest value the encoding allows.
    """

    def __init__(self, index, value, max_value):
        self.index = index
        self.value = value
        self.max_value = max_value

        super().__init__(
            f"component {value} at index {index} is outside [0, {max_value}]"
        )
