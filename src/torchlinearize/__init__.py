"""torchlinearize: gamma-encoded pixels to linear light for PyTorch."""

from . import (
    color,
    pixel,
)

__all__ = [
    "color",
    "pixel",
]

__version__ = "0.1.0"
