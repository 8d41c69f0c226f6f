"""Hypothesis strategies for pixel linearization testing."""

from ._bit_depths import bit_depths
from ._components import components
from ._pixel_formats import pixel_formats
from ._pixels import pixels
from ._shapes import shapes

__all__ = [
    # Encoding strategies
    "bit_depths",
    "pixel_formats",
    # Tensor strategies
    "components",
    "pixels",
    "shapes",
]
