"""Gamma-encoded pixels to linear light.

Operations
----------
to_glu : Gray components to linear light (one value per component).
to_rgbaplu : Pixels of any supported format to premultiplied linear RGBA.
linearize_component : ``to_glu`` with a caller-supplied lookup table.
linearize_pixel : ``to_rgbaplu`` with a caller-supplied lookup table.
component_encoding : Resolve bit depth and maximum value for a dtype.
"""

from torchlinearize.pixel._component_encoding import (
    ComponentEncoding,
    component_encoding,
)
from torchlinearize.pixel._exceptions import ComponentRangeError, PixelError
from torchlinearize.pixel._linearize import (
    linearize_component,
    linearize_pixel,
)
from torchlinearize.pixel._pixel_format import (
    PIXEL_LAYOUTS,
    PixelFormat,
    PixelLayout,
    pixel_layout,
)
from torchlinearize.pixel._premultiplied_linear_pixel import (
    PremultipliedLinearPixel,
)
from torchlinearize.pixel._to_glu import to_glu
from torchlinearize.pixel._to_rgbaplu import to_rgbaplu

__all__ = [
    "PIXEL_LAYOUTS",
    "ComponentEncoding",
    "ComponentRangeError",
    "PixelError",
    "PixelFormat",
    "PixelLayout",
    "PremultipliedLinearPixel",
    "component_encoding",
    "linearize_component",
    "linearize_pixel",
    "pixel_layout",
    "to_glu",
    "to_rgbaplu",
]
