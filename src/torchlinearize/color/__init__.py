"""sRGB transfer functions and lookup tables."""

from torchlinearize.color._gamma_lookup_table import (
    SUPPORTED_BIT_DEPTHS,
    gamma_lookup_table,
)
from torchlinearize.color._srgb_linear_to_srgb import (
    srgb_linear_to_srgb,
)
from torchlinearize.color._srgb_to_srgb_linear import (
    srgb_to_srgb_linear,
)

__all__ = [
    "SUPPORTED_BIT_DEPTHS",
    "gamma_lookup_table",
    "srgb_linear_to_srgb",
    "srgb_to_srgb_linear",
]
