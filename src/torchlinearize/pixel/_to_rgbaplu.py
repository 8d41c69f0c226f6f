"""Batch conversion of pixels to premultiplied linear RGBA."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchlinearize.color import gamma_lookup_table
from torchlinearize.pixel._component_encoding import (
    as_components,
    component_encoding,
)
from torchlinearize.pixel._linearize import linearize_pixel
from torchlinearize.pixel._pixel_format import PixelFormat
from torchlinearize.pixel._premultiplied_linear_pixel import (
    PremultipliedLinearPixel,
)


def to_rgbaplu(
    input: Union[Tensor, Sequence[Sequence[int]]],
    format: PixelFormat = "rgba",
    *,
    bit_depth: Optional[int] = None,
    dtype: torch.dtype = torch.float64,
) -> PremultipliedLinearPixel:
    r"""Convert encoded pixels to RGBA premultiplied linear-light unit scale.

    This is the usual preparation step before downsampling or comparing
    images: averages of the result are physically meaningful, and pixels
    with little coverage contribute little colour.

    Parameters
    ----------
    input : Tensor, shape (..., channels)
        Integer pixels laid out as ``format``.
    format : str, default "rgba"
        One of ``"gray"``, ``"gray_alpha"``, ``"rgb"``, ``"bgr"``,
        ``"rgba"``, ``"bgra"``.
    bit_depth : int, optional
        Bits per component. Inferred from ``torch.uint8`` and
        ``torch.uint16``; required for other integer dtypes.
    dtype : torch.dtype, default torch.float64
        Floating dtype of the result.

    Returns
    -------
    PremultipliedLinearPixel
        Batch shape ``input.shape[:-1]``, same order as ``input``.

    Raises
    ------
    TypeError
        If ``input`` is not integral.
    ValueError
        If the bit depth cannot be resolved, ``format`` is unknown or the
        channel dimension does not match it.
    ComponentRangeError
        If a component exceeds the encoding's maximum.

    Examples
    --------
    Opaque red and half-covered white:

    >>> pixels = torch.tensor(
    ...     [[255, 0, 0, 255], [255, 255, 255, 128]], dtype=torch.uint8
    ... )
    >>> to_rgbaplu(pixels).to_tensor()
    tensor([[1.0000, 0.0000, 0.0000, 1.0000],
            [0.5020, 0.5020, 0.5020, 0.5020]], dtype=torch.float64)

    16-bit BGR held in an ``int32`` tensor:

    >>> pixels = torch.tensor([[0, 0, 65535]], dtype=torch.int32)
    >>> to_rgbaplu(pixels, "bgr", bit_depth=16).to_tensor()
    tensor([[1., 0., 0., 1.]], dtype=torch.float64)

    See Also
    --------
    to_glu : Conversion for bare gray components.
    """
    input = as_components(input)

    encoding = component_encoding(input.dtype, bit_depth)

    table = gamma_lookup_table(
        encoding.bit_depth, dtype=dtype, device=input.device
    )

    return linearize_pixel(input, table, format)
