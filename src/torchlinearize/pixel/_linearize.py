"""Per-pixel gamma-to-linear conversion through a lookup table."""

from __future__ import annotations

from typing import Sequence, Union

import torch
from torch import Tensor

from torchlinearize.pixel._component_encoding import (
    as_components,
    check_component_range,
    check_integer_dtype,
)
from torchlinearize.pixel._pixel_format import PixelFormat, pixel_layout
from torchlinearize.pixel._premultiplied_linear_pixel import (
    PremultipliedLinearPixel,
)

_TABLE_LENGTHS = (256, 65536)


def _validate_table(table: Tensor, caller: str) -> int:
    # Returns the max encoded value the table covers.
    if not table.is_floating_point():
        raise TypeError(
            f"{caller}: table must be a floating point tensor, "
            f"got {table.dtype}"
        )

    if table.dim() != 1 or table.shape[0] not in _TABLE_LENGTHS:
        raise ValueError(
            f"{caller}: table must be 1-D with length in {_TABLE_LENGTHS}, "
            f"got shape {tuple(table.shape)}"
        )

    return table.shape[0] - 1


def _as_indices(
    input: Union[Tensor, Sequence], max_value: int, caller: str
) -> Tensor:
    input = as_components(input)

    check_integer_dtype(input.dtype, caller)

    # uint8 index tensors would be read as masks; uint16 has no comparison
    # kernels. int64 avoids both.
    indices = input.to(torch.int64)

    check_component_range(indices, max_value)

    return indices


def _premultiply(
    r: Tensor,
    g: Tensor,
    b: Tensor,
    a: Tensor,
) -> PremultipliedLinearPixel:
    return PremultipliedLinearPixel(
        r=r * a,
        g=g * a,
        b=b * a,
        a=a,
        batch_size=a.shape,
    )


def linearize_component(
    input: Union[Tensor, Sequence[int]],
    table: Tensor,
) -> Tensor:
    r"""Map bare single components to linear light.

    Each encoded value :math:`v` becomes :math:`T[v]`. The result is a plain
    tensor rather than an RGBA record; grayscale-only consumers use it as is.

    Parameters
    ----------
    input : Tensor
        Integer components of any shape, including a 0-d single value.
    table : Tensor, shape (M + 1,)
        Lookup table from :func:`gamma_lookup_table`.

    Returns
    -------
    Tensor
        Linear values with the shape of ``input`` and the dtype and device
        of ``table``.

    Raises
    ------
    TypeError
        If ``input`` is not integral or ``table`` is not floating.
    ValueError
        If ``table`` has an unsupported shape.
    ComponentRangeError
        If any component lies outside ``[0, M]``.

    Examples
    --------
    >>> table = gamma_lookup_table(8)
    >>> linearize_component(torch.tensor([0, 10, 255], dtype=torch.uint8), table)
    tensor([0.0000, 0.0030, 1.0000], dtype=torch.float64)
    """
    max_value = _validate_table(table, "linearize_component")

    indices = _as_indices(input, max_value, "linearize_component")

    return table[indices.to(table.device)]


def linearize_pixel(
    input: Union[Tensor, Sequence[Sequence[int]]],
    table: Tensor,
    format: PixelFormat = "rgba",
) -> PremultipliedLinearPixel:
    r"""Map encoded pixels to premultiplied linear-light RGBA.

    With :math:`M = \operatorname{len}(T) - 1` and
    :math:`\alpha = v_{alpha} / M` (or :math:`1` for opaque formats), every
    colour channel :math:`c` becomes :math:`T[v_c] \cdot \alpha`.

    Parameters
    ----------
    input : Tensor, shape (..., channels)
        Integer pixels. The trailing dimension holds the channels of
        ``format``; leading dimensions are batch dimensions and may be empty.
    table : Tensor, shape (M + 1,)
        Lookup table from :func:`gamma_lookup_table`. Alpha is scaled by the
        same ``M`` as colour.
    format : str, default "rgba"
        Channel layout of ``input``. One of:

        - ``"gray"``: one gray channel, opaque.
        - ``"gray_alpha"``: gray then alpha.
        - ``"rgb"`` / ``"bgr"``: three colour channels, opaque.
        - ``"rgba"`` / ``"bgra"``: three colour channels then alpha.

    Returns
    -------
    PremultipliedLinearPixel
        Batch shape ``input.shape[:-1]``.

    Raises
    ------
    TypeError
        If ``input`` is not integral or ``table`` is not floating.
    ValueError
        If ``format`` is unknown, the trailing dimension does not match it,
        or ``table`` has an unsupported shape.
    ComponentRangeError
        If any component lies outside ``[0, M]``.

    Examples
    --------
    Half-covered white:

    >>> table = gamma_lookup_table(8)
    >>> pixel = torch.tensor([255, 255, 255, 128], dtype=torch.uint8)
    >>> linearize_pixel(pixel, table, "rgba").to_tensor()
    tensor([0.5020, 0.5020, 0.5020, 0.5020], dtype=torch.float64)

    Notes
    -----
    Channel order changes only which source channel feeds which field, so
    ``"bgr"`` input equals ``"rgb"`` input with the channels reversed.
    """
    layout = pixel_layout(format)

    max_value = _validate_table(table, "linearize_pixel")

    indices = _as_indices(input, max_value, "linearize_pixel")

    if indices.dim() == 0 or indices.shape[-1] != layout.channels:
        raise ValueError(
            f"linearize_pixel: {format!r} pixels need a trailing dimension "
            f"of {layout.channels}, got shape {tuple(indices.shape)}"
        )

    indices = indices.to(table.device)

    linear = table[indices]

    r, g, b = (linear[..., channel] for channel in layout.color)

    if layout.alpha is None:
        a = torch.ones_like(r)
    else:
        # Divide in double precision; 65535 overflows float16.
        a = (
            indices[..., layout.alpha].to(torch.float64) / max_value
        ).to(table.dtype)

    return _premultiply(r, g, b, a)
