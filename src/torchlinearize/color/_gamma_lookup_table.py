"""Gamma-to-linear lookup tables for integer components."""

import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from torchlinearize.color._srgb_to_srgb_linear import srgb_to_srgb_linear

SUPPORTED_BIT_DEPTHS = (8, 16)


def gamma_lookup_table(
    bit_depth: int = 8,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[Union[torch.device, str]] = None,
) -> Tensor:
    r"""Tabulate the sRGB decoding function for every integer code.

    For a component encoding with maximum value :math:`M = 2^{d} - 1`, the
    table has :math:`M + 1` entries and

    .. math::
        T[i] = f\left(\frac{i}{M}\right)

    where :math:`f` is :func:`srgb_to_srgb_linear`.

    Parameters
    ----------
    bit_depth : int, default 8
        Bits per component. One of ``8`` or ``16``.
    dtype : torch.dtype, default torch.float64
        Floating dtype of the returned table. Entries are always evaluated in
        double precision and then cast.
    device : torch.device or str, optional
        Device to place the table on.

    Returns
    -------
    Tensor, shape (2 ** bit_depth,)
        Non-decreasing table with ``T[0] == 0`` and ``T[-1] == 1``.

    Raises
    ------
    ValueError
        If ``bit_depth`` is not supported.
    TypeError
        If ``dtype`` is not a floating dtype.

    Warns
    -----
    RuntimeWarning
        If a 16-bit table is requested in half precision, which cannot
        distinguish neighbouring codes.

    Examples
    --------
    >>> table = torchlinearize.color.gamma_lookup_table(8)
    >>> table.shape
    torch.Size([256])
    >>> table[[0, 128, 255]]
    tensor([0.0000, 0.2159, 1.0000], dtype=torch.float64)

    Notes
    -----
    The table is a fresh tensor on every call. It is only read by the pixel
    linearizer, so one table can be shared by any number of conversions of
    the same bit depth.
    """
    if bit_depth not in SUPPORTED_BIT_DEPTHS:
        raise ValueError(
            f"gamma_lookup_table: bit_depth must be one of "
            f"{SUPPORTED_BIT_DEPTHS}, got {bit_depth}"
        )

    if not dtype.is_floating_point:
        raise TypeError(
            f"gamma_lookup_table: dtype must be a floating dtype, got {dtype}"
        )

    if bit_depth == 16 and dtype in (torch.float16, torch.bfloat16):
        warnings.warn(
            f"A 16-bit lookup table in {dtype} maps many neighbouring codes "
            f"to the same value. Consider float32 or float64.",
            RuntimeWarning,
            stacklevel=2,
        )

    max_value = (1 << bit_depth) - 1

    codes = torch.arange(max_value + 1, dtype=torch.float64, device=device)

    return srgb_to_srgb_linear(codes / max_value).to(dtype)
