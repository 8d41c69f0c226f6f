"""Batch conversion of single components to linear light."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchlinearize.color import gamma_lookup_table
from torchlinearize.pixel._component_encoding import (
    as_components,
    component_encoding,
)
from torchlinearize.pixel._linearize import linearize_component


def to_glu(
    input: Union[Tensor, Sequence[int]],
    *,
    bit_depth: Optional[int] = None,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Convert gamma-encoded gray components to linear light, unit scale.

    Builds the lookup table for the encoding once, then maps every component
    through it.

    Parameters
    ----------
    input : Tensor
        Integer components, any shape. Each element is one gray sample with
        no alpha.
    bit_depth : int, optional
        Bits per component. Inferred from ``torch.uint8`` and
        ``torch.uint16``; required for other integer dtypes.
    dtype : torch.dtype, default torch.float64
        Floating dtype of the result.

    Returns
    -------
    Tensor
        Linear values in ``[0, 1]``, same shape and order as ``input``.

    Raises
    ------
    TypeError
        If ``input`` is not integral.
    ValueError
        If the bit depth cannot be resolved.
    ComponentRangeError
        If a component exceeds the encoding's maximum.

    Examples
    --------
    >>> to_glu(torch.tensor([10, 13], dtype=torch.uint8))
    tensor([0.0030, 0.0040], dtype=torch.float64)

    An empty input gives an empty output:

    >>> to_glu(torch.empty(0, dtype=torch.uint8)).shape
    torch.Size([0])

    See Also
    --------
    to_rgbaplu : Conversion for formats with colour or alpha.
    """
    input = as_components(input)

    encoding = component_encoding(input.dtype, bit_depth)

    table = gamma_lookup_table(
        encoding.bit_depth, dtype=dtype, device=input.device
    )

    return linearize_component(input, table)
