from typing import Optional, Tuple

import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._shapes import shapes

_NUMPY_DTYPES = {
    8: numpy.uint8,
    16: numpy.uint16,
}


@hypothesis.strategies.composite
def components(
    draw: hypothesis.strategies.DrawFn,
    bit_depth: int = 8,
    shape: Optional[Tuple[int, ...]] = None,
    min_dims: int = 0,
    max_dims: int = 3,
    max_side: int = 8,
) -> torch.Tensor:
    """Integer component tensors, valid for ``bit_depth``.

    8-bit data comes back as ``torch.uint8``. 16-bit data comes back as
    ``torch.int32`` since most torch kernels lack ``torch.uint16`` support.
    """
    if shape is None:
        shape = draw(shapes(min_dims, max_dims, max_side=max_side))

    arr = draw(
        hypothesis.extra.numpy.arrays(_NUMPY_DTYPES[bit_depth], shape)
    )

    if bit_depth == 8:
        return torch.from_numpy(arr)

    return torch.from_numpy(arr.astype(numpy.int32))
