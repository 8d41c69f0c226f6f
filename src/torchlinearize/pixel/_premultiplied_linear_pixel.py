"""Premultiplied linear-light RGBA pixels."""

from __future__ import annotations

import torch
from tensordict import tensorclass
from torch import Tensor


@tensorclass
class PremultipliedLinearPixel:
    """RGBA pixels in linear light, premultiplied by alpha, unit scale.

    As a tensorclass, PremultipliedLinearPixel supports:
    - Batching: indexing with `pixels[0]` or `pixels[:2]`
    - Device movement: `pixels.to("cuda")`
    - Reshaping: `pixels.reshape(height, width)` for image layouts

    Attributes
    ----------
    r : Tensor
        Red, premultiplied by ``a``. Shape is the batch shape.
    g : Tensor
        Green, premultiplied by ``a``.
    b : Tensor
        Blue, premultiplied by ``a``.
    a : Tensor
        Alpha in ``[0, 1]``. Exactly ``1`` for formats without alpha.

    Examples
    --------
    >>> pixels = to_rgbaplu(torch.tensor([[255, 0, 0, 255]], dtype=torch.uint8))
    >>> pixels.to_tensor()
    tensor([[1., 0., 0., 1.]], dtype=torch.float64)
    """

    r: Tensor
    g: Tensor
    b: Tensor
    a: Tensor

    def to_tensor(self) -> Tensor:
        """Stack the fields into a ``(..., 4)`` tensor in RGBA order."""
        return torch.stack([self.r, self.g, self.b, self.a], dim=-1)
