"""Linear sRGB to sRGB transfer function."""

import torch
from torch import Tensor

_THRESHOLD = 0.0031308


def srgb_linear_to_srgb(input: Tensor) -> Tensor:
    r"""Convert linear-light values back to gamma-encoded sRGB.

    Mathematical Definition
    -----------------------
    .. math::
        g(l) = \begin{cases}
            12.92 \, l & \text{if } l \leq 0.0031308 \\
            1.055 \, l^{1/2.4} - 0.055 & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Linear-light values, typically in ``[0, 1]``.

    Returns
    -------
    Tensor
        Gamma-encoded values with the same shape and dtype as ``input``.

    Examples
    --------
    >>> linear = torch.tensor([0.0331, 0.2140, 0.6038])
    >>> torchlinearize.color.srgb_linear_to_srgb(linear)
    tensor([0.2000, 0.5000, 0.8000])

    See Also
    --------
    srgb_to_srgb_linear : Forward conversion.
    """
    if not input.is_floating_point():
        raise TypeError(
            f"srgb_linear_to_srgb: input must be a floating point tensor, "
            f"got {input.dtype}"
        )

    # Keep the base strictly positive; l ** (1 / 2.4) has an infinite
    # derivative at zero.
    base = torch.clamp(input, min=_THRESHOLD)

    return torch.where(
        input <= _THRESHOLD,
        input * 12.92,
        1.055 * torch.pow(base, 1.0 / 2.4) - 0.055,
    )
