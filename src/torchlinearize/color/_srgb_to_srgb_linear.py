"""sRGB to linear sRGB transfer function."""

import torch
from torch import Tensor

_THRESHOLD = 0.04045


def srgb_to_srgb_linear(input: Tensor) -> Tensor:
    r"""Convert gamma-encoded sRGB values to linear light.

    Applies the IEC 61966-2-1 decoding transfer function elementwise. The
    conversion is differentiable and supports arbitrary tensor shapes.

    Mathematical Definition
    -----------------------
    For each input value :math:`s`:

    .. math::
        f(s) = \begin{cases}
            \frac{s}{12.92} & \text{if } s \leq 0.04045 \\
            \left(\frac{s + 0.055}{1.055}\right)^{2.4} & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Gamma-encoded values in the unit range. Any shape, any floating
        dtype.

    Returns
    -------
    Tensor
        Linear-light values with the same shape and dtype as ``input``.

    Raises
    ------
    TypeError
        If ``input`` is not a floating point tensor.

    Examples
    --------
    >>> srgb = torch.tensor([0.2, 0.5, 0.8])
    >>> torchlinearize.color.srgb_to_srgb_linear(srgb)
    tensor([0.0331, 0.2140, 0.6038])

    Values at or below the threshold take the linear segment:

    >>> torchlinearize.color.srgb_to_srgb_linear(torch.tensor([0.04]))
    tensor([0.0031])

    Notes
    -----
    - The linear segment near black keeps quantization noise from being
      amplified by the power curve.
    - The two branches meet at the threshold, so the function is continuous.

    See Also
    --------
    srgb_linear_to_srgb : Inverse conversion.
    gamma_lookup_table : Tabulates this function for integer components.

    References
    ----------
    .. [1] IEC 61966-2-1:1999, "Multimedia systems and equipment - Colour
           measurement and management - Part 2-1: Colour management - Default
           RGB colour space - sRGB"
    """
    if not input.is_floating_point():
        raise TypeError(
            f"srgb_to_srgb_linear: input must be a floating point tensor, "
            f"got {input.dtype}"
        )

    # Clamp the power branch's base so the unused side of torch.where never
    # produces NaN gradients for negative inputs.
    gamma = torch.pow(
        torch.clamp((input + 0.055) / 1.055, min=0.0),
        2.4,
    )

    return torch.where(input <= _THRESHOLD, input / 12.92, gamma)
