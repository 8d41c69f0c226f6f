"""Integer component encodings."""

from typing import NamedTuple, Optional, Sequence, Union

import torch
from torch import Tensor

from torchlinearize.color import SUPPORTED_BIT_DEPTHS
from torchlinearize.pixel._exceptions import ComponentRangeError

_INFERRED_BIT_DEPTHS = {
    torch.uint8: 8,
    torch.uint16: 16,
}

# Components are indexed as int64; uint64 values above 2**63 would wrap.
_UNSUPPORTED_INTEGER_DTYPES = (torch.uint64,)


def as_components(input: Union[Tensor, Sequence]) -> Tensor:
    """Coerce pixel data to a tensor without changing integer dtypes.

    Empty sequences have no element type to infer, so they become empty
    ``int64`` tensors instead of ``torch.as_tensor``'s default float.
    """
    if isinstance(input, Tensor):
        return input

    input = torch.as_tensor(input)

    if input.numel() == 0:
        return input.to(torch.int64)

    return input


def check_integer_dtype(dtype: torch.dtype, caller: str) -> None:
    """Raise ``TypeError`` unless ``dtype`` can hold pixel components."""
    if dtype.is_floating_point or dtype.is_complex or dtype == torch.bool:
        raise TypeError(
            f"{caller}: pixel components must have an integer dtype, "
            f"got {dtype}"
        )

    if dtype in _UNSUPPORTED_INTEGER_DTYPES:
        raise TypeError(
            f"{caller}: {dtype} components are not supported, "
            f"use a signed or narrower integer dtype"
        )


class ComponentEncoding(NamedTuple):
    """Unsigned integer component at a fixed bit depth.

    Parameters
    ----------
    bit_depth : int
        Bits per component, ``8`` or ``16``.
    max_value : int
        Largest encoded value, ``2 ** bit_depth - 1``.
    """

    bit_depth: int
    max_value: int


def component_encoding(
    dtype: torch.dtype,
    bit_depth: Optional[int] = None,
) -> ComponentEncoding:
    """Resolve the component encoding of integer pixel data.

    Parameters
    ----------
    dtype : torch.dtype
        Dtype of the tensor holding the components.
    bit_depth : int, optional
        Bits per component. Inferred for ``torch.uint8`` (8) and
        ``torch.uint16`` (16); required for every other integer dtype.

    Returns
    -------
    ComponentEncoding

    Raises
    ------
    TypeError
        If ``dtype`` is not an integer dtype.
    ValueError
        If ``bit_depth`` is missing and cannot be inferred, is not supported,
        or does not fit in ``dtype``.

    Examples
    --------
    >>> component_encoding(torch.uint8)
    ComponentEncoding(bit_depth=8, max_value=255)
    >>> component_encoding(torch.int32, bit_depth=16)
    ComponentEncoding(bit_depth=16, max_value=65535)
    """
    check_integer_dtype(dtype, "component_encoding")

    if bit_depth is None:
        if dtype not in _INFERRED_BIT_DEPTHS:
            raise ValueError(
                f"component_encoding: cannot infer bit_depth from {dtype}, "
                f"pass bit_depth explicitly"
            )

        bit_depth = _INFERRED_BIT_DEPTHS[dtype]

    if bit_depth not in SUPPORTED_BIT_DEPTHS:
        raise ValueError(
            f"component_encoding: bit_depth must be one of "
            f"{SUPPORTED_BIT_DEPTHS}, got {bit_depth}"
        )

    max_value = (1 << bit_depth) - 1

    if torch.iinfo(dtype).max < max_value:
        raise ValueError(
            f"component_encoding: {dtype} cannot hold {bit_depth}-bit "
            f"components"
        )

    return ComponentEncoding(bit_depth, max_value)


def check_component_range(input: Tensor, max_value: int) -> None:
    """Fail on the first component outside ``[0, max_value]``.

    Skipped for meta tensors and under ``torch.compile``, where reading
    values back to the host is not possible.
    """
    if input.is_meta or torch.compiler.is_compiling():
        return

    if input.numel() == 0:
        return

    invalid = (input < 0) | (input > max_value)

    if invalid.any():
        index = tuple(invalid.nonzero()[0].tolist())

        raise ComponentRangeError(index, input[index].item(), max_value)
