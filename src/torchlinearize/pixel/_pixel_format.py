"""Pixel channel layouts."""

from typing import Dict, Literal, NamedTuple, Optional, Tuple

PixelFormat = Literal[
    "gray",
    "gray_alpha",
    "rgb",
    "bgr",
    "rgba",
    "bgra",
]


class PixelLayout(NamedTuple):
    """Where each canonical channel lives in an encoded pixel.

    Parameters
    ----------
    channels : int
        Number of components per pixel (size of the trailing dimension).
    color : tuple of int
        Source channel index feeding red, green and blue, in that order.
        Grayscale layouts feed all three from the same channel.
    alpha : int or None
        Source channel index of alpha, or ``None`` for opaque layouts.
    """

    channels: int
    color: Tuple[int, int, int]
    alpha: Optional[int]


PIXEL_LAYOUTS: Dict[str, PixelLayout] = {
    "gray": PixelLayout(1, (0, 0, 0), None),
    "gray_alpha": PixelLayout(2, (0, 0, 0), 1),
    "rgb": PixelLayout(3, (0, 1, 2), None),
    "bgr": PixelLayout(3, (2, 1, 0), None),
    "rgba": PixelLayout(4, (0, 1, 2), 3),
    "bgra": PixelLayout(4, (2, 1, 0), 3),
}


def pixel_layout(format: str) -> PixelLayout:
    """Look up the channel layout of a pixel format.

    Raises
    ------
    ValueError
        If ``format`` is not one of :data:`PixelFormat`.
    """
    try:
        return PIXEL_LAYOUTS[format]
    except KeyError:
        raise ValueError(
            f"pixel_layout: format must be one of {sorted(PIXEL_LAYOUTS)}, "
            f"got {format!r}"
        ) from None
