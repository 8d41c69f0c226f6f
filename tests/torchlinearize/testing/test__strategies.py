"""Tests for the hypothesis strategies shipped with the package."""

import hypothesis
import hypothesis.strategies
import torch

from torchlinearize.pixel import pixel_layout
from torchlinearize.testing.strategies import (
    bit_depths,
    components,
    pixel_formats,
    pixels,
    shapes,
)


class TestStrategies:
    """Generated data satisfies the converters' preconditions."""

    @hypothesis.given(shape=shapes())
    def test_shapes(self, shape):
        assert len(shape) <= 3
        assert all(0 <= side <= 8 for side in shape)

    @hypothesis.given(bit_depth=bit_depths, data=hypothesis.strategies.data())
    def test_components_in_range(self, bit_depth, data):
        values = data.draw(components(bit_depth))
        expected_dtype = torch.uint8 if bit_depth == 8 else torch.int32
        assert values.dtype == expected_dtype
        if values.numel():
            assert values.to(torch.int64).max().item() <= 2**bit_depth - 1
            assert values.to(torch.int64).min().item() >= 0

    @hypothesis.given(format=pixel_formats, data=hypothesis.strategies.data())
    def test_pixels_channel_dimension(self, format, data):
        values = data.draw(pixels(format))
        assert values.shape[-1] == pixel_layout(format).channels
