"""Tests for pixel layouts."""

import pytest

from torchlinearize.pixel import PIXEL_LAYOUTS, PixelLayout, pixel_layout


class TestPixelLayout:
    """Format names resolve to channel layouts."""

    @pytest.mark.parametrize(
        "format, channels",
        [
            ("gray", 1),
            ("gray_alpha", 2),
            ("rgb", 3),
            ("bgr", 3),
            ("rgba", 4),
            ("bgra", 4),
        ],
    )
    def test_channel_counts(self, format, channels):
        assert pixel_layout(format).channels == channels

    def test_reversed_orderings(self):
        assert pixel_layout("bgr").color == pixel_layout("rgb").color[::-1]
        assert pixel_layout("bgra").alpha == pixel_layout("rgba").alpha

    def test_indices_within_channels(self):
        for layout in PIXEL_LAYOUTS.values():
            indices = list(layout.color)
            if layout.alpha is not None:
                indices.append(layout.alpha)
            assert all(0 <= i < layout.channels for i in indices)

    def test_alpha_is_last(self):
        for layout in PIXEL_LAYOUTS.values():
            if layout.alpha is not None:
                assert layout.alpha == layout.channels - 1

    def test_unknown(self):
        with pytest.raises(ValueError, match="'rgbx'"):
            pixel_layout("rgbx")

    def test_is_named_tuple(self):
        assert isinstance(pixel_layout("rgb"), PixelLayout)
