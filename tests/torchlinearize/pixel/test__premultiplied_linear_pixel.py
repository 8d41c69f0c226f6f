"""Tests for PremultipliedLinearPixel."""

import torch

from torchlinearize.pixel import PremultipliedLinearPixel, to_rgbaplu


def _pixels(n):
    values = torch.linspace(0.0, 1.0, n, dtype=torch.float64)
    return PremultipliedLinearPixel(
        r=values * 0.5,
        g=values * 0.25,
        b=values * 0.125,
        a=values,
        batch_size=[n],
    )


class TestPremultipliedLinearPixel:
    """Tensorclass behaviour relied on by consumers."""

    def test_to_tensor_order(self):
        stacked = _pixels(3).to_tensor()
        assert stacked.shape == (3, 4)
        torch.testing.assert_close(
            stacked[-1],
            torch.tensor([0.5, 0.25, 0.125, 1.0], dtype=torch.float64),
        )

    def test_indexing(self):
        pixels = _pixels(5)
        assert pixels[1:3].batch_size == torch.Size([2])
        assert pixels[4].a.item() == 1.0

    def test_reshape_to_image(self):
        pixels = _pixels(6).reshape(2, 3)
        assert pixels.r.shape == (2, 3)
        assert pixels.to_tensor().shape == (2, 3, 4)

    def test_from_conversion(self):
        pixels = to_rgbaplu(torch.full((2, 2, 3), 255, dtype=torch.uint8), "rgb")
        assert (pixels.to_tensor() == 1.0).all()
