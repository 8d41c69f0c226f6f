"""Tests for srgb_linear_to_srgb."""

import pytest
import torch
from torch.autograd import gradcheck

from torchlinearize.color import (
    srgb_linear_to_srgb,
    srgb_to_srgb_linear,
)


class TestSrgbLinearToSrgbKnownValues:
    """Tests against the IEC 61966-2-1 encoding curve."""

    def test_endpoints(self):
        srgb = srgb_linear_to_srgb(
            torch.tensor([0.0, 1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            srgb, torch.tensor([0.0, 1.0], dtype=torch.float64)
        )

    def test_linear_segment(self):
        linear = torch.tensor([0.0005, 0.002, 0.003], dtype=torch.float64)
        torch.testing.assert_close(srgb_linear_to_srgb(linear), linear * 12.92)

    def test_mid_gray(self):
        srgb = srgb_linear_to_srgb(torch.tensor([0.2140411]))
        assert torch.isclose(srgb[0], torch.tensor(0.5), atol=1e-5)


class TestSrgbLinearToSrgbRoundTrip:
    """Inverse of srgb_to_srgb_linear on the unit interval."""

    def test_decode_then_encode(self):
        srgb = torch.linspace(0.0, 1.0, 101, dtype=torch.float64)
        recovered = srgb_linear_to_srgb(srgb_to_srgb_linear(srgb))
        torch.testing.assert_close(recovered, srgb, atol=1e-9, rtol=0.0)

    def test_encode_then_decode(self):
        linear = torch.tensor(
            [0.0001, 0.003, 0.01, 0.2, 0.8], dtype=torch.float64
        )
        recovered = srgb_to_srgb_linear(srgb_linear_to_srgb(linear))
        torch.testing.assert_close(recovered, linear, atol=1e-9, rtol=0.0)


class TestSrgbLinearToSrgbGradients:
    """Tests for autograd support."""

    def test_gradcheck(self):
        linear = torch.tensor(
            [0.001, 0.1, 0.5, 0.9], dtype=torch.float64, requires_grad=True
        )
        assert gradcheck(srgb_linear_to_srgb, (linear,), eps=1e-7, atol=1e-4)

    def test_gradient_finite_at_zero(self):
        linear = torch.zeros(3, requires_grad=True)
        srgb_linear_to_srgb(linear).sum().backward()
        assert torch.isfinite(linear.grad).all()


class TestSrgbLinearToSrgbDtypes:
    """Tests for dtype handling."""

    def test_rejects_integer_input(self):
        with pytest.raises(TypeError, match="floating point"):
            srgb_linear_to_srgb(torch.tensor([1, 2]))
