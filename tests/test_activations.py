"""Tests for ReLU and the polynomial activation."""

import numpy as np
import pytest

from fieldnn.ops.activations import poly, relu
from fieldnn.ops.shapes import ShapeError
from fieldnn.primitives.field import FF, to_field
from fieldnn.primitives.order import HALF_MODULUS, to_signed


class TestRelu:
    """Zero out negative elements."""

    def test_mixed(self) -> None:
        out = relu([-1, 0, 5, -7, 3])
        assert np.array_equal(out, to_field([0, 0, 5, 0, 3]))

    def test_boundary_is_kept(self) -> None:
        out = relu([HALF_MODULUS, HALF_MODULUS + 1])
        assert np.array_equal(out, to_field([HALF_MODULUS, 0]))

    def test_idempotent(self) -> None:
        x = FF.Random(16)
        assert np.array_equal(relu(relu(x)), relu(x))

    def test_scalar_rejected(self) -> None:
        with pytest.raises(ShapeError):
            relu(3)


class TestPoly:
    """v * v + scale * v."""

    def test_values(self) -> None:
        assert np.array_equal(poly([2, -3, 0], 1), to_field([6, 6, 0]))

    def test_negative_scale(self) -> None:
        assert to_signed(poly([3, 1], -1)) == [6, 0]

    def test_zero_scale_squares(self) -> None:
        assert np.array_equal(poly([4, -5], 0), to_field([16, 25]))
