"""Tests for the signed order over field elements."""

import pytest

from fieldnn.config import PRIME
from fieldnn.primitives.field import FF, to_field
from fieldnn.primitives.order import (
    HALF_MODULUS,
    arg_max,
    is_greater_than,
    is_greater_than_signed,
    is_less_than_signed,
    is_negative,
    is_positive,
    signed_max,
    to_signed,
)


class TestBoundary:
    """Positivity around the half-modulus boundary."""

    def test_half_modulus_value(self) -> None:
        assert HALF_MODULUS == (PRIME - 1) // 2

    def test_zero_is_positive(self) -> None:
        assert is_positive(0)
        assert not is_negative(0)

    def test_boundary_is_positive_not_negative(self) -> None:
        """The boundary is positive, and is_negative is false there too."""
        assert is_positive(HALF_MODULUS)
        assert not is_negative(HALF_MODULUS)

    def test_just_above_boundary_is_negative(self) -> None:
        assert is_negative(HALF_MODULUS + 1)
        assert not is_positive(HALF_MODULUS + 1)

    def test_minus_one_is_negative(self) -> None:
        assert is_negative(PRIME - 1)
        assert is_negative(-1)
        assert is_negative(FF(PRIME - 1))

    @pytest.mark.parametrize("v", [
        0, 1, 2, 1000, HALF_MODULUS - 1, HALF_MODULUS + 1, HALF_MODULUS + 2, PRIME - 2, PRIME - 1,
    ])
    def test_partition_away_from_boundary(self, v: int) -> None:
        """Exactly one predicate holds for every non-boundary element."""
        assert is_positive(v) != is_negative(v)


class TestComparison:
    """Unsigned and signed comparison."""

    def test_unsigned_ignores_sign(self) -> None:
        assert is_greater_than(-1, 1)
        assert not is_greater_than(1, -1)
        assert not is_greater_than(5, 5)

    @pytest.mark.parametrize("a,b", [
        (2, 1),
        (1, -1),
        (-10, -11),
        (0, -1),
        (HALF_MODULUS, HALF_MODULUS + 1),
    ])
    def test_signed_greater(self, a: int, b: int) -> None:
        assert is_greater_than_signed(a, b)
        assert not is_greater_than_signed(b, a)

    def test_signed_minus_one_below_one(self) -> None:
        assert not is_greater_than_signed(-1, 1)

    def test_signed_is_strict(self) -> None:
        assert not is_greater_than_signed(3, 3)
        assert not is_greater_than_signed(-3, -3)

    def test_signed_matches_integer_order(self) -> None:
        """Signed comparison agrees with ordinary int comparison on small values."""
        values = [-7, -3, -1, 0, 1, 4, 9]
        for a in values:
            for b in values:
                assert is_greater_than_signed(a, b) == (a > b)

    def test_less_than_is_mirror(self) -> None:
        assert is_less_than_signed(-5, 2)
        assert not is_less_than_signed(2, -5)

    def test_field_element_operands(self) -> None:
        assert is_greater_than_signed(FF(2), to_field(-2))


class TestArgMax:
    """First index of the signed maximum."""

    def test_basic(self) -> None:
        assert arg_max([3, 2, 5, 1, 4]) == 2

    def test_ties_keep_earliest(self) -> None:
        assert arg_max([1, 7, 3, 7]) == 1

    def test_negatives(self) -> None:
        assert arg_max([-5, -2, -9]) == 1

    def test_positive_beats_large_unsigned(self) -> None:
        """-1 is the largest unsigned value but loses to 0."""
        assert arg_max(to_field([-1, 0])) == 1

    def test_single(self) -> None:
        assert arg_max([42]) == 0

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            arg_max([])

    def test_signed_max(self) -> None:
        assert to_signed(signed_max([-4, -1, -3])) == -1


class TestToSigned:
    """Signed interpretation of field elements."""

    def test_scalars(self) -> None:
        assert to_signed(5) == 5
        assert to_signed(PRIME - 5) == -5
        assert to_signed(HALF_MODULUS) == HALF_MODULUS

    def test_arrays(self) -> None:
        assert to_signed(to_field([1, -2, 0])) == [1, -2, 0]
