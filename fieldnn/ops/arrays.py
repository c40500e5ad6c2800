"""Elementwise and length-changing operations over flat field arrays."""

from fieldnn.ops.shapes import ShapeError, as_vector, check_length
from fieldnn.primitives.field import FF, FieldLike


def arr_add(x: FieldLike, y: FieldLike) -> FF:
    """Elementwise sum of two equal-length arrays."""
    x = as_vector(x, "arr_add x")
    y = as_vector(y, "arr_add y")
    check_length(y, len(x), "arr_add y")
    return x + y


def dot_prod(x: FieldLike, y: FieldLike) -> FF:
    """Sum of elementwise products of two equal-length arrays."""
    x = as_vector(x, "dot_prod x")
    y = as_vector(y, "dot_prod y")
    check_length(y, len(x), "dot_prod y")
    acc = FF(0)
    for i in range(len(x)):
        acc = acc + x[i] * y[i]
    return acc


def prune_arr(x: FieldLike, n: int) -> FF:
    """First n elements of x.

    Raises:
        ShapeError: If x has fewer than n elements
    """
    x = as_vector(x, "prune_arr x")
    if n < 0 or len(x) < n:
        raise ShapeError(f"prune_arr: cannot take {n} elements from length {len(x)}")
    return x[:n].copy()


def pad_arr(x: FieldLike, max_len: int) -> FF:
    """x followed by zeros up to max_len elements.

    Raises:
        ShapeError: If x is longer than max_len
    """
    x = as_vector(x, "pad_arr x")
    if len(x) > max_len:
        raise ShapeError(f"pad_arr: length {len(x)} exceeds max_len {max_len}")
    out = FF.Zeros(max_len)
    out[:len(x)] = x
    return out
