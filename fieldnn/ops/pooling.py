"""Pooling over flattened field tensors.

Windows are non-overlapping (stride equals the kernel extent) and the output
extent is in_size // kernel_size along each axis. Trailing elements that do
not fill a whole window are dropped from the output, not rejected:

    max_pool_1d([1, 2, 3, 4, 5], in_size=5, in_channels=1, kernel_size=2) == [2, 4]

The same rule covers a kernel larger than the input: no window fits, so the
channel contributes no outputs and the result is empty.

A 1D tensor [channels][in_size] is pooled as the 2D tensor
[channels][1][in_size] with a 1 x kernel_size window.

Reductions:
    max: signed maximum under is_greater_than_signed (first of equal values)
    sum: field sum of the window
    avg: window sum divided by the window area in the field, i.e. multiplied
         by the modular inverse of the area. This equals integer division only
         when the sum is an exact multiple of the area.
"""

import logging
from typing import Callable, List

from fieldnn.ops.shapes import (
    as_vector,
    check_length,
    check_positive,
    pool_output_size,
)
from fieldnn.primitives.field import FF, FieldLike
from fieldnn.primitives.order import signed_max

logger = logging.getLogger(__name__)

Reducer = Callable[[List[FF]], FF]


# --- Reducers ---

def _max_reduce(window: List[FF]) -> FF:
    return signed_max(window)


def _sum_reduce(window: List[FF]) -> FF:
    acc = FF(0)
    for v in window:
        acc = acc + v
    return acc


def _avg_reduce(window: List[FF]) -> FF:
    return _sum_reduce(window) / FF(len(window))


# --- Window Engine ---

def _pool(
    x: FieldLike,
    in_h: int,
    in_w: int,
    in_channels: int,
    kernel_h: int,
    kernel_w: int,
    reduce: Reducer,
    name: str,
) -> FF:
    """Apply reduce to every kernel_h x kernel_w window of every channel."""
    x = as_vector(x, f"{name} x")
    check_positive(in_channels, f"{name} in_channels")
    check_positive(in_h, f"{name} input height")
    check_positive(in_w, f"{name} input width")
    check_positive(kernel_h, f"{name} kernel height")
    check_positive(kernel_w, f"{name} kernel width")
    check_length(x, in_channels * in_h * in_w, f"{name} x")

    out_h = pool_output_size(in_h, kernel_h)
    out_w = pool_output_size(in_w, kernel_w)
    logger.debug(
        "%s: %dx%dx%d -> %dx%dx%d (kernel=%dx%d)",
        name, in_channels, in_h, in_w, in_channels, out_h, out_w, kernel_h, kernel_w,
    )

    out = FF.Zeros(in_channels * out_h * out_w)
    for c in range(in_channels):
        base = c * in_h * in_w
        for i in range(out_h):
            for j in range(out_w):
                window = [
                    x[base + (i * kernel_h + ki) * in_w + j * kernel_w + kj]
                    for ki in range(kernel_h)
                    for kj in range(kernel_w)
                ]
                out[(c * out_h + i) * out_w + j] = reduce(window)
    return out


# --- Max Pooling ---

def max_pool_1d(x: FieldLike, in_size: int, in_channels: int, kernel_size: int) -> FF:
    """Signed max over non-overlapping windows of each channel."""
    return _pool(x, 1, in_size, in_channels, 1, kernel_size, _max_reduce, "max_pool_1d")


def max_pool_2d_nonsq(
    x: FieldLike,
    in_h: int,
    in_w: int,
    in_channels: int,
    kernel_h: int,
    kernel_w: int,
) -> FF:
    return _pool(x, in_h, in_w, in_channels, kernel_h, kernel_w, _max_reduce, "max_pool_2d")


def max_pool_2d(x: FieldLike, in_size: int, in_channels: int, kernel_size: int) -> FF:
    return max_pool_2d_nonsq(x, in_size, in_size, in_channels, kernel_size, kernel_size)


# --- Average Pooling ---

def avg_pool_1d(x: FieldLike, in_size: int, in_channels: int, kernel_size: int) -> FF:
    """Window sum divided by kernel_size (field division)."""
    return _pool(x, 1, in_size, in_channels, 1, kernel_size, _avg_reduce, "avg_pool_1d")


def avg_pool_2d_nonsq(
    x: FieldLike,
    in_h: int,
    in_w: int,
    in_channels: int,
    kernel_h: int,
    kernel_w: int,
) -> FF:
    return _pool(x, in_h, in_w, in_channels, kernel_h, kernel_w, _avg_reduce, "avg_pool_2d")


def avg_pool_2d(x: FieldLike, in_size: int, in_channels: int, kernel_size: int) -> FF:
    return avg_pool_2d_nonsq(x, in_size, in_size, in_channels, kernel_size, kernel_size)


# --- Sum Pooling ---

def sum_pool_1d(x: FieldLike, in_size: int, in_channels: int, kernel_size: int) -> FF:
    return _pool(x, 1, in_size, in_channels, 1, kernel_size, _sum_reduce, "sum_pool_1d")


def sum_pool_2d_nonsq(
    x: FieldLike,
    in_h: int,
    in_w: int,
    in_channels: int,
    kernel_h: int,
    kernel_w: int,
) -> FF:
    return _pool(x, in_h, in_w, in_channels, kernel_h, kernel_w, _sum_reduce, "sum_pool_2d")


def sum_pool_2d(x: FieldLike, in_size: int, in_channels: int, kernel_size: int) -> FF:
    return sum_pool_2d_nonsq(x, in_size, in_size, in_channels, kernel_size, kernel_size)


# --- Global Pooling ---
# One output per channel; the window is the whole spatial extent.

def global_max_pool_2d_nonsq(x: FieldLike, in_h: int, in_w: int, in_channels: int) -> FF:
    return _pool(x, in_h, in_w, in_channels, in_h, in_w, _max_reduce, "global_max_pool_2d")


def global_max_pool_2d(x: FieldLike, in_size: int, in_channels: int) -> FF:
    return global_max_pool_2d_nonsq(x, in_size, in_size, in_channels)


def global_avg_pool_2d_nonsq(x: FieldLike, in_h: int, in_w: int, in_channels: int) -> FF:
    return _pool(x, in_h, in_w, in_channels, in_h, in_w, _avg_reduce, "global_avg_pool_2d")


def global_avg_pool_2d(x: FieldLike, in_size: int, in_channels: int) -> FF:
    return global_avg_pool_2d_nonsq(x, in_size, in_size, in_channels)


def global_sum_pool_2d_nonsq(x: FieldLike, in_h: int, in_w: int, in_channels: int) -> FF:
    return _pool(x, in_h, in_w, in_channels, in_h, in_w, _sum_reduce, "global_sum_pool_2d")


def global_sum_pool_2d(x: FieldLike, in_size: int, in_channels: int) -> FF:
    return global_sum_pool_2d_nonsq(x, in_size, in_size, in_channels)
