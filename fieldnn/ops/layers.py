"""Fully-connected and convolution layers over flattened field tensors.

Layout convention: tensors are flattened channel-major, then row-major within
each channel. Weights are flattened [out_channel][in_channel][kernel...].
Convolutions are cross-correlations (no kernel flip) with no padding.
"""

import logging

from fieldnn.ops.shapes import (
    as_vector,
    check_length,
    check_positive,
    check_window,
    conv_output_size,
)
from fieldnn.primitives.field import FF, FieldLike

logger = logging.getLogger(__name__)


# --- Fully Connected ---

def fc(x: FieldLike, w: FieldLike, b: FieldLike) -> FF:
    """Fully-connected layer: out[i] = b[i] + sum_j w[i*N_IN + j] * x[j].

    N_IN is len(x) and N_OUT is len(b).

    Raises:
        ShapeError: If len(w) != N_IN * N_OUT
    """
    x = as_vector(x, "fc x")
    w = as_vector(w, "fc w")
    b = as_vector(b, "fc b")
    n_in, n_out = len(x), len(b)
    check_length(w, n_in * n_out, f"fc w ({n_out}x{n_in})")
    logger.debug("fc: %d -> %d", n_in, n_out)

    out = FF.Zeros(n_out)
    for i in range(n_out):
        acc = b[i]
        for j in range(n_in):
            acc = acc + w[i * n_in + j] * x[j]
        out[i] = acc
    return out


# --- Convolution ---

def conv1d(
    x: FieldLike,
    w: FieldLike,
    b: FieldLike,
    in_size: int,
    in_channels: int,
    out_channels: int,
    kernel_size: int,
    stride: int,
) -> FF:
    """1D convolution.

    Args:
        x: Input, in_channels * in_size elements
        w: Weights, out_channels * in_channels * kernel_size elements
        b: Bias, out_channels elements
        in_size: Spatial length of each input channel
        in_channels: Number of input channels
        out_channels: Number of output channels
        kernel_size: Kernel length
        stride: Step between kernel positions

    Returns:
        out_channels * out_size elements, out_size = (in_size - kernel_size) // stride + 1
    """
    x = as_vector(x, "conv1d x")
    w = as_vector(w, "conv1d w")
    b = as_vector(b, "conv1d b")
    check_positive(in_channels, "conv1d in_channels")
    check_positive(out_channels, "conv1d out_channels")
    check_positive(stride, "conv1d stride")
    check_window(in_size, kernel_size, "conv1d")
    check_length(x, in_channels * in_size, "conv1d x")
    check_length(w, out_channels * in_channels * kernel_size, "conv1d w")
    check_length(b, out_channels, "conv1d b")

    out_size = conv_output_size(in_size, kernel_size, stride)
    logger.debug(
        "conv1d: %dx%d -> %dx%d (kernel=%d, stride=%d)",
        in_channels, in_size, out_channels, out_size, kernel_size, stride,
    )

    out = FF.Zeros(out_channels * out_size)
    for oc in range(out_channels):
        for j in range(out_size):
            acc = b[oc]
            for ic in range(in_channels):
                for k in range(kernel_size):
                    weight = w[(oc * in_channels + ic) * kernel_size + k]
                    acc = acc + weight * x[ic * in_size + j * stride + k]
            out[oc * out_size + j] = acc
    return out


def conv2d_nonsq(
    x: FieldLike,
    w: FieldLike,
    b: FieldLike,
    in_h: int,
    in_w: int,
    in_channels: int,
    out_channels: int,
    kernel_h: int,
    kernel_w: int,
    stride: int,
) -> FF:
    """2D convolution with independent height/width extents and a shared stride.

    Input is [in_channels][in_h][in_w], weights [out_channels][in_channels][kernel_h][kernel_w],
    output [out_channels][out_h][out_w].
    """
    x = as_vector(x, "conv2d x")
    w = as_vector(w, "conv2d w")
    b = as_vector(b, "conv2d b")
    check_positive(in_channels, "conv2d in_channels")
    check_positive(out_channels, "conv2d out_channels")
    check_positive(stride, "conv2d stride")
    check_window(in_h, kernel_h, "conv2d height")
    check_window(in_w, kernel_w, "conv2d width")
    check_length(x, in_channels * in_h * in_w, "conv2d x")
    check_length(w, out_channels * in_channels * kernel_h * kernel_w, "conv2d w")
    check_length(b, out_channels, "conv2d b")

    out_h = conv_output_size(in_h, kernel_h, stride)
    out_w = conv_output_size(in_w, kernel_w, stride)
    logger.debug(
        "conv2d: %dx%dx%d -> %dx%dx%d (kernel=%dx%d, stride=%d)",
        in_channels, in_h, in_w, out_channels, out_h, out_w, kernel_h, kernel_w, stride,
    )

    kernel_area = kernel_h * kernel_w
    out = FF.Zeros(out_channels * out_h * out_w)
    for oc in range(out_channels):
        for i in range(out_h):
            for j in range(out_w):
                acc = b[oc]
                for ic in range(in_channels):
                    w_base = (oc * in_channels + ic) * kernel_area
                    x_base = ic * in_h * in_w
                    for ki in range(kernel_h):
                        row = (i * stride + ki) * in_w
                        for kj in range(kernel_w):
                            weight = w[w_base + ki * kernel_w + kj]
                            acc = acc + weight * x[x_base + row + j * stride + kj]
                out[(oc * out_h + i) * out_w + j] = acc
    return out


def conv2d(
    x: FieldLike,
    w: FieldLike,
    b: FieldLike,
    in_size: int,
    in_channels: int,
    out_channels: int,
    kernel_size: int,
    stride: int,
) -> FF:
    """Square 2D convolution; see conv2d_nonsq."""
    return conv2d_nonsq(
        x, w, b,
        in_h=in_size,
        in_w=in_size,
        in_channels=in_channels,
        out_channels=out_channels,
        kernel_h=kernel_size,
        kernel_w=kernel_size,
        stride=stride,
    )
