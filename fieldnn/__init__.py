"""
fieldnn: fixed-shape tensor arithmetic over a prime field.

Vector and matrix products, fully-connected and convolution layers, pooling
and activations, all computed exactly in GF(p). Signed values are recovered
through the half-modulus boundary (see fieldnn.primitives.order), which is
what max pooling, ReLU and arg_max compare with.

Usage:
    from fieldnn import conv1d, max_pool_1d, relu, to_signed

    h = conv1d(x, w, b, in_size=5, in_channels=2, out_channels=1, kernel_size=3, stride=1)
    h = relu(h)
    y = max_pool_1d(h, in_size=3, in_channels=1, kernel_size=2)
    print(to_signed(y))

The field is chosen once per process via the FIELDNN_PRIME environment
variable (default: BN254 scalar field).
"""

from fieldnn.config import PRIME

# Field and signed order
from fieldnn.primitives import (
    FF,
    FIELD_BYTES,
    HALF_MODULUS,
    arg_max,
    field_bytes,
    is_greater_than,
    is_greater_than_signed,
    is_less_than_signed,
    is_negative,
    is_positive,
    signed_max,
    to_field,
    to_signed,
)

# Operations
from fieldnn.ops import (
    Matrix,
    ShapeError,
    arr_add,
    avg_pool_1d,
    avg_pool_2d,
    avg_pool_2d_nonsq,
    conv1d,
    conv2d,
    conv2d_nonsq,
    conv_output_size,
    dot_prod,
    fc,
    global_avg_pool_2d,
    global_avg_pool_2d_nonsq,
    global_max_pool_2d,
    global_max_pool_2d_nonsq,
    global_sum_pool_2d,
    global_sum_pool_2d_nonsq,
    mat_mul,
    mat_vec_mul,
    max_pool_1d,
    max_pool_2d,
    max_pool_2d_nonsq,
    pad_arr,
    pool_output_size,
    poly,
    prune_arr,
    relu,
    sum_pool_1d,
    sum_pool_2d,
    sum_pool_2d_nonsq,
)

__version__ = "0.1.0"
__all__ = [
    # Field
    "PRIME",
    "FF",
    "FIELD_BYTES",
    "field_bytes",
    "to_field",
    # Order
    "HALF_MODULUS",
    "is_positive",
    "is_negative",
    "is_greater_than",
    "is_greater_than_signed",
    "is_less_than_signed",
    "arg_max",
    "signed_max",
    "to_signed",
    # Errors and sizing
    "ShapeError",
    "conv_output_size",
    "pool_output_size",
    # Arrays
    "arr_add",
    "dot_prod",
    "prune_arr",
    "pad_arr",
    # Matrices
    "Matrix",
    "mat_vec_mul",
    "mat_mul",
    # Layers
    "fc",
    "conv1d",
    "conv2d",
    "conv2d_nonsq",
    # Pooling
    "max_pool_1d",
    "max_pool_2d",
    "max_pool_2d_nonsq",
    "avg_pool_1d",
    "avg_pool_2d",
    "avg_pool_2d_nonsq",
    "sum_pool_1d",
    "sum_pool_2d",
    "sum_pool_2d_nonsq",
    "global_max_pool_2d",
    "global_max_pool_2d_nonsq",
    "global_avg_pool_2d",
    "global_avg_pool_2d_nonsq",
    "global_sum_pool_2d",
    "global_sum_pool_2d_nonsq",
    # Activations
    "relu",
    "poly",
]
