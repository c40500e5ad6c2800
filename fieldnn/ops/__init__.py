"""Ops - array, matrix, layer, pooling and activation operations."""

from fieldnn.ops.activations import poly, relu
from fieldnn.ops.arrays import arr_add, dot_prod, pad_arr, prune_arr
from fieldnn.ops.layers import conv1d, conv2d, conv2d_nonsq, fc
from fieldnn.ops.matrix import Matrix, mat_mul, mat_vec_mul
from fieldnn.ops.pooling import (
    avg_pool_1d,
    avg_pool_2d,
    avg_pool_2d_nonsq,
    global_avg_pool_2d,
    global_avg_pool_2d_nonsq,
    global_max_pool_2d,
    global_max_pool_2d_nonsq,
    global_sum_pool_2d,
    global_sum_pool_2d_nonsq,
    max_pool_1d,
    max_pool_2d,
    max_pool_2d_nonsq,
    sum_pool_1d,
    sum_pool_2d,
    sum_pool_2d_nonsq,
)
from fieldnn.ops.shapes import ShapeError, conv_output_size, pool_output_size

__all__ = [
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
