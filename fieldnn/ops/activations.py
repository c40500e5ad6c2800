"""Elementwise activations over field arrays."""

from fieldnn.ops.shapes import as_vector
from fieldnn.primitives.field import FF, FieldLike, to_field
from fieldnn.primitives.order import is_positive


def relu(values: FieldLike) -> FF:
    """Keep positive elements (per is_positive), zero the rest."""
    values = as_vector(values, "relu values")
    out = FF.Zeros(len(values))
    for i in range(len(values)):
        if is_positive(values[i]):
            out[i] = values[i]
    return out


def poly(values: FieldLike, scale: int) -> FF:
    """Polynomial activation v * v + scale * v.

    A cheap-to-prove nonlinearity (two multiplications per element). It is
    its own operation and does not approximate any standard activation.
    """
    values = as_vector(values, "poly values")
    s = to_field(scale)
    return values * values + s * values
