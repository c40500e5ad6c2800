"""Primitives - field construction and the signed order built on it."""

from fieldnn.primitives.field import (
    FF,
    FIELD_BYTES,
    field_bytes,
    to_field,
)
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

__all__ = [
    # Field
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
]
