"""Signed ordering over field elements.

A prime field has no native order. Following the usual two's-complement
reading, elements in [0, (p - 1) / 2] are non-negative and elements above
that boundary represent negatives (v stands for v - p). Comparisons work on
the canonical big-endian byte representation, so the first differing byte
decides.

The boundary itself counts as positive and is_negative is false there; every
other element is exactly one of positive or negative.
"""

from typing import List, Union

import numpy as np

from fieldnn.config import PRIME
from fieldnn.primitives.field import FF, FieldLike, field_bytes, to_field

# --- Boundary ---

HALF_MODULUS = (PRIME - 1) // 2
"""Pivot separating non-negative from negative representations."""

_HALF_MODULUS_BYTES = field_bytes(HALF_MODULUS)


# --- Predicates ---

def is_positive(value: FieldLike) -> bool:
    """True iff value <= HALF_MODULUS. Zero and the boundary are positive."""
    return field_bytes(value) <= _HALF_MODULUS_BYTES


def is_negative(value: FieldLike) -> bool:
    """True iff value > HALF_MODULUS."""
    return field_bytes(value) > _HALF_MODULUS_BYTES


def is_greater_than(a: FieldLike, b: FieldLike) -> bool:
    """Unsigned comparison of canonical representations."""
    return field_bytes(a) > field_bytes(b)


def is_greater_than_signed(a: FieldLike, b: FieldLike) -> bool:
    """Signed comparison around the half-modulus boundary.

    Operands on the same side compare unsigned; otherwise the positive
    operand is the greater one.
    """
    a_pos = is_positive(a)
    if a_pos == is_positive(b):
        return is_greater_than(a, b)
    return a_pos


def is_less_than_signed(a: FieldLike, b: FieldLike) -> bool:
    return is_greater_than_signed(b, a)


# --- Reductions ---

def arg_max(values: FieldLike) -> int:
    """Index of the signed maximum.

    Scans left to right and only replaces the running maximum on strict
    improvement, so ties resolve to the earliest index.

    Raises:
        ValueError: If values is empty
    """
    if len(values) == 0:
        raise ValueError("arg_max of an empty sequence")
    best = 0
    for i in range(1, len(values)):
        if is_greater_than_signed(values[i], values[best]):
            best = i
    return best


def signed_max(values: FieldLike) -> FF:
    """Signed maximum of a non-empty sequence, as a field element."""
    return to_field(values)[arg_max(values)]


# --- Signed Interpretation ---

def to_signed(values: FieldLike) -> Union[int, List[int]]:
    """Read field elements as signed integers (negatives map to v - p)."""
    if isinstance(values, (int, np.integer)) or np.ndim(values) == 0:
        v = int(values) % PRIME
        return v - PRIME if is_negative(v) else v
    return [to_signed(v) for v in values]
