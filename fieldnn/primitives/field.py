"""Prime field GF(p) used for all tensor arithmetic.

Uses the galois library for field arithmetic. FF is the field type; every
public operation in fieldnn accepts plain ints (negative ints are read as
their residue mod p) and returns FF arrays.
"""

from typing import Sequence, Union

import galois
import numpy as np

from fieldnn.config import KNOWN_GENERATORS, PRIME

# --- Field Construction ---

if PRIME in KNOWN_GENERATORS:
    FF = galois.GF(PRIME, primitive_element=KNOWN_GENERATORS[PRIME], verify=False)
else:
    FF = galois.GF(PRIME)
"""Base field GF(p) for the configured prime."""

FIELD_BYTES = (PRIME.bit_length() + 7) // 8
"""Width of the canonical big-endian byte representation."""

FieldLike = Union[int, Sequence[int], np.ndarray]


# --- Conversion ---

def to_field(values: FieldLike) -> FF:
    """Convert ints (possibly negative) or an FF array into FF.

    Scalars become 0-d FF elements and sequences keep their rank (nested
    lists become 2-D arrays and so on). FF input is returned unchanged.
    """
    if isinstance(values, FF):
        return values
    if isinstance(values, (int, np.integer)):
        return FF(int(values) % PRIME)
    arr = np.asarray(values, dtype=object)
    reduced = np.array([int(v) % PRIME for v in arr.flat], dtype=object).reshape(arr.shape)
    if reduced.size == 0:
        return FF.Zeros(arr.shape)
    return FF(reduced.tolist())


def field_bytes(value: FieldLike) -> bytes:
    """Canonical byte representation of a field element, most significant byte first."""
    return (int(value) % PRIME).to_bytes(FIELD_BYTES, "big")
