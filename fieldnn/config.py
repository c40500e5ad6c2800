"""Global configuration for fieldnn.

The prime field is process-wide. It is fixed at import time and must match
the field used by the weights and by whatever backend consumes the outputs.
Set FIELDNN_PRIME (decimal or 0x-prefixed hex) before importing fieldnn to
select a different field.
"""

import os

# ---------- Named primes ----------
# BN254 scalar field (circom / ZoKrates default)
BN254_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Goldilocks: p = 2^64 - 2^32 + 1
GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

# BLS12-381 scalar field
BLS12_381_PRIME = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

# Multiplicative generators. Passing one to galois skips the factorisation
# of p - 1, which is impractical for the 254/255-bit primes.
KNOWN_GENERATORS = {
    BN254_PRIME: 5,
    GOLDILOCKS_PRIME: 7,
    BLS12_381_PRIME: 7,
}

# ---------- Active field ----------
PRIME = int(os.environ.get("FIELDNN_PRIME", str(BN254_PRIME)), 0)
