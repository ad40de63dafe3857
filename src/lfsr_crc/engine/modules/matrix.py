from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Tuple
import logging

import numpy as np

from lfsr_crc import lfsr
from lfsr_crc.descriptor import reflect_bits


logger = logging.getLogger(__name__)

_BYTE_SHIFTS = np.arange(8, dtype=np.int64)


@dataclass(frozen=True)
class Config:
    """
    Bit-parallel CRC engine (one GF(2) matrix pass per input byte).

    cache_matrices: reuse H1/H2 across computations sharing (poly, degree).
                    When False they are derived again on every update() call.
    """
    cache_matrices: bool = True


@dataclass(frozen=True)
class Matrices:
    """
    Transition matrices for one (poly, degree) pair.

      h1[n] (n = 0..7):        register after n zero-input clocks seeded with poly
      h2[n] (n = 0..degree-1): register after 8 zero-input clocks seeded with 1 << n

      h1_rows[i, c] == bit i of h1[c], shape (degree, 8)
      h2_rows[i, c] == bit i of h2[c], shape (degree, degree)

    Row i of each array selects which data bits / register bits feed bit i of
    the next register. Arrays are read-only; equality compares h1/h2 only.
    """
    poly: int
    degree: int
    h1: Tuple[int, ...]
    h2: Tuple[int, ...]
    h1_rows: np.ndarray = field(compare=False, repr=False)
    h2_rows: np.ndarray = field(compare=False, repr=False)
    shifts: np.ndarray = field(compare=False, repr=False)
    weights: np.ndarray = field(compare=False, repr=False)


# ----------------------------
# Matrix construction
# ----------------------------

def derive_matrices(poly: int, degree: int) -> Matrices:
    """
    Build H1/H2 from scratch by stepping the Galois LFSR.

    Precondition: poly is non-zero and fits in `degree` bits. The CRC
    descriptor enforces this; called directly with a bad polynomial the
    result is well defined but meaningless.
    """
    h1 = tuple(lfsr.parallel(n, 0, poly, poly=poly, degree=degree) for n in range(8))
    h2 = tuple(lfsr.parallel(8, 0, 1 << n, poly=poly, degree=degree) for n in range(degree))

    h1_rows = _rows(h1, degree)
    h2_rows = _rows(h2, degree)
    shifts = np.arange(degree, dtype=np.int64)
    weights = np.int64(1) << shifts
    shifts.setflags(write=False)
    weights.setflags(write=False)

    logger.debug("derived H1/H2 for poly=0x%X degree=%d", poly, degree)
    return Matrices(
        poly=poly,
        degree=degree,
        h1=h1,
        h2=h2,
        h1_rows=h1_rows,
        h2_rows=h2_rows,
        shifts=shifts,
        weights=weights,
    )


@lru_cache(maxsize=64)
def build_matrices(poly: int, degree: int) -> Matrices:
    """Cached derive_matrices(); matrices depend only on (poly, degree)."""
    return derive_matrices(poly, degree)


def _rows(columns: Tuple[int, ...], degree: int) -> np.ndarray:
    cols = np.array(columns, dtype=np.int64)
    shifts = np.arange(degree, dtype=np.int64)[:, None]
    rows = ((cols[None, :] >> shifts) & 1).astype(np.uint8)
    rows.setflags(write=False)
    return rows


# ----------------------------
# Per-byte fold
# ----------------------------

def fold_byte(register: int, byte: int, *, matrices: Matrices, ref_in: bool) -> int:
    """
    Advance the register by one input byte in a single pass.

      next[i] = XOR_j (h1_rows[i, j] & rev[j])  ^  XOR_j (h2_rows[i, j] & gen[j])

    where rev is the byte (bit-reversed when ref_in) and gen the current
    register. Equivalent to 8 serial clocks with real data.
    """
    rev = reflect_bits(byte, 8) if ref_in else byte
    data_bits = (rev >> _BYTE_SHIFTS) & 1
    state_bits = (register >> matrices.shifts) & 1

    next_bits = (matrices.h1_rows @ data_bits + matrices.h2_rows @ state_bits) & 1
    return int(next_bits @ matrices.weights)


def update(register: int, data: bytes, *, crc: Any, cfg: Any) -> int:
    """
    Fold every byte of data into the register, in input order.
    Uniform engine API: update(register, bytes, *, crc, cfg) -> register
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("update: data must be bytes-like")

    degree = int(crc.degree)
    if getattr(cfg, "cache_matrices", True):
        matrices = build_matrices(crc.poly, degree)
    else:
        matrices = derive_matrices(crc.poly, degree)

    ref_in = crc.ref_in
    for b in bytes(data):
        register = fold_byte(register, b, matrices=matrices, ref_in=ref_in)
    return register
