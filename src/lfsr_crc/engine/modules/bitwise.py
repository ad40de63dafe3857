from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lfsr_crc import lfsr
from lfsr_crc.descriptor import reflect_bits


@dataclass(frozen=True)
class Config:
    """
    Serial reference engine: 8 Galois clocks per input byte, MSB first.

    Slow, but it follows the textbook shift-register directly, so it is
    used to cross-check the matrix engine. No options.
    """


def update(register: int, data: bytes, *, crc: Any, cfg: Any) -> int:
    """
    Fold every byte of data into the register, one bit per clock.
    Uniform engine API: update(register, bytes, *, crc, cfg) -> register
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("update: data must be bytes-like")

    degree = int(crc.degree)
    top = degree - 1

    for b in bytes(data):
        rev = reflect_bits(b, 8) if crc.ref_in else b
        for k in range(7, -1, -1):
            # Data bit enters at the top of the register and joins the feedback.
            register ^= ((rev >> k) & 1) << top
            register = lfsr.serial(register, poly=crc.poly, degree=degree)
    return register
