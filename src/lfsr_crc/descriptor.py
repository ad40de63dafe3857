from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from lfsr_crc.errors import InvalidConfiguration


class Degree(IntEnum):
    """Supported register widths. The value is the polynomial degree in bits."""
    CRC4 = 4
    CRC5 = 5
    CRC7 = 7
    CRC8 = 8
    CRC15 = 15
    CRC16 = 16
    CRC24 = 24
    CRC32 = 32


_CONFIG_FIELDS = ("degree", "name", "poly", "init", "ref_in", "ref_out", "xor_out")


@dataclass
class CRC:
    """
    CRC definition plus the result of the last computation.

      degree:  register width tag (Degree or a plain int from the supported set)
      name:    label only
      poly:    generator polynomial without the implicit x**degree term
      init:    initial register value
      ref_in:  reverse the bit order of each input byte before folding
      ref_out: reverse the bit order of the final register
      xor_out: final XOR mask
      result:  starts at init; overwritten by every compute_crc() call

    Everything but `result` is read-only once constructed. Bad definitions are
    rejected here with InvalidConfiguration instead of producing meaningless
    check values later.
    """
    degree: Degree
    name: str
    poly: int
    init: int
    ref_in: bool
    ref_out: bool
    xor_out: int
    result: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "degree", _as_degree(self.degree))
        width = int(self.degree)

        _check_int(self, "poly", width)
        _check_int(self, "init", width)
        _check_int(self, "xor_out", width)
        if self.poly == 0:
            raise InvalidConfiguration(f"{self.name}: poly must be non-zero")
        for flag in ("ref_in", "ref_out"):
            if not isinstance(getattr(self, flag), bool):
                raise InvalidConfiguration(f"{self.name}: {flag} must be bool")

        if self.result is None:
            self.result = self.init

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _CONFIG_FIELDS and name in self.__dict__:
            raise AttributeError(f"CRC.{name} is read-only; build a new descriptor instead")
        super().__setattr__(name, value)

    @property
    def width(self) -> int:
        return int(self.degree)

    @property
    def mask(self) -> int:
        return (1 << int(self.degree)) - 1


def reflect_bits(value: int, width: int) -> int:
    """Reverse the low `width` bits of value (bit d <-> bit width-1-d)."""
    r = 0
    for _ in range(width):
        r = (r << 1) | (value & 1)
        value >>= 1
    return r


# ----------------------------
# Internal
# ----------------------------

def _as_degree(degree: Any) -> Degree:
    if isinstance(degree, Degree):
        return degree
    if isinstance(degree, bool) or not isinstance(degree, int):
        raise InvalidConfiguration(f"degree must be a Degree or int, got {type(degree).__name__}")
    try:
        return Degree(degree)
    except ValueError:
        supported = ", ".join(str(int(d)) for d in Degree)
        raise InvalidConfiguration(f"unsupported degree {degree}; expected one of {supported}") from None


def _check_int(crc: CRC, name: str, width: int) -> None:
    v = getattr(crc, name)
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidConfiguration(f"{crc.name}: {name} must be int")
    if not (0 <= v < (1 << width)):
        raise InvalidConfiguration(
            f"{crc.name}: {name}=0x{v:X} does not fit in {width} bits"
        )
