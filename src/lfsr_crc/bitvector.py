from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


@dataclass
class BitVector:
    """
    Fixed-width (32-bit) unsigned scalar with per-bit access.

      v = BitVector(0b1010)
      v.get()      -> 10
      v.get(1)     -> True
      v.set(0, 1)  -> value becomes 0b1011
      v[3]         -> True

    Bit indices are expected in [0, 32). Callers bound them by construction
    (0..7 for byte bits, 0..degree-1 for register bits), so they are not
    range-checked here.
    """
    value: int = 0

    def __post_init__(self) -> None:
        self.value &= _MASK

    def get(self, idx: Optional[int] = None):
        if idx is None:
            return self.value
        return (self.value >> idx) & 1 != 0

    def set(self, *args) -> None:
        """
        set(value)     -> replace the whole value
        set(idx, bit)  -> set or clear a single bit
        """
        if len(args) == 1:
            self.value = args[0] & _MASK
        elif len(args) == 2:
            idx, bit = args
            if bit:
                self.value |= 1 << idx
            else:
                self.value &= ~(1 << idx) & _MASK
        else:
            raise TypeError(f"set() takes 1 or 2 arguments ({len(args)} given)")

    def copy(self) -> BitVector:
        return BitVector(self.value)

    def __getitem__(self, idx: int) -> bool:
        return self.get(idx)

    def __setitem__(self, idx: int, bit: bool) -> None:
        self.set(idx, bit)

    def __int__(self) -> int:
        return self.value
