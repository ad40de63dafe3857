"""
Bit-parallel CRC engine for 4 to 32-bit CRC definitions.

  from lfsr_crc import CRC, Degree, compute_crc

  crc = CRC(Degree.CRC32, "CRC-32/ISO-HDLC", 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF)
  compute_crc(crc, b"123456789")   # -> 0xCBF43926, also stored in crc.result
"""
from lfsr_crc.bitvector import BitVector
from lfsr_crc.descriptor import CRC, Degree, reflect_bits
from lfsr_crc.errors import InvalidConfiguration
from lfsr_crc.engine.stage import Computation, Config, check, compute_crc

__all__ = [
    "BitVector",
    "CRC",
    "Computation",
    "Config",
    "Degree",
    "InvalidConfiguration",
    "check",
    "compute_crc",
    "reflect_bits",
]
