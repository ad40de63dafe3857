from __future__ import annotations

from lfsr_crc.bitvector import BitVector


def serial(prev: int, *, poly: int, degree: int, din: bool = False) -> int:
    """
    One clock of a Galois LFSR with a single injected input bit.

    The top register bit is the only feedback source; it is gated through
    every polynomial tap independently:

      fb[i]   = poly[i] & prev[degree-1]
      next[0] = din ^ fb[0]
      next[i] = prev[i-1] ^ fb[i]      (0 < i < degree)

    Bits at or above `degree` are never produced.
    """
    p = BitVector(prev)
    taps = BitVector(poly)
    nxt = BitVector()
    msb = p[degree - 1]

    for i in range(degree):
        fb = taps[i] & msb
        if i == 0:
            nxt[i] = din ^ fb
        else:
            nxt[i] = p[i - 1] ^ fb
    return nxt.get()


def parallel(n: int, din: int, init: int, *, poly: int, degree: int) -> int:
    """
    Run `n` serial clocks starting from `init`.

    Clock i (1-indexed) injects bit i of `din` while i < 8, and zero after
    that. With din=0 this is simply the register advanced n times, which is
    how the transition matrices are derived.
    """
    x = BitVector(init)
    d = BitVector(din & 0xFF)
    for i in range(1, n + 1):
        bit = d[i] if i < 8 else False
        x.set(serial(x.get(), poly=poly, degree=degree, din=bit))
    return x.get()
