from __future__ import annotations


class InvalidConfiguration(ValueError):
    """
    A CRC definition that the engine cannot run: unsupported degree tag, or a
    polynomial / initial value / output mask with bits above the degree.
    """
