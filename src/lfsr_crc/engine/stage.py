from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
import importlib
import logging
import pkgutil

from lfsr_crc.descriptor import CRC, reflect_bits


logger = logging.getLogger(__name__)

CHECK_INPUT = b"123456789"


@dataclass(frozen=True)
class Config:
    """
    Engine stage config.

    module: engine module name (e.g. "matrix", "bitwise")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "matrix"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available engine modules under lfsr_crc/engine/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_engine_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_engine_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"engine module '{cfg.module}' missing Config")
    if not callable(getattr(mod, "update", None)):
        raise AttributeError(f"engine module '{cfg.module}' missing update")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


# ----------------------------
# Computation context
# ----------------------------

class Computation:
    """
    Running state of one CRC computation.

      c = Computation(crc)
      c.update(b"1234").update(b"56789")
      c.finalize()   -> same value as compute_crc(crc, b"123456789")

    The register holds the raw (unreflected, unmasked) LFSR state and starts
    at crc.init. finalize() does not modify it, so more data may follow.
    Nothing here is shared between instances.
    """

    def __init__(self, crc: CRC, cfg: Optional[Config] = None):
        if not isinstance(crc, CRC):
            raise TypeError("crc must be a CRC descriptor")
        self.crc = crc
        self.cfg = cfg if cfg is not None else Config()
        self._mod, self._module_cfg = _resolve_module_and_cfg(self.cfg)
        self.register = crc.init

    def update(self, data: bytes) -> Computation:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("update: data must be bytes-like")
        self.register = self._mod.update(
            self.register, bytes(data), crc=self.crc, cfg=self._module_cfg
        )
        return self

    def finalize(self) -> int:
        crc = self.crc
        out = self.register
        if crc.ref_out:
            out = reflect_bits(out, crc.width)
        return (out ^ crc.xor_out) & crc.mask


# ----------------------------
# Public API
# ----------------------------

def compute_crc(crc: CRC, data: bytes, *, cfg: Optional[Config] = None) -> int:
    """
    Compute the CRC of data, store it in crc.result and return it.

    data may be empty: the result is then init (reflected if ref_out) XOR
    xor_out.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("compute_crc: data must be bytes-like")

    result = Computation(crc, cfg).update(data).finalize()
    crc.result = result
    logger.debug("%s: %d bytes -> 0x%0*X", crc.name, len(data), (crc.width + 3) // 4, result)
    return result


def check(crc: CRC, *, cfg: Optional[Config] = None) -> int:
    """
    Check value of a CRC definition: its CRC over b"123456789".
    crc.result is left untouched.
    """
    return Computation(crc, cfg).update(CHECK_INPUT).finalize()
