from __future__ import annotations

import random
from pathlib import Path

import pytest

from lfsr_crc.descriptor import CRC, Degree


def repo_root() -> Path:
    """
    Find the repository root by walking upward until we find pyproject.toml.
    This is robust regardless of where tests live.
    """
    start = Path(__file__).resolve()
    for p in [start] + list(start.parents):
        if (p / "pyproject.toml").exists():
            return p
    raise RuntimeError("repo_root(): could not find pyproject.toml walking upward")


@pytest.fixture
def crc8() -> CRC:
    return CRC(Degree.CRC8, "CRC-8", 0x07, 0x00, False, False, 0x00)


@pytest.fixture
def crc16_ccitt_false() -> CRC:
    return CRC(Degree.CRC16, "CRC-16/CCITT-FALSE", 0x1021, 0xFFFF, False, False, 0x0000)


@pytest.fixture
def crc32_iso_hdlc() -> CRC:
    return CRC(Degree.CRC32, "CRC-32/ISO-HDLC", 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF)


@pytest.fixture
def payload() -> bytes:
    """Deterministic pseudo-random payload."""
    rng = random.Random(0xC0FFEE)
    return bytes(rng.randrange(256) for _ in range(97))


@pytest.fixture
def examples_dir() -> Path:
    return repo_root() / "examples"
