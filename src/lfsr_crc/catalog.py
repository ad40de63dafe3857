from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from lfsr_crc.descriptor import CRC, Degree
from lfsr_crc.engine.stage import compute_crc


@dataclass(frozen=True)
class CatalogEntry:
    """
    A named, standard CRC definition (Williams / RevEng parameter model).

    check is the CRC of b"123456789" and is only used for verification.
    create() returns a fresh descriptor each call, so results never leak
    between users of the same entry.
    """
    degree: int
    name: str
    poly: int
    init: int
    ref_in: bool
    ref_out: bool
    xor_out: int
    check: int
    aliases: Tuple[str, ...] = ()

    def create(self) -> CRC:
        return CRC(
            degree=Degree(self.degree),
            name=self.name,
            poly=self.poly,
            init=self.init,
            ref_in=self.ref_in,
            ref_out=self.ref_out,
            xor_out=self.xor_out,
        )


# RevEng CRC catalogue entries (https://reveng.sourceforge.io/crc-catalogue/all.htm)
# restricted to the supported widths.
#   width, name, poly, init, refin, refout, xorout, check, aliases
CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry(4, "CRC-4/G-704", 0x3, 0x0, True, True, 0x0, 0x7, ("CRC-4/ITU",)),
    CatalogEntry(4, "CRC-4/INTERLAKEN", 0x3, 0xF, False, False, 0xF, 0xB, ()),
    CatalogEntry(5, "CRC-5/EPC-C1G2", 0x09, 0x09, False, False, 0x00, 0x00, ("CRC-5/EPC",)),
    CatalogEntry(5, "CRC-5/G-704", 0x15, 0x00, True, True, 0x00, 0x07, ("CRC-5/ITU",)),
    CatalogEntry(5, "CRC-5/USB", 0x05, 0x1F, True, True, 0x1F, 0x19, ()),
    CatalogEntry(7, "CRC-7/MMC", 0x09, 0x00, False, False, 0x00, 0x75, ("CRC-7",)),
    CatalogEntry(7, "CRC-7/ROHC", 0x4F, 0x7F, True, True, 0x00, 0x53, ()),
    CatalogEntry(7, "CRC-7/UMTS", 0x45, 0x00, False, False, 0x00, 0x61, ()),
    CatalogEntry(8, "CRC-8/AUTOSAR", 0x2F, 0xFF, False, False, 0xFF, 0xDF, ()),
    CatalogEntry(8, "CRC-8/BLUETOOTH", 0xA7, 0x00, True, True, 0x00, 0x26, ()),
    CatalogEntry(8, "CRC-8/CDMA2000", 0x9B, 0xFF, False, False, 0x00, 0xDA, ()),
    CatalogEntry(8, "CRC-8/DARC", 0x39, 0x00, True, True, 0x00, 0x15, ()),
    CatalogEntry(8, "CRC-8/DVB-S2", 0xD5, 0x00, False, False, 0x00, 0xBC, ()),
    CatalogEntry(8, "CRC-8/GSM-A", 0x1D, 0x00, False, False, 0x00, 0x37, ()),
    CatalogEntry(8, "CRC-8/GSM-B", 0x49, 0x00, False, False, 0xFF, 0x94, ()),
    CatalogEntry(8, "CRC-8/HITAG", 0x1D, 0xFF, False, False, 0x00, 0xB4, ()),
    CatalogEntry(8, "CRC-8/I-432-1", 0x07, 0x00, False, False, 0x55, 0xA1, ()),
    CatalogEntry(8, "CRC-8/I-CODE", 0x1D, 0xFD, False, False, 0x00, 0x7E, ()),
    CatalogEntry(8, "CRC-8/LTE", 0x9B, 0x00, False, False, 0x00, 0xEA, ()),
    CatalogEntry(8, "CRC-8/MAXIM-DOW", 0x31, 0x00, True, True, 0x00, 0xA1, ("CRC-8/MAXIM", "DOW-CRC")),
    CatalogEntry(8, "CRC-8/MIFARE-MAD", 0x1D, 0xC7, False, False, 0x00, 0x99, ()),
    CatalogEntry(8, "CRC-8/NRSC-5", 0x31, 0xFF, False, False, 0x00, 0xF7, ()),
    CatalogEntry(8, "CRC-8/OPENSAFETY", 0x2F, 0x00, False, False, 0x00, 0x3E, ()),
    CatalogEntry(8, "CRC-8/ROHC", 0x07, 0xFF, True, True, 0x00, 0xD0, ()),
    CatalogEntry(8, "CRC-8/SAE-J1850", 0x1D, 0xFF, False, False, 0xFF, 0x4B, ()),
    CatalogEntry(8, "CRC-8/SMBUS", 0x07, 0x00, False, False, 0x00, 0xF4, ()),
    CatalogEntry(8, "CRC-8/TECH-3250", 0x1D, 0xFF, True, True, 0x00, 0x97, ("CRC-8/AES", "CRC-8/EBU")),
    CatalogEntry(8, "CRC-8/WCDMA", 0x9B, 0x00, True, True, 0x00, 0x25, ()),
    CatalogEntry(15, "CRC-15/CAN", 0x4599, 0x0000, False, False, 0x0000, 0x059E, ("CRC-15",)),
    CatalogEntry(15, "CRC-15/MPT1327", 0x6815, 0x0000, False, False, 0x0001, 0x2566, ()),
    CatalogEntry(16, "CRC-16/ARC", 0x8005, 0x0000, True, True, 0x0000, 0xBB3D, ("ARC", "CRC-16", "CRC-16/LHA", "CRC-IBM")),
    CatalogEntry(16, "CRC-16/CDMA2000", 0xC867, 0xFFFF, False, False, 0x0000, 0x4C06, ()),
    CatalogEntry(16, "CRC-16/CMS", 0x8005, 0xFFFF, False, False, 0x0000, 0xAEE7, ()),
    CatalogEntry(16, "CRC-16/DDS-110", 0x8005, 0x800D, False, False, 0x0000, 0x9ECF, ()),
    CatalogEntry(16, "CRC-16/DECT-R", 0x0589, 0x0000, False, False, 0x0001, 0x007E, ("R-CRC-16",)),
    CatalogEntry(16, "CRC-16/DECT-X", 0x0589, 0x0000, False, False, 0x0000, 0x007F, ("X-CRC-16",)),
    CatalogEntry(16, "CRC-16/DNP", 0x3D65, 0x0000, True, True, 0xFFFF, 0xEA82, ()),
    CatalogEntry(16, "CRC-16/EN-13757", 0x3D65, 0x0000, False, False, 0xFFFF, 0xC2B7, ()),
    CatalogEntry(16, "CRC-16/GENIBUS", 0x1021, 0xFFFF, False, False, 0xFFFF, 0xD64E, ("CRC-16/DARC", "CRC-16/EPC", "CRC-16/EPC-C1G2", "CRC-16/I-CODE")),
    CatalogEntry(16, "CRC-16/GSM", 0x1021, 0x0000, False, False, 0xFFFF, 0xCE3C, ()),
    CatalogEntry(16, "CRC-16/IBM-3740", 0x1021, 0xFFFF, False, False, 0x0000, 0x29B1, ("CRC-16/AUTOSAR", "CRC-16/CCITT-FALSE")),
    CatalogEntry(16, "CRC-16/IBM-SDLC", 0x1021, 0xFFFF, True, True, 0xFFFF, 0x906E, ("CRC-16/ISO-HDLC", "CRC-16/ISO-IEC-14443-3-B", "CRC-16/X-25", "CRC-B", "X-25")),
    CatalogEntry(16, "CRC-16/ISO-IEC-14443-3-A", 0x1021, 0xC6C6, True, True, 0x0000, 0xBF05, ("CRC-A",)),
    CatalogEntry(16, "CRC-16/KERMIT", 0x1021, 0x0000, True, True, 0x0000, 0x2189, ("CRC-16/BLUETOOTH", "CRC-16/CCITT", "CRC-16/CCITT-TRUE", "CRC-16/V-41-LSB", "CRC-CCITT", "KERMIT")),
    CatalogEntry(16, "CRC-16/LJ1200", 0x6F63, 0x0000, False, False, 0x0000, 0xBDF4, ()),
    CatalogEntry(16, "CRC-16/M17", 0x5935, 0xFFFF, False, False, 0x0000, 0x772B, ()),
    CatalogEntry(16, "CRC-16/MAXIM-DOW", 0x8005, 0x0000, True, True, 0xFFFF, 0x44C2, ("CRC-16/MAXIM",)),
    CatalogEntry(16, "CRC-16/MCRF4XX", 0x1021, 0xFFFF, True, True, 0x0000, 0x6F91, ()),
    CatalogEntry(16, "CRC-16/MODBUS", 0x8005, 0xFFFF, True, True, 0x0000, 0x4B37, ("MODBUS",)),
    CatalogEntry(16, "CRC-16/NRSC-5", 0x080B, 0xFFFF, True, True, 0x0000, 0xA066, ()),
    CatalogEntry(16, "CRC-16/OPENSAFETY-A", 0x5935, 0x0000, False, False, 0x0000, 0x5D38, ()),
    CatalogEntry(16, "CRC-16/OPENSAFETY-B", 0x755B, 0x0000, False, False, 0x0000, 0x20FE, ()),
    CatalogEntry(16, "CRC-16/PROFIBUS", 0x1DCF, 0xFFFF, False, False, 0xFFFF, 0xA819, ("CRC-16/IEC-61158-2",)),
    CatalogEntry(16, "CRC-16/RIELLO", 0x1021, 0xB2AA, True, True, 0x0000, 0x63D0, ()),
    CatalogEntry(16, "CRC-16/SPI-FUJITSU", 0x1021, 0x1D0F, False, False, 0x0000, 0xE5CC, ("CRC-16/AUG-CCITT",)),
    CatalogEntry(16, "CRC-16/T10-DIF", 0x8BB7, 0x0000, False, False, 0x0000, 0xD0DB, ()),
    CatalogEntry(16, "CRC-16/TELEDISK", 0xA097, 0x0000, False, False, 0x0000, 0x0FB3, ()),
    CatalogEntry(16, "CRC-16/TMS37157", 0x1021, 0x89EC, True, True, 0x0000, 0x26B1, ()),
    CatalogEntry(16, "CRC-16/UMTS", 0x8005, 0x0000, False, False, 0x0000, 0xFEE8, ("CRC-16/BUYPASS", "CRC-16/VERIFONE")),
    CatalogEntry(16, "CRC-16/USB", 0x8005, 0xFFFF, True, True, 0xFFFF, 0xB4C8, ()),
    CatalogEntry(16, "CRC-16/XMODEM", 0x1021, 0x0000, False, False, 0x0000, 0x31C3, ("CRC-16/ACORN", "CRC-16/LTE", "CRC-16/V-41-MSB", "XMODEM", "ZMODEM")),
    CatalogEntry(24, "CRC-24/BLE", 0x00065B, 0x555555, True, True, 0x000000, 0xC25A56, ()),
    CatalogEntry(24, "CRC-24/FLEXRAY-A", 0x5D6DCB, 0xFEDCBA, False, False, 0x000000, 0x7979BD, ()),
    CatalogEntry(24, "CRC-24/FLEXRAY-B", 0x5D6DCB, 0xABCDEF, False, False, 0x000000, 0x1F23B8, ()),
    CatalogEntry(24, "CRC-24/INTERLAKEN", 0x328B63, 0xFFFFFF, False, False, 0xFFFFFF, 0xB4F3E6, ()),
    CatalogEntry(24, "CRC-24/LTE-A", 0x864CFB, 0x000000, False, False, 0x000000, 0xCDE703, ()),
    CatalogEntry(24, "CRC-24/LTE-B", 0x800063, 0x000000, False, False, 0x000000, 0x23EF52, ()),
    CatalogEntry(24, "CRC-24/OPENPGP", 0x864CFB, 0xB704CE, False, False, 0x000000, 0x21CF02, ("CRC-24",)),
    CatalogEntry(24, "CRC-24/OS-9", 0x800063, 0xFFFFFF, False, False, 0xFFFFFF, 0x200FA5, ()),
    CatalogEntry(32, "CRC-32/AIXM", 0x814141AB, 0x00000000, False, False, 0x00000000, 0x3010BF7F, ("CRC-32Q",)),
    CatalogEntry(32, "CRC-32/AUTOSAR", 0xF4ACFB13, 0xFFFFFFFF, True, True, 0xFFFFFFFF, 0x1697D06A, ()),
    CatalogEntry(32, "CRC-32/BASE91-D", 0xA833982B, 0xFFFFFFFF, True, True, 0xFFFFFFFF, 0x87315576, ("CRC-32D",)),
    CatalogEntry(32, "CRC-32/BZIP2", 0x04C11DB7, 0xFFFFFFFF, False, False, 0xFFFFFFFF, 0xFC891918, ("CRC-32/AAL5", "CRC-32/DECT-B", "B-CRC-32")),
    CatalogEntry(32, "CRC-32/CD-ROM-EDC", 0x8001801B, 0x00000000, True, True, 0x00000000, 0x6EC2EDC4, ()),
    CatalogEntry(32, "CRC-32/CKSUM", 0x04C11DB7, 0x00000000, False, False, 0xFFFFFFFF, 0x765E7680, ("CKSUM", "CRC-32/POSIX")),
    CatalogEntry(32, "CRC-32/ISCSI", 0x1EDC6F41, 0xFFFFFFFF, True, True, 0xFFFFFFFF, 0xE3069283, ("CRC-32/BASE91-C", "CRC-32/CASTAGNOLI", "CRC-32/INTERLAKEN", "CRC-32C")),
    CatalogEntry(32, "CRC-32/ISO-HDLC", 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF, 0xCBF43926, ("CRC-32", "CRC-32/ADCCP", "CRC-32/V-42", "CRC-32/XZ", "PKZIP")),
    CatalogEntry(32, "CRC-32/JAMCRC", 0x04C11DB7, 0xFFFFFFFF, True, True, 0x00000000, 0x340BC6D9, ("JAMCRC",)),
    CatalogEntry(32, "CRC-32/MEF", 0x741B8CD7, 0xFFFFFFFF, True, True, 0x00000000, 0xD2C22F51, ()),
    CatalogEntry(32, "CRC-32/MPEG-2", 0x04C11DB7, 0xFFFFFFFF, False, False, 0x00000000, 0x0376E6E7, ()),
    CatalogEntry(32, "CRC-32/XFER", 0x000000AF, 0x00000000, False, False, 0x00000000, 0xBD0BE338, ()),
)


def _build_index() -> Dict[str, CatalogEntry]:
    index: Dict[str, CatalogEntry] = {}
    for entry in CATALOG:
        for key in (entry.name,) + entry.aliases:
            index[key.upper()] = entry
    return index


_INDEX = _build_index()


def names() -> list[str]:
    return [entry.name for entry in CATALOG]


def lookup(name: str) -> CatalogEntry:
    """Find an entry by name or alias (case-insensitive)."""
    try:
        return _INDEX[name.upper()]
    except KeyError:
        raise KeyError(f"unknown CRC algorithm: {name!r}") from None


def crc(name: str, data: bytes) -> int:
    """One-shot: CRC of data using the named catalogue algorithm."""
    return compute_crc(lookup(name).create(), data)
