from lfsr_crc import catalog
from lfsr_crc.engine.stage import check


if __name__ == "__main__":
    for entry in catalog.CATALOG:
        crc = entry.create()
        got = check(crc)
        digits = (entry.degree + 3) // 4
        status = "ok" if got == entry.check else "FAIL"
        print(f"{entry.name:<28} width={entry.degree:<2} check=0x{got:0{digits}X}  {status}")
