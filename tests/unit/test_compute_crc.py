import pytest

from lfsr_crc import CRC, Computation, Config, check, compute_crc, reflect_bits
from lfsr_crc.engine.modules import matrix


CHECK_INPUT = b"123456789"


def test_crc8_check_value(crc8):
    assert compute_crc(crc8, CHECK_INPUT) == 0xF4
    assert crc8.result == 0xF4


def test_crc16_ccitt_false_check_value(crc16_ccitt_false):
    assert compute_crc(crc16_ccitt_false, CHECK_INPUT) == 0x29B1
    assert crc16_ccitt_false.result == 0x29B1


def test_crc32_iso_hdlc_check_value(crc32_iso_hdlc):
    assert compute_crc(crc32_iso_hdlc, CHECK_INPUT) == 0xCBF43926
    assert crc32_iso_hdlc.result == 0xCBF43926


def test_accepts_bytearray_and_memoryview(crc32_iso_hdlc):
    assert compute_crc(crc32_iso_hdlc, bytearray(CHECK_INPUT)) == 0xCBF43926
    assert compute_crc(crc32_iso_hdlc, memoryview(CHECK_INPUT)) == 0xCBF43926


def test_rejects_non_bytes(crc8):
    with pytest.raises(TypeError, match="bytes-like"):
        compute_crc(crc8, "123456789")


def test_deterministic(crc32_iso_hdlc, payload):
    first = compute_crc(crc32_iso_hdlc, payload)
    for _ in range(3):
        assert compute_crc(crc32_iso_hdlc, payload) == first


@pytest.mark.parametrize(
    "crc",
    [
        CRC(4, "CRC-4/INTERLAKEN", 0x3, 0xF, False, False, 0xF),
        CRC(5, "CRC-5/USB", 0x05, 0x1F, True, True, 0x1F),
        CRC(8, "CRC-8/ROHC", 0x07, 0xFF, True, True, 0x00),
        CRC(16, "x", 0x1021, 0x1234, True, True, 0xFFFF),
        CRC(16, "CRC-16/IBM-3740", 0x1021, 0xFFFF, False, False, 0x0000),
        CRC(32, "CRC-32/ISO-HDLC", 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF),
    ],
    ids=lambda c: c.name,
)
def test_empty_input_identity(crc):
    expected = reflect_bits(crc.init, crc.width) if crc.ref_out else crc.init
    assert compute_crc(crc, b"") == expected ^ crc.xor_out


def test_empty_crc32_is_zero(crc32_iso_hdlc):
    assert compute_crc(crc32_iso_hdlc, b"") == 0


def test_byte_at_a_time_matches_whole_buffer(crc32_iso_hdlc, payload):
    whole = compute_crc(crc32_iso_hdlc, payload)

    c = Computation(crc32_iso_hdlc)
    for b in payload:
        c.update(bytes([b]))
    assert c.finalize() == whole


def test_split_updates_match_whole_buffer(crc16_ccitt_false):
    c = Computation(crc16_ccitt_false).update(b"1234").update(b"").update(b"56789")
    assert c.finalize() == 0x29B1


def test_finalize_does_not_consume_state(crc8):
    c = Computation(crc8).update(b"1234")
    assert c.finalize() == c.finalize()
    c.update(b"56789")
    assert c.finalize() == 0xF4


def test_result_overwritten_each_call(crc8):
    compute_crc(crc8, b"a")
    first = crc8.result
    compute_crc(crc8, CHECK_INPUT)
    assert crc8.result == 0xF4
    assert first != crc8.result


def test_check_leaves_result_untouched(crc16_ccitt_false):
    assert check(crc16_ccitt_false) == 0x29B1
    assert crc16_ccitt_false.result == crc16_ccitt_false.init


def test_uncached_matrices_give_same_result(crc32_iso_hdlc, payload):
    cached = compute_crc(crc32_iso_hdlc, payload)
    cfg = Config(module="matrix", module_cfg=matrix.Config(cache_matrices=False))
    assert compute_crc(crc32_iso_hdlc, payload, cfg=cfg) == cached


def test_distinct_descriptors_do_not_interfere(crc8, crc32_iso_hdlc):
    c8 = Computation(crc8)
    c32 = Computation(crc32_iso_hdlc)
    for b in CHECK_INPUT:
        c8.update(bytes([b]))
        c32.update(bytes([b]))
    assert c8.finalize() == 0xF4
    assert c32.finalize() == 0xCBF43926
