import pytest

from lfsr_crc.descriptor import CRC
from lfsr_crc.engine import stage as engine_stage


def test_available_modules_lists_engines():
    mods = engine_stage.available_modules()
    assert "matrix" in mods
    assert "bitwise" in mods


@pytest.mark.parametrize("module_name", engine_stage.available_modules())
def test_engine_stage_check_value_all_modules(module_name: str, crc32_iso_hdlc):
    mod = engine_stage._import_engine_module(module_name)

    # Project invariant: module Config must be default-constructible
    try:
        module_cfg = mod.Config()
    except TypeError as e:
        pytest.fail(
            f"engine module '{module_name}' Config() must be default-constructible. Error: {e}"
        )

    cfg = engine_stage.Config(module=module_name, module_cfg=module_cfg)
    assert engine_stage.compute_crc(crc32_iso_hdlc, b"123456789", cfg=cfg) == 0xCBF43926


def test_engines_agree_on_random_data(payload):
    crcs = [
        CRC(4, "CRC-4/G-704", 0x3, 0x0, True, True, 0x0),
        CRC(5, "CRC-5/USB", 0x05, 0x1F, True, True, 0x1F),
        CRC(7, "CRC-7/ROHC", 0x4F, 0x7F, True, True, 0x00),
        CRC(15, "CRC-15/CAN", 0x4599, 0, False, False, 0),
        CRC(24, "CRC-24/OPENPGP", 0x864CFB, 0xB704CE, False, False, 0),
        CRC(32, "CRC-32/BZIP2", 0x04C11DB7, 0xFFFFFFFF, False, False, 0xFFFFFFFF),
    ]
    matrix_cfg = engine_stage.Config(module="matrix")
    bitwise_cfg = engine_stage.Config(module="bitwise")
    for crc in crcs:
        a = engine_stage.compute_crc(crc, payload, cfg=matrix_cfg)
        b = engine_stage.compute_crc(crc, payload, cfg=bitwise_cfg)
        assert a == b, crc.name


def test_rejects_empty_module_name(crc8):
    with pytest.raises(ValueError, match="non-empty string"):
        engine_stage.compute_crc(crc8, b"abc", cfg=engine_stage.Config(module=""))


def test_rejects_unknown_module(crc8):
    with pytest.raises(ModuleNotFoundError):
        engine_stage.compute_crc(crc8, b"abc", cfg=engine_stage.Config(module="nope"))


def test_computation_requires_descriptor():
    with pytest.raises(TypeError):
        engine_stage.Computation({"poly": 0x07})
