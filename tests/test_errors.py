from dsp56emu.errors import (
    DspError,
    IllegalInstructionError,
    MemoryAccessError,
    NotImplementedFeatureError,
    show_assert,
)


def test_show_assert_writes_banner_and_message(capsys):
    line = show_assert("x > 0")
    err = capsys.readouterr().err
    assert line == "DSP 56300 Emulator: ASSERTION FAILEDx > 0"
    assert err == line + "\n"


def test_not_implemented_is_a_dsp_error_with_prefix():
    err = NotImplementedFeatureError("bitreverse")
    assert isinstance(err, DspError)
    assert "Not implemented: bitreverse" in str(err)


def test_memory_access_error_formats_address():
    err = MemoryAccessError(0xabc, write=True)
    assert str(err) == "DSP 56300 ERROR: Memory Write: 000abc"
    assert err.address == 0xabc
    assert err.write is True


def test_memory_read_error_message():
    err = MemoryAccessError(0x123456)
    assert "Memory Read: 123456" in str(err)


def test_illegal_instruction_keeps_opcode():
    err = IllegalInstructionError(0x000005)
    assert isinstance(err, DspError)
    assert err.opcode == 5
    assert str(err).endswith("Illegal instruction: 000005")