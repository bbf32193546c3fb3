import pytest

from ttfoutline.errors import BufferBoundsError, FontDecodeError
from ttfoutline.reader import read_i16, read_tag, read_u8, read_u16, read_u32

DATA = bytes([0x12, 0x34, 0xFF, 0xFE, 0x67, 0x6C, 0x79, 0x66])


def test_big_endian_fields():
    assert read_u8(DATA, 2) == 0xFF
    assert read_u16(DATA, 0) == 0x1234
    assert read_i16(DATA, 2) == -2
    assert read_u16(DATA, 2) == 0xFFFE
    assert read_u32(DATA, 0) == 0x1234FFFE
    assert read_tag(DATA, 4) == "glyf"


def test_reads_from_memoryview_and_bytearray():
    assert read_u16(memoryview(DATA), 0) == 0x1234
    assert read_tag(bytearray(DATA), 4) == "glyf"


@pytest.mark.parametrize(
    "reader, offset",
    [(read_u8, 8), (read_u16, 7), (read_i16, 7), (read_u32, 5), (read_tag, 6), (read_u16, -1)],
)
def test_reads_past_the_buffer_are_not_clamped(reader, offset):
    with pytest.raises(BufferBoundsError) as info:
        reader(DATA, offset)
    assert info.value.offset == offset
    assert info.value.length == len(DATA)
    assert isinstance(info.value, IndexError)
    assert isinstance(info.value, FontDecodeError)


def test_non_ascii_tag_still_decodes():
    assert read_tag(b"\xffabc", 0) == "\xffabc"
