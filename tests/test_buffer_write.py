import pytest

from mbytes.buffer import ByteBuffer
from mbytes.errors import OffsetNegative, OffsetOverflow

ABC = b"abcdef"


def test_write_round_trip():
    b = ByteBuffer(0)
    assert b.write(ABC) == len(ABC)
    assert b.pos() == len(ABC)

    assert b.seek_from_start(0) == 0
    rbuff = bytearray(len(ABC))
    n, _ = b.read(rbuff)
    assert n == len(ABC)
    assert rbuff == ABC


def test_write_appends_at_end():
    b = ByteBuffer(0)
    b.write(ABC)
    b.write(ABC)
    assert b.pos() == 12
    assert b.bytes() == ABC * 2


def test_overlap_write():
    b = ByteBuffer.from_bytes(ABC)
    b.seek_from_start(3)
    assert b.write(ABC) == 6
    assert b.bytes() == b"abcabcdef"
    assert b.size() == 9
    # cursor moves by the appended bytes only
    assert b.pos() == 6


def test_overwrite_only_keeps_cursor():
    b = ByteBuffer.from_bytes(ABC * 3)
    b.seek_from_end(-len(ABC))
    assert b.write(b"ABCDEF") == 6
    assert b.size() == 18
    assert b.pos() == 12
    assert b.bytes() == ABC * 2 + b"ABCDEF"


def test_write_accepts_memoryview():
    b = ByteBuffer(0)
    b.write(memoryview(b"xyz")[1:])
    assert b.bytes() == b"yz"


def test_write_empty_is_noop():
    b = ByteBuffer.from_bytes(ABC)
    b.seek_from_start(2)
    assert b.write(b"") == 0
    assert b.pos() == 2 and b.bytes() == ABC


def test_write_at_overwrite_and_append():
    b = ByteBuffer(0)
    for _ in range(5):
        assert b.write(ABC) == len(ABC)
    clone = b.clone()
    assert b.size() == 30

    for off in range(0, 30, len(ABC)):
        assert b.write_at(ABC, off) == len(ABC)
    assert clone.compare_with(b) == 0

    off = b.size() - 3
    assert b.write_at(ABC, off) == len(ABC)
    assert b.size() == 33
    assert b.pos() == off + 3

    b.seek_from_end(-len(ABC))
    rbuff = bytearray(len(ABC))
    n, eof = b.read(rbuff)
    assert (n, eof) == (6, False)
    assert rbuff == ABC


def test_write_at_inside_moves_cursor_to_offset():
    b = ByteBuffer.from_bytes(ABC)
    b.seek_from_end(-1)
    b.write_at(b"XY", 1)
    assert b.bytes() == b"aXYdef"
    assert b.pos() == 1


@pytest.mark.parametrize("offset,exc", [(-1, OffsetNegative), (6, OffsetOverflow), (7, OffsetOverflow)])
def test_write_at_bounds(offset, exc):
    b = ByteBuffer.from_bytes(ABC)
    b.seek_from_start(2)
    with pytest.raises(exc):
        b.write_at(b"zz", offset)
    assert b.pos() == 2
    assert b.bytes() == ABC


def test_write_at_on_empty_buffer_overflows():
    with pytest.raises(OffsetOverflow):
        ByteBuffer(0).write_at(b"a", 0)


def test_write_byte_always_appends():
    b = ByteBuffer.from_bytes(ABC)
    b.seek_from_start(1)
    b.write_byte(ord("g"))
    assert b.bytes() == ABC + b"g"
    assert b.pos() == 7


def test_write_byte_range():
    with pytest.raises(ValueError):
        ByteBuffer(0).write_byte(256)


def test_write_at_float_offset_rejected():
    b = ByteBuffer.from_bytes(ABC)
    b.seek_from_start(2)
    with pytest.raises(TypeError):
        b.write_at(b"zz", 1.0)
    assert b.pos() == 2
    assert b.bytes() == ABC
