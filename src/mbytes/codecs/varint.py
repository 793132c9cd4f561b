from __future__ import annotations

from typing import Iterator

from ..capabilities import ByteReader
from ..errors import EndOfData, VarintOverflow

MAX_VARINT_LEN64 = 10
MAX_UINT64 = (1 << 64) - 1


def _check_uint64(x: int) -> None:
    if not (0 <= x <= MAX_UINT64):
        raise ValueError(f"value out of uint64 range: {x}")


def uvarint_size(x: int) -> int:
    """Number of bytes encode_uvarint(x) produces."""
    _check_uint64(x)
    n = 1
    while x >= 0x80:
        x >>= 7
        n += 1
    return n


def encode_uvarint(x: int) -> bytes:
    """
    Little-endian base-128: 7 payload bits per byte, least significant group
    first, high bit set on every byte but the last. At most 10 bytes.
    """
    _check_uint64(x)
    out = bytearray()
    while x >= 0x80:
        out.append((x & 0x7F) | 0x80)
        x >>= 7
    out.append(x)
    return bytes(out)


def _finish_uvarint(r: ByteReader, b: int) -> int:
    x, s = 0, 0
    for i in range(MAX_VARINT_LEN64):
        if i:
            b = r.read_byte()
        if b < 0x80:
            # 10th byte may only carry the single top bit of a uint64
            if i == MAX_VARINT_LEN64 - 1 and b > 1:
                raise VarintOverflow(i + 1)
            return x | (b << s)
        x |= (b & 0x7F) << s
        s += 7
    raise VarintOverflow(MAX_VARINT_LEN64)


def read_uvarint(r: ByteReader) -> int:
    """
    Decode one varint from `r`, a byte at a time. Errors from the reader
    propagate unchanged (EndOfData when the data stops mid-value).
    """
    return _finish_uvarint(r, r.read_byte())


def iter_uvarints(r: ByteReader) -> Iterator[int]:
    """
    Yield varints until `r` runs out exactly on a value boundary.
    A value cut short by the end of data still raises EndOfData.
    """
    while True:
        try:
            first = r.read_byte()
        except EndOfData:
            return
        yield _finish_uvarint(r, first)
