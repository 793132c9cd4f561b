from __future__ import annotations

from .capabilities import Reader, Writer
from .errors import ByteBufferError, EndOfData, ShortWrite

DEFAULT_CHUNK_SIZE = 32 * 1024

# a reader returning nothing without signalling eof this many times in a row is broken
_MAX_EMPTY_READS = 100


class NoProgress(ByteBufferError):
    pass


def _read_some(src: Reader, view: memoryview, empty_reads: int) -> tuple[int, bool, int]:
    n, eof = src.read(view)
    if n == 0 and not eof:
        empty_reads += 1
        if empty_reads >= _MAX_EMPTY_READS:
            raise NoProgress(f"reader returned no data {empty_reads} times without eof")
    else:
        empty_reads = 0
    return n, eof, empty_reads


def copy(dst: Writer, src: Reader, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """
    Drain `src` into `dst` until the end of data; returns the number of bytes
    copied. Reading starts wherever `src` is positioned.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    view = memoryview(bytearray(chunk_size))
    total = 0
    empty_reads = 0
    while True:
        n, eof, empty_reads = _read_some(src, view, empty_reads)
        if n > 0:
            written = dst.write(view[:n])
            if written != n:
                raise ShortWrite(n, written)
            total += n
        if eof:
            return total


def read_full(src: Reader, size: int) -> bytes:
    """
    Read exactly `size` bytes. Running out first raises EndOfData carrying
    the bytes that were read.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    out = bytearray(size)
    view = memoryview(out)
    got = 0
    empty_reads = 0
    while got < size:
        n, eof, empty_reads = _read_some(src, view[got:], empty_reads)
        got += n
        if eof and got < size:
            raise EndOfData(f"wanted {size} bytes, got {got}", data=bytes(out[:got]))
    return bytes(out)


def copy_n(dst: Writer, src: Reader, n: int) -> int:
    """Copy exactly `n` bytes; nothing is written if `src` holds fewer."""
    data = read_full(src, n)
    written = dst.write(data)
    if written != n:
        raise ShortWrite(n, written)
    return written
