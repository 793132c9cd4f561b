from __future__ import annotations

import operator
from enum import IntEnum
from typing import NamedTuple

from loguru import logger

from .capabilities import BytesLike
from .codecs.varint import encode_uvarint, read_uvarint
from .errors import (
    ByteReadError,
    EndOfData,
    OffsetNegative,
    OffsetOverflow,
    SeekNegative,
    SeekOverflow,
    UnknownWhence,
)
from .models.info import BufferInfo

# library stays silent unless an application (e.g. the cli) enables it
logger.disable("mbytes")


class Whence(IntEnum):
    START = 0
    CURRENT = 1
    END = 2


class ReadResult(NamedTuple):
    """
    Outcome of a read: `count` bytes were copied into the destination, and
    `eof` is set when the end of data was reached before the destination was
    filled. `count` is valid even when `eof` is set.
    """
    count: int
    eof: bool = False


class ByteBuffer:
    """
    Growable in-memory byte store with a cursor.

    Implements the reader, writer, seeker, positional reader/writer and byte
    reader/writer capabilities from `mbytes.capabilities`.

    Invariant: 0 <= pos() <= size() between public calls. Seeking only ever
    addresses existing bytes; writing is what extends the buffer.
    """

    __slots__ = ("_buf", "_pos")

    def __init__(self, size: int = 0):
        self._buf = bytearray()
        self._pos = 0
        self.reset(size)

    @classmethod
    def new(cls, size: int = 0) -> ByteBuffer:
        return cls(size)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> ByteBuffer:
        """Buffer holding a private copy of `data`, positioned at 0."""
        r = cls()
        r._buf = bytearray(data)
        return r

    # -----------------------------
    # Sizing, comparison
    # -----------------------------

    def reset(self, size: int = 0) -> ByteBuffer:
        """
        Replace the content with `size` zero bytes and move to 0.
        Any pre-existing data is lost.
        """
        if size < 0:
            raise ValueError(f"negative buffer size: {size}")
        if self._buf:
            logger.debug("reset: dropping {} bytes, new size {}", len(self._buf), size)
        self._buf = bytearray(size)
        self._pos = 0
        return self

    def clear(self) -> ByteBuffer:
        return self.reset(0)

    def empty(self) -> bool: return len(self._buf) == 0
    def size(self) -> int: return len(self._buf)
    def pos(self) -> int: return self._pos
    def tell(self) -> int: return self._pos

    def bytes(self) -> bytes:
        """Copy of the whole content; later writes are not visible through it."""
        return bytes(self._buf)

    def compare_with(self, other: ByteBuffer) -> int:
        a, b = self._buf, other._buf
        return (a > b) - (a < b)

    def clone(self) -> ByteBuffer:
        """Deep copy of the content. The clone starts at position 0."""
        logger.debug("clone: {} bytes", len(self._buf))
        return type(self).from_bytes(self._buf)

    def info(self) -> BufferInfo:
        return BufferInfo(
            size=len(self._buf),
            pos=self._pos,
            empty=self.empty(),
            remaining=len(self._buf) - self._pos,
        )

    def __len__(self) -> int:
        return len(self._buf)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteBuffer):
            return NotImplemented
        return self._buf == other._buf

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._buf)}, pos={self._pos})"

    # -----------------------------
    # Seeking
    # -----------------------------

    def _overflows(self, p: int) -> bool:
        return p >= len(self._buf)

    def _check_offset(self, offset: int) -> int:
        offset = operator.index(offset)
        if offset < 0:
            raise OffsetNegative(offset)
        if self._overflows(offset):
            raise OffsetOverflow(offset, len(self._buf))
        return offset

    def seek(self, offset: int, whence: int = Whence.START) -> int:
        """
        Move the cursor and return the new position.

        Valid targets are [0, size()); on any failure the cursor is left
        where it was.
        Raises UnknownWhence, SeekNegative, SeekOverflow.
        """
        # only plain ints name a whence; bool and float would match by equality
        if isinstance(whence, bool) or not isinstance(whence, int):
            raise UnknownWhence(whence)
        try:
            whence = Whence(whence)
        except ValueError:
            raise UnknownWhence(whence) from None

        target = operator.index(offset)
        if whence is Whence.CURRENT:
            target += self._pos
        elif whence is Whence.END:
            # offset is expected to be negative here
            target += len(self._buf)

        if target < 0:
            raise SeekNegative(target)
        if self._overflows(target):
            raise SeekOverflow(target, len(self._buf))

        self._pos = target
        return target

    def seek_from_start(self, offset: int) -> int: return self.seek(offset, Whence.START)
    def seek_from_current(self, offset: int) -> int: return self.seek(offset, Whence.CURRENT)
    def seek_from_end(self, offset: int) -> int: return self.seek(offset, Whence.END)
    def seek_to_start(self) -> int: return self.seek(0, Whence.START)
    def seek_to_end(self) -> int: return self.seek(0, Whence.END)

    # -----------------------------
    # Reading
    # -----------------------------

    def _read_from(self, dst, pos: int, advance: bool) -> ReadResult:
        view = memoryview(dst).cast("B")
        avail = len(self._buf) - pos
        if avail <= 0:
            return ReadResult(0, True)

        n = min(avail, len(view))
        view[:n] = self._buf[pos:pos + n]
        if advance:
            self._pos += n
        return ReadResult(n, n < len(view))

    def read(self, dst) -> ReadResult:
        """
        Fill `dst` (a writable bytes-like object) from the cursor onwards and
        advance past the bytes read. A short read comes back with eof set.
        """
        return self._read_from(dst, self._pos, True)

    def read_at(self, dst, offset: int) -> ReadResult:
        """
        Fill `dst` from `offset` without touching the cursor, so several
        positional reads may interleave as long as nothing writes meanwhile.
        Raises OffsetNegative, OffsetOverflow.
        """
        offset = self._check_offset(offset)
        return self._read_from(dst, offset, False)

    def readinto(self, b) -> int:
        return self.read(b).count

    def read_bytes(self, size: int | None = -1) -> bytes:
        """Return up to `size` bytes (the remainder if None/negative); b"" at end of data."""
        avail = max(len(self._buf) - self._pos, 0)
        if size is None or size < 0:
            size = avail
        size = min(size, avail)
        out = bytearray(size)
        n, _ = self.read(out)
        return bytes(out[:n])

    def read_byte(self) -> int:
        one = bytearray(1)
        n, eof = self.read(one)
        if eof:
            raise EndOfData()
        if n != 1:
            raise ByteReadError(n)
        return one[0]

    def byte_at(self, pos: int) -> int:
        """Byte at `pos`, much like indexing; the cursor does not move."""
        one = bytearray(1)
        n, eof = self.read_at(one, pos)
        if eof:
            raise EndOfData()
        if n != 1:
            raise ByteReadError(n)
        return one[0]

    # -----------------------------
    # Writing
    # -----------------------------

    def _write_from(self, src: BytesLike, pos: int) -> tuple[int, int]:
        if not isinstance(src, (bytes, bytearray)):
            src = bytes(src)
        total = len(src)

        # bytes landing inside the current content are overwritten,
        # the rest is appended
        overlap = min(len(self._buf) - pos, total)
        appended = total - overlap
        if overlap > 0:
            self._buf[pos:pos + overlap] = src[:overlap]
        if appended > 0:
            self._buf += src[overlap:]
        return appended, total

    def write(self, src: BytesLike) -> int:
        """
        Write `src` at the cursor, overwriting then growing as needed.

        The cursor advances by the number of appended bytes only: a write that
        lands entirely inside the content leaves it in place, a write that
        straddles the end leaves it where the overwrite stopped.
        Returns len(src).
        """
        appended, written = self._write_from(src, self._pos)
        self._pos += appended
        return written

    def write_at(self, src: BytesLike, offset: int) -> int:
        """
        Write `src` at `offset`. Afterwards the cursor sits at
        offset + appended bytes, following the same growth rule as write().
        Raises OffsetNegative, OffsetOverflow.
        """
        offset = self._check_offset(offset)
        appended, written = self._write_from(src, offset)
        self._pos = offset + appended
        return written

    def write_byte(self, c: int) -> None:
        # always a pure append, wherever the cursor was
        self._buf.append(c)
        self._pos = len(self._buf)

    # -----------------------------
    # Varints
    # -----------------------------

    def write_uint64_var(self, x: int) -> int:
        return self.write(encode_uvarint(x))

    def read_uint64_var(self) -> int:
        return read_uvarint(self)
