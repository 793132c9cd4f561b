"""
Narrow I/O capabilities. Consumers such as `mbytes.streams.copy` depend on
these rather than on ByteBuffer itself; any object with matching methods
qualifies.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from .buffer import ReadResult

BytesLike = Union[bytes, bytearray, memoryview]


@runtime_checkable
class Reader(Protocol):
    def read(self, dst) -> ReadResult:
        """Fill `dst`; returns (count, eof). `count` is valid even with eof set."""
        ...


@runtime_checkable
class Writer(Protocol):
    def write(self, src: BytesLike) -> int: ...


@runtime_checkable
class Seeker(Protocol):
    def seek(self, offset: int, whence: int = 0) -> int: ...


@runtime_checkable
class ReaderAt(Protocol):
    def read_at(self, dst, offset: int) -> ReadResult: ...


@runtime_checkable
class WriterAt(Protocol):
    def write_at(self, src: BytesLike, offset: int) -> int: ...


@runtime_checkable
class ByteReader(Protocol):
    def read_byte(self) -> int: ...


@runtime_checkable
class ByteWriter(Protocol):
    def write_byte(self, c: int) -> None: ...

