from __future__ import annotations


class ByteBufferError(ValueError):
    pass


class UnknownWhence(ByteBufferError):
    def __init__(self, whence) -> None:
        super().__init__(f"unknown whence value: {whence!r}")
        self.whence = whence


class SeekNegative(ByteBufferError):
    def __init__(self, target: int) -> None:
        super().__init__(f"negative seek: {target}")
        self.target = target


class SeekOverflow(ByteBufferError):
    def __init__(self, target: int, size: int) -> None:
        super().__init__(f"seek overflow: {target} >= size {size}")
        self.target = target
        self.size = size


class OffsetNegative(ByteBufferError):
    def __init__(self, offset: int) -> None:
        super().__init__(f"negative offset: {offset}")
        self.offset = offset


class OffsetOverflow(ByteBufferError):
    def __init__(self, offset: int, size: int) -> None:
        super().__init__(f"offset overflow: {offset} >= size {size}")
        self.offset = offset
        self.size = size


class EndOfData(ByteBufferError, EOFError):
    """
    End of available bytes. `data` holds whatever was read before the end was
    hit (empty when nothing was available), so short reads are never lost.
    """

    def __init__(self, msg: str = "end of data", *, data: bytes = b"") -> None:
        super().__init__(msg)
        self.data = data

    @property
    def count(self) -> int:
        return len(self.data)


class ByteReadError(ByteBufferError):
    def __init__(self, count: int) -> None:
        super().__init__(f"error reading byte: got {count} bytes")
        self.count = count


class VarintOverflow(ByteBufferError):
    def __init__(self, nbytes: int) -> None:
        super().__init__(f"varint overflows a 64-bit integer after {nbytes} bytes")
        self.nbytes = nbytes


class ShortWrite(ByteBufferError):
    def __init__(self, offered: int, written: int) -> None:
        super().__init__(f"short write: {written} of {offered} bytes")
        self.offered = offered
        self.written = written
