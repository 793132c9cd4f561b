from __future__ import annotations
from pydantic import BaseModel, Field, model_validator

from ..codecs.varint import MAX_UINT64, MAX_VARINT_LEN64


class BufferInfo(BaseModel):
    size: int = Field(..., ge=0)
    pos: int = Field(..., ge=0)
    empty: bool
    remaining: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _pos_within_size(self) -> "BufferInfo":
        if self.pos > self.size:
            raise ValueError(f"pos {self.pos} beyond size {self.size}")
        return self


class VarintRecord(BaseModel):
    offset: int = Field(..., ge=0)
    length: int = Field(..., ge=1, le=MAX_VARINT_LEN64)
    value: int = Field(..., ge=0, le=MAX_UINT64)
