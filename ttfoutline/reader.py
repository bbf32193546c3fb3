"""
Bounds-checked big-endian field readers.

Every decoder stage reads through these helpers instead of slicing the buffer
directly, so an offset that points past the end of the font surfaces as a
``BufferBoundsError`` at the exact read that went wrong rather than as a
short slice that silently decodes to garbage further down.
"""

from __future__ import annotations

import struct
from typing import Union

from .errors import BufferBoundsError

Buffer = Union[bytes, bytearray, memoryview]

UINT8 = 1
UINT16 = 2
INT16 = 2
UINT32 = 4
TAG = 4

_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")


def ensure_readable(buffer: Buffer, offset: int, width: int) -> None:
    if offset < 0 or offset + width > len(buffer):
        raise BufferBoundsError(offset, width, len(buffer))


def read_u8(buffer: Buffer, offset: int) -> int:
    ensure_readable(buffer, offset, UINT8)
    return _U8.unpack_from(buffer, offset)[0]


def read_u16(buffer: Buffer, offset: int) -> int:
    ensure_readable(buffer, offset, UINT16)
    return _U16.unpack_from(buffer, offset)[0]


def read_i16(buffer: Buffer, offset: int) -> int:
    ensure_readable(buffer, offset, INT16)
    return _I16.unpack_from(buffer, offset)[0]


def read_u32(buffer: Buffer, offset: int) -> int:
    ensure_readable(buffer, offset, UINT32)
    return _U32.unpack_from(buffer, offset)[0]


def read_tag(buffer: Buffer, offset: int) -> str:
    ensure_readable(buffer, offset, TAG)
    raw = bytes(buffer[offset : offset + TAG])
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError:
        # Keep lookups deterministic for junk tags instead of failing here.
        return raw.decode("latin-1")
