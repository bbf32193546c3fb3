"""
Character to glyph mapping through a cmap format 4 (segment mapping) subtable.

    cmap header      uint16 version, uint16 numTables
    encoding record  uint16 platformID, uint16 encodingID, uint32 subtable offset
    format 4         uint16 format, length, language, segCountX2,
                     searchRange, entrySelector, rangeShift
                     uint16 endCode[segCount]
                     uint16 reservedPad
                     uint16 startCode[segCount]
                     int16  idDelta[segCount]
                     uint16 idRangeOffset[segCount]
                     uint16 glyphIdArray[]

idRangeOffset is measured from the address of its own slot, which is why the
subtable keeps absolute offsets for every array instead of indexes.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import UnsupportedCmapError
from .reader import UINT16, UINT32, Buffer, read_u16, read_u32

ENCODING_RECORDS_OFFSET = 2 * UINT16
ENCODING_RECORD_SIZE = 2 * UINT16 + UINT32

FORMAT_4 = 4
SEG_COUNT_X2_OFFSET = 6
END_CODES_OFFSET = 14
MAX_FORMAT4_CODE_POINT = 0xFFFF

# Windows Unicode BMP first, then Unicode 2.0 BMP; anything else in table order.
PREFERRED_ENCODINGS = ((3, 1), (0, 3))


@dataclass(frozen=True)
class EncodingRecord:
    platform_id: int
    encoding_id: int
    offset: int
    format: int


@dataclass(frozen=True)
class Format4Subtable:
    offset: int
    seg_count: int
    end_codes: Tuple[int, ...]
    start_codes_offset: int
    id_deltas_offset: int
    id_range_offsets_offset: int

    @classmethod
    def parse(cls, buffer: Buffer, offset: int) -> "Format4Subtable":
        fmt = read_u16(buffer, offset)
        if fmt != FORMAT_4:
            raise UnsupportedCmapError(f"cmap subtable at 0x{offset:X} is format {fmt}, expected 4")
        seg_count = read_u16(buffer, offset + SEG_COUNT_X2_OFFSET) // 2
        end_codes_offset = offset + END_CODES_OFFSET
        end_codes = tuple(read_u16(buffer, end_codes_offset + idx * UINT16) for idx in range(seg_count))
        # reservedPad sits between the end and start code arrays.
        start_codes_offset = end_codes_offset + seg_count * UINT16 + UINT16
        id_deltas_offset = start_codes_offset + seg_count * UINT16
        id_range_offsets_offset = id_deltas_offset + seg_count * UINT16
        return cls(
            offset=offset,
            seg_count=seg_count,
            end_codes=end_codes,
            start_codes_offset=start_codes_offset,
            id_deltas_offset=id_deltas_offset,
            id_range_offsets_offset=id_range_offsets_offset,
        )

    def segment(self, buffer: Buffer, index: int) -> Tuple[int, int, int, int, int]:
        """Return ``(start, end, id_delta, id_range_offset, id_range_offset_slot)``."""

        slot = self.id_range_offsets_offset + index * UINT16
        return (
            read_u16(buffer, self.start_codes_offset + index * UINT16),
            self.end_codes[index],
            read_u16(buffer, self.id_deltas_offset + index * UINT16),
            read_u16(buffer, slot),
            slot,
        )


def iter_encoding_records(buffer: Buffer, cmap_offset: int) -> Iterator[EncodingRecord]:
    count = read_u16(buffer, cmap_offset + UINT16)
    for idx in range(count):
        base = cmap_offset + ENCODING_RECORDS_OFFSET + idx * ENCODING_RECORD_SIZE
        subtable = cmap_offset + read_u32(buffer, base + 2 * UINT16)
        yield EncodingRecord(
            platform_id=read_u16(buffer, base),
            encoding_id=read_u16(buffer, base + UINT16),
            offset=subtable,
            format=read_u16(buffer, subtable),
        )


def find_format4_subtable(buffer: Buffer, cmap_offset: int) -> Format4Subtable:
    candidates = [record for record in iter_encoding_records(buffer, cmap_offset) if record.format == FORMAT_4]
    if not candidates:
        raise UnsupportedCmapError("cmap table has no format 4 subtable")
    by_encoding = {(record.platform_id, record.encoding_id): record for record in reversed(candidates)}
    for key in PREFERRED_ENCODINGS:
        if key in by_encoding:
            return Format4Subtable.parse(buffer, by_encoding[key].offset)
    return Format4Subtable.parse(buffer, candidates[0].offset)


def lookup_glyph_id(buffer: Buffer, subtable: Format4Subtable, code_point: int) -> int:
    if code_point < 0 or code_point > MAX_FORMAT4_CODE_POINT:
        return 0
    # End codes ascend, so the first end >= code_point is the only candidate.
    index = bisect.bisect_left(subtable.end_codes, code_point)
    if index >= subtable.seg_count:
        return 0
    start, _end, id_delta, id_range_offset, slot = subtable.segment(buffer, index)
    if start > code_point:
        return 0
    if id_range_offset == 0:
        return (id_delta + code_point) & 0xFFFF
    glyph_id = read_u16(buffer, slot + id_range_offset + 2 * (code_point - start))
    if glyph_id == 0:
        return 0
    return (glyph_id + id_delta) & 0xFFFF
