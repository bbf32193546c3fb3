"""
Table directory, glyph count and location table resolution.

Layout reference (all big endian):

    offset table     uint32 sfntVersion, uint16 numTables, 3 x uint16 search hints
    table record     tag[4], uint32 checksum, uint32 offset, uint32 length   (16 bytes)
    maxp             uint16 numGlyphs at +4
    head             int16 indexToLocFormat at +50
    loca             numGlyphs + 1 entries, uint16 (value / 2) or uint32
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence, Tuple

from .errors import GlyphIdError, MissingTableError
from .reader import TAG, UINT16, UINT32, Buffer, read_i16, read_tag, read_u16, read_u32

NUM_TABLES_OFFSET = 4
TABLE_RECORDS_OFFSET = 12
TABLE_RECORD_SIZE = TAG + 3 * UINT32

MAXP_NUM_GLYPHS_OFFSET = 4
HEAD_INDEX_TO_LOC_FORMAT_OFFSET = 50

SHORT_LOCA_FORMAT = 0
REQUIRED_TABLES = ("head", "maxp", "loca", "cmap", "glyf")


@dataclass(frozen=True)
class TableRecord:
    tag: str
    checksum: int
    offset: int
    length: int


def iter_table_records(buffer: Buffer) -> Iterator[TableRecord]:
    num_tables = read_u16(buffer, NUM_TABLES_OFFSET)
    for idx in range(num_tables):
        base = TABLE_RECORDS_OFFSET + idx * TABLE_RECORD_SIZE
        yield TableRecord(
            tag=read_tag(buffer, base),
            checksum=read_u32(buffer, base + TAG),
            offset=read_u32(buffer, base + TAG + UINT32),
            length=read_u32(buffer, base + TAG + 2 * UINT32),
        )


def parse_table_directory(buffer: Buffer) -> dict[str, int]:
    """Map each table tag to its absolute offset. A repeated tag keeps the last record."""

    directory: dict[str, int] = {}
    for record in iter_table_records(buffer):
        directory[record.tag] = record.offset
    return directory


def table_offset(directory: Mapping[str, int], tag: str) -> int:
    try:
        return directory[tag]
    except KeyError:
        raise MissingTableError(tag) from None


def missing_tables(directory: Mapping[str, int], required: Sequence[str] = REQUIRED_TABLES) -> list[str]:
    return [tag for tag in required if tag not in directory]


def read_num_glyphs(buffer: Buffer, directory: Mapping[str, int]) -> int:
    return read_u16(buffer, table_offset(directory, "maxp") + MAXP_NUM_GLYPHS_OFFSET)


def read_index_to_loc_format(buffer: Buffer, directory: Mapping[str, int]) -> int:
    return read_i16(buffer, table_offset(directory, "head") + HEAD_INDEX_TO_LOC_FORMAT_OFFSET)


def read_location_table(
    buffer: Buffer,
    directory: Mapping[str, int],
    num_glyphs: int | None = None,
) -> Tuple[int, ...]:
    """
    Return the glyf-relative start offset of every glyph plus the trailing
    sentinel, so glyph ``i`` spans ``[locations[i], locations[i + 1])``.
    """

    if num_glyphs is None:
        num_glyphs = read_num_glyphs(buffer, directory)
    loca = table_offset(directory, "loca")
    if read_index_to_loc_format(buffer, directory) == SHORT_LOCA_FORMAT:
        return tuple(read_u16(buffer, loca + idx * UINT16) * 2 for idx in range(num_glyphs + 1))
    return tuple(read_u32(buffer, loca + idx * UINT32) for idx in range(num_glyphs + 1))


def glyph_range(locations: Sequence[int], glyph_id: int) -> Tuple[int, int]:
    if glyph_id < 0 or glyph_id + 1 >= len(locations):
        raise GlyphIdError(glyph_id, max(len(locations) - 1, 0))
    return locations[glyph_id], locations[glyph_id + 1]


def has_outline(locations: Sequence[int], glyph_id: int) -> bool:
    start, end = glyph_range(locations, glyph_id)
    return start < end
