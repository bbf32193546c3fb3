"""
TrueType simple glyph outline decoding split into modules for reuse.
"""

from .cmap import EncodingRecord, Format4Subtable, find_format4_subtable, iter_encoding_records, lookup_glyph_id
from .entities import Contour, DecodeFailure, Point, SimpleGlyph
from .errors import (
    BufferBoundsError,
    FontDecodeError,
    GlyphIdError,
    MalformedGlyphError,
    MissingTableError,
    UnsupportedCmapError,
)
from .font import (
    FontFile,
    decode_font,
    decode_glyph,
    decode_text,
    font_to_dict,
    resolve_glyph_id,
    text_characters,
)
from .glyf import accumulate, decode_simple_glyph, read_coordinate_deltas, read_flags
from .logging import GlyphTraceLogger, log_decode_failures
from .tables import (
    REQUIRED_TABLES,
    TableRecord,
    glyph_range,
    has_outline,
    iter_table_records,
    missing_tables,
    parse_table_directory,
    read_index_to_loc_format,
    read_location_table,
    read_num_glyphs,
    table_offset,
)

__all__ = [
    "EncodingRecord",
    "Format4Subtable",
    "find_format4_subtable",
    "iter_encoding_records",
    "lookup_glyph_id",
    "Contour",
    "DecodeFailure",
    "Point",
    "SimpleGlyph",
    "BufferBoundsError",
    "FontDecodeError",
    "GlyphIdError",
    "MalformedGlyphError",
    "MissingTableError",
    "UnsupportedCmapError",
    "FontFile",
    "decode_font",
    "decode_glyph",
    "decode_text",
    "font_to_dict",
    "resolve_glyph_id",
    "text_characters",
    "accumulate",
    "decode_simple_glyph",
    "read_coordinate_deltas",
    "read_flags",
    "GlyphTraceLogger",
    "log_decode_failures",
    "REQUIRED_TABLES",
    "TableRecord",
    "glyph_range",
    "has_outline",
    "iter_table_records",
    "missing_tables",
    "parse_table_directory",
    "read_index_to_loc_format",
    "read_location_table",
    "read_num_glyphs",
    "table_offset",
]
