from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterable, List, Tuple

from .cmap import Format4Subtable, find_format4_subtable, lookup_glyph_id
from .entities import DecodeFailure, SimpleGlyph
from .errors import FontDecodeError
from .glyf import decode_simple_glyph
from .logging import GlyphTraceLogger
from .reader import Buffer
from .tables import (
    glyph_range,
    parse_table_directory,
    read_location_table,
    read_num_glyphs,
    table_offset,
)


@dataclass(eq=False)
class FontFile:
    """
    Read-only view over a TrueType font buffer.

    The table directory, location table and cmap subtable are derived lazily
    and memoized on the instance. Without a ``trace`` logger nothing else is
    written, so one ``FontFile`` can serve lookups from several threads.
    """

    buffer: Buffer = field(repr=False)
    trace: GlyphTraceLogger | None = field(default=None, repr=False)

    @cached_property
    def tables(self) -> dict[str, int]:
        return parse_table_directory(self.buffer)

    @cached_property
    def num_glyphs(self) -> int:
        return read_num_glyphs(self.buffer, self.tables)

    @cached_property
    def locations(self) -> Tuple[int, ...]:
        return read_location_table(self.buffer, self.tables, self.num_glyphs)

    @cached_property
    def cmap(self) -> Format4Subtable:
        return find_format4_subtable(self.buffer, table_offset(self.tables, "cmap"))

    def resolve_glyph_id(self, character: str) -> int:
        return lookup_glyph_id(self.buffer, self.cmap, ord(character))

    def has_outline(self, glyph_id: int) -> bool:
        start, end = glyph_range(self.locations, glyph_id)
        return start < end

    def decode_glyph(self, glyph_id: int) -> SimpleGlyph:
        start, _end = glyph_range(self.locations, glyph_id)
        glyph_offset = table_offset(self.tables, "glyf") + start
        return decode_simple_glyph(self.buffer, glyph_offset, trace=self.trace)

    def decode_font(
        self,
        characters: Iterable[str],
        *,
        failures: List[DecodeFailure] | None = None,
    ) -> dict[str, SimpleGlyph]:
        glyphs: dict[str, SimpleGlyph] = {}
        for character in characters:
            glyph_id: int | None = None
            try:
                glyph_id = self.resolve_glyph_id(character)
                if not self.has_outline(glyph_id):
                    continue
                glyphs[character] = self.decode_glyph(glyph_id)
            except FontDecodeError as exc:
                # One bad glyph must not sink the rest of the batch.
                if failures is not None:
                    failures.append(DecodeFailure(character=character, glyph_id=glyph_id, error=exc))
        return glyphs


def text_characters(text: str) -> List[str]:
    """Distinct non-whitespace characters of ``text`` in code point order."""

    return sorted({ch for ch in text if not ch.isspace()})


def resolve_glyph_id(buffer: Buffer, character: str) -> int:
    return FontFile(buffer).resolve_glyph_id(character)


def decode_glyph(buffer: Buffer, glyph_id: int) -> SimpleGlyph:
    return FontFile(buffer).decode_glyph(glyph_id)


def decode_font(buffer: Buffer, characters: Iterable[str]) -> dict[str, SimpleGlyph]:
    return FontFile(buffer).decode_font(characters)


def decode_text(buffer: Buffer, text: str) -> dict[str, SimpleGlyph]:
    return FontFile(buffer).decode_font(text_characters(text))


def font_to_dict(glyphs: dict[str, SimpleGlyph]) -> dict:
    return {"glyphs": {character: glyph.to_dict() for character, glyph in glyphs.items()}}
