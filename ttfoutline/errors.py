from __future__ import annotations


class FontDecodeError(ValueError):
    """Base class for every failure raised while decoding a font buffer."""


class BufferBoundsError(FontDecodeError, IndexError):
    def __init__(self, offset: int, width: int, length: int) -> None:
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"read of {width} byte(s) at 0x{offset:X} runs past end of buffer ({length} bytes)"
        )


class MissingTableError(FontDecodeError, KeyError):
    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"font has no '{tag}' table")

    def __str__(self) -> str:
        return self.args[0]


class GlyphIdError(FontDecodeError):
    def __init__(self, glyph_id: int, num_glyphs: int) -> None:
        self.glyph_id = glyph_id
        self.num_glyphs = num_glyphs
        super().__init__(f"glyph id {glyph_id} is outside the location table ({num_glyphs} glyphs)")


class UnsupportedCmapError(FontDecodeError):
    pass


class MalformedGlyphError(FontDecodeError):
    pass
