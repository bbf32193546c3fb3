import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fontbuilder import build_font, composite_glyph, simple_glyph

# 'A'..'C' map to glyphs 1..3 through idDelta -64.
ABC_SEGMENT = (65, 67, -64, 0)


@pytest.fixture
def triangle_glyph():
    # Three on-curve points, x and y both short positive vectors.
    return simple_glyph(
        end_points=[2],
        flags=[0x37, 0x37, 0x37],
        x_data=[10, 5, 3],
        y_data=[1, 2, 4],
        bbox=(10, 1, 18, 7),
    )


@pytest.fixture
def abc_font(triangle_glyph):
    """notdef (empty), 'A' triangle, 'B' empty, 'C' truncated outline."""

    truncated = simple_glyph(end_points=[50], flags=[])
    return build_font([b"", triangle_glyph, b"", truncated], [ABC_SEGMENT])


@pytest.fixture
def composite_font(triangle_glyph):
    return build_font([b"", triangle_glyph, composite_glyph(), b""], [ABC_SEGMENT])
