"""
Simple (quadratic) glyph outline decoding from the glyf table.

    int16   numberOfContours      (< 0 means composite, not decoded here)
    int16   xMin, yMin, xMax, yMax
    uint16  endPtsOfContours[numberOfContours]
    uint16  instructionLength
    uint8   instructions[instructionLength]
    uint8   flags[]               (run-length encoded, expands to numPoints)
    uint8 / int16 xCoordinates[]  (deltas)
    uint8 / int16 yCoordinates[]  (deltas)

Coordinates are deltas against the previous point of the whole glyph, so the
running value carries across contour boundaries.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .entities import Contour, Point, SimpleGlyph
from .errors import MalformedGlyphError
from .logging import GlyphTraceLogger
from .reader import INT16, UINT8, UINT16, Buffer, read_i16, read_u8, read_u16

ON_CURVE = 0x01
X_SHORT_VECTOR = 0x02
Y_SHORT_VECTOR = 0x04
REPEAT_FLAG = 0x08
X_IS_SAME_OR_POSITIVE = 0x10
Y_IS_SAME_OR_POSITIVE = 0x20

HEADER_SIZE = 5 * INT16


def read_flags(buffer: Buffer, offset: int, num_points: int) -> Tuple[List[int], int]:
    """Expand the flag stream to exactly ``num_points`` entries; returns the flags and the next offset."""

    flags: List[int] = []
    cursor = offset
    while len(flags) < num_points:
        flag = read_u8(buffer, cursor)
        cursor += UINT8
        flags.append(flag)
        if flag & REPEAT_FLAG:
            repeat = read_u8(buffer, cursor)
            cursor += UINT8
            flags.extend([flag] * repeat)
    # A repeat run may overshoot the last point.
    return flags[:num_points], cursor


def read_coordinate_deltas(
    buffer: Buffer,
    offset: int,
    flags: Sequence[int],
    short_bit: int,
    same_bit: int,
) -> Tuple[List[int], int]:
    deltas: List[int] = []
    cursor = offset
    for flag in flags:
        if flag & short_bit:
            magnitude = read_u8(buffer, cursor)
            cursor += UINT8
            deltas.append(magnitude if flag & same_bit else -magnitude)
        elif flag & same_bit:
            deltas.append(0)
        else:
            deltas.append(read_i16(buffer, cursor))
            cursor += INT16
    return deltas, cursor


def accumulate(deltas: Sequence[int]) -> List[int]:
    """Turn per-point deltas into absolute int16 coordinates."""

    if not deltas:
        return []
    totals = np.cumsum(np.asarray(deltas, dtype=np.int64))
    return totals.astype(np.int16).tolist()


def _partition(points: Sequence[Point], end_points: Sequence[int]) -> Tuple[Contour, ...]:
    contours: List[Contour] = []
    start = 0
    for end in end_points:
        contours.append(Contour(points=tuple(points[start : end + 1])))
        start = end + 1
    return tuple(contours)


def decode_simple_glyph(
    buffer: Buffer,
    glyph_offset: int,
    *,
    trace: GlyphTraceLogger | None = None,
) -> SimpleGlyph:
    num_contours = read_i16(buffer, glyph_offset)
    bbox = (
        read_i16(buffer, glyph_offset + INT16),
        read_i16(buffer, glyph_offset + 2 * INT16),
        read_i16(buffer, glyph_offset + 3 * INT16),
        read_i16(buffer, glyph_offset + 4 * INT16),
    )
    if num_contours < 0:
        if trace is not None:
            trace.record(
                offset=glyph_offset,
                contours=num_contours,
                points=0,
                instruction_length=0,
                flag_bytes=0,
                bbox=bbox,
            )
        return SimpleGlyph.empty()

    end_points_offset = glyph_offset + HEADER_SIZE
    end_points = [read_u16(buffer, end_points_offset + idx * UINT16) for idx in range(num_contours)]
    for previous, current in zip(end_points, end_points[1:]):
        if current < previous:
            raise MalformedGlyphError(
                f"glyph at 0x{glyph_offset:X} has decreasing contour end points {previous} -> {current}"
            )
    num_points = end_points[-1] + 1 if end_points else 0

    instruction_length_offset = end_points_offset + num_contours * UINT16
    instruction_length = read_u16(buffer, instruction_length_offset)
    flags_offset = instruction_length_offset + UINT16 + instruction_length

    flags, x_offset = read_flags(buffer, flags_offset, num_points)
    x_deltas, y_offset = read_coordinate_deltas(buffer, x_offset, flags, X_SHORT_VECTOR, X_IS_SAME_OR_POSITIVE)
    y_deltas, _ = read_coordinate_deltas(buffer, y_offset, flags, Y_SHORT_VECTOR, Y_IS_SAME_OR_POSITIVE)

    points = [
        Point(x=x, y=y, on_curve=bool(flag & ON_CURVE))
        for x, y, flag in zip(accumulate(x_deltas), accumulate(y_deltas), flags)
    ]
    if trace is not None:
        trace.record(
            offset=glyph_offset,
            contours=num_contours,
            points=num_points,
            instruction_length=instruction_length,
            flag_bytes=x_offset - flags_offset,
            bbox=bbox,
        )
    x_min, y_min, x_max, y_max = bbox
    return SimpleGlyph(
        x_min=x_min,
        y_min=y_min,
        x_max=x_max,
        y_max=y_max,
        contours=_partition(points, end_points),
    )
