#!/usr/bin/env python3
"""
Decode the simple glyph outlines a piece of text needs out of a TrueType font.

Prints a short per-glyph preview and optionally writes the full outline
payload (bounding boxes plus contours of on/off-curve points) to JSON:

    python ttf_glyph_dump.py Roboto.ttf --text "Hello" --json hello.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Sequence

from ttfoutline import (
    DecodeFailure,
    FontDecodeError,
    FontFile,
    GlyphTraceLogger,
    SimpleGlyph,
    font_to_dict,
    log_decode_failures,
    text_characters,
)

PRINTABLE_ASCII = "".join(chr(i) for i in range(33, 127))


def _load_text(args: argparse.Namespace) -> str:
    if args.chars_file:
        return args.chars_file.read_text(encoding="utf-8")
    return args.text


def _print_preview(glyphs: dict[str, SimpleGlyph], limit: int) -> None:
    print(f"[+] Decoded {len(glyphs)} glyph outline(s)")
    preview = sorted(glyphs.items())[: max(0, limit)]
    if not preview:
        return
    print("[preview]")
    for character, glyph in preview:
        on_curve = sum(point.on_curve for contour in glyph.contours for point in contour.points)
        print(
            f"  {character!r:<6} U+{ord(character):04X} contours={len(glyph.contours):3d} "
            f"points={glyph.point_count:4d} on_curve={on_curve:4d} "
            f"bbox=({glyph.x_min:+d},{glyph.y_min:+d})-({glyph.x_max:+d},{glyph.y_max:+d})"
        )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode TrueType glyph outlines for the characters in a text.")
    parser.add_argument("font", type=Path, help="Path to a .ttf font")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text",
        default=PRINTABLE_ASCII,
        help="Characters to decode; whitespace and repeats are dropped (default: printable ASCII)",
    )
    source.add_argument("--chars-file", type=Path, help="Read the characters to decode from a UTF-8 file")
    parser.add_argument("--json", type=Path, help="Optional destination for the glyph outline JSON")
    parser.add_argument("--limit", type=int, default=10, help="Preview line cap (default: 10)")
    parser.add_argument("--failures-log", type=Path, help="Write characters that failed to decode to this file")
    parser.add_argument("--trace", type=Path, help="Write a per-glyph decode trace to this file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    data = args.font.read_bytes()
    characters = text_characters(_load_text(args))
    trace = GlyphTraceLogger(args.trace) if args.trace else None
    font = FontFile(data, trace=trace)
    failures: List[DecodeFailure] = []
    try:
        print(f"[+] Font size {len(data)} bytes, {font.num_glyphs} glyph(s), {len(font.tables)} table(s)")
        glyphs = font.decode_font(characters, failures=failures)
    except FontDecodeError as exc:
        print(f"[!] {args.font}: {exc}")
        return 1
    finally:
        if trace is not None:
            trace.flush()
    skipped = len(characters) - len(glyphs) - len(failures)
    _print_preview(glyphs, args.limit)
    if skipped:
        print(f"[+] {skipped} character(s) have no outline")
    if failures:
        print(f"[!] {len(failures)} character(s) failed to decode")
        if args.failures_log:
            log_decode_failures(failures, args.failures_log)
            print(f"[+] Failure log written to {args.failures_log}")
    if args.json:
        payload = {"source": str(args.font), **font_to_dict(glyphs)}
        args.json.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"[+] JSON outline payload written to {args.json}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
