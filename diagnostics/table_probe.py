#!/usr/bin/env python3
"""
Probe a TrueType font's structure without decoding any outlines:
  - table directory (tag, offset, length)
  - glyph count and loca format
  - cmap encoding records and the format 4 segment header

Usage:
    python diagnostics/table_probe.py Roboto.ttf
    python diagnostics/table_probe.py Roboto.ttf --json roboto_tables.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ttfoutline.cmap import find_format4_subtable, iter_encoding_records
from ttfoutline.errors import FontDecodeError
from ttfoutline.tables import (
    iter_table_records,
    missing_tables,
    parse_table_directory,
    read_index_to_loc_format,
    read_location_table,
    read_num_glyphs,
    table_offset,
)


def probe(data: bytes) -> dict:
    records = list(iter_table_records(data))
    directory = parse_table_directory(data)
    report: dict = {
        "size": len(data),
        "tables": [
            {"tag": rec.tag, "offset": rec.offset, "length": rec.length, "checksum": rec.checksum}
            for rec in records
        ],
        "missing": missing_tables(directory),
    }
    if report["missing"]:
        return report
    num_glyphs = read_num_glyphs(data, directory)
    locations = read_location_table(data, directory, num_glyphs)
    report["num_glyphs"] = num_glyphs
    report["loca_format"] = read_index_to_loc_format(data, directory)
    report["empty_glyphs"] = sum(1 for start, end in zip(locations, locations[1:]) if start == end)
    cmap = table_offset(directory, "cmap")
    report["encodings"] = [
        {"platform": rec.platform_id, "encoding": rec.encoding_id, "offset": rec.offset, "format": rec.format}
        for rec in iter_encoding_records(data, cmap)
    ]
    subtable = find_format4_subtable(data, cmap)
    report["format4"] = {
        "offset": subtable.offset,
        "seg_count": subtable.seg_count,
        "last_end_code": subtable.end_codes[-1] if subtable.end_codes else None,
    }
    return report


def _print_report(path: Path, report: dict) -> None:
    print(f"[+] {path} ({report['size']} bytes)")
    for table in report["tables"]:
        print(f"  {table['tag']:<4} offset=0x{table['offset']:06X} length={table['length']}")
    if report["missing"]:
        print(f"[!] Missing required table(s): {', '.join(report['missing'])}")
        return
    print(f"[+] glyphs={report['num_glyphs']} loca_format={report['loca_format']} empty={report['empty_glyphs']}")
    for enc in report["encodings"]:
        print(
            f"  cmap platform={enc['platform']} encoding={enc['encoding']} "
            f"format={enc['format']} offset=0x{enc['offset']:06X}"
        )
    fmt4 = report["format4"]
    print(f"[+] format 4 subtable at 0x{fmt4['offset']:06X} with {fmt4['seg_count']} segment(s)")


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump TrueType table directory and cmap layout.")
    parser.add_argument("font", type=Path)
    parser.add_argument("--json", type=Path, help="Optional destination for the probe report")
    args = parser.parse_args()

    try:
        report = probe(args.font.read_bytes())
    except FontDecodeError as exc:
        print(f"[!] {args.font}: {exc}")
        return 1
    _print_report(args.font, report)
    if args.json:
        args.json.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"[+] Report written to {args.json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
