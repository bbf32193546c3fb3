import importlib.util
import json
from pathlib import Path

import ttf_glyph_dump

ROOT = Path(__file__).resolve().parent.parent


def _load_probe():
    spec = importlib.util.spec_from_file_location("table_probe", ROOT / "diagnostics" / "table_probe.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_dump_writes_json_payload(tmp_path, abc_font, capsys):
    font_path = tmp_path / "abc.ttf"
    font_path.write_bytes(abc_font)
    out = tmp_path / "glyphs.json"
    failures = tmp_path / "logs" / "failures.txt"

    code = ttf_glyph_dump.main(
        [str(font_path), "--text", "ABC", "--json", str(out), "--failures-log", str(failures)]
    )

    assert code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["source"] == str(font_path)
    assert list(payload["glyphs"]) == ["A"]
    assert payload["glyphs"]["A"]["yMax"] == 7
    stdout = capsys.readouterr().out
    assert "[+] Decoded 1 glyph outline(s)" in stdout
    assert "1 character(s) have no outline" in stdout
    assert "1 character(s) failed to decode" in stdout
    assert "U+0043" in failures.read_text(encoding="utf-8")


def test_dump_trace_and_chars_file(tmp_path, abc_font):
    font_path = tmp_path / "abc.ttf"
    font_path.write_bytes(abc_font)
    chars = tmp_path / "chars.txt"
    chars.write_text("A A\n", encoding="utf-8")
    trace = tmp_path / "trace.txt"

    assert ttf_glyph_dump.main([str(font_path), "--chars-file", str(chars), "--trace", str(trace)]) == 0
    lines = trace.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Glyph offset=0x")
    assert "contours=1 points=3" in lines[0]
    assert lines[1] == "  instructions=0 flag_bytes=3"


def test_dump_reports_unreadable_font(tmp_path, capsys):
    font_path = tmp_path / "broken.ttf"
    font_path.write_bytes(b"\x00\x01")
    assert ttf_glyph_dump.main([str(font_path)]) == 1
    assert capsys.readouterr().out.startswith("[!]")


def test_probe_report(abc_font):
    report = _load_probe().probe(abc_font)
    assert [table["tag"] for table in report["tables"]] == ["head", "maxp", "cmap", "loca", "glyf"]
    assert report["missing"] == []
    assert report["num_glyphs"] == 4
    assert report["loca_format"] == 0
    assert report["empty_glyphs"] == 2
    assert report["encodings"][0]["format"] == 4
    assert report["format4"]["seg_count"] == 2
