from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from .entities import DecodeFailure


def log_decode_failures(failures: Sequence[DecodeFailure], destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    lines: List[str] = []
    for idx, entry in enumerate(failures, start=1):
        glyph = "-" if entry.glyph_id is None else str(entry.glyph_id)
        lines.append(
            f"#{idx:04d} char={entry.character!r} U+{ord(entry.character):04X} glyph={glyph} "
            f"{type(entry.error).__name__}: {entry.error}"
        )
    destination.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")


@dataclass
class GlyphTraceLogger:
    """Collects one trace block per decoded glyph and writes them on ``flush``."""

    destination: Path

    def __post_init__(self) -> None:
        self._lines: List[str] = []

    def record(
        self,
        *,
        offset: int,
        contours: int,
        points: int,
        instruction_length: int,
        flag_bytes: int,
        bbox: Tuple[int, int, int, int],
        note: str | None = None,
    ) -> None:
        header = (
            f"Glyph offset=0x{offset:06X} contours={contours} points={points} "
            f"bbox=({bbox[0]},{bbox[1]})-({bbox[2]},{bbox[3]})"
        )
        if note:
            header += f" | {note}"
        self._lines.append(header)
        if contours < 0:
            self._lines.append("  (composite glyph skipped)")
            return
        self._lines.append(f"  instructions={instruction_length} flag_bytes={flag_bytes}")

    def flush(self) -> None:
        if not self._lines:
            return
        self.destination.parent.mkdir(parents=True, exist_ok=True)
        text = "\n".join(self._lines) + "\n"
        self.destination.write_text(text, encoding="utf-8")
