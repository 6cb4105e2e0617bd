"""Bitmap font metrics used to space characters of on-screen text."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, List, Union

GLYPH_COUNT = 256

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected an integer, got {text!r}")
    return int(match.group(1))


@dataclass
class FontMetrics:
    """Per-glyph advance widths and the cell width of a bitmap font sheet."""

    spacing: List[int] = field(default_factory=lambda: [0] * GLYPH_COUNT)
    cell_width: int = 0

    def text_offsets(self, text: str) -> List[float]:
        """Return the x translation, in cell units, of each character of ``text``.

        The first character sits at 0.5 (the centre of its cell); each following
        character is shifted by the advance widths of the ones before it.
        """
        if self.cell_width <= 0:
            raise ValueError("font cell width is unknown")
        offsets: List[float] = []
        offset = 0.0
        for char in text:
            code = ord(char)
            if code >= GLYPH_COUNT:
                raise ValueError(f"character {char!r} is outside the font sheet")
            offsets.append(0.5 + offset)
            offset += self.spacing[code] / self.cell_width
        return offsets


def parse_font_metrics(lines: Iterable[str]) -> FontMetrics:
    """Build metrics from the lines of a font data CSV file.

    ``Char <n> Base Width,<w>`` lines set the advance of glyph ``n`` and
    ``Cell Width,<w>`` sets the cell width; every other line is ignored.
    """
    metrics = FontMetrics()
    for raw in lines:
        line = raw.rstrip("\r\n")
        head, _, rest = line.partition(" ")
        if head == "Char":
            number, _, tail = rest.partition(" ")
            index = _parse_int(number)
            key, _, value = tail.partition(",")
            if key == "Base Width":
                if not 0 <= index < GLYPH_COUNT:
                    raise ValueError(f"glyph index {index} out of range")
                metrics.spacing[index] = _parse_int(value)
        elif head == "Cell":
            key, _, value = rest.partition(",")
            if key == "Width":
                metrics.cell_width = _parse_int(value)
    return metrics


def load_font_metrics(path: Union[str, PathLike]) -> FontMetrics:
    """Read font metrics from the CSV file at ``path``."""
    with open(path, encoding="latin-1") as stream:
        return parse_font_metrics(stream)


def frames_per_second(dt: float) -> float:
    """Frame rate for a frame that took ``dt`` seconds; infinite for zero."""
    if dt == 0:
        return math.inf
    return 1.0 / dt