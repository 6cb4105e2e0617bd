import math

import pytest

from pongphysics.fonts import (
    FontMetrics,
    frames_per_second,
    load_font_metrics,
    parse_font_metrics,
)

SAMPLE = [
    "Image Width,256\n",
    "Cell Width,16\n",
    "Cell Height,16\n",
    "Char 65 Base Width,10\n",
    "Char 66 Base Width,8\r\n",
    "Char 65 Width Offset,0\n",
    "Font Name,Arial\n",
]


def test_parse_reads_cell_width_and_glyph_widths():
    metrics = parse_font_metrics(SAMPLE)
    assert metrics.cell_width == 16
    assert metrics.spacing[65] == 10
    assert metrics.spacing[66] == 8


def test_parse_ignores_unrelated_lines():
    metrics = parse_font_metrics(SAMPLE)
    assert len(metrics.spacing) == 256
    assert sum(metrics.spacing) == 18


def test_parse_empty_gives_defaults():
    metrics = parse_font_metrics([])
    assert metrics.cell_width == 0
    assert all(width == 0 for width in metrics.spacing)


def test_parse_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_font_metrics(["Cell Width,abc\n"])


def test_parse_rejects_out_of_range_glyph():
    with pytest.raises(ValueError):
        parse_font_metrics(["Char 300 Base Width,5\n"])


def test_text_offsets_start_at_half_cell():
    metrics = parse_font_metrics(SAMPLE)
    offsets = metrics.text_offsets("AB")
    assert offsets[0] == 0.5
    assert offsets[1] == pytest.approx(0.5 + 10 / 16)


def test_text_offsets_accumulate_widths():
    metrics = parse_font_metrics(SAMPLE)
    text = "ABAB"
    offsets = metrics.text_offsets(text)
    assert len(offsets) == len(text)
    for i in range(1, len(text)):
        step = offsets[i] - offsets[i - 1]
        assert step == pytest.approx(metrics.spacing[ord(text[i - 1])] / 16)


def test_text_offsets_empty_text():
    metrics = parse_font_metrics(SAMPLE)
    assert metrics.text_offsets("") == []


def test_text_offsets_need_cell_width():
    with pytest.raises(ValueError):
        FontMetrics().text_offsets("A")


def test_text_offsets_reject_wide_characters():
    metrics = parse_font_metrics(SAMPLE)
    with pytest.raises(ValueError):
        metrics.text_offsets("\u4e2d")


def test_load_round_trip(tmp_path):
    path = tmp_path / "font.csv"
    path.write_text("".join(SAMPLE), encoding="latin-1")
    loaded = load_font_metrics(path)
    assert loaded == parse_font_metrics(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_font_metrics(tmp_path / "missing.csv")


@pytest.mark.parametrize("dt", [0.016, 0.5, 2.0])
def test_frames_per_second_inverts_dt(dt):
    assert frames_per_second(dt) * dt == pytest.approx(1.0)


def test_frames_per_second_zero_is_infinite():
    assert frames_per_second(0.0) == math.inf