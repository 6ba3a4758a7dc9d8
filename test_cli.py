#!/usr/bin/env python3
"""
Tests for the command line entry point
"""

import json

import cv2
import numpy as np
import pytest

from config import EXIT_DECODE_ERROR, EXIT_IMAGE_ERROR, EXIT_OK
from main import run
from main.output import describe_unknowns, format_output
from main.setup.arguments import setup_arguments
from glyph_recognition import Digit, Glyph, Pixel, Unknown


@pytest.fixture
def message_png(tmp_path, message_raster):
    path = tmp_path / "message1.png"
    cv2.imwrite(str(path), message_raster)
    return path


def test_defaults():
    args = setup_arguments([])

    assert args.image == "tests/files/message1.png"
    assert args.format == "transcript"
    assert args.scale == 4
    assert args.border == 2
    assert args.workers == 1


def test_prints_transcript(message_png, capsys):
    assert run([str(message_png)]) == EXIT_OK

    out = capsys.readouterr().out
    assert out.splitlines() == ["0", "11", "22", "33", "44", "55", "66", "77", "88", "..."]


def test_prints_json(message_png, capsys):
    assert run([str(message_png), "--format", "json", "--workers", "3"]) == EXIT_OK

    data = json.loads(capsys.readouterr().out)
    assert data["lines"][0] == [{"type": "digit", "value": 0}]
    assert data["lines"][-1] == [{"type": "ellipsis"}]


def test_prints_grid(message_png, capsys):
    assert run([str(message_png), "--format", "grid", "--verbose"]) == EXIT_OK

    rows = capsys.readouterr().out.split("\n")
    assert rows[0].startswith(" #")
    assert rows[1].startswith("# ")


def test_missing_image_exit_code(tmp_path):
    assert run([str(tmp_path / "nope.png")]) == EXIT_IMAGE_ERROR


def test_gray_image_exit_code(tmp_path):
    path = tmp_path / "gray.png"
    cv2.imwrite(str(path), np.full((40, 40), 128, dtype=np.uint8))

    assert run([str(path), "--debug"]) == EXIT_DECODE_ERROR


def test_invalid_scale_exit_code(message_png):
    assert run([str(message_png), "--scale", "0"]) == EXIT_DECODE_ERROR


def test_debug_format_and_unknown_report():
    glyph = Glyph.from_columns([[Pixel.ON], [Pixel.OFF], [Pixel.ON]])
    lines = [[Digit(2), Unknown(glyph)]]

    assert format_output("debug", lines) == "[[Digit(2), Unknown(Glyph(width=3, pixels=101))]]"
    assert describe_unknowns(lines) == ["line 1, glyph 2 (3x1):\n# #"]


def test_reports_progress_on_stderr(message_png, capsys):
    assert run([str(message_png)]) == EXIT_OK

    err = capsys.readouterr().err
    assert "Raster loaded" in err
    assert "Width: 48" in err
    assert "Decoding" in err
    assert "Unknown glyphs: 0" in err
