"""Tests for the command line entry point."""

import argparse
import json

import pytest

from layoutinspect.main import main, parse_offset

LAYOUT_YAML = """
root:
  bounds: [0, 0, 100, 100]
widgets:
  box:
    bounds: [10, 20, 30, 40]
    constraints:
      left: parent
"""


@pytest.fixture
def layout_path(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(LAYOUT_YAML)
    return path


def test_prints_design_info(layout_path, capsys):
    assert main([str(layout_path), "--offset", "5,5", "--options", "1"]) == 0

    doc = json.loads(capsys.readouterr().out)
    assert doc["content"]["box"]["box"] == {"left": 15, "top": 25, "right": 35, "bottom": 45}
    assert "constraints" not in doc["content"]["box"]


def test_negative_offset(layout_path, capsys):
    main([str(layout_path), "--offset=-10,-20"])

    doc = json.loads(capsys.readouterr().out)
    assert doc["content"]["parent"]["box"] == {"left": -10, "top": -20, "right": 90, "bottom": 80}


def test_writes_output_file(layout_path, tmp_path):
    output = tmp_path / "out.json"
    main([str(layout_path), "-o", str(output), "--indent", "2"])

    text = output.read_text()
    assert text.startswith('{\n  "type": "CONSTRAINTS"')
    assert json.loads(text)["content"]["box"]["constraints"][0]["target"] == "parent"


def test_invalid_layout_exits(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("widgets:\n  a:\n    constraints: {left: ghost}\n")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 2
    assert "unknown widget 'ghost'" in capsys.readouterr().err


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.yaml")])


@pytest.mark.parametrize("value,expected", [("0,0", (0, 0)), ("-3,7", (-3, 7))])
def test_parse_offset(value, expected):
    assert parse_offset(value) == expected


@pytest.mark.parametrize("value", ["1", "1,2,3", "a,b"])
def test_parse_offset_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_offset(value)


@pytest.mark.parametrize("text", [
    "root: [1, 2]\n",
    "widgets:\n  a: [1, 2]\n",
    "widgets:\n  a:\n    constraints: [left]\n",
    "widgets:\n  a:\n    constraints: {left: 5}\n",
])
def test_malformed_layout_exits(tmp_path, capsys, text):
    """Malformed snapshots are reported as usage errors, not tracebacks."""
    path = tmp_path / "bad.yaml"
    path.write_text(text)

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 2
    assert "must be" in capsys.readouterr().err
