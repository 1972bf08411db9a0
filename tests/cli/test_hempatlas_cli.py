# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from hempatlas.cli import build_parser, main


def test_resolve_prints_coordinates(capsys) -> None:
    assert main(["resolve", "Paris, France", "Atlantis"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Paris, France\t48.8566\t2.3522\tFrance"
    assert out[1].startswith("Atlantis\t")


def test_resolve_json(capsys) -> None:
    main(["resolve", "--json", "Berlin, Germany", "   "])
    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["resolved"] is True
    assert rows[0]["country"] == "Germany"
    assert rows[1] == {
        "location": "   ",
        "resolved": False,
        "lat": None,
        "lng": None,
        "country": None,
        "city": "Other",
    }


def test_globe_builds_bundle_without_backend(tmp_path, capsys) -> None:
    out_dir = tmp_path / "site"
    assert main(["globe", "--output", str(out_dir), "--preset", "retro"]) == 0
    assert (out_dir / "index.html").exists()
    config = json.loads((out_dir / "assets" / "config.json").read_text())
    assert config["scene"]["points"] == []
    assert config["scene"]["style"]["showGrid"] is True
    assert str(out_dir / "index.html") in capsys.readouterr().out


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_unknown_preset_rejected(tmp_path) -> None:
    with pytest.raises(SystemExit):
        main(["globe", "--output", str(tmp_path), "--preset", "vaporwave"])
