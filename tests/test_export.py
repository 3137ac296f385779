"""Tests for JSON export, the text report, FX analysis and the CLI."""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from reaparser import cli_export
from reaparser.analyzer.fx_chain import get_fx_chains, get_fx_usage_stats, get_tracks_for_fx
from reaparser.core.rpp_parser import load_project
from reaparser.export.json_export import (
    export_project_json,
    export_projects_json,
    project_to_dict,
)
from reaparser.report import format_project

from helpers import SAMPLE_PROJECT, make_rpp


@pytest.fixture
def sample_path():
    path = make_rpp(SAMPLE_PROJECT, name="Sample")
    yield path
    path.unlink()


@pytest.fixture
def restore_logging():
    """The CLI reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_project_to_dict(sample_path):
    data = project_to_dict(load_project(sample_path))
    assert data["version"] == {"major": 6, "minor": 12, "platform": "windows"}
    assert data["sample_rate"] == 48000
    assert data["tempo"] == {"bpm": 128.0, "beats": 4, "bars": 4}
    assert data["track_count"] == 2
    assert data["referenced_files"] == ["/samples/kick.wav"]

    master, drums, bass = data["tracks"]
    assert master["guid"] == "0"
    assert master["channels"] == 2
    assert "phase_inverted" not in master
    assert drums["phase_inverted"] is True
    assert [fx["type"] for fx in drums["fx_chain"]] == ["vst", "js"]
    assert [i["type"] for i in drums["items"]] == ["sample", "midi"]
    assert bass["items"] == []


def test_silent_volume_is_exported_as_string(sample_path):
    """-inf dB is not valid JSON, so it is written as a string."""
    data = project_to_dict(load_project(sample_path))
    midi_item = data["tracks"][1]["items"][1]
    assert midi_item["volume"] == "-inf"
    json.dumps(data, allow_nan=False)


def test_export_project_json(sample_path):
    project = load_project(sample_path)
    with tempfile.TemporaryDirectory() as tmpdir:
        out = Path(tmpdir) / "project.json"
        export_project_json(project, out)
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["name"] == project.name


def test_export_projects_json(sample_path):
    project = load_project(sample_path)
    with tempfile.TemporaryDirectory() as tmpdir:
        out = Path(tmpdir) / "projects.json"
        export_projects_json([project, project], out)
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["project_count"] == 2
        assert len(data["projects"]) == 2


def test_format_project(sample_path):
    report = format_project(load_project(sample_path))
    assert "Reaper version: Windows 6.12" in report
    assert "Sample rate: 48000Hz" in report
    assert "Tempo: 128 bpm 4/4" in report
    assert "1) Drums (8D5F1B6C-0000-0000-0000-000000000001)" in report
    assert "Phase: Flipped" in report
    assert "FILE  : /samples/kick.wav" in report
    assert "END   : 3.75s" in report
    assert "ReaEQ (Cockos) (reaeq.dll) [VST]" in report
    assert "loser/3BandEQ [JS]" in report
    assert "FX usage (1 of 2 tracks):" in report
    assert "  ReaEQ (Cockos): 1 (Drums)" in report


def test_fx_analysis(sample_path):
    project = load_project(sample_path)
    chains = get_fx_chains(project)
    assert [track.name for track, _ in chains] == ["Drums"]
    assert get_fx_usage_stats(project) == {"ReaEQ (Cockos)": 1, "loser/3BandEQ": 1}
    tracks = get_tracks_for_fx(project, "loser/3BandEQ")
    assert [t.name for t, _ in tracks] == ["Drums"]
    assert get_tracks_for_fx(project, "Missing") == []


def test_cli_prints_json(sample_path, capsys, restore_logging):
    assert cli_export.main([str(sample_path), "--no-db", "--percent-pan"]) == 0
    data = json.loads(capsys.readouterr().out)
    drums = data["tracks"][1]
    assert drums["volume"] == 0.5
    assert drums["pan"] == pytest.approx(-30.0)


def test_cli_reports_invalid_project(capsys, restore_logging):
    path = make_rpp("not a project\n")
    assert cli_export.main([str(path)]) == 1
    data = json.loads(capsys.readouterr().out)
    assert "Invalid Reaper project" in data["error"]
    assert data["path"] == str(path)
    path.unlink()


def test_cli_requires_a_path(capsys):
    assert cli_export.main([]) == 1
    assert "error" in json.loads(capsys.readouterr().out)


def test_cli_rejects_unknown_option(sample_path, capsys):
    assert cli_export.main([str(sample_path), "--bogus"]) == 1
    assert "--bogus" in json.loads(capsys.readouterr().out)["error"]


def test_cli_rejects_unknown_log_level(sample_path, capsys):
    assert cli_export.main([str(sample_path), "--log-level=LOUD"]) == 1
    assert "LOUD" in json.loads(capsys.readouterr().out)["error"]


def test_cli_accepts_lowercase_log_level(sample_path, capsys, restore_logging):
    assert cli_export.main([str(sample_path), "--log-level=debug"]) == 0
    assert logging.getLogger().level == logging.DEBUG
    assert json.loads(capsys.readouterr().out)["track_count"] == 2
