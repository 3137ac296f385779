"""Export ReaProject data to JSON."""

from __future__ import annotations

import json
import math
from pathlib import Path

from reaparser.core.models import FxEntry, MediaItem, ReaProject, Track


def project_to_dict(project: ReaProject) -> dict:
    """Convert a ReaProject to a serializable dict."""
    return {
        "name": project.name,
        "file_path": str(project.file_path),
        "version": {
            "major": project.version.major,
            "minor": project.version.minor,
            "platform": project.version.platform.value,
        },
        "sample_rate": project.sample_rate,
        "tempo": {
            "bpm": project.tempo.bpm,
            "beats": project.tempo.beats,
            "bars": project.tempo.bars,
        },
        "track_count": project.track_count,
        "item_count": project.item_count,
        "fx_count": project.fx_count,
        "referenced_files": sorted(project.referenced_files),
        "tracks": [_track_to_dict(t) for t in project.tracks],
    }


def _track_to_dict(track: Track) -> dict:
    result = {
        "name": track.name,
        "guid": track.guid,
        "index": track.index,
        "volume": _number(track.volume),
        "pan": _number(track.pan),
        "muted": track.muted,
        "items": [_item_to_dict(i) for i in track.items],
        "fx_chain": [_fx_to_dict(fx) for fx in track.fx_chain],
    }
    if track.is_master:
        result["channels"] = track.channels
    else:
        result["phase_inverted"] = track.phase_inverted
    return result


def _item_to_dict(item: MediaItem) -> dict:
    return {
        "name": item.name,
        "type": item.item_type.value,
        "file_path": item.file_path,
        "volume": _number(item.volume),
        "pan": _number(item.pan),
        "muted": item.muted,
        "start": item.start,
        "length": item.length,
        "end": item.end,
    }


def _fx_to_dict(fx: FxEntry) -> dict:
    return {
        "name": fx.name,
        "type": fx.fx_type.value,
        "file_path": fx.file_path,
        "data": fx.data,
    }


def _number(value: float) -> float | str:
    # -inf dB (silent fader) and nan are not valid JSON numbers
    if math.isfinite(value):
        return value
    return str(value)


def export_project_json(project: ReaProject, output_path: Path):
    """Export a project to a JSON file."""
    data = project_to_dict(project)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_projects_json(projects: list[ReaProject], output_path: Path):
    """Export multiple projects to a single JSON file."""
    data = {
        "export_version": "1.0",
        "project_count": len(projects),
        "projects": [project_to_dict(p) for p in projects],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
