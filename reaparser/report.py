"""Plain-text report of a parsed project."""

from __future__ import annotations

from reaparser.analyzer.fx_chain import get_fx_chains, get_fx_usage_stats, get_tracks_for_fx
from reaparser.core.models import MediaType, ReaProject


def format_project(project: ReaProject) -> str:
    lines = [
        f"Reaper project: {project.name}",
        f"Reaper version: {project.version}",
        f"Sample rate: {project.sample_rate}Hz",
        f"Tempo: {project.tempo.bpm:g} bpm {project.tempo.time_signature}",
        "",
    ]

    if project.tracks:
        lines.append("Tracks:")
        lines.append("-" * 28)

    for t in project.tracks:
        lines.append(f"{t.index}) {t.name} ({t.guid})")
        lines.append(f"Volume: {t.volume:g}dB Pan: {t.pan:g}%")
        if t.is_master:
            lines.append(f"Channels: {t.channels}")
        lines.append(f"Muted: {'Yes' if t.muted else 'No'}")
        if not t.is_master:
            lines.append(f"Phase: {'Flipped' if t.phase_inverted else 'Normal'}")

        if t.items:
            lines.append("Items: " + "-" * 21)
        for item in t.items:
            lines.append(f'"{item.name}" [{item.item_type.display_name}]')
            if item.item_type == MediaType.SAMPLE:
                lines.append(f"FILE  : {item.file_path or ''}")
            lines.append(f"START : {item.start:g}s")
            lines.append(f"END   : {item.end:g}s")
            lines.append(f"LENGTH: {item.length:g}s")

        if t.fx_chain:
            lines.append("FX Chain: " + "-" * 18)
        for fx in t.fx_chain:
            if fx.file_path:
                lines.append(f"{fx.name} ({fx.file_path}) [{fx.fx_type.value.upper()}]")
            else:
                lines.append(f"{fx.name} [{fx.fx_type.value.upper()}]")

        lines.append("")

    usage = get_fx_usage_stats(project)
    if usage:
        lines.append(f"FX usage ({len(get_fx_chains(project))} of {project.track_count} tracks):")
        for name, count in usage.items():
            tracks = ", ".join(t.name for t, _ in get_tracks_for_fx(project, name))
            lines.append(f"  {name}: {count} ({tracks})")

    return "\n".join(lines)
