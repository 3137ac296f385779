"""FX chain analysis - extract and count FX chains per track."""

from __future__ import annotations

from reaparser.core.models import FxEntry, ReaProject, Track


def get_fx_chains(project: ReaProject) -> list[tuple[Track, list[FxEntry]]]:
    """Get the FX chain for each track that has one."""
    chains = []
    for track in project.tracks:
        if track.fx_chain:
            chains.append((track, track.fx_chain))
    return chains


def get_fx_usage_stats(project: ReaProject) -> dict[str, int]:
    """Count how often each effect is used across all tracks."""
    stats: dict[str, int] = {}
    for track in project.tracks:
        for fx in track.fx_chain:
            name = fx.name or "Unknown"
            stats[name] = stats.get(name, 0) + 1
    return dict(sorted(stats.items(), key=lambda x: x[1], reverse=True))


def get_tracks_for_fx(project: ReaProject, fx_name: str) -> list[tuple[Track, FxEntry]]:
    """Find all tracks using a specific effect."""
    return project.fx_by_name().get(fx_name, [])
