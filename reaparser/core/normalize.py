"""Volume and pan post-processing shared by master, tracks and items."""

from __future__ import annotations

import math

from reaparser.core.models import ParseOptions


def to_decibel(amplitude: float) -> float:
    """Linear amplitude to decibels. 0 gives -inf, negatives give nan."""
    if amplitude == 0:
        return -math.inf
    if amplitude < 0:
        return math.nan
    return 20.0 * math.log10(amplitude)


def normalize_levels(
    volume: float, pan: float, options: ParseOptions
) -> tuple[float, float]:
    """Apply the configured volume/pan transforms and return the new pair."""
    if options.convert_volume_to_db:
        volume = to_decibel(volume)
    if not options.normalize_pan:
        pan *= 100.0
    return volume, pan
