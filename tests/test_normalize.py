"""Tests for volume/pan normalization."""

import math

import pytest

from reaparser.core.models import ParseOptions
from reaparser.core.normalize import normalize_levels, to_decibel


def test_to_decibel():
    assert to_decibel(1.0) == 0.0
    assert to_decibel(0.5) == pytest.approx(-6.0206, abs=1e-4)
    assert to_decibel(2.0) == pytest.approx(6.0206, abs=1e-4)


def test_to_decibel_non_positive_is_not_clamped():
    assert to_decibel(0.0) == -math.inf
    assert math.isnan(to_decibel(-1.0))


def test_default_options_convert_volume_only():
    volume, pan = normalize_levels(0.5, -0.3, ParseOptions())
    assert volume == pytest.approx(-6.0206, abs=1e-4)
    assert pan == -0.3


def test_raw_options_change_nothing():
    options = ParseOptions(convert_volume_to_db=False, normalize_pan=True)
    assert normalize_levels(0.5, -0.3, options) == (0.5, -0.3)


def test_percent_pan_changes_pan_only():
    options = ParseOptions(convert_volume_to_db=False, normalize_pan=False)
    volume, pan = normalize_levels(0.5, -0.3, options)
    assert volume == 0.5
    assert pan == pytest.approx(-30.0)


def test_options_are_immutable():
    options = ParseOptions()
    with pytest.raises(AttributeError):
        options.normalize_pan = False
