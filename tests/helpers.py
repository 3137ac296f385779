"""Shared .rpp fixtures for the test modules."""

import tempfile
from pathlib import Path

HEADER = '<REAPER_PROJECT 0.1 "6.12/win64" 1595275163\n'

SAMPLE_PROJECT = HEADER + """\
  RIPPLE 0
  TEMPO 128 4 4
  SAMPLERATE 48000 0 0
  MASTER_NCH 2 2
  MASTER_VOLUME 0.5 0.25 -1 -1 1
  <TRACK {8D5F1B6C-0000-0000-0000-000000000001}
    NAME "Drums"
    VOLPAN 0.5 -0.3 0 0 0
    MUTESOLO 1 0 0
    IPHASE 1
    <FXCHAIN
      WNDRECT 24 52 655 408
      SHOW 0
      <VST "VST: ReaEQ (Cockos)" reaeq.dll 0 "" 1919247729<56535472656571726561657100000000>
        cWVlcu5e7f4CAAAA
        AQAAAAAAAAAC
      >
      FLOATPOS 0 0 0 0
      <JS loser/3BandEQ ""
        0.000000 200.000000 0.000000 -
      >
    >
    <ITEM
      POSITION 1.5
      LENGTH 2.25
      MUTE 0 0
      NAME "kick.wav"
      VOLPAN 1 0 1 -1
      <SOURCE WAVE
        FILE "/samples/kick.wav"
      >
    >
    <ITEM
      POSITION 4
      LENGTH 1
      MUTE 1 0
      NAME Pattern
      <SOURCE MIDI
        HASDATA 1 960 QN
      >
    >
  >
  <TRACK {8D5F1B6C-0000-0000-0000-000000000002}
    NAME Bass
    VOLPAN 1 0 -1 -1 1
    MUTESOLO 0 0 0
    IPHASE 0
  >
>
"""


def make_rpp(content: str, name: str = "TestProject") -> Path:
    """Create a temporary .rpp file with the given text content."""
    tmp = tempfile.NamedTemporaryFile(prefix=name, suffix=".rpp", delete=False)
    tmp.write(content.encode("utf-8"))
    tmp.close()
    return Path(tmp.name)


def track_block(guid: str, *body: str) -> str:
    """A <TRACK block with the given (already indented) body lines."""
    lines = [f"  <TRACK {{{guid}}}\n"]
    lines.extend(line + "\n" for line in body)
    lines.append("  >\n")
    return "".join(lines)
