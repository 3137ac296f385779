"""Known tags, block markers and field patterns found in .rpp files."""

import re

# Longer lines are cut to this many characters by the line reader
MAX_LINE_LENGTH = 1024

# Project header, first line of every .rpp file:
#   <REAPER_PROJECT 0.1 "6.12/win64" 1595275163
HEADER_PATTERN = re.compile(
    r'^<REAPER_PROJECT\s+[-+]?\d*\.?\d+\s+"(\d+)\.(\d+)[^/"]*/([^"]+)"\s+[-+]?\d+\s*$'
)

# Save-platform codes as written into the header's version token
PLATFORM_CODES = {
    "win64": "windows",
    "win32": "windows",
    "OSX64": "osx",
    "OSX32": "osx",
}

# Block markers. Indentation is part of the marker: it encodes nesting depth.
TRACK_OPEN = re.compile(r"^  <TRACK \{([^}]*)\}")
TRACK_CLOSE = "  >"
ITEM_OPEN = "    <ITEM"
ITEM_CLOSE = "    >"
FXCHAIN_OPEN = re.compile(r"^    <FXCHAIN\s*$")
FXCHAIN_CLOSE = "    >"
FX_ENTRY_CLOSE = "      >"

# Item source headers
SOURCE_MIDI = "      <SOURCE MIDI"
SOURCE_SAMPLE = ("      <SOURCE WAVE", "      <SOURCE MP3")

# Numeric building blocks
_INT = r"([-+]?\d+)"
_FLOAT = r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?inf|nan)"
_TOKEN = r'("[^"]*"|\S+)'


def field_pattern(indent: int, tag: str, *values: str) -> re.Pattern:
    """Build the regex for a tagged field line at a fixed indentation.

    Only the leading values are captured; newer REAPER versions append more.
    """
    body = r"\s+".join(values)
    return re.compile(rf"^ {{{indent}}}{tag}\s+{body}(?=\s|$)")


# Project properties
SAMPLERATE_FIELD = field_pattern(2, "SAMPLERATE", _INT, _INT, _INT)
TEMPO_FIELD = field_pattern(2, "TEMPO", _FLOAT, _INT, _INT)

# Master track
MASTER_NCH_FIELD = field_pattern(2, "MASTER_NCH", _INT, _INT)
MASTER_VOLUME_FIELD = field_pattern(2, "MASTER_VOLUME", _FLOAT, _FLOAT, _INT, _INT, _INT)

# Track body
TRACK_NAME_FIELD = re.compile(r'^    NAME\s+(?:"([^"]*)"|(\S+))')
TRACK_VOLPAN_FIELD = field_pattern(4, "VOLPAN", _FLOAT, _FLOAT, _INT, _INT, _INT)
TRACK_IPHASE_FIELD = field_pattern(4, "IPHASE", _INT)
TRACK_MUTESOLO_FIELD = field_pattern(4, "MUTESOLO", _INT, _INT, _INT)

# Media item body
ITEM_POSITION_FIELD = field_pattern(6, "POSITION", _FLOAT)
ITEM_LENGTH_FIELD = field_pattern(6, "LENGTH", _FLOAT)
ITEM_MUTE_FIELD = field_pattern(6, "MUTE", _INT, _INT)
ITEM_NAME_FIELD = re.compile(r'^      NAME\s+(?:"([^"]*)"|(\S+))')
ITEM_VOLPAN_FIELD = field_pattern(6, "VOLPAN", _FLOAT, _FLOAT, _FLOAT, _FLOAT)
ITEM_FILE_FIELD = re.compile(r'^        FILE\s+"([^"]*)"')

# FX chain entries
JS_ENTRY = re.compile(r'^      <JS\s+(?:"([^"]*)"|(\S+))')
PLUGIN_ENTRY = re.compile(r'^      <\S+\s+"([^":]*):\s*([^"]*)"\s+' + _TOKEN)

# Longest prefix first: "VST3i" must not be read as "VST3" or "VSTi"
FX_TYPE_PREFIXES = (
    ("VST3i", "vst3i"),
    ("VST3", "vst3"),
    ("VSTi", "vsti"),
    ("VST", "vst"),
    ("AUi", "aui"),
    ("AU", "au"),
)

# Characters dropped from plugin data blobs (newlines are kept)
FX_DATA_STRIP = str.maketrans("", "", "\t \r")
