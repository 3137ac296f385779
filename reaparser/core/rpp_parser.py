"""Text .rpp file parser for REAPER projects.

Extracts version, sample rate, tempo, the master track and every track with
its media items and FX chain from a line-oriented .rpp file. Each stage makes
its own pass over the file and rewinds the shared cursor when done.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from reaparser.core.constants import (
    FX_DATA_STRIP,
    FX_ENTRY_CLOSE,
    FX_TYPE_PREFIXES,
    FXCHAIN_CLOSE,
    FXCHAIN_OPEN,
    HEADER_PATTERN,
    ITEM_CLOSE,
    ITEM_FILE_FIELD,
    ITEM_LENGTH_FIELD,
    ITEM_MUTE_FIELD,
    ITEM_NAME_FIELD,
    ITEM_OPEN,
    ITEM_POSITION_FIELD,
    ITEM_VOLPAN_FIELD,
    JS_ENTRY,
    MASTER_NCH_FIELD,
    MASTER_VOLUME_FIELD,
    PLATFORM_CODES,
    PLUGIN_ENTRY,
    SAMPLERATE_FIELD,
    SOURCE_MIDI,
    SOURCE_SAMPLE,
    TEMPO_FIELD,
    TRACK_CLOSE,
    TRACK_IPHASE_FIELD,
    TRACK_MUTESOLO_FIELD,
    TRACK_NAME_FIELD,
    TRACK_OPEN,
    TRACK_VOLPAN_FIELD,
)
from reaparser.core.errors import InvalidFormat
from reaparser.core.line_reader import LineReader
from reaparser.core.models import (
    FxEntry,
    FxType,
    MediaItem,
    MediaType,
    ParseOptions,
    Platform,
    ReaProject,
    Track,
)
from reaparser.core.normalize import normalize_levels

logger = logging.getLogger(__name__)

MASTER_GUID = "0"
MASTER_NAME = "MASTER"


class RppParser:
    """Parser for REAPER .rpp project files."""

    def __init__(self, rpp_path: str | Path, options: ParseOptions | None = None):
        self.source = str(rpp_path)
        self.path = Path(rpp_path)
        self.options = options or ParseOptions()
        self.project = ReaProject(file_path=self.path)

    def parse(self) -> ReaProject:
        """Parse the .rpp file and return a ReaProject.

        Raises UnreadableSource if the file can't be opened and InvalidFormat
        if its first line is not a REAPER project header.
        """
        with LineReader(self.path) as reader:
            self._load_metadata(reader)
            self._load_properties(reader)
            self._load_tracks(reader)

        self.project.valid = True
        logger.info(
            "Loaded %s: %d tracks, %d items, %d FX",
            self.project.name,
            self.project.track_count,
            self.project.item_count,
            self.project.fx_count,
        )
        return self.project

    # ── Metadata extraction ──────────────────────────────────────────────

    def _load_metadata(self, reader: LineReader):
        """Validate the header line and read the version token."""
        header = reader.next_line()
        match = HEADER_PATTERN.match(header.lstrip("\ufeff")) if header else None
        if not match:
            raise InvalidFormat(self.source)

        version = self.project.version
        version.major = int(match.group(1))
        version.minor = int(match.group(2))
        version.platform = _classify_platform(match.group(3))

        self.project.name = project_name_from_path(self.source)
        logger.debug("%s: REAPER %s", self.project.name, version)

        reader.rewind()

    def _load_properties(self, reader: LineReader):
        """Pick up sample rate and tempo from the top level."""
        for line in reader:
            m = SAMPLERATE_FIELD.match(line)
            if m:
                self.project.sample_rate = int(m.group(1))

            m = TEMPO_FIELD.match(line)
            if m:
                tempo = self.project.tempo
                tempo.bpm = float(m.group(1))
                tempo.beats = int(m.group(2))
                tempo.bars = int(m.group(3))

        reader.rewind()

    # ── Track extraction ─────────────────────────────────────────────────

    def _load_tracks(self, reader: LineReader):
        """Build the master track, then every <TRACK block in file order."""
        self._load_master_track(reader)

        track_count = 0
        for line in reader:
            m = TRACK_OPEN.match(line)
            if not m:
                continue

            track_count += 1
            track = Track(guid=m.group(1), index=track_count)
            self._load_track_body(reader, track)
            self._apply_options(track)
            self.project.tracks.append(track)

        logger.debug("%s: %d tracks", self.project.name, track_count)

    def _load_master_track(self, reader: LineReader):
        """The master bus has no block of its own; later fields win."""
        master = Track(guid=MASTER_GUID, name=MASTER_NAME, index=0)

        for line in reader:
            m = MASTER_NCH_FIELD.match(line)
            if m:
                # Second value is the output channel count
                master.channels = int(m.group(2))

            m = MASTER_VOLUME_FIELD.match(line)
            if m:
                master.volume = float(m.group(1))
                master.pan = float(m.group(2))

        self._apply_options(master)
        self.project.tracks.append(master)

        reader.rewind()

    def _load_track_body(self, reader: LineReader, track: Track):
        for line in reader:
            if line.startswith(TRACK_CLOSE):
                return

            m = TRACK_NAME_FIELD.match(line)
            if m:
                track.name = _token(m)

            m = TRACK_VOLPAN_FIELD.match(line)
            if m:
                track.volume = float(m.group(1))
                track.pan = float(m.group(2))

            m = TRACK_IPHASE_FIELD.match(line)
            if m:
                track.phase_inverted = int(m.group(1)) != 0

            m = TRACK_MUTESOLO_FIELD.match(line)
            if m:
                track.muted = int(m.group(1)) != 0

            if line.startswith(ITEM_OPEN):
                track.items.append(self._load_media_item(reader))
            elif FXCHAIN_OPEN.match(line):
                track.fx_chain.extend(self._load_fx_chain(reader))

        logger.warning(
            "%s: track %s is not closed before end of file",
            self.project.name, track.guid,
        )

    # ── Media items ──────────────────────────────────────────────────────

    def _load_media_item(self, reader: LineReader) -> MediaItem:
        """Read one <ITEM block. The open line has already been consumed."""
        item = MediaItem()

        for line in reader:
            if line.startswith(ITEM_CLOSE):
                break

            m = ITEM_POSITION_FIELD.match(line)
            if m:
                item.start = float(m.group(1))

            m = ITEM_LENGTH_FIELD.match(line)
            if m:
                item.length = float(m.group(1))

            m = ITEM_MUTE_FIELD.match(line)
            if m:
                item.muted = int(m.group(1)) != 0

            m = ITEM_NAME_FIELD.match(line)
            if m:
                item.name = _token(m)

            m = ITEM_VOLPAN_FIELD.match(line)
            if m:
                item.volume = float(m.group(1))
                item.pan = float(m.group(2))

            if line.startswith(SOURCE_MIDI):
                item.item_type = MediaType.MIDI
            elif line.startswith(SOURCE_SAMPLE):
                item.item_type = MediaType.SAMPLE
                # The sample's FILE line directly follows its source header
                file_line = reader.next_line()
                m = ITEM_FILE_FIELD.match(file_line) if file_line else None
                if m:
                    item.file_path = m.group(1)

        item.end = item.start + item.length
        self._apply_options(item)
        return item

    # ── FX chains ────────────────────────────────────────────────────────

    def _load_fx_chain(self, reader: LineReader) -> list[FxEntry]:
        """Read one <FXCHAIN block into FX entries, in chain order."""
        chain: list[FxEntry] = []

        for line in reader:
            if line.startswith(FXCHAIN_CLOSE):
                break

            m = JS_ENTRY.match(line)
            if m:
                chain.append(self._load_script_fx(reader, _token(m)))
                continue

            m = PLUGIN_ENTRY.match(line)
            if m:
                chain.append(self._load_plugin_fx(reader, m))

        return chain

    def _load_script_fx(self, reader: LineReader, name: str) -> FxEntry:
        """JS effects keep their slider state on the single following line."""
        data = reader.next_line() or ""
        return FxEntry(name=name, data=data.lstrip(" "), fx_type=FxType.JS)

    def _load_plugin_fx(self, reader: LineReader, header: re.Match) -> FxEntry:
        """Binary plugins carry a base64 state chunk up to their close line."""
        fx = FxEntry(
            name=header.group(2).strip(),
            file_path=header.group(3).strip('"'),
            fx_type=_classify_fx_type(header.group(1).strip()),
        )

        chunks: list[str] = []
        for line in reader:
            if line.startswith(FX_ENTRY_CLOSE):
                break
            chunks.append(line)
        fx.data = "".join(chunks).translate(FX_DATA_STRIP)

        return fx

    # ── Post-processing ──────────────────────────────────────────────────

    def _apply_options(self, entity: Track | MediaItem):
        entity.volume, entity.pan = normalize_levels(
            entity.volume, entity.pan, self.options
        )


def project_name_from_path(path: str) -> str:
    """File name without directory and extension, e.g. "MySong" for
    "C:\\Projects\\MySong.RPP". Either part is optional."""
    name = re.split(r"[/\\]", path)[-1]
    if "." in name:
        name = name[: name.rfind(".")]
    return name


def _classify_platform(code: str) -> Platform:
    return Platform(PLATFORM_CODES.get(code, Platform.UNDEFINED.value))


def _classify_fx_type(type_name: str) -> FxType:
    for prefix, fx_type in FX_TYPE_PREFIXES:
        if type_name.startswith(prefix):
            return FxType(fx_type)
    return FxType.UNDEFINED


def _token(match: re.Match) -> str:
    """Value of a quoted-or-bare name field."""
    if match.group(1) is not None:
        return match.group(1)
    return match.group(2)


def load_project(rpp_path: str | Path, options: ParseOptions | None = None) -> ReaProject:
    """Load a REAPER project file with the given options."""
    parser = RppParser(rpp_path, options)
    return parser.parse()
