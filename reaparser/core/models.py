"""Dataclasses for all ReaParser data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Platform(Enum):
    UNDEFINED = "undefined"
    WINDOWS = "windows"
    OSX = "osx"
    LINUX = "linux"

    @property
    def display_name(self) -> str:
        return {
            Platform.WINDOWS: "Windows",
            Platform.OSX: "Apple OSX",
            Platform.LINUX: "Linux",
        }.get(self, "Unknown")


class MediaType(Enum):
    UNDEFINED = "undefined"
    SAMPLE = "sample"
    MIDI = "midi"

    @property
    def display_name(self) -> str:
        return {
            MediaType.SAMPLE: "Sample",
            MediaType.MIDI: "Midi",
        }.get(self, "Unknown")


class FxType(Enum):
    VST = "vst"
    VST3 = "vst3"
    VSTI = "vsti"
    VST3I = "vst3i"
    AU = "au"
    AUI = "aui"
    JS = "js"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class ParseOptions:
    # REAPER serializes volume as linear amplitude; True converts to dB
    # (as seen on the track fader tooltips).
    convert_volume_to_db: bool = True
    # True keeps pan in -1..1 as serialized; False scales it to -100..100.
    normalize_pan: bool = True


@dataclass
class Version:
    major: int = 0
    minor: int = 0
    platform: Platform = Platform.UNDEFINED

    @property
    def platform_string(self) -> str:
        return self.platform.display_name

    def __str__(self) -> str:
        return f"{self.platform_string} {self.major}.{self.minor}"


@dataclass
class Tempo:
    bpm: float = 0.0
    beats: int = 0
    bars: int = 0

    @property
    def time_signature(self) -> str:
        return f"{self.beats}/{self.bars}"


@dataclass
class MediaItem:
    name: str = ""
    file_path: str | None = None
    item_type: MediaType = MediaType.UNDEFINED
    volume: float = 0.0
    pan: float = 0.0
    muted: bool = False
    # Positions in seconds
    start: float = 0.0
    length: float = 0.0
    end: float = 0.0


@dataclass
class FxEntry:
    name: str = ""
    file_path: str | None = None
    data: str = field(default="", repr=False)
    fx_type: FxType = FxType.UNDEFINED


@dataclass
class Track:
    name: str = ""
    guid: str = ""
    index: int = 0
    volume: float = 0.0
    pan: float = 0.0
    channels: int = 0
    muted: bool = False
    phase_inverted: bool = False
    items: list[MediaItem] = field(default_factory=list)
    fx_chain: list[FxEntry] = field(default_factory=list)

    @property
    def is_master(self) -> bool:
        return self.index == 0


@dataclass
class ReaProject:
    name: str = ""
    file_path: Path = field(default_factory=Path)
    version: Version = field(default_factory=Version)
    sample_rate: int = 0
    tempo: Tempo = field(default_factory=Tempo)
    tracks: list[Track] = field(default_factory=list)
    valid: bool = False

    def __bool__(self) -> bool:
        return self.valid

    @property
    def master(self) -> Track | None:
        return self.tracks[0] if self.tracks else None

    @property
    def track_count(self) -> int:
        """Number of ordinary tracks (master excluded)."""
        return sum(1 for t in self.tracks if not t.is_master)

    @property
    def item_count(self) -> int:
        return sum(len(t.items) for t in self.tracks)

    @property
    def fx_count(self) -> int:
        return sum(len(t.fx_chain) for t in self.tracks)

    @property
    def referenced_files(self) -> set[str]:
        return {item.file_path for _, item in self.all_items() if item.file_path}

    def all_items(self) -> list[tuple[Track, MediaItem]]:
        result = []
        for track in self.tracks:
            for item in track.items:
                result.append((track, item))
        return result

    def all_fx(self) -> list[tuple[Track, FxEntry]]:
        result = []
        for track in self.tracks:
            for fx in track.fx_chain:
                result.append((track, fx))
        return result

    def fx_by_name(self) -> dict[str, list[tuple[Track, FxEntry]]]:
        by_name: dict[str, list[tuple[Track, FxEntry]]] = {}
        for track, fx in self.all_fx():
            by_name.setdefault(fx.name, []).append((track, fx))
        return by_name
