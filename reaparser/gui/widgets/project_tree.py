"""Project tree view widget for displaying the track/item/FX hierarchy."""

import customtkinter as ctk
from reaparser.gui import theme
from reaparser.core.models import FxEntry, MediaItem, ReaProject, Track


class ProjectTree(ctk.CTkScrollableFrame):
    """Scrollable tree showing tracks with their items and FX chains."""

    def __init__(self, parent, **kwargs):
        super().__init__(parent, fg_color=theme.BG_PRIMARY, **kwargs)
        self._items: list[ctk.CTkFrame] = []

    def load_project(self, project: ReaProject):
        """Display the project's track hierarchy."""
        self._clear()

        for track in project.tracks:
            track_frame = ctk.CTkFrame(self, fg_color=theme.BG_TERTIARY, corner_radius=6)
            track_frame.pack(fill="x", pady=(4, 0), padx=4)

            self._add_track_header(track_frame, track)

            for item in track.items:
                self._add_item_row(track_frame, item)
            for fx in track.fx_chain:
                self._add_fx_row(track_frame, fx)

            self._items.append(track_frame)

    def _add_track_header(self, parent: ctk.CTkFrame, track: Track):
        header = ctk.CTkFrame(parent, fg_color="transparent")
        header.pack(fill="x", padx=8, pady=6)

        label = "MASTER" if track.is_master else f"#{track.index}"
        ctk.CTkLabel(
            header,
            text=label,
            font=(theme.FONT_MONO, theme.FONT_SIZE_SMALL),
            text_color=theme.ACCENT if track.is_master else theme.TEXT_MUTED,
            width=60,
            anchor="w",
        ).pack(side="left")

        ctk.CTkLabel(
            header,
            text=track.name or "(unnamed)",
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_BODY, "bold"),
            text_color=theme.TEXT_DISABLED if track.muted else theme.TEXT_PRIMARY,
            anchor="w",
        ).pack(side="left", fill="x", expand=True)

        flags = [f"{track.volume:.1f} vol", f"{track.pan:+.2f} pan"]
        if track.muted:
            flags.append("MUTE")
        if track.phase_inverted:
            flags.append("Ø")
        if track.is_master and track.channels:
            flags.append(f"{track.channels}ch")
        ctk.CTkLabel(
            header,
            text=" | ".join(flags),
            font=(theme.FONT_MONO, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_MUTED,
        ).pack(side="right")

    def _add_item_row(self, parent: ctk.CTkFrame, item: MediaItem):
        row = ctk.CTkFrame(parent, fg_color="transparent")
        row.pack(fill="x", padx=(30, 8), pady=2)

        ctk.CTkLabel(
            row,
            text=f"[{item.item_type.display_name.upper()}]",
            font=(theme.FONT_MONO, theme.FONT_SIZE_SMALL),
            text_color=theme.ACCENT_WARNING if item.muted else theme.ACCENT_SUCCESS,
            width=80,
            anchor="w",
        ).pack(side="left")

        ctk.CTkLabel(
            row,
            text=item.name or item.file_path or "Unnamed Item",
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_SECONDARY,
            anchor="w",
        ).pack(side="left", fill="x", expand=True)

        ctk.CTkLabel(
            row,
            text=f"{item.start:.2f}s - {item.end:.2f}s",
            font=(theme.FONT_MONO, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_MUTED,
        ).pack(side="right")

    def _add_fx_row(self, parent: ctk.CTkFrame, fx: FxEntry):
        row = ctk.CTkFrame(parent, fg_color="transparent")
        row.pack(fill="x", padx=(30, 8), pady=2)

        ctk.CTkLabel(
            row,
            text="●",
            font=(theme.FONT_FAMILY, 8),
            text_color=theme.FX_TYPE_COLORS.get(fx.fx_type.value, theme.TEXT_MUTED),
            width=15,
        ).pack(side="left")

        ctk.CTkLabel(
            row,
            text=fx.name or "Unknown FX",
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_SECONDARY,
            anchor="w",
        ).pack(side="left", fill="x", expand=True)

        ctk.CTkLabel(
            row,
            text=fx.fx_type.value.upper(),
            font=(theme.FONT_MONO, theme.FONT_SIZE_SMALL - 1),
            text_color=theme.ACCENT_INFO,
        ).pack(side="right")

    def _clear(self):
        for item in self._items:
            item.destroy()
        self._items.clear()
