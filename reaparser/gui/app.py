"""Main application window: pick a project, parse it, browse the result."""

import logging
import threading
from pathlib import Path
from tkinter import filedialog

import customtkinter as ctk

from reaparser.analyzer.fx_chain import get_fx_usage_stats, get_tracks_for_fx
from reaparser.core.errors import ReaParserError
from reaparser.core.models import ParseOptions, ReaProject
from reaparser.core.rpp_parser import load_project
from reaparser.export.json_export import export_project_json
from reaparser.gui import theme
from reaparser.gui.widgets.project_tree import ProjectTree
from reaparser.utils.config import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_SCAN_PATH,
    PROJECT_EXTENSIONS,
    WINDOW_HEIGHT,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)


class ReaParserApp:
    """Main application class."""

    def __init__(self):
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("dark-blue")

        self.root = ctk.CTk()
        self.root.title(f"{APP_NAME} v{APP_VERSION}")
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.root.minsize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.root.configure(fg_color=theme.BG_PRIMARY)

        self.project: ReaProject | None = None
        self._build_ui()

    def _build_ui(self):
        # Title bar
        title_frame = ctk.CTkFrame(self.root, fg_color=theme.BG_PRIMARY)
        title_frame.pack(fill="x", padx=20, pady=(15, 5))

        ctk.CTkLabel(
            title_frame,
            text=APP_NAME,
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_TITLE, "bold"),
            text_color=theme.ACCENT,
        ).pack(side="left")

        # File selection
        top_frame = ctk.CTkFrame(self.root, fg_color="transparent")
        top_frame.pack(fill="x", padx=15, pady=(10, 5))

        self.path_var = ctk.StringVar()
        ctk.CTkEntry(
            top_frame,
            textvariable=self.path_var,
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_BODY),
            fg_color=theme.BG_TERTIARY,
        ).pack(side="left", fill="x", expand=True, padx=(0, 10))

        ctk.CTkButton(
            top_frame,
            text="Browse...",
            width=80,
            command=self._browse,
            fg_color=theme.BG_TERTIARY,
            hover_color=theme.BG_HOVER,
        ).pack(side="left", padx=(0, 5))

        self.parse_btn = ctk.CTkButton(
            top_frame,
            text="Parse",
            width=100,
            command=self._parse,
            fg_color=theme.ACCENT_DARK,
            hover_color=theme.ACCENT,
        )
        self.parse_btn.pack(side="left", padx=(0, 5))

        self.export_btn = ctk.CTkButton(
            top_frame,
            text="JSON Export",
            width=110,
            command=self._export_json,
            fg_color=theme.BG_TERTIARY,
            hover_color=theme.ACCENT_SUCCESS,
            state="disabled",
        )
        self.export_btn.pack(side="left")

        # Parse options
        options_frame = ctk.CTkFrame(self.root, fg_color="transparent")
        options_frame.pack(fill="x", padx=15, pady=(0, 5))

        self.db_var = ctk.BooleanVar(value=True)
        ctk.CTkCheckBox(
            options_frame, text="Volume in dB", variable=self.db_var
        ).pack(side="left", padx=(0, 15))

        self.normalize_pan_var = ctk.BooleanVar(value=True)
        ctk.CTkCheckBox(
            options_frame, text="Pan as -1..1", variable=self.normalize_pan_var
        ).pack(side="left")

        # Status
        self.status_var = ctk.StringVar(value="Select a .rpp file and click 'Parse'")
        ctk.CTkLabel(
            self.root,
            textvariable=self.status_var,
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_MUTED,
        ).pack(fill="x", padx=15, pady=(5, 5))

        # FX usage
        self.fx_stats_var = ctk.StringVar()
        ctk.CTkLabel(
            self.root,
            textvariable=self.fx_stats_var,
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_MUTED,
            anchor="w",
            justify="left",
        ).pack(fill="x", padx=15, pady=(0, 5))

        self.project_tree = ProjectTree(self.root)
        self.project_tree.pack(fill="both", expand=True, padx=15, pady=(0, 15))

    def _browse(self):
        path = filedialog.askopenfilename(
            title="Select a REAPER project",
            filetypes=[("REAPER Project", "*.rpp *.RPP")],
            initialdir=str(DEFAULT_SCAN_PATH),
        )
        if path:
            self.path_var.set(path)
            self._parse()

    def _parse(self):
        path = self.path_var.get().strip()
        if not path:
            return

        rpp_path = Path(path)
        if rpp_path.suffix.lower() not in PROJECT_EXTENSIONS:
            self.status_var.set("Not a .rpp file!")
            return

        options = ParseOptions(
            convert_volume_to_db=self.db_var.get(),
            normalize_pan=self.normalize_pan_var.get(),
        )
        self.parse_btn.configure(state="disabled")
        self.status_var.set("Parsing...")

        threading.Thread(
            target=self._run_parse, args=(rpp_path, options), daemon=True
        ).start()

    def _run_parse(self, rpp_path: Path, options: ParseOptions):
        try:
            project = load_project(rpp_path, options)
        except ReaParserError as e:
            logger.error("%s", e)
            message = str(e)
            self.root.after(
                0,
                lambda: (
                    self.status_var.set(f"Error: {message}"),
                    self.parse_btn.configure(state="normal"),
                ),
            )
            return

        def update_ui():
            self.project = project
            self.project_tree.load_project(project)
            self.parse_btn.configure(state="normal")
            self.export_btn.configure(state="normal")
            self.status_var.set(
                f"{project.name} ({project.version}): {project.track_count} tracks, "
                f"{project.item_count} items, {project.fx_count} FX"
            )
            self.fx_stats_var.set(self._fx_usage_text(project))

        self.root.after(0, update_ui)

    @staticmethod
    def _fx_usage_text(project: ReaProject) -> str:
        usage = get_fx_usage_stats(project)
        if not usage:
            return "No FX"
        parts = []
        for name, count in usage.items():
            tracks = ", ".join(t.name for t, _ in get_tracks_for_fx(project, name))
            parts.append(f"{name} x{count} ({tracks})")
        return "FX: " + " | ".join(parts)

    def _export_json(self):
        if not self.project:
            return

        path = filedialog.asksaveasfilename(
            title="Save JSON export",
            defaultextension=".json",
            filetypes=[("JSON", "*.json")],
            initialfile=f"{self.project.name}.json",
        )
        if path:
            export_project_json(self.project, Path(path))
            self.status_var.set(f"Exported: {path}")

    def open_project(self, rpp_path):
        """Load a project given on the command line."""
        self.path_var.set(str(rpp_path))
        self._parse()

    def run(self):
        self.root.mainloop()
