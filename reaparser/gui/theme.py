"""Dark theme constants for the ReaParser GUI."""

# Base colors
BG_PRIMARY = "#1e1e1e"
BG_SECONDARY = "#2d2d2d"
BG_TERTIARY = "#383838"
BG_HOVER = "#444444"

# Accent colors
ACCENT = "#bb86fc"
ACCENT_DARK = "#9a67db"
ACCENT_SUCCESS = "#03dac6"
ACCENT_WARNING = "#cf6679"
ACCENT_INFO = "#64b5f6"

# Text colors
TEXT_PRIMARY = "#ffffff"
TEXT_SECONDARY = "#cccccc"
TEXT_MUTED = "#888888"
TEXT_DISABLED = "#555555"

# Fonts
FONT_FAMILY = "Segoe UI"
FONT_MONO = "Consolas"
FONT_SIZE_TITLE = 20
FONT_SIZE_BODY = 11
FONT_SIZE_SMALL = 9

# FX type badge colors
FX_TYPE_COLORS = {
    "vst": ACCENT_INFO,
    "vst3": ACCENT_INFO,
    "vsti": ACCENT_SUCCESS,
    "vst3i": ACCENT_SUCCESS,
    "au": "#ffb74d",
    "aui": "#81c784",
    "js": ACCENT,
}
