"""Default paths and application settings."""

from pathlib import Path

DEFAULT_SCAN_PATH = Path.home()
PROJECT_EXTENSIONS = {".rpp"}
APP_NAME = "ReaParser"
APP_VERSION = "1.0.0"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 750
WINDOW_MIN_WIDTH = 700
WINDOW_MIN_HEIGHT = 500
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
