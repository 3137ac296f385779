"""ReaParser - REAPER project viewer.

Run: python main.py [project.rpp]
"""

import sys
from pathlib import Path

# Ensure package is importable when running from project root
sys.path.insert(0, str(Path(__file__).parent))

from reaparser.gui.app import ReaParserApp
from reaparser.utils.logging_setup import setup_logging


def main():
    setup_logging()
    app = ReaParserApp()
    if len(sys.argv) > 1:
        app.open_project(sys.argv[1])
    app.run()


if __name__ == "__main__":
    main()
