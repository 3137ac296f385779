"""CLI entry point: print a REAPER project as JSON.

Usage: python -m reaparser.cli_export "path/to/project.rpp" [OPTIONS]

Outputs JSON to stdout. On failure a {"error": ...} object is printed and
the exit code is 1.
"""

import json
import logging
import sys
from pathlib import Path

from reaparser.core.errors import ReaParserError
from reaparser.core.models import ParseOptions
from reaparser.core.rpp_parser import load_project
from reaparser.export.json_export import project_to_dict
from reaparser.utils.logging_setup import setup_logging

USAGE = """Usage: python -m reaparser.cli_export <project.rpp> [OPTIONS]

Options:
  --no-db            - Keep volume as linear amplitude instead of dB
  --percent-pan      - Scale pan to -100..100 instead of -1..1
  --log-file=PATH    - Also log to a file
  --log-level=LEVEL  - DEBUG, INFO, WARNING, ERROR (default: WARNING)"""


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(json.dumps({"error": "No .rpp path provided"}))
        print(USAGE, file=sys.stderr)
        return 1

    rpp_path = Path(args[0])
    convert_volume_to_db = True
    normalize_pan = True
    log_file = None
    log_level = "WARNING"

    for arg in args[1:]:
        if arg == "--no-db":
            convert_volume_to_db = False
        elif arg == "--percent-pan":
            normalize_pan = False
        elif arg.startswith("--log-file="):
            log_file = Path(arg.split("=", 1)[1])
        elif arg.startswith("--log-level="):
            log_level = arg.split("=", 1)[1]
            if not isinstance(getattr(logging, log_level.upper(), None), int):
                print(json.dumps({"error": f"Unknown log level: {log_level}"}))
                return 1
        else:
            print(json.dumps({"error": f"Unknown option: {arg}"}))
            return 1

    setup_logging(log_file=log_file, level=log_level)

    options = ParseOptions(
        convert_volume_to_db=convert_volume_to_db,
        normalize_pan=normalize_pan,
    )
    try:
        project = load_project(rpp_path, options)
    except ReaParserError as e:
        print(json.dumps({"error": str(e), "path": e.path}))
        return 1

    print(json.dumps(project_to_dict(project), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
