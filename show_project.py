"""Quick script to print a parsed REAPER project."""
import sys
sys.path.insert(0, ".")

from reaparser.core.errors import ReaParserError
from reaparser.core.models import ParseOptions
from reaparser.core.rpp_parser import load_project
from reaparser.report import format_project

if len(sys.argv) < 2:
    print("Usage: python show_project.py <project.rpp>")
    sys.exit(1)

# Pan in percent, as on REAPER's track pan tooltips
options = ParseOptions(convert_volume_to_db=True, normalize_pan=False)

try:
    project = load_project(sys.argv[1], options)
except ReaParserError as e:
    print(e)
    sys.exit(1)

print(format_project(project))
