"""Project Global Constants. """

from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
LOG_CONFIG_FILE = PROJECT_ROOT / Path("logging.conf")

# Ethereum mainnet block 0.
GENESIS_UNIX = 1438269973
GENESIS_UTC = datetime(2015, 7, 30, 15, 26, 13, tzinfo=timezone.utc)

# Post-merge slot time, used to extrapolate beyond the chain head.
AVERAGE_BLOCK_SECONDS = 12

DEFAULT_TIME_ZONE = "UTC"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

# Time strings look like YYYY[-MM[-DD[ hh[:mm[:ss]]]]]
TIME_SEPARATORS = "- :"
TIME_COMPONENT_NAMES = ("year", "month", "day", "hour", "minute", "second")
# Lowest valid value for each component, used to fill unspecified trailing fields.
TIME_COMPONENT_MINIMUMS = (1, 1, 1, 0, 0, 0)
