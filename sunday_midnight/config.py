from __future__ import annotations

import os


# Zone used when a caller does not name one (CLI --tz, web ?tz=)
TZ_NAME = os.environ.get("SUNDAY_MIDNIGHT_TZ", "UTC")

# "strict": exact Sunday midnight counts down a full week; "inclusive": it counts down 0
MIDNIGHT_POLICY = os.environ.get("SUNDAY_MIDNIGHT_POLICY", "strict").strip().lower()
