# simcal/util/console.py
from __future__ import annotations

import os
import sys
from typing import Any


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    v = (os.getenv("SIMCAL_OBS_LOG", "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}
