"""simcal Python package.

Month-view calendar grids rendered as HTML tables.

Public API:
  - import from `simcal.api` (preferred) or `import simcal` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)

__version__ = "1.0.0"
