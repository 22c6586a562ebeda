"""Pytest configuration.

Modules live flat at the repository root, so make the root importable when
the project is not installed.
"""

import sys
from pathlib import Path

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))
