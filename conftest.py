"""
Test configuration to keep imports stable when running from a checkout.

We explicitly place ``src`` at the front of ``sys.path`` so imports resolve to
the checked-in package rather than a previously installed copy.
"""
from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
src_str = str(SRC_DIR)

if src_str in sys.path:
    sys.path.remove(src_str)
sys.path.insert(0, src_str)
