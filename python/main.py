#!/usr/bin/env python3
"""Conundrum puzzle solver.

Usage::

    python main.py 1 2 3 4 5 0 6 7
    python main.py 0 1 2 3 4 5 6 7 --check --stats
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conundrum_cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
