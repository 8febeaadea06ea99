#!/usr/bin/env python3
"""Render the indicator charts from a local metrics file.

Usage:
    python scripts/render_indicators.py --data data/metrics.json --width 940 --output build
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from indicator_charts.cli import main

if __name__ == "__main__":
    sys.exit(main())
