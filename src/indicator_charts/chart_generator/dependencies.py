from __future__ import annotations

import io

import matplotlib

matplotlib.use("Agg")  # Use non-GUI backend to prevent threading issues
import matplotlib.patches as mpatches
import matplotlib.path as mpath
import matplotlib.pyplot as plt

# Stable element ids so identical renders produce identical SVG.
plt.rcParams["svg.hashsalt"] = "indicator-charts"
plt.rcParams["svg.fonttype"] = "none"

__all__ = [
    "io",
    "plt",
    "mpatches",
    "mpath",
]
