"""Building blocks for the chart rendering pipeline."""
