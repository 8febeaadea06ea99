from __future__ import annotations

"""Helper for chart styling and configuration"""


class ChartStyler:
    """Provides chart styling configuration"""

    def __init__(self):
        # One SVG unit per pixel
        self.dpi = 72

        # Color scheme
        self.background_color = "#ffffff"
        self.grid_color = "#e6e6e6"
        self.axis_text_color = "#666666"
        self.line_color = "#17807e"
        self.label_color = "#333333"
        self.bubble_color = "#ffffff"
        self.font_size = 12
        self.line_width = 2.0

        # Term shading by administration
        self.default_term_color = "#eeeeee"
        self.term_colors = {
            "clinton": "#d8e6f2",
            "bush": "#f6dcd5",
            "obama": "#d8e6f2",
            "trump": "#f6dcd5",
        }

    def term_color(self, slug: str) -> str:
        return self.term_colors.get(slug, self.default_term_color)
