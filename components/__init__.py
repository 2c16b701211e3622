"""
UI Components package for the Recipe World Map Streamlit application.

This package contains reusable UI components that can be used across different pages.
"""

from .ui_helpers import print_widget_label, warning_box, page_header, map_legend
from .country_panel import render_country_panel
from .navigation import open_in_new_tab

__all__ = [
    'print_widget_label',
    'warning_box',
    'page_header',
    'map_legend',
    'render_country_panel',
    'open_in_new_tab'
]
