"""
UI helper functions for the Recipe World Map Streamlit application.
"""

import streamlit as st
from st_flexible_callout_elements import flexible_callout

from utils.config import COLOR_HIGHLIGHTED, COLOR_COMING_SOON, TOTAL_COUNTRIES


def print_widget_label(label_text, icon=None, help_text=None, sidebar=False):
    """
    Print a formatted widget label with optional icon and help text.

    Args:
        label_text: The text to display
        icon: Optional material icon name (without 'material/' prefix)
        help_text: Optional help text tooltip
        sidebar: If True, displays in sidebar with smaller text
    """
    if icon:
        line = f":material/{icon}: &nbsp; "
    else:
        line = ""

    if sidebar:
        st.sidebar.markdown(
            f"<small>{line}<b>{label_text}</b></small>", unsafe_allow_html=True, help=help_text)
    else:
        st.markdown(f"{line}**{label_text}**", help=help_text)


def warning_box(msg, title=None, icon=":material/warning:"):
    """
    Display a warning callout box.

    Args:
        msg: The message to display
        title: Optional title (will be bold)
        icon: Icon to display (default: warning icon)
    """
    if title:
        msg = f'<span style="font-weight: bold;">{title}</span><br>{msg}'

    flexible_callout(msg,
                     icon=icon,
                     background_color="#fffbeb",
                     font_color="#936b0c",
                     icon_size=23)


def progress_label(completed, total=TOTAL_COUNTRIES):
    return f"{completed}/{total} Countries Completed"


def page_header(completed):
    """
    Display the blog title, tagline and the completed countries badge.

    Args:
        completed: Number of countries with a recipe
    """
    st.markdown("<h1 style='font-size: 2.25rem; font-weight: 700; margin-bottom: 0;'>Flooziemagoo</h1>",
                unsafe_allow_html=True)
    st.caption("Making one vegan recipe from every country in the world")
    st.badge(progress_label(completed), color="green")


def _swatch(color, label):
    return (f"<span style='display:inline-flex; align-items:center; gap:6px; margin-right:18px;'>"
            f"<span style='width:14px; height:14px; border-radius:3px; background:{color};'></span>"
            f"<small><b>{label}</b></small></span>")


def map_legend():
    """Legend below the map with the two country states."""
    st.markdown(_swatch(COLOR_HIGHLIGHTED, "Recipe Available") + _swatch(COLOR_COMING_SOON, "Coming Soon"),
                unsafe_allow_html=True)
    st.caption("Orange countries have completed recipes! Click them to view the blog post. "
               "Gray countries are coming soon - click to vote!")
