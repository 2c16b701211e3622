"""
Recipe World Map Streamlit Application - Main Entry Point

An interactive world map of the Flooziemagoo blog, which makes one vegan recipe from
every country in the world. Countries with a recipe link to the blog post; the others
can be voted for.

The application uses a startup/rerun pattern:
- On startup (empty session_state): start a fresh log, kick off the post fetch
- On reruns: use the state cached in session_state

Run with:
streamlit run main.py
"""

# Standard library imports
import os
import sys

import streamlit as st

# Local imports - global config must be imported before anything else
from utils.config import APP_ROOT, log

# ═══════════════════════════════════════════════════════════════════════════════
# GLOBAL CONFIGURATION & SETUP (runs on every request)
# ═══════════════════════════════════════════════════════════════════════════════

# Force unbuffered output for real-time logging
sys.stdout.reconfigure(line_buffering=True)

# Streamlit config loaded from .streamlit/config.toml

st.set_page_config(
    initial_sidebar_state="auto",
    page_icon="🌍",
    page_title="Flooziemagoo World Map"
)

with open(os.path.join(APP_ROOT, "assets", "css", "styles.css"), "r", encoding="utf-8") as f:
    css_content = f.read()
st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)

# ═══════════════════════════════════════════════════════════════════════════════
# STARTUP INITIALIZATION (runs only when session_state is empty)
# ═══════════════════════════════════════════════════════════════════════════════

# Detect app startup: empty session_state means this is a fresh session
if st.session_state == {}:

    from utils.common import start_session_log
    from utils.session import start_feed

    start_session_log()
    log("Session started")

    # The page renders straight away, the merged records appear when the fetch finishes
    start_feed()

# ═══════════════════════════════════════════════════════════════════════════════
# MAIN APPLICATION (runs on startup and every rerun)
# ═══════════════════════════════════════════════════════════════════════════════

world_map_page = st.Page(
    os.path.join("pages", "world_map.py"), title="World map", icon=":material/public:", default=True)
settings_page = st.Page(
    os.path.join("pages", "settings.py"), title="Settings", icon=":material/settings:")
pg = st.navigation([world_map_page, settings_page])

# Run the selected page
pg.run()
