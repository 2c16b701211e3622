"""
Recipe World Map Global Configuration

This module defines global constants and utility functions used across the entire project.
It establishes the app root, the external endpoints and the map colors that all other
modules depend on.

Key Features:
- Centralized path management for the app
- External endpoints for the blog post feed and the world geometry
- Map color palette shared by the map and the legend
- Unified logging function

Important: This file is imported by main.py before session_state exists, so it cannot
depend on Streamlit session state.
"""

import os

# ═══════════════════════════════════════════════════════════════════════════════
# CORE DIRECTORY STRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

# Root app directory
# Path calculation: utils/config.py -> utils -> app root
APP_ROOT = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

LOG_DIR = os.path.join(APP_ROOT, "assets", "logs")
LOG_FILE = os.path.join(LOG_DIR, "log.txt")

# ═══════════════════════════════════════════════════════════════════════════════
# EXTERNAL ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════════

# WordPress post list of the blog. Single page only, no authentication.
FEED_URL = "https://public-api.wordpress.com/wp/v2/sites/flooziemagoo.wordpress.com/posts"

# Natural Earth admin-0 countries (110m) as GeoJSON, with ISO_A2 properties
GEOJSON_URL = "https://raw.githubusercontent.com/nvkelso/natural-earth-vector/master/geojson/ne_110m_admin_0_countries.geojson"

# ═══════════════════════════════════════════════════════════════════════════════
# MAP CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

# Country has a recipe on the blog
COLOR_HIGHLIGHTED = "#F97316"

# Country without a recipe: no merged record, or a record without content
COLOR_COMING_SOON = "#E5E7EB"

COLOR_STROKE = "#FFFFFF"

COLOR_SEA = "#38BDF8"

# Number of countries the blog aims to cover
TOTAL_COUNTRIES = 195

# ═══════════════════════════════════════════════════════════════════════════════
# UTILITY FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def log(msg):
    """
    Unified logging function that writes to both file and console.

    Args:
        msg (str): Message to log

    Behavior:
        - Appends message to assets/logs/log.txt
        - Prints message to console (stdout)
        - Automatically adds newline character

    Note: This is a simple logging function. The main.py file handles log rotation
    and archival of previous sessions.
    """
    os.makedirs(LOG_DIR, exist_ok=True)
    with open(LOG_FILE, 'a', encoding="utf-8") as f:
        f.write(f"{msg}\n")
    print(msg)
