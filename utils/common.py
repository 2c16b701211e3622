"""
Recipe World Map Common Utilities

Shared utility functions used across the app including:
- Session state management
- Application settings (config/settings.json)
- Session log rotation
- Logging wrapper for callbacks
"""

import os
import json
import shutil
from datetime import datetime

import streamlit as st

from utils.config import APP_ROOT, FEED_URL, GEOJSON_URL, LOG_DIR, LOG_FILE, log


def init_session_state(section):
    """
    Initialize session state for a specific section if it doesn't exist.
    """
    if section not in st.session_state:
        st.session_state[section] = {}


def get_session_var(section, var_name, default=None):
    """
    Get a variable from session state for a specific section.
    """
    init_session_state(section)
    return st.session_state[section].get(var_name, default)


def set_session_var(section, var_name, value):
    """
    Set a variable in session state for a specific section.
    """
    init_session_state(section)
    st.session_state[section][var_name] = value


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION SETTINGS (config/settings.json)
# ═══════════════════════════════════════════════════════════════════════════════

APP_SETTINGS_FILE = os.path.join(APP_ROOT, "config", "settings.json")
DEFAULT_APP_SETTINGS = {
    "feed": {
        "url": FEED_URL,
        "timeout_seconds": None
    },
    "map": {
        "geojson_url": GEOJSON_URL,
        "height": 600
    }
}


def load_app_settings(settings_file=None):
    """
    Load application-level settings from config/settings.json.
    Creates the file with defaults if missing or invalid.
    """
    settings_file = settings_file or APP_SETTINGS_FILE
    os.makedirs(os.path.dirname(settings_file), exist_ok=True)

    if not os.path.exists(settings_file):
        save_app_settings(DEFAULT_APP_SETTINGS, settings_file)
        return json.loads(json.dumps(DEFAULT_APP_SETTINGS))

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings.json must contain an object")
    except (json.JSONDecodeError, ValueError):
        log(f"Invalid settings file {settings_file}, restoring defaults")
        save_app_settings(DEFAULT_APP_SETTINGS, settings_file)
        return json.loads(json.dumps(DEFAULT_APP_SETTINGS))

    # fill sections added after the file was written
    for section, defaults in DEFAULT_APP_SETTINGS.items():
        current = data.get(section)
        if not isinstance(current, dict):
            data[section] = dict(defaults)
        else:
            for key, value in defaults.items():
                current.setdefault(key, value)
    return data


def save_app_settings(settings_dict, settings_file=None):
    """
    Persist application-level settings to config/settings.json.
    """
    settings_file = settings_file or APP_SETTINGS_FILE
    os.makedirs(os.path.dirname(settings_file), exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        json.dump(settings_dict, f, indent=2)


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION LOG
# ═══════════════════════════════════════════════════════════════════════════════

def start_session_log():
    """
    Archive the previous session log and write a fresh header.
    """
    previous_sessions_dir = os.path.join(LOG_DIR, "previous_sessions")

    try:
        os.makedirs(previous_sessions_dir, exist_ok=True)

        if os.path.exists(LOG_FILE) and os.path.getsize(LOG_FILE) > 0:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            shutil.move(LOG_FILE, os.path.join(previous_sessions_dir, f"log_{timestamp}.txt"))

        with open(LOG_FILE, "w", encoding="utf-8") as file:
            session_start = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            file.write(f"Recipe World Map Log - Session Started: {session_start}\n")
            file.write("=" * 60 + "\n")
            file.write("Previous sessions are archived in: assets/logs/previous_sessions/\n")
            file.write("=" * 60 + "\n\n")

    except PermissionError:
        print(f"Permission denied when accessing {LOG_FILE}. Could not setup logging.")
    except OSError as e:
        print(f"Error setting up logging: {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# CALLBACK ERROR LOGGING WRAPPER
# ═══════════════════════════════════════════════════════════════════════════════

def logged_callback(func):
    """
    Decorator to wrap Streamlit callbacks with error logging.

    This ensures that any exceptions in callbacks are logged to the file
    before Streamlit catches and displays them in the UI.

    Usage:
        @logged_callback
        def on_button_click():
            # Your callback code here
            pass
    """
    import functools
    import traceback

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            log(f"ERROR in callback {func.__name__}: {type(e).__name__}: {e}")
            log(traceback.format_exc())
            # Re-raise so Streamlit still shows the error in UI
            raise

    return wrapper
