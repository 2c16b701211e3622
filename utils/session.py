"""
Per-session state of the world map page.

Everything lives in the "world_map" section of st.session_state:
- feed_future:   background post fetch started at session start
- records:       merged CountryRecords, computed once the fetch has finished
- controller:    InteractionController with the selection and the vote ledger
- pending_url:   recipe URL to open in a new tab on the next render
- last_opened:   record of the last recipe that was opened from the map
- map_key:       generation of the map widget, bumped after every handled click
"""

from utils.common import get_session_var, set_session_var, load_app_settings
from utils.config import log
from utils.country_merger import merge_posts
from utils.feed_client import start_background_fetch, posts_from_future
from utils.interaction import InteractionController, NAVIGATED, NO_ACTION
from utils.map_view import feature_code, resolve_click

SECTION = "world_map"


def start_feed():
    """Kick off the post fetch and forget any previously merged records."""
    feed_settings = load_app_settings()["feed"]
    future = start_background_fetch(feed_settings["url"], feed_settings["timeout_seconds"])
    set_session_var(SECTION, "feed_future", future)
    set_session_var(SECTION, "records", None)
    log("Started background post fetch")


def feed_pending():
    future = get_session_var(SECTION, "feed_future")
    return future is not None and not future.done()


def current_records():
    """
    Merged country records for this session.

    Returns an empty list while the fetch is still running, so the map renders every
    country as coming soon instead of waiting.
    """
    records = get_session_var(SECTION, "records")
    if records is not None:
        return records

    future = get_session_var(SECTION, "feed_future")
    if future is None or not future.done():
        return []

    records = merge_posts(posts_from_future(future))
    set_session_var(SECTION, "records", records)
    log(f"Merged {len(records)} country records")
    return records


def queue_navigation(url):
    set_session_var(SECTION, "pending_url", url)


def pop_pending_url():
    url = get_session_var(SECTION, "pending_url")
    set_session_var(SECTION, "pending_url", None)
    return url


def get_controller():
    controller = get_session_var(SECTION, "controller")
    if controller is None:
        controller = InteractionController(open_url=queue_navigation)
        set_session_var(SECTION, "controller", controller)
    return controller


def map_widget_key():
    return f"world_map_{get_session_var(SECTION, 'map_key', 0)}"


def handle_map_click(clicked, index, controller):
    """
    Act on one click on the map.

    st_folium keeps reporting the last clicked feature until the widget is replaced,
    so the widget key is bumped after every click. The next render starts from a
    fresh widget, and a second click on the same country is a new click.

    Args:
        clicked (dict): Properties of the clicked feature
        index (dict): Country records by code
        controller (InteractionController): Session controller

    Returns:
        str: Outcome of the click (NO_ACTION, NAVIGATED or FOCUSED)
    """
    set_session_var(SECTION, "map_key", get_session_var(SECTION, "map_key", 0) + 1)

    record = resolve_click(feature_code(clicked), index)
    outcome = controller.handle_click(record)
    if outcome == NAVIGATED:
        set_session_var(SECTION, "last_opened", record)
    elif outcome == NO_ACTION:
        log(f"No recipe record for {clicked.get('NAME')}")
    return outcome
