"""
World map page

Every country is colored by whether the blog has a recipe for it. Clicking a country
with a recipe opens the blog post in a new tab; clicking a known country without one
focuses it in the side panel, where visitors can vote for it.

The post feed is fetched in the background. Until it arrives the map is drawn with
every country as coming soon, and a small fragment polls the fetch and reruns the
page once it has finished.
"""

import pandas as pd
import requests
import streamlit as st

from assets.dicts.countries import countries_data
from components import (
    page_header,
    map_legend,
    render_country_panel,
    open_in_new_tab,
    print_widget_label,
    warning_box,
)
from utils.common import load_app_settings, get_session_var
from utils.config import log
from utils.country_merger import index_by_code, completed_count
from utils.map_view import load_world_geojson, build_map, render_map
from utils.session import (
    SECTION,
    current_records,
    feed_pending,
    get_controller,
    handle_map_click,
    map_widget_key,
    pop_pending_url,
)

st.set_page_config(layout="wide")


@st.fragment(run_every=1)
def feed_status():
    """Poll the background fetch without holding up the page, rerun once it has finished."""
    if not feed_pending():
        st.rerun()
    st.caption(":material/hourglass_empty: Loading recipes from the blog...")


map_settings = load_app_settings()["map"]
records = current_records()
index = index_by_code(records)
controller = get_controller()

page_header(completed_count(records))

col_map, col_panel = st.columns([2, 1], gap="large")

with col_map:
    st.subheader(":material/location_on: Interactive World Map - All 195 Countries", divider="grey")

    try:
        geojson = load_world_geojson(map_settings["geojson_url"])
    except (requests.exceptions.RequestException, ValueError) as e:
        log(f"Could not load world geometry: {e}")
        geojson = None

    if geojson is None:
        warning_box("The world map could not be loaded. Please try again later.",
                    title="Map unavailable")
    else:
        clicked = render_map(build_map(geojson, index), height=map_settings["height"], key=map_widget_key())
        if clicked:
            handle_map_click(clicked, index, controller)
            # redraw with a fresh map widget so the same country can be clicked again
            st.rerun()

    map_legend()
    if feed_pending():
        feed_status()

with col_panel:
    render_country_panel(controller, get_session_var(SECTION, "last_opened"))

pending_url = pop_pending_url()
if pending_url:
    open_in_new_tab(pending_url)

# sidebar leaderboard of this session's votes
most_wanted = controller.most_wanted()
if most_wanted:
    names = {meta["code"]: f"{meta['flag']} {name}" for name, meta in countries_data.items()}
    print_widget_label("Most wanted", icon="favorite", sidebar=True)
    st.sidebar.dataframe(
        pd.DataFrame([{"Country": names.get(code, code), "Votes": votes} for code, votes in most_wanted]),
        hide_index=True,
        width="stretch",
    )
