"""
Recipe World Map Settings

Configuration interface for the app including:
- Post feed and world geometry endpoints
- Reloading the post feed for this session
- Merged country records and session state for debugging
"""

import pandas as pd
import streamlit as st

from components import print_widget_label
from utils.common import load_app_settings, save_app_settings, logged_callback
from utils.session import start_feed, current_records, feed_pending

st.set_page_config(layout="centered")


# FEED
app_settings = load_app_settings()

st.subheader(":material/rss_feed: Blog feed", divider="grey")
st.caption(
    "Posts are read from the blog once per session. Titles must follow the "
    "'Country | Recipe title' convention and the country must be listed in the catalog "
    "to show up on the map."
)

with st.form("feed_settings_form"):
    print_widget_label("Post feed URL")
    feed_url = st.text_input("Post feed URL", value=app_settings["feed"]["url"], label_visibility="collapsed")
    print_widget_label("World geometry URL")
    geojson_url = st.text_input("World geometry URL", value=app_settings["map"]["geojson_url"],
                                label_visibility="collapsed")
    map_height = st.slider("Map height", min_value=300, max_value=1000,
                           value=int(app_settings["map"]["height"]), step=50)

    submitted = st.form_submit_button("Save and reload feed", type="primary", width="stretch")

    if submitted:
        app_settings["feed"]["url"] = feed_url.strip()
        app_settings["map"]["geojson_url"] = geojson_url.strip()
        app_settings["map"]["height"] = int(map_height)
        save_app_settings(app_settings)
        start_feed()
        st.rerun()


@logged_callback
def on_reload_feed():
    start_feed()


st.button(":material/refresh: Reload feed", width="stretch", on_click=on_reload_feed,
          disabled=feed_pending())


# RECORDS
st.subheader(":material/public: Countries on the map", divider="grey")
records = current_records()
if feed_pending():
    st.caption("The feed is still loading.")
elif not records:
    st.caption("No recipes found in the feed.")
else:
    st.dataframe(
        pd.DataFrame([{
            "Code": record.code,
            "Country": f"{record.flag_glyph} {record.display_name}",
            "Cuisine": record.category_label,
            "Recipe": record.content_title,
            "Link": record.external_url,
        } for record in records]),
        column_config={"Link": st.column_config.LinkColumn("Link")},
        hide_index=True,
        width="stretch",
    )

with st.expander("st.session_state", expanded=False):
    st.write(st.session_state)
