"""
World map rendering helpers.

Color and click lookups against the merged country records, and construction of the
folium map with one shape per world country.
"""

import folium as fl
import requests
import streamlit as st
from streamlit_folium import st_folium

from utils.config import (
    GEOJSON_URL,
    COLOR_HIGHLIGHTED,
    COLOR_COMING_SOON,
    COLOR_STROKE,
    COLOR_SEA,
    log,
)

# Natural Earth uses -99 when ISO_A2 is not assigned (France and Norway in the 110m file)
MISSING_ISO = "-99"


def feature_code(properties):
    """
    Get the ISO alpha-2 code of a world geometry feature.

    Args:
        properties (dict): GeoJSON feature properties

    Returns:
        str | None: Two-letter code, or None if the feature has none
    """
    if not isinstance(properties, dict):
        return None
    for key in ("ISO_A2", "ISO_A2_EH"):
        code = properties.get(key)
        if isinstance(code, str) and code and code != MISSING_ISO:
            return code.upper()
    return None


def resolve_click(code, index):
    """Record for a clicked geometry, or None for a country without a merged record."""
    if code is None:
        return None
    return index.get(code)


def resolve_color(code, index):
    """
    Fill color for a geometry code. Every input resolves to a color.
    """
    record = resolve_click(code, index)
    if record is None:
        return COLOR_COMING_SOON
    return COLOR_HIGHLIGHTED if record.has_content else COLOR_COMING_SOON


def style_for(index):
    """Build the folium style_function for the country layer."""

    def style_function(feature):
        code = feature_code(feature.get("properties"))
        return {
            "fillColor": resolve_color(code, index),
            "fillOpacity": 1.0,
            "color": COLOR_STROKE,
            "weight": 0.5,
        }

    return style_function


@st.cache_data(show_spinner=False)
def load_world_geojson(url=GEOJSON_URL):
    """
    Download the world country shapes. Cached for the lifetime of the server process.

    Raises requests.exceptions.RequestException or ValueError when the geometry cannot
    be loaded, so that a failed download is not cached.
    """
    log(f"Downloading world geometry from: {url}")
    response = requests.get(url, timeout=30)
    response.raise_for_status()
    geojson = response.json()
    if not isinstance(geojson, dict):
        raise ValueError(f"World geometry is a {type(geojson).__name__}, expected a FeatureCollection object")
    log(f"Loaded {len(geojson.get('features', []))} country shapes")
    return geojson


def build_map(geojson, index):
    """
    Create the folium world map with every country colored by recipe status.

    Args:
        geojson (dict): World country FeatureCollection
        index (dict): Country code -> CountryRecord

    Returns:
        folium.Map
    """
    m = fl.Map(
        location=[20, 0],
        zoom_start=2,
        min_zoom=1,
        tiles=None,
        control_scale=False,
        world_copy_jump=True,
    )

    # no tile layer, so color the sea behind the shapes
    m.get_root().header.add_child(fl.Element(
        f"<style>.leaflet-container {{ background: {COLOR_SEA}; }}</style>"))

    fl.GeoJson(
        geojson,
        name="countries",
        style_function=style_for(index),
        highlight_function=lambda feature: {"weight": 1.5, "fillOpacity": 0.85},
        tooltip=fl.GeoJsonTooltip(fields=["NAME"], labels=False),
    ).add_to(m)

    return m


# due to a bug there is extra whitespace below the map, so we use a custom class to reduce the height
# https://discuss.streamlit.io/t/folium-map-white-space-under-the-map-on-the-first-rendering/84363
def render_map(m, height, key="world_map_0"):
    """
    Draw the map and return the properties of the last clicked country, if any.
    """
    st.markdown(f"""
    <style>
    iframe[title="streamlit_folium.st_folium"] {{
        height: {height}px;
    }}
    </style>
    """, unsafe_allow_html=True)
    map_data = st_folium(m, height=height, use_container_width=True,
                         returned_objects=["last_active_drawing"], key=key)

    if not map_data or not map_data.get("last_active_drawing"):
        return None
    return map_data["last_active_drawing"].get("properties")
