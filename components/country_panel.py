"""
Side panel with the last opened recipe and the focused country.
"""

import streamlit as st

from utils.common import logged_callback


def _country_heading(record):
    col_flag, col_name = st.columns([1, 4], vertical_alignment="center")
    with col_flag:
        st.markdown(f"<span style='font-size: 2.5rem;'>{record.flag_glyph}</span>", unsafe_allow_html=True)
    with col_name:
        st.markdown(f"### {record.display_name}")
        st.caption(f"{record.category_label} Cuisine")


def render_recipe_card(record):
    """
    Link back to the recipe that was last opened from the map, for browsers that
    block the new tab.
    """
    with st.container(border=True):
        _country_heading(record)
        st.markdown("**Recipe Available!**")
        st.write(record.content_title)
        st.link_button(":material/open_in_new: View Recipe", record.external_url,
                       type="primary", width="stretch")


def render_country_panel(controller, opened=None):
    """
    Show the last opened recipe and the focused country with its vote button.

    Args:
        controller (InteractionController): Session controller
        opened (CountryRecord): Record of the last recipe opened from the map, if any

    Nothing is rendered while no recipe was opened and no country is focused.
    """
    if opened is not None:
        render_recipe_card(opened)

    record = controller.selected
    if record is None:
        return

    @logged_callback
    def on_vote():
        controller.vote()

    with st.container(border=True):
        _country_heading(record)
        st.markdown("**Coming Soon!**")
        st.write("This recipe hasn't been created yet. Vote to help prioritize it!")
        col_label, col_count = st.columns([3, 1])
        with col_label:
            st.caption("Current votes:")
        with col_count:
            st.badge(str(controller.votes_for(record.code)), color="gray")
        st.button(":material/favorite: Vote for This Country",
                  key=f"vote_{record.code}",
                  on_click=on_vote,
                  width="stretch")
