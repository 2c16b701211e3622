"""
Open external links from a Streamlit rerun.

Streamlit scripts run on the server, so a new browser tab has to be opened by a
script injected into the page. The injected iframe is hidden so no extra whitespace
appears in the layout.
"""

from __future__ import annotations

import json
import streamlit.components.v1 as components


def _hidden_component(html: str) -> None:
    """Render hidden HTML (no visual footprint)."""
    components.html(
        f"""
        <div style="margin:0;padding:0;">
        <script>
        const frame = window.frameElement;
        if (frame) {{
            frame.style.position = "absolute";
            frame.style.width = "0px";
            frame.style.height = "0px";
            frame.style.border = "0";
            frame.style.opacity = "0";
            frame.style.pointerEvents = "none";
        }}
        </script>
        {html}
        </div>
        """,
        height=0,
        width=0,
    )


def open_in_new_tab(url: str) -> None:
    """Open url in a new browser tab of the viewer."""
    js = f"""
    <script>
    window.parent.open({json.dumps(url)}, "_blank", "noopener");
    </script>
    """
    _hidden_component(js)
