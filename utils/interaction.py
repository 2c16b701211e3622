"""
Selection and voting state for the world map.

The controller is created once per browser session and kept in st.session_state, so
votes and the focused country survive reruns but are discarded when the session ends.
"""

import webbrowser

from utils.config import log

# click outcomes
NO_ACTION = "no_action"
NAVIGATED = "navigated"
FOCUSED = "focused"


class InteractionController:
    """
    Owns the focused country and the session's vote ledger.

    States:
        Idle              -> selected is None
        Focused(record)   -> selected is a record without content

    There is no transition back to Idle; selecting another country replaces the focus.
    """

    def __init__(self, open_url=None):
        self.selected = None
        self.votes = {}
        self.open_url = open_url or (lambda url: webbrowser.open_new_tab(url))

    @property
    def is_idle(self):
        return self.selected is None

    def handle_click(self, record):
        """
        React to a click on a map shape.

        Args:
            record (CountryRecord | None): Record the clicked shape resolved to

        Returns:
            str: NO_ACTION, NAVIGATED or FOCUSED
        """
        if record is None:
            return NO_ACTION

        if record.has_content and record.external_url:
            log(f"Opening recipe for {record.display_name}: {record.external_url}")
            self.open_url(record.external_url)
            return NAVIGATED

        self.selected = record
        return FOCUSED

    def vote(self):
        """
        Add one vote for the focused country.

        Returns:
            int | None: New vote count, or None when no country is focused
        """
        if self.selected is None:
            return None
        code = self.selected.code
        self.votes[code] = self.votes.get(code, 0) + 1
        log(f"Vote for {code}: {self.votes[code]}")
        return self.votes[code]

    def votes_for(self, code):
        return self.votes.get(code, 0)

    def most_wanted(self):
        """(code, votes) pairs, most votes first, ties by code."""
        return sorted(self.votes.items(), key=lambda item: (-item[1], item[0]))
