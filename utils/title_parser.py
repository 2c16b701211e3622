"""
Post title parsing.

Blog posts follow the title convention "<emoji> <Country> | <Recipe title>".
"""

import re

# Decorative prefix: any leading run of characters that are neither word characters nor whitespace
EMOJI_PREFIX = re.compile(r"^[^\w\s]*")

DELIMITER = "|"


def parse_title(title):
    """
    Split a raw post title into a (country name, recipe title) pair.

    Args:
        title (str): Post title, e.g. "🌴 Jamaica | Jerk Jackfruit Tacos"

    Returns:
        tuple | None: ("Jamaica", "Jerk Jackfruit Tacos"), or None when the title
        does not contain exactly one delimiter.
    """
    if not isinstance(title, str):
        return None

    parts = EMOJI_PREFIX.sub("", title, count=1).split(DELIMITER)
    if len(parts) != 2:
        return None

    country_name, recipe_title = parts
    return country_name.strip(), recipe_title.strip()
