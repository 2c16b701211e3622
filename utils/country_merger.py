"""
Join parsed blog posts with the country catalog.

A CountryRecord only exists for a country that is both in the catalog and has a post
following the title convention. Countries without a record are "coming soon".
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from assets.dicts.countries import countries_data
from utils.config import log
from utils.title_parser import parse_title


@dataclass(frozen=True)
class CountryRecord:
    code: str
    display_name: str
    has_content: bool
    flag_glyph: str
    category_label: str
    content_title: Optional[str] = None
    external_url: Optional[str] = None


def merge_posts(posts, catalog=None) -> List[CountryRecord]:
    """
    Build the list of known countries with a recipe.

    Args:
        posts (list[Post]): Posts in feed order
        catalog (dict): Country name -> {"code", "cuisine", "flag"}, defaults to countries_data

    Returns:
        list[CountryRecord]: One record per qualifying post, in feed order. Duplicate
        countries are kept; use index_by_code for lookups.
    """
    if catalog is None:
        catalog = countries_data

    records = []
    for post in posts:
        parsed = parse_title(post.title)
        if parsed is None:
            continue

        country_name, recipe_title = parsed
        meta = catalog.get(country_name)
        if meta is None:
            log(f"Skipping post for unknown country: {country_name!r}")
            continue
        if not post.link:
            log(f"Skipping post without link: {post.title!r}")
            continue

        records.append(CountryRecord(
            code=meta["code"],
            display_name=country_name,
            has_content=True,
            flag_glyph=meta["flag"],
            category_label=meta["cuisine"],
            content_title=recipe_title,
            external_url=post.link,
        ))

    return records


def index_by_code(records) -> Dict[str, CountryRecord]:
    """Code -> record lookup. The first record in feed order wins for duplicate codes."""
    index = {}
    for record in records:
        index.setdefault(record.code, record)
    return index


def completed_count(records):
    """Number of distinct countries with a recipe; duplicate posts for one country count once."""
    return len({record.code for record in records if record.has_content})
