"""
Blog post feed client.

Fetches the post list from the WordPress REST API and normalises every entry into a
Post. A failed fetch never raises: it degrades to an empty post list so the map shows
every country as coming soon.
"""

import html
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

import requests

from utils.config import FEED_URL, log


@dataclass(frozen=True)
class Post:
    title: str
    link: str


def normalize_post(raw):
    """
    Convert one raw WordPress post object into a Post.

    Malformed entries become a Post with empty fields so that they fail title
    parsing downstream instead of raising here.
    """
    if not isinstance(raw, dict):
        return Post(title="", link="")

    title = raw.get("title")
    if isinstance(title, dict):
        title = title.get("rendered")
    if not isinstance(title, str):
        title = ""

    link = raw.get("link")
    if not isinstance(link, str):
        link = ""

    # rendered titles carry HTML entities (&#8217;, &amp;)
    return Post(title=html.unescape(title), link=link.strip())


def fetch_posts(url=FEED_URL, timeout=None):
    """
    Download the post list from the blog.

    Args:
        url (str): Post list endpoint
        timeout (float | None): Request timeout in seconds, None waits indefinitely

    Returns:
        list[Post]: Posts in feed order, or an empty list if the fetch failed
    """
    log(f"EXECUTED: fetch_posts({url})")

    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        log(f"Response status: {response.status_code}")

        if response.status_code != 200:
            log(f"Failed to download posts. Status code: {response.status_code}")
            return []

        payload = response.json()

    except requests.exceptions.RequestException as e:
        log(f"Could not fetch posts: {e}")
        return []
    except ValueError as e:
        log(f"Post feed returned invalid JSON: {e}")
        return []

    if not isinstance(payload, list):
        log(f"Post feed returned {type(payload).__name__} instead of a list")
        return []

    posts = [normalize_post(raw) for raw in payload]
    log(f"Fetched {len(posts)} posts")
    return posts


def start_background_fetch(url=FEED_URL, timeout=None) -> Future:
    """
    Run fetch_posts in a worker thread so the page can render before the feed arrives.

    Every call gets its own single-worker executor, so a fetch stuck on a slow
    endpoint never queues the fetches of other sessions behind it. The worker
    thread exits once its fetch has finished.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="feed-fetch")
    try:
        return executor.submit(fetch_posts, url, timeout)
    finally:
        executor.shutdown(wait=False)


def posts_from_future(future):
    """
    Posts of a finished fetch, or an empty list while it is still running.
    """
    if future is None or not future.done():
        return []
    try:
        return future.result()
    except Exception as e:
        log(f"Background post fetch failed: {type(e).__name__}: {e}")
        return []
