"""
Tests for the blog post feed client.
"""

import threading
import unittest
from concurrent.futures import Future
from unittest.mock import patch, MagicMock

import requests

from utils.feed_client import Post, normalize_post, fetch_posts, start_background_fetch, posts_from_future


def make_response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestNormalizePost(unittest.TestCase):
    """Test cases for the Post schema at the fetch boundary."""

    def test_wordpress_post(self):
        raw = {"title": {"rendered": "🌴 Jamaica | Jerk Jackfruit Tacos"}, "link": "https://blog.example/jerk"}
        self.assertEqual(normalize_post(raw), Post("🌴 Jamaica | Jerk Jackfruit Tacos", "https://blog.example/jerk"))

    def test_html_entities_are_unescaped(self):
        raw = {"title": {"rendered": "Trinidad and Tobago | Doubles &amp; Chutney"}, "link": "x"}
        self.assertEqual(normalize_post(raw).title, "Trinidad and Tobago | Doubles & Chutney")

    def test_plain_string_title(self):
        self.assertEqual(normalize_post({"title": "France | Ratatouille", "link": "x"}).title,
                         "France | Ratatouille")

    def test_malformed_entries_become_empty_posts(self):
        for raw in (None, "post", 3, [], {}, {"title": {"rendered": 5}, "link": None}, {"title": None}):
            self.assertEqual(normalize_post(raw), Post("", ""))


@patch("utils.feed_client.log")
class TestFetchPosts(unittest.TestCase):
    """Test cases for fetch_posts."""

    @patch("utils.feed_client.requests.get")
    def test_returns_posts_in_feed_order(self, mock_get, _log):
        mock_get.return_value = make_response(payload=[
            {"title": {"rendered": "France | Ratatouille"}, "link": "https://blog.example/fr"},
            {"title": {"rendered": "Brazil | Feijoada"}, "link": "https://blog.example/br"},
        ])

        posts = fetch_posts("https://feed.example/posts")

        self.assertEqual([p.title for p in posts], ["France | Ratatouille", "Brazil | Feijoada"])
        mock_get.assert_called_once()
        self.assertEqual(mock_get.call_args.args[0], "https://feed.example/posts")
        self.assertIsNone(mock_get.call_args.kwargs["timeout"])

    @patch("utils.feed_client.requests.get")
    def test_network_error_degrades_to_empty(self, mock_get, _log):
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")
        self.assertEqual(fetch_posts(), [])

    @patch("utils.feed_client.requests.get")
    def test_bad_status_degrades_to_empty(self, mock_get, _log):
        mock_get.return_value = make_response(status_code=503)
        self.assertEqual(fetch_posts(), [])

    @patch("utils.feed_client.requests.get")
    def test_invalid_json_degrades_to_empty(self, mock_get, _log):
        mock_get.return_value = make_response(json_error=ValueError("Expecting value"))
        self.assertEqual(fetch_posts(), [])

    @patch("utils.feed_client.requests.get")
    def test_non_list_payload_degrades_to_empty(self, mock_get, _log):
        mock_get.return_value = make_response(payload={"code": "rest_no_route"})
        self.assertEqual(fetch_posts(), [])


@patch("utils.feed_client.log")
class TestBackgroundFetch(unittest.TestCase):
    """Test cases for the background fetch helpers."""

    @patch("utils.feed_client.fetch_posts")
    def test_fetch_runs_in_worker(self, mock_fetch, _log):
        mock_fetch.return_value = [Post("France | Ratatouille", "x")]
        future = start_background_fetch("https://feed.example/posts", 5)
        self.assertEqual(future.result(timeout=5), [Post("France | Ratatouille", "x")])
        mock_fetch.assert_called_once_with("https://feed.example/posts", 5)

    @patch("utils.feed_client.fetch_posts")
    def test_stuck_fetches_do_not_hold_up_other_sessions(self, mock_fetch, _log):
        release = threading.Event()
        self.addCleanup(release.set)

        def fetch(url, timeout):
            if url.endswith("/slow"):
                release.wait(timeout=10)
            return [Post(url, url)]

        mock_fetch.side_effect = fetch
        stuck = [start_background_fetch("https://feed.example/slow", None) for _ in range(2)]
        third = start_background_fetch("https://feed.example/fast", None)

        self.assertEqual(third.result(timeout=2), [Post("https://feed.example/fast", "https://feed.example/fast")])
        self.assertFalse(any(future.done() for future in stuck))

        release.set()
        for future in stuck:
            future.result(timeout=5)

    def test_pending_future_yields_no_posts(self, _log):
        self.assertEqual(posts_from_future(Future()), [])
        self.assertEqual(posts_from_future(None), [])

    def test_failed_future_yields_no_posts(self, _log):
        future = Future()
        future.set_exception(RuntimeError("boom"))
        self.assertEqual(posts_from_future(future), [])

    def test_finished_future_yields_posts(self, _log):
        future = Future()
        future.set_result([Post("a", "b")])
        self.assertEqual(posts_from_future(future), [Post("a", "b")])


if __name__ == '__main__':
    unittest.main()
