"""
Tests for the world map color and click lookups.
"""

import unittest
from unittest.mock import patch, MagicMock

import folium
import requests

from utils.config import COLOR_HIGHLIGHTED, COLOR_COMING_SOON, COLOR_STROKE
from utils.country_merger import CountryRecord
from utils.map_view import feature_code, resolve_color, resolve_click, style_for, build_map, load_world_geojson

FRANCE = CountryRecord(code="FR", display_name="France", has_content=True, flag_glyph="🇫🇷",
                       category_label="European", content_title="Ratatouille",
                       external_url="https://blog.example/fr")
SAMOA_PLANNED = CountryRecord(code="WS", display_name="Samoa", has_content=False, flag_glyph="🇼🇸",
                              category_label="Pacific")
INDEX = {"FR": FRANCE, "WS": SAMOA_PLANNED}


def square_feature(name, iso_a2, iso_a2_eh=None):
    return {
        "type": "Feature",
        "properties": {"NAME": name, "ISO_A2": iso_a2, "ISO_A2_EH": iso_a2_eh or iso_a2},
        "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]]},
    }


class TestFeatureCode(unittest.TestCase):
    """Test cases for reading the ISO code of a geometry."""

    def test_iso_a2(self):
        self.assertEqual(feature_code({"ISO_A2": "JM"}), "JM")

    def test_missing_iso_falls_back(self):
        self.assertEqual(feature_code({"ISO_A2": "-99", "ISO_A2_EH": "FR"}), "FR")

    def test_no_code(self):
        self.assertIsNone(feature_code({"ISO_A2": "-99", "ISO_A2_EH": "-99"}))
        self.assertIsNone(feature_code({}))
        self.assertIsNone(feature_code(None))


class TestResolveColor(unittest.TestCase):
    """Test cases for the color lookup."""

    def test_content_is_highlighted(self):
        self.assertEqual(resolve_color("FR", INDEX), COLOR_HIGHLIGHTED)

    def test_unknown_is_coming_soon(self):
        self.assertEqual(resolve_color("BR", INDEX), COLOR_COMING_SOON)

    def test_record_without_content_renders_like_unknown(self):
        self.assertEqual(resolve_color("WS", INDEX), resolve_color("BR", INDEX))

    def test_lookup_is_total(self):
        for code in ("FR", "WS", "JM", "", "-99", None, "fr"):
            self.assertIn(resolve_color(code, INDEX), (COLOR_HIGHLIGHTED, COLOR_COMING_SOON))
            self.assertIn(resolve_color(code, {}), (COLOR_COMING_SOON,))

    def test_resolve_click(self):
        self.assertIs(resolve_click("FR", INDEX), FRANCE)
        self.assertIsNone(resolve_click("BR", INDEX))
        self.assertIsNone(resolve_click(None, INDEX))


class TestBuildMap(unittest.TestCase):
    """Test cases for the folium map."""

    def setUp(self):
        self.geojson = {
            "type": "FeatureCollection",
            "features": [square_feature("France", "-99", "FR"), square_feature("Brazil", "BR")],
        }

    def test_style_function(self):
        style = style_for(INDEX)
        france, brazil = self.geojson["features"]
        self.assertEqual(style(france)["fillColor"], COLOR_HIGHLIGHTED)
        self.assertEqual(style(brazil)["fillColor"], COLOR_COMING_SOON)
        self.assertEqual(style(brazil)["color"], COLOR_STROKE)
        self.assertEqual(style(brazil)["weight"], 0.5)

    def test_build_map(self):
        m = build_map(self.geojson, INDEX)
        self.assertIsInstance(m, folium.Map)
        html = m.get_root().render()
        self.assertIn(COLOR_HIGHLIGHTED, html)
        self.assertIn("leaflet-container", html)


@patch("utils.map_view.log")
@patch("utils.map_view.requests.get")
class TestLoadWorldGeojson(unittest.TestCase):
    """Test cases for downloading the world shapes."""

    def setUp(self):
        load_world_geojson.clear()
        self.addCleanup(load_world_geojson.clear)

    def test_feature_collection(self, mock_get, _log):
        collection = {"type": "FeatureCollection", "features": [square_feature("Brazil", "BR")]}
        mock_get.return_value = MagicMock(**{"json.return_value": collection})
        self.assertEqual(load_world_geojson("https://geo.example/world.geojson"), collection)

    def test_non_object_payload_is_rejected(self, mock_get, _log):
        mock_get.return_value = MagicMock(**{"json.return_value": [square_feature("Brazil", "BR")]})
        with self.assertRaises(ValueError):
            load_world_geojson("https://geo.example/list.geojson")

    def test_http_error_is_raised(self, mock_get, _log):
        mock_get.return_value = MagicMock(
            **{"raise_for_status.side_effect": requests.exceptions.HTTPError("404 Not Found")})
        with self.assertRaises(requests.exceptions.RequestException):
            load_world_geojson("https://geo.example/missing.geojson")


if __name__ == '__main__':
    unittest.main()
