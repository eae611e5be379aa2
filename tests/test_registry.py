"""
Tests for the search request: URL construction, response parsing, failures.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from npsearch import registry
from npsearch.utils.errors import NetworkError


def _response(payload=None, status_error=None, json_error=None):
    resp = MagicMock()
    resp.raise_for_status.side_effect = status_error
    if json_error:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class TestSearchUrl:
    def test_grammar_characters_kept(self):
        assert registry.search_url("react+author:gaearon+keywords:a,b") == (
            "https://api.npms.io/v2/search?q=react+author:gaearon+keywords:a,b"
        )

    def test_scoped_names_kept(self):
        assert registry.search_url("core+scope:@babel/x", "http://localhost/s") == (
            "http://localhost/s?q=core+scope:@babel/x"
        )

    def test_other_characters_escaped(self):
        assert registry.search_url("a b&c") == "https://api.npms.io/v2/search?q=a%20b%26c"


class TestSearch:
    def test_parses_hits_in_order(self, search_payload):
        with patch("npsearch.registry.requests.get", return_value=_response(search_payload)) as get:
            hits = registry.search("lodash")
        get.assert_called_once_with("https://api.npms.io/v2/search?q=lodash", timeout=None)
        assert [h.package.name for h in hits] == ["lodash", "lodash-es"]
        assert hits[0].package.links.homepage == "https://lodash.com/"
        assert hits[1].package.links.repository is None
        assert hits[0].score.quality == 0.75
        assert hits[0].score.final == 0.25

    def test_timeout_passed_through(self, search_payload):
        with patch("npsearch.registry.requests.get", return_value=_response(search_payload)) as get:
            registry.search("lodash", "http://localhost/s", timeout=5)
        get.assert_called_once_with("http://localhost/s?q=lodash", timeout=5)

    def test_no_results(self, empty_payload):
        with patch("npsearch.registry.requests.get", return_value=_response(empty_payload)):
            assert registry.search("zzzzzz") == []

    def test_connection_error(self):
        with patch(
            "npsearch.registry.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with pytest.raises(NetworkError, match="connection refused"):
                registry.search("lodash")

    def test_http_error(self):
        resp = _response(status_error=requests.HTTPError("503 Server Error"))
        with patch("npsearch.registry.requests.get", return_value=resp):
            with pytest.raises(NetworkError, match="503"):
                registry.search("lodash")

    def test_invalid_json(self):
        resp = _response(json_error=ValueError("Expecting value"))
        with patch("npsearch.registry.requests.get", return_value=resp):
            with pytest.raises(NetworkError, match="malformed"):
                registry.search("lodash")

    def test_missing_results(self):
        with patch("npsearch.registry.requests.get", return_value=_response({"total": 3})):
            with pytest.raises(NetworkError):
                registry.search("lodash")

    def test_result_without_package(self):
        payload = {"total": 1, "results": [{"score": {"final": 1}}]}
        with patch("npsearch.registry.requests.get", return_value=_response(payload)):
            with pytest.raises(NetworkError):
                registry.search("lodash")

    def test_null_scores_keep_the_results(self, search_payload):
        search_payload["results"][1]["score"]["detail"]["quality"] = None
        with patch("npsearch.registry.requests.get", return_value=_response(search_payload)):
            hits = registry.search("lodash")
        assert len(hits) == 2
        assert hits[1].score.quality == 0.0
