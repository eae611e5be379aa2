"""
Shared fixtures: a realistic search response and the records parsed from it.
Scores use binary-exact fractions so rendered percentages are predictable.
"""

import pytest

from npsearch.models import PackageLinks, PackageRecord, SearchHit
from npsearch.utils.config import DEFAULTS


@pytest.fixture
def search_payload():
    return {
        "total": 2,
        "results": [
            {
                "package": {
                    "name": "lodash",
                    "version": "4.17.21",
                    "description": "Lodash modular utilities.",
                    "links": {
                        "npm": "https://www.npmjs.com/package/lodash",
                        "homepage": "https://lodash.com/",
                        "repository": "https://github.com/lodash/lodash",
                        "bugs": "https://github.com/lodash/lodash/issues",
                    },
                },
                "score": {
                    "final": 0.25,
                    "detail": {"quality": 0.75, "popularity": 1.0, "maintenance": 0.5},
                },
                "searchScore": 100000.43,
            },
            {
                "package": {
                    "name": "lodash-es",
                    "version": "4.17.21",
                    "description": "Lodash exported as ES modules.",
                    "links": {"npm": "https://www.npmjs.com/package/lodash-es"},
                },
                "score": {
                    "final": 0.5,
                    "detail": {"quality": 0.5, "popularity": 0.25, "maintenance": 0.0625},
                },
                "searchScore": 0.02,
            },
        ],
    }


@pytest.fixture
def empty_payload():
    return {"total": 0, "results": []}


@pytest.fixture
def hits(search_payload):
    return [SearchHit.from_dict(item) for item in search_payload["results"]]


@pytest.fixture
def bare_package():
    """A package with only its registry page link."""
    return PackageRecord(
        name="left-pad",
        version="1.3.0",
        description="String left pad",
        links=PackageLinks(npm="https://www.npmjs.com/package/left-pad"),
    )


@pytest.fixture
def config():
    return dict(DEFAULTS, npm="npm")
