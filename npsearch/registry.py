# npsearch/registry.py

import logging
from urllib.parse import quote

import requests

from npsearch.models import SearchHit
from npsearch.utils.errors import NetworkError

logger = logging.getLogger(__name__)

NPMS_SEARCH = "https://api.npms.io/v2/search"
# characters of the registry query grammar that must reach it unescaped
QUERY_SAFE = "+:,@/"


def search_url(query: str, api_url: str = NPMS_SEARCH) -> str:
    return f"{api_url}?q={quote(query, safe=QUERY_SAFE)}"


def search(query: str, api_url: str = NPMS_SEARCH, timeout=None) -> list[SearchHit]:
    """
    Run one search request and return the hits in the registry's ranking.
    Any transport, status or payload problem raises NetworkError.
    """
    url = search_url(query, api_url)
    logger.debug("GET %s", url)
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        data = r.json()
        if data.get("total") == 0:
            return []
        return [SearchHit.from_dict(item) for item in data["results"]]
    except requests.RequestException as e:
        raise NetworkError(f"Search request failed: {e}") from e
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.debug("Unexpected search payload from %s: %r", url, e)
        raise NetworkError(f"Search request failed: malformed response ({e})") from e
