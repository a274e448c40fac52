from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

import requests

from anichin.config import SETTINGS, Settings
from anichin.errors import EmptyResponse, UpstreamFetchFailed
from anichin.models import HomePage, ListingItem, SeriesDetail, StreamResult
from anichin.parser import parse_detail, parse_genres, parse_listing, parse_stream
from anichin.slugs import episode_url, series_url
from anichin.text import clean

logger = logging.getLogger(__name__)

HOME_ONGOING_LIMIT = 12
HOME_TRENDING_LIMIT = 8
HOME_COMPLETE_LIMIT = 12


class AnichinScraper:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or SETTINGS
        self.base_url = self.settings.base_url
        self.session = requests.Session()
        self.session.headers.update(self.settings.headers)

    def _get_html(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, allow_redirects=True, timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            logger.warning("Error fetching %s: %s", url, e)
            raise UpstreamFetchFailed(f"Request failed: {e}") from e

        if not response.ok:
            logger.warning("Upstream returned %s for %s", response.status_code, url)
            raise UpstreamFetchFailed(f"Request failed: {response.status_code} {response.reason}")

        page = response.text
        if not page or not page.strip():
            raise EmptyResponse()
        return page

    def get_ongoing(self) -> List[ListingItem]:
        page = self._get_html(f"{self.base_url}/ongoing/")
        return parse_listing(page, "Ongoing", False, self.base_url)

    def get_completed(self) -> List[ListingItem]:
        page = self._get_html(f"{self.base_url}/completed/")
        return parse_listing(page, "Completed", True, self.base_url)

    def search(self, query: str) -> List[ListingItem]:
        query = clean(query)
        if not query:
            return []
        page = self._get_html(f"{self.base_url}/?s={quote(query, safe='')}")
        return parse_listing(page, "", False, self.base_url)

    def get_home(self) -> HomePage:
        ongoing = self.get_ongoing()
        completed = self.get_completed()
        return HomePage(
            ongoing=ongoing[:HOME_ONGOING_LIMIT],
            trending=ongoing[:HOME_TRENDING_LIMIT],
            complete=completed[:HOME_COMPLETE_LIMIT],
        )

    def get_detail(self, slug_or_url: str) -> SeriesDetail:
        url = series_url(slug_or_url, self.base_url)
        return parse_detail(self._get_html(url), url, self.base_url)

    def get_stream(self, slug_or_url: str) -> StreamResult:
        url = episode_url(slug_or_url, self.base_url)
        return parse_stream(self._get_html(url), url, slug_or_url, self.base_url)

    def get_genres(self) -> List[str]:
        return parse_genres(self._get_html(f"{self.base_url}/"))
