"""
Website Scan Pipeline
Fetches a business website and discovers its social accounts and brand metadata
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional

import requests

from ...core.base_pipeline import BasePipeline, PipelineResult
from ...core.errors import InvalidRequestError, InvalidUrlError, NoPlatformsFoundError
from ...core.scan.discovery import discover, extract_business_name, is_valid_url, normalize_url
from ...core.scan.metadata import extract_metadata
from ...core.scan.models import DiscoveryResult
from .fetch import fetch_html

logger = logging.getLogger(__name__)


class WebsiteScanPipeline(BasePipeline):
    """
    URL -> HTML -> platform links + website metadata.

    The fetcher is injectable so tests and offline runs can hand in HTML
    without touching the network.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        fetcher: Optional[Callable[[str], str]] = None,
    ):
        super().__init__(config)
        self.timeout = config.get('fetch_timeout', 10.0)
        self.user_agent = config.get('user_agent')
        self._fetcher = fetcher
        self._session: Optional[requests.Session] = None

    def initialize(self) -> bool:
        if self._fetcher is None:
            self._session = requests.Session()
        self.is_initialized = True
        logger.info("Website scan pipeline initialized (timeout=%.0fs)", self.timeout)
        return True

    def validate_input(self, url: Any) -> None:
        if not isinstance(url, str) or not url.strip():
            raise InvalidRequestError("URL is required")
        if not is_valid_url(normalize_url(url)):
            raise InvalidUrlError("Invalid URL format")

    def process(self, url: str) -> PipelineResult:
        """
        Scan one website.

        Raises:
            InvalidRequestError / InvalidUrlError: bad input
            SiteUnreachableError / WebsiteFetchError: fetch failed
            NoPlatformsFoundError: the page links to no social account
        """
        if not self.is_initialized:
            raise RuntimeError("Pipeline not initialized. Call initialize() first.")

        self.validate_input(url)
        normalized = normalize_url(url)

        html = self._fetch(normalized)
        platforms = discover(html)
        if not platforms:
            logger.info("No social accounts found on %s", normalized)
            raise NoPlatformsFoundError("No social media accounts found")

        result = DiscoveryResult(
            url=normalized,
            business_name=extract_business_name(html, normalized),
            platforms=platforms,
            website_data=extract_metadata(html),
        )
        logger.info(
            "Scanned %s: %d platforms (%s)",
            normalized,
            len(platforms),
            ", ".join(p.platform.value for p in platforms),
        )

        return PipelineResult(
            pipeline_name="WebsiteScan",
            timestamp=datetime.now(),
            data={'discovery': result},
            warnings=[],
            metadata={'html_length': len(html)},
        )

    def _fetch(self, url: str) -> str:
        if self._fetcher is not None:
            return self._fetcher(url)
        return fetch_html(url, timeout=self.timeout, user_agent=self.user_agent, session=self._session)

    def cleanup(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
        self.is_initialized = False
