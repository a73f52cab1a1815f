"""HTML fetching for website scans."""

import logging
from typing import Optional

import requests

from ...core.errors import SiteUnreachableError, WebsiteFetchError

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Couldn't reach that website. Is the URL correct?"


def fetch_html(
    url: str,
    timeout: float = 10.0,
    user_agent: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    GET the page and return its body as text.

    Raises:
        SiteUnreachableError: DNS, connection or timeout failure
        WebsiteFetchError: the site answered with a non-2xx status
    """
    headers = {"User-Agent": user_agent} if user_agent else {}
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Fetching %s failed: %s", url, e)
        raise SiteUnreachableError(UNREACHABLE_MESSAGE) from e

    if not 200 <= resp.status_code < 300:
        logger.warning("Fetching %s returned HTTP %d", url, resp.status_code)
        raise WebsiteFetchError(f"The website answered with HTTP {resp.status_code}")

    logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
    return resp.text
