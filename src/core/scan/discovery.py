"""
Social link discovery over raw website HTML.

Pattern matching over the raw text, no DOM: malformed markup yields fewer
links, never an error. Each platform is one row of PLATFORM_RULES
(pattern + validator); rules run in table order and the first accepted
link per platform wins.
"""

import html as html_lib
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Pattern
from urllib.parse import urlparse

from .models import Platform, PlatformLink

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Noise filtering
# ----------------------------------------------------------------------

_NOISE_PATTERNS: List[Pattern] = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"privacy",
        r"policy",
        r"terms",
        r"sharer\.php",
        r"sharer",
        r"share",
        r"intent/tweet",
        r"widgets",
        r"plugins",
        r"embed",
        r"dialog",
        r"hashtag",
        r"explore",
        r"search",
        r"facebook\.com/pages/",
        r"facebook\.com/profile\.php",
        r"facebook\.com/groups",
        r"facebook\.com/events",
        r"facebook\.com/photo",
        r"facebook\.com/watch",
        r"instagram\.com/p/",
        r"instagram\.com/reel/",
        r"instagram\.com/tv/",
        r"instagram\.com/explore",
        r"youtube\.com/watch",
        r"youtube\.com/embed",
        r"youtube\.com/shorts",
    )
]
# year or tracking id as the last path segment, e.g. facebook.com/2008
_NUMERIC_TAIL = re.compile(r"/\d+/?$")


def is_noisy_link(url: str) -> bool:
    """True for share buttons, policy pages, posts and other non-profile links."""
    if _NUMERIC_TAIL.search(url):
        return True
    return any(p.search(url) for p in _NOISE_PATTERNS)


# ----------------------------------------------------------------------
# Platform validators
# ----------------------------------------------------------------------

FACEBOOK_RESERVED = frozenset({
    "pages", "profile.php", "groups", "events", "photo", "watch",
    "help", "about", "privacy", "terms", "login", "signup",
    "marketplace", "gaming", "settings", "notifications",
})
INSTAGRAM_RESERVED = frozenset({"p", "reel", "tv", "explore", "accounts", "direct"})
GOOGLE_BUSINESS_SHAPES = (
    "google.com/maps/place",
    "goo.gl/maps",
    "g.page/",
    "business.google.com",
    "maps.google.com/?cid=",
)

_FACEBOOK_HANDLE = re.compile(r"facebook\.com/([^/?#]+)", re.IGNORECASE)
_INSTAGRAM_HANDLE = re.compile(r"instagram\.com/([^/?#]+)", re.IGNORECASE)


def valid_facebook(url: str) -> bool:
    match = _FACEBOOK_HANDLE.search(url)
    if not match:
        return False
    handle = match.group(1)
    if handle.isdigit() or len(handle) <= 3:
        return False
    if handle.lower() in FACEBOOK_RESERVED:
        return False
    return handle[0].isascii() and handle[0].isalpha()


def valid_instagram(url: str) -> bool:
    match = _INSTAGRAM_HANDLE.search(url)
    if not match:
        return False
    return match.group(1).lower() not in INSTAGRAM_RESERVED


def valid_youtube(url: str) -> bool:
    lowered = url.lower()
    return not any(part in lowered for part in ("/watch", "/embed", "/shorts"))


def valid_google_business(url: str) -> bool:
    lowered = url.lower()
    return any(shape in lowered for shape in GOOGLE_BUSINESS_SHAPES)


def accept_any(url: str) -> bool:
    return True


# ----------------------------------------------------------------------
# Rule table
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class PlatformRule:
    platform: Platform
    pattern: Pattern
    validator: Callable[[str], bool] = accept_any


def _rx(pattern: str) -> Pattern:
    return re.compile(pattern, re.IGNORECASE)


PLATFORM_RULES: List[PlatformRule] = [
    PlatformRule(Platform.INSTAGRAM, _rx(r"(?:www\.)?instagram\.com/([a-zA-Z0-9._]+)"), valid_instagram),
    PlatformRule(Platform.FACEBOOK, _rx(r"(?:www\.)?facebook\.com/([a-zA-Z][a-zA-Z0-9._-]*)"), valid_facebook),
    PlatformRule(Platform.LINKEDIN, _rx(r"linkedin\.com/(company|in)/([a-zA-Z0-9-]+)")),
    PlatformRule(Platform.TWITTER, _rx(r"twitter\.com/([a-zA-Z0-9_]+)")),
    # must not be the tail of another domain (netflix.com, dropbox.com)
    PlatformRule(Platform.X, _rx(r"(?<![\w-])x\.com/([a-zA-Z0-9_]+)")),
    PlatformRule(Platform.TIKTOK, _rx(r"tiktok\.com/@([a-zA-Z0-9._]+)")),
    PlatformRule(Platform.YOUTUBE, _rx(r"youtube\.com/(?:c/|channel/|user/|@)?([a-zA-Z0-9_-]+)"), valid_youtube),
    PlatformRule(Platform.PINTEREST, _rx(r"pinterest\.(com|pt)/([a-zA-Z0-9_]+)")),
    PlatformRule(
        Platform.GOOGLE_BUSINESS,
        _rx(
            r"(?:google\.com/maps/place/|goo\.gl/maps/|g\.page/|business\.google\.com/"
            r"|maps\.google\.com/\?cid=)([^\"'\s<>&]+)"
        ),
        valid_google_business,
    ),
]


def discover(html: str, rules: List[PlatformRule] = PLATFORM_RULES) -> List[PlatformLink]:
    """Return at most one PlatformLink per platform, in rule order."""
    if not html:
        return []

    links: List[PlatformLink] = []
    for rule in rules:
        for match in rule.pattern.finditer(html):
            candidate = match.group(0)
            if not candidate.lower().startswith("http"):
                candidate = "https://" + candidate
            if is_noisy_link(candidate) or not rule.validator(candidate):
                continue
            links.append(PlatformLink(platform=rule.platform, url=candidate))
            break

    logger.debug("Discovered %d platform links", len(links))
    return links


# ----------------------------------------------------------------------
# URL helpers and business name
# ----------------------------------------------------------------------

def normalize_url(url: str) -> str:
    """Trim and add https:// when no http(s) scheme is given."""
    normalized = url.strip()
    if not normalized.startswith(("http://", "https://")):
        normalized = "https://" + normalized
    return normalized


def is_valid_url(url: str) -> bool:
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


_TITLE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
_TITLE_SUFFIX = re.compile(r"\s*[-–|]\s*(Home|Homepage|Official|Website).*$", re.IGNORECASE)


def extract_business_name(html: str, url: str) -> str:
    """
    Business name from the page <title>, minus a trailing "- Home" style
    suffix. Falls back to the capitalized first label of the domain.
    """
    match = _TITLE.search(html or "")
    if match:
        title = _TITLE_SUFFIX.sub("", html_lib.unescape(match.group(1)).strip())
        if title:
            return title

    try:
        hostname = urlparse(url).hostname or ""
    except ValueError:
        hostname = ""
    if hostname.startswith("www."):
        hostname = hostname[4:]
    label = hostname.split(".")[0]
    if not label:
        return "Business"
    return label[0].upper() + label[1:]
