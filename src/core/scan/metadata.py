"""
Website metadata: hero text, tagline, meta descriptions, brand colors and a
coarse tone label, all pulled from raw HTML with regular expressions.
"""

import html as html_lib
import re
from collections import Counter
from typing import List, Optional, Tuple

from .models import Tone, WebsiteMetadata

_H1 = re.compile(r"<h1[^>]*>([\s\S]*?)</h1>", re.IGNORECASE)
_H2 = re.compile(r"<h2[^>]*>([\s\S]*?)</h2>", re.IGNORECASE)
_P = re.compile(r"<p(?:\s[^>]*)?>([\s\S]*?)</p>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]*>")

_META_DESCRIPTION = (
    re.compile(r"<meta[^>]*name=[\"']description[\"'][^>]*content=[\"']([^\"']+)[\"']", re.IGNORECASE),
    re.compile(r"<meta[^>]*content=[\"']([^\"']+)[\"'][^>]*name=[\"']description[\"']", re.IGNORECASE),
)
_OG_DESCRIPTION = (
    re.compile(r"<meta[^>]*property=[\"']og:description[\"'][^>]*content=[\"']([^\"']+)[\"']", re.IGNORECASE),
    re.compile(r"<meta[^>]*content=[\"']([^\"']+)[\"'][^>]*property=[\"']og:description[\"']", re.IGNORECASE),
)

_DECLARATION = re.compile(
    r"(?<![\w-])(?:background-color|border-color|background|color|fill)\s*:\s*([^;\"'{}<>]+)",
    re.IGNORECASE,
)
_COLOR_VALUE = re.compile(
    r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b"
    r"|rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})",
    re.IGNORECASE,
)

PROFESSIONAL_KEYWORDS = ("solution", "enterprise", "business", "professional", "industry", "expert")
CASUAL_KEYWORDS = ("hey", "awesome", "cool", "fun", "easy", "simple", "love")
PLAYFUL_KEYWORDS = ("amazing", "exciting", "magic", "wow", "yay", "!")

MAX_COLORS = 5


def _strip_tags(fragment: str) -> str:
    return html_lib.unescape(_TAG.sub(" ", fragment))


def _collapse(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _first_text(pattern, html: str, lower: int, upper: int) -> str:
    """First match whose collapsed text length is strictly inside (lower, upper)."""
    for match in pattern.finditer(html):
        text = _collapse(_strip_tags(match.group(1)))
        if lower < len(text) < upper:
            return text
    return ""


def extract_hero_text(html: str) -> str:
    """First <h1> of 11 to 149 characters that fits on one line."""
    for match in _H1.finditer(html):
        text = re.sub(r"[ \t\f\v]+", " ", _strip_tags(match.group(1))).strip()
        if "\n" in text or "\r" in text:
            continue
        if 10 < len(text) < 150:
            return text
    return ""


def extract_tagline(html: str) -> str:
    return _first_text(_H2, html, 15, 200) or _first_text(_P, html, 30, 300)


def _first_attr(patterns, html: str) -> str:
    for pattern in patterns:
        match = pattern.search(html)
        if match:
            return match.group(1)
    return ""


# ----------------------------------------------------------------------
# Colors
# ----------------------------------------------------------------------

def _to_hex(match) -> Optional[str]:
    hex_digits, r, g, b = match.groups()
    if hex_digits:
        if len(hex_digits) == 3:
            hex_digits = "".join(ch * 2 for ch in hex_digits)
        return "#" + hex_digits.upper()
    r, g, b = (min(int(c), 255) for c in (r, g, b))
    return "#{:02X}{:02X}{:02X}".format(r, g, b)


def _channels(hex_color: str) -> Tuple[int, int, int]:
    return tuple(int(hex_color[i:i + 2], 16) for i in (1, 3, 5))


def _is_brand_color(hex_color: str) -> bool:
    r, g, b = _channels(hex_color)
    if max(r, g, b) - min(r, g, b) < 10:
        return False  # grayscale
    return not (r > 240 and g > 240 and b > 240)


def extract_dominant_colors(html: str, limit: int = MAX_COLORS) -> List[str]:
    """
    Most frequent non-gray colors declared in CSS, as #RRGGBB.

    Only color, background, background-color, border-color and fill
    declarations count. Ties keep first-seen order.
    """
    counts: Counter = Counter()
    for declaration in _DECLARATION.finditer(html or ""):
        for value in _COLOR_VALUE.finditer(declaration.group(1)):
            color = _to_hex(value)
            if color and _is_brand_color(color):
                counts[color] += 1
    return [color for color, _ in counts.most_common(limit)]


# ----------------------------------------------------------------------
# Tone
# ----------------------------------------------------------------------

def detect_tone(text: str) -> Tone:
    """
    Count how many keywords of each set appear in the text. Professional
    wins on a strict majority, then Playful; any casual keyword makes it
    Casual/Friendly.
    """
    lowered = (text or "").lower()
    professional = sum(1 for k in PROFESSIONAL_KEYWORDS if k in lowered)
    casual = sum(1 for k in CASUAL_KEYWORDS if k in lowered)
    playful = sum(1 for k in PLAYFUL_KEYWORDS if k in lowered)

    if professional > casual and professional > playful:
        return Tone.PROFESSIONAL
    if playful > professional and playful > casual:
        return Tone.PLAYFUL
    if casual > 0:
        return Tone.CASUAL
    return Tone.NEUTRAL


def extract_metadata(html: str) -> WebsiteMetadata:
    html = html or ""
    hero = extract_hero_text(html)
    tagline = extract_tagline(html)
    meta_description = _first_attr(_META_DESCRIPTION, html)
    return WebsiteMetadata(
        hero_text=hero,
        tagline=tagline,
        meta_description=meta_description,
        og_description=_first_attr(_OG_DESCRIPTION, html),
        dominant_colors=extract_dominant_colors(html),
        detected_tone=detect_tone(" ".join((hero, tagline, meta_description))),
    )
