"""Tests for website metadata extraction."""

import pytest

from src.core.scan.metadata import (
    detect_tone,
    extract_dominant_colors,
    extract_hero_text,
    extract_metadata,
    extract_tagline,
)
from src.core.scan.models import Tone


# ------------------------------------------------------------------
# Hero and tagline
# ------------------------------------------------------------------

class TestHeroText:
    def test_short_heading_is_skipped(self):
        assert extract_hero_text("<h1>Welcome</h1>") == ""

    def test_first_qualifying_heading(self):
        html = "<h1>Welcome</h1><h1>Fresh Bakery Downtown</h1>"
        assert extract_hero_text(html) == "Fresh Bakery Downtown"

    def test_nested_tags_are_stripped(self):
        html = '<h1 class="hero"><span>Bread</span> <em>for everyone</em></h1>'
        assert extract_hero_text(html) == "Bread for everyone"

    def test_multiline_heading_is_skipped(self):
        html = "<h1>Fresh bread\nevery single morning</h1>"
        assert extract_hero_text(html) == ""

    def test_length_bounds_are_exclusive(self):
        assert extract_hero_text("<h1>" + "a" * 10 + "</h1>") == ""
        assert extract_hero_text("<h1>" + "a" * 11 + "</h1>") == "a" * 11
        assert extract_hero_text("<h1>" + "a" * 150 + "</h1>") == ""


class TestTagline:
    def test_h2_first(self):
        html = "<h2>The best pastries in town</h2><p>" + "p" * 40 + "</p>"
        assert extract_tagline(html) == "The best pastries in town"

    def test_paragraph_fallback(self):
        html = "<h2>Too short</h2><p>Baked daily with flour from local mills.</p>"
        assert extract_tagline(html) == "Baked daily with flour from local mills."

    def test_short_paragraph_is_skipped(self):
        assert extract_tagline("<p>Hi there</p>") == ""

    def test_whitespace_is_collapsed(self):
        html = "<h2>\n   Bread   and\n  pastries since 1985\n</h2>"
        assert extract_tagline(html) == "Bread and pastries since 1985"


# ------------------------------------------------------------------
# Meta descriptions
# ------------------------------------------------------------------

class TestMetaDescriptions:
    def test_literal_values(self, bakery_html):
        meta = extract_metadata(bakery_html)
        assert meta.meta_description == "Artisan bread baked every morning in Lisbon"
        assert meta.og_description == "Fresh bread and pastries"

    def test_content_before_name(self):
        html = '<meta content="Cakes for every party" name="description">'
        assert extract_metadata(html).meta_description == "Cakes for every party"

    def test_absent(self, empty_html):
        meta = extract_metadata(empty_html)
        assert meta.meta_description == ""
        assert meta.og_description == ""


# ------------------------------------------------------------------
# Colors
# ------------------------------------------------------------------

class TestDominantColors:
    def test_sample_site(self, bakery_html):
        assert extract_dominant_colors(bakery_html) == ["#E63946", "#1D3557"]

    def test_short_hex_and_rgba(self):
        html = '<div style="color: #f60; background: rgba(0, 128, 255, 0.5)"></div>'
        assert extract_dominant_colors(html) == ["#FF6600", "#0080FF"]

    def test_grayscale_and_white_are_dropped(self):
        html = "<style>a { color: #777777; background: #FAFAFB; fill: #F5F8FA; border-color: #000 }</style>"
        assert extract_dominant_colors(html) == []

    def test_near_white_with_a_tint_is_dropped(self):
        # every channel above 240 even though the channel spread is 11
        assert extract_dominant_colors("<p style='color: rgb(255, 244, 250)'>") == []

    def test_ordered_by_frequency_then_first_seen(self):
        html = (
            "<style>"
            ".a { color: #112233 } .b { color: #AA0000 } .c { color: #00AA00 }"
            ".d { color: #00AA00 } .e { background-color: #aa0000 }"
            "</style>"
        )
        assert extract_dominant_colors(html) == ["#AA0000", "#00AA00", "#112233"]

    def test_at_most_five(self):
        colors = ["#FF0000", "#00FF00", "#0000FF", "#FFAA00", "#AA00FF", "#00AAFF"]
        html = "".join(f'<b style="color: {c}"></b>' for c in colors)
        assert extract_dominant_colors(html) == colors[:5]

    def test_only_color_declarations_count(self):
        html = '<a href="#page-1" data-id="#ABCDEF" style="width: 10px; outline: #FF0000"></a>'
        assert extract_dominant_colors(html) == []


# ------------------------------------------------------------------
# Tone
# ------------------------------------------------------------------

class TestTone:
    def test_professional(self):
        assert detect_tone("The enterprise solution for your business") is Tone.PROFESSIONAL

    def test_playful(self):
        assert detect_tone("Amazing cakes, wow!") is Tone.PLAYFUL

    def test_casual(self):
        assert detect_tone("Simple recipes we love") is Tone.CASUAL

    def test_casual_wins_a_tie(self):
        # one professional and one casual keyword: no strict majority
        assert detect_tone("Business made easy") is Tone.CASUAL

    def test_neutral(self):
        assert detect_tone("Bread and pastries") is Tone.NEUTRAL
        assert detect_tone("") is Tone.NEUTRAL

    def test_metadata_tone_from_page_text(self):
        html = (
            "<h1>Enterprise solution for your business</h1>"
            '<meta name="description" content="Industry experts since 1990">'
        )
        assert extract_metadata(html).detected_tone is Tone.PROFESSIONAL


class TestExtractMetadata:
    def test_sample_site(self, bakery_html):
        meta = extract_metadata(bakery_html)
        assert meta.hero_text == "Fresh bread every morning"
        assert meta.tagline == "The best pastries in town since 1985"
        assert meta.detected_tone is Tone.NEUTRAL

    @pytest.mark.parametrize("html", ["", "<h1", "<<<<", "<p>unterminated"])
    def test_malformed_html(self, html):
        meta = extract_metadata(html)
        assert meta.hero_text == ""
        assert meta.dominant_colors == []

    def test_to_dict(self, bakery_html):
        data = extract_metadata(bakery_html).to_dict()
        assert set(data) == {
            "heroText", "tagline", "metaDescription", "ogDescription",
            "dominantColors", "detectedTone",
        }
        assert data["detectedTone"] == "Neutral"
