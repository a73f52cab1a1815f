"""Test configuration and fixtures"""

from typing import Any, Dict, List, Optional

import pytest

from src.core.markers.models import MarkerCategory, MarkerInfo, ReferenceRange, Sex
from src.core.markers.store import MarkerStore, get_default_store


def make_info(name, aliases=(), unit="", category=MarkerCategory.OTHER, references=None, **texts):
    return MarkerInfo(
        name=name,
        aliases=tuple(aliases),
        unit=unit,
        category=category,
        references=tuple(references or (ReferenceRange(),)),
        what_is=texts.get("what_is", f"O que é {name}"),
        what_for=texts.get("what_for", ""),
        high_meaning=texts.get("high_meaning", f"{name} alto"),
        low_meaning=texts.get("low_meaning", f"{name} baixo"),
    )


@pytest.fixture
def info_factory():
    return make_info


@pytest.fixture
def fixture_entries() -> List[MarkerInfo]:
    return [
        make_info(
            "Hemoglobina", ("HGB", "Hb"), "g/dL", MarkerCategory.HEMATOLOGY,
            (
                ReferenceRange(min=13.0, max=17.0, sex=Sex.MALE),
                ReferenceRange(min=12.0, max=16.0, sex=Sex.FEMALE),
            ),
        ),
        make_info("Glicose", ("Glicemia", "Glucose"), "mg/dL", MarkerCategory.METABOLISM,
                  (ReferenceRange(min=70, max=110),)),
        make_info("Colesterol HDL", ("HDL",), "mg/dL", MarkerCategory.LIPIDS,
                  (ReferenceRange(min=40),)),
        make_info("Ferro", ("Ferro Sérico",), "µg/dL", MarkerCategory.IRON,
                  (ReferenceRange(min=60, max=170),)),
        make_info("Ferritina", ("Ferrit",), "ng/mL", MarkerCategory.IRON,
                  (ReferenceRange(min=30, max=400),)),
    ]


@pytest.fixture
def store(fixture_entries) -> MarkerStore:
    return MarkerStore(fixture_entries)


@pytest.fixture(scope="session")
def kb_store() -> MarkerStore:
    """The bundled Knowledge Base"""
    return get_default_store()


# ------------------------------------------------------------------
# Fake collaborators
# ------------------------------------------------------------------

class FakeLLM:
    """Stands in for LLMClient: returns a canned JSON object and records prompts."""

    def __init__(self, response: Optional[Dict[str, Any]] = None, available: bool = True):
        self.response = response or {}
        self.available = available
        self.prompts: List[str] = []

    @property
    def is_available(self) -> bool:
        return self.available

    def complete_json(self, prompt: str, max_tokens: Optional[int] = None) -> Dict[str, Any]:
        self.prompts.append(prompt)
        return self.response


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


# ------------------------------------------------------------------
# HTML samples
# ------------------------------------------------------------------

@pytest.fixture
def bakery_html() -> str:
    return """<!DOCTYPE html>
<html>
<head>
  <title>Padaria Lisboa - Home</title>
  <meta name="description" content="Artisan bread baked every morning in Lisbon">
  <meta property="og:description" content="Fresh bread and pastries">
  <style>
    .hero { background-color: #E63946; color: #fff; }
    .btn { background: #E63946; border-color: rgb(29, 53, 87); }
    .footer { color: #333333; }
  </style>
</head>
<body>
  <h1>Fresh bread every morning</h1>
  <h2>The best pastries in town since 1985</h2>
  <p>Short.</p>
  <a href="https://www.facebook.com/sharer/sharer.php?u=x">Share</a>
  <a href="https://www.instagram.com/p/ABC123/">A post</a>
  <a href="https://www.instagram.com/padarialisboa/">Instagram</a>
  <a href="https://www.facebook.com/padarialisboa">Facebook</a>
  <a href="https://www.youtube.com/watch?v=abc">Video</a>
  <a href="https://www.youtube.com/@padarialisboa">YouTube</a>
  <a href="https://www.netflix.com/title">Netflix</a>
</body>
</html>"""


@pytest.fixture
def empty_html() -> str:
    return "<html><head><title></title></head><body><p>Nothing to see</p></body></html>"
