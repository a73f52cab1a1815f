"""Tests for the HTTP API, with fake collaborators in place of Claude, PDFs and the network."""

import pytest
from fastapi.testclient import TestClient

from src.backend import api
from src.core.analyst import ReportAnalyst, SocialAnalyst
from src.core.errors import SiteUnreachableError
from src.pipelines.lab_report import LabReportPipeline
from src.pipelines.website_scan import WebsiteScanPipeline

LAB_TEXT = "Hemoglobina 11.2 g/dL [12.0 - 16.0]\nFerritina 8 ng/mL [30 - 400]\n" + " " * 10

EXTRACTION = {
    "labName": "Laboratório Central",
    "reportDate": "2024-03-12",
    "patientSex": "F",
    "markers": [
        {"name": "HGB", "originalName": "Hemoglobina (HGB)", "value": 11.2, "unit": "g/dL",
         "refMin": 12.0, "refMax": 16.0},
        {"name": "Ferritina", "value": 8, "unit": "ng/mL", "refMin": 30, "refMax": 400},
    ],
}

SOCIAL = {
    "overallScore": 58,
    "overallInsight": "Good base, post more often.",
    "platforms": [{"name": "Instagram", "url": "https://instagram.com/acme", "score": 60}],
}

PDF = ("report.pdf", b"%PDF-1.4 fake", "application/pdf")

ONE_PER_WINDOW = {"limit": 1, "window_seconds": 900}


@pytest.fixture
def configure(store, bakery_html, empty_html, fake_llm_factory):
    def fetcher(url):
        if "down" in url:
            raise SiteUnreachableError("Couldn't reach that website. Is the URL correct?")
        if "empty" in url:
            return empty_html
        return bakery_html

    def _configure(limits=None):
        lab = LabReportPipeline(
            {'max_file_size': 1024, 'allowed_content_types': ['application/pdf'], 'min_text_length': 50},
            llm=fake_llm_factory(EXTRACTION),
            store=store,
            text_extractor=lambda _: LAB_TEXT,
        )
        api.configure(
            lab=lab,
            scan=WebsiteScanPipeline({}, fetcher=fetcher),
            report=ReportAnalyst(llm=None, store=store),
            social=SocialAnalyst(fake_llm_factory(SOCIAL)),
            store=store,
            limits=limits,
        )
        return TestClient(api.app)

    return _configure


@pytest.fixture
def client(configure):
    return configure()


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------

class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client):
        data = client.get("/ready").json()
        assert data["ready"] is True
        assert data["markers"] == 5
        assert data["llm"] is False


# ------------------------------------------------------------------
# Lab reports
# ------------------------------------------------------------------

class TestParse:
    def test_parse(self, client):
        response = client.post("/api/parse", files={"file": PDF})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["extractionMethod"] == "pdfplumber"
        assert data["warnings"] == []
        markers = data["report"]["markers"]
        assert markers[0]["name"] == "Hemoglobina"
        assert markers[0]["originalName"] == "Hemoglobina (HGB)"
        assert markers[0]["flag"] == "low"
        assert data["report"]["patientSex"] == "F"

    def test_missing_file(self, client):
        response = client.post("/api/parse")
        assert response.status_code == 400
        assert response.json() == {"error": "Nenhum ficheiro enviado"}

    def test_wrong_type(self, client):
        response = client.post("/api/parse", files={"file": ("a.png", b"\x89PNG", "image/png")})
        assert response.status_code == 400
        assert response.json()["error"] == "Apenas ficheiros PDF são aceites"

    def test_too_large(self, client):
        response = client.post("/api/parse", files={"file": ("big.pdf", b"x" * 4096, "application/pdf")})
        assert response.status_code == 413

    def test_upload_read_is_bounded(self, client, monkeypatch):
        sizes = []
        process = api.lab_pipeline.process

        def recording(upload):
            sizes.append(len(upload.content))
            return process(upload)

        monkeypatch.setattr(api.lab_pipeline, "process", recording)
        response = client.post("/api/parse", files={"file": ("big.pdf", b"x" * 100_000, "application/pdf")})
        assert response.status_code == 413
        assert sizes == [1025]


class TestAnalyze:
    def test_round_trip_through_analysis(self, client):
        report = client.post("/api/parse", files={"file": PDF}).json()["report"]
        response = client.post("/api/analyze", json={"reports": [report], "patientAge": 40})
        assert response.status_code == 200
        analysis = response.json()["analysis"]
        assert analysis["mode"] == "rule_based"
        assert [i["markerName"] for i in analysis["attentionItems"]] == ["Hemoglobina", "Ferritina"]

    def test_no_reports(self, client):
        response = client.post("/api/analyze", json={"reports": []})
        assert response.status_code == 400
        assert response.json() == {"error": "Nenhum relatório fornecido"}

    def test_malformed_report(self, client):
        response = client.post("/api/analyze", json={"reports": [{"labName": "x"}]})
        assert response.status_code == 400

    @pytest.mark.parametrize("value", ["abc", None, "12"])
    def test_non_numeric_marker_value(self, client, value):
        marker = {"id": "m1", "name": "Ferro", "value": value, "refMin": 60, "refMax": 170, "flag": "low"}
        response = client.post("/api/analyze", json={"reports": [{"id": "r1", "markers": [marker]}]})
        assert response.status_code == 400
        assert response.json() == {"error": "Relatório inválido"}

    def test_non_numeric_bound(self, client):
        marker = {"id": "m1", "name": "Ferro", "value": 200, "refMin": 60, "refMax": "170", "flag": "high"}
        response = client.post("/api/analyze", json={"reports": [{"id": "r1", "markers": [marker]}]})
        assert response.status_code == 400

    def test_invalid_body(self, client):
        response = client.post("/api/analyze", json={"reports": "nope", "patientAge": "old"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request data"}


class TestMarkers:
    def test_lookup_by_alias(self, client):
        response = client.get("/api/markers/hgb", params={"sex": "F"})
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Hemoglobina"
        assert data["reference"] == {"min": 12.0, "max": 16.0, "sex": "F", "ageGroup": None}

    def test_unknown_marker(self, client):
        response = client.get("/api/markers/Procalcitonina")
        assert response.status_code == 404
        assert "error" in response.json()


# ------------------------------------------------------------------
# Website scan
# ------------------------------------------------------------------

class TestScan:
    def test_discover(self, client):
        response = client.post("/api/scan/discover", json={"url": "padarialisboa.pt"})
        assert response.status_code == 200
        data = response.json()
        assert data["url"] == "https://padarialisboa.pt"
        assert data["businessName"] == "Padaria Lisboa"
        assert [p["platform"] for p in data["platforms"]] == ["Instagram", "Facebook", "YouTube"]
        assert data["websiteData"]["dominantColors"] == ["#E63946", "#1D3557"]

    @pytest.mark.parametrize("body,status", [
        ({}, 400),
        ({"url": "not a url"}, 400),
        ({"url": "https://down.example"}, 400),
        ({"url": "https://empty.example"}, 404),
    ])
    def test_discover_errors(self, client, body, status):
        response = client.post("/api/scan/discover", json=body)
        assert response.status_code == status
        assert "error" in response.json()

    def test_analyze(self, client):
        response = client.post("/api/scan/analyze", json={
            "url": "https://acme.pt",
            "businessName": "Acme",
            "platforms": [{"platform": "Instagram", "url": "https://instagram.com/acme"}],
            "userGoal": "More bookings",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["overallScore"] == 58
        assert data["platforms"][0]["checkmarks"] == {"good": [], "bad": [], "reflect": []}
        assert "Facebook" in data["missingPlatforms"]

    @pytest.mark.parametrize("body", [
        {"url": "https://acme.pt", "platforms": []},
        {"url": "https://acme.pt", "platforms": [{"platform": "MySpace", "url": "https://myspace.com/a"}]},
        {"platforms": [{"platform": "Instagram", "url": "https://instagram.com/acme"}]},
    ])
    def test_analyze_invalid(self, client, body):
        response = client.post("/api/scan/analyze", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request data"}


# ------------------------------------------------------------------
# Rate limiting
# ------------------------------------------------------------------

class TestRateLimiting:
    def test_scan_limit(self, configure):
        client = configure({"scan": ONE_PER_WINDOW})
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}).status_code == 200
        response = client.post("/api/scan/discover", json={"url": "acme.pt"})
        assert response.status_code == 429
        assert response.json() == {"error": api.SCAN_RATE_LIMIT_MESSAGE}

    def test_lab_limit_message(self, configure):
        client = configure({"analyze": ONE_PER_WINDOW})
        client.post("/api/analyze", json={"reports": []})
        response = client.post("/api/analyze", json={"reports": []})
        assert response.status_code == 429
        assert response.json() == {"error": api.LAB_RATE_LIMIT_MESSAGE}

    def test_keyed_by_forwarded_address(self, configure):
        client = configure({"scan": ONE_PER_WINDOW})
        first = {"x-forwarded-for": "203.0.113.7, 10.0.0.1"}
        second = {"x-forwarded-for": "198.51.100.2"}
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}, headers=first).status_code == 200
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}, headers=second).status_code == 200
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}, headers=first).status_code == 429


    def test_scan_endpoints_share_one_limit(self, configure):
        client = configure({"scan": ONE_PER_WINDOW})
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}).status_code == 200
        response = client.post("/api/scan/analyze", json={
            "url": "https://acme.pt",
            "platforms": [{"platform": "Instagram", "url": "https://instagram.com/acme"}],
        })
        assert response.status_code == 429

    def test_limits_are_per_endpoint(self, configure):
        client = configure({"analyze": ONE_PER_WINDOW})
        client.post("/api/analyze", json={"reports": []})
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}).status_code == 200

    def test_configure_starts_fresh_windows(self, configure):
        client = configure({"scan": ONE_PER_WINDOW})
        client.post("/api/scan/discover", json={"url": "acme.pt"})
        client = configure({"scan": ONE_PER_WINDOW})
        assert client.post("/api/scan/discover", json={"url": "acme.pt"}).status_code == 200
