"""Tests for configuration defaults and overrides."""

import pytest

from src.core.config import FIFTEEN_MINUTES, Config


@pytest.fixture
def cfg():
    return Config()


class TestDefaults:
    def test_parser(self, cfg):
        assert cfg.parser_config['max_file_size'] == 10 * 1024 * 1024
        assert cfg.parser_config['min_text_length'] == 50

    def test_rate_limits(self, cfg):
        assert cfg.get_rate_limit('parse') == {'limit': 10, 'window_seconds': FIFTEEN_MINUTES}
        assert cfg.get_rate_limit('analyze')['limit'] == 20
        assert cfg.get_rate_limit('scan')['limit'] == 20

    def test_pipeline_config_lookup(self, cfg):
        assert cfg.get_pipeline_config('lab_report') is cfg.parser_config
        assert cfg.get_pipeline_config('Website_Scan') is cfg.scan_config
        assert cfg.get_pipeline_config('unknown') == {}


class TestEnvironment:
    def test_fetch_timeout(self, monkeypatch):
        monkeypatch.setenv('SANUM_FETCH_TIMEOUT', '3.5')
        assert Config().scan_config['fetch_timeout'] == 3.5

    def test_bad_timeout_is_ignored(self, monkeypatch):
        monkeypatch.setenv('SANUM_FETCH_TIMEOUT', 'soon')
        assert Config().scan_config['fetch_timeout'] == 10.0

    def test_api_key_and_model(self, monkeypatch):
        monkeypatch.setenv('ANTHROPIC_API_KEY', 'sk-test')
        monkeypatch.setenv('SANUM_LLM_MODEL', 'claude-test')
        cfg = Config()
        assert cfg.llm_config['api_key'] == 'sk-test'
        assert cfg.llm_config['model'] == 'claude-test'


class TestOverrides:
    def test_update_config(self, cfg):
        cfg.update_config('scan', {'fetch_timeout': 2})
        assert cfg.scan_config['fetch_timeout'] == 2

    def test_unknown_section(self, cfg):
        with pytest.raises(ValueError):
            cfg.update_config('video', {})

    def test_yaml_file(self, cfg, tmp_path):
        path = tmp_path / "sanum.yaml"
        path.write_text(
            "scan:\n"
            "  fetch_timeout: 15\n"
            "rate_limit:\n"
            "  parse: {limit: 5, window_seconds: 60}\n",
            encoding="utf-8",
        )
        cfg.load_overrides(path)
        assert cfg.scan_config['fetch_timeout'] == 15
        assert cfg.get_rate_limit('parse') == {'limit': 5, 'window_seconds': 60}
        assert cfg.get_rate_limit('scan')['limit'] == 20

    def test_yaml_must_be_a_mapping(self, cfg, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            cfg.load_overrides(path)

    def test_yaml_section_must_be_a_mapping(self, cfg, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scan: 5\n", encoding="utf-8")
        with pytest.raises(ValueError):
            cfg.load_overrides(path)
