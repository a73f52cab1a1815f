"""
Configuration management for Sanum
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# ANTHROPIC_API_KEY and friends may live in a local .env
load_dotenv(PROJECT_ROOT / ".env")

FIFTEEN_MINUTES = 15 * 60


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default


class Config:
    """Main configuration class for Sanum"""

    def __init__(self):
        # Lab report parsing
        self.parser_config = {
            'max_file_size': 10 * 1024 * 1024,  # bytes
            'allowed_content_types': ['application/pdf'],
            'min_text_length': 50,  # below this the PDF is treated as scanned/protected
            'max_tokens': 4096,
        }

        # Website scan
        self.scan_config = {
            'fetch_timeout': _env_float('SANUM_FETCH_TIMEOUT', 10.0),  # seconds
            'user_agent': 'Mozilla/5.0 (compatible; SocialMediaScan/1.0; +https://sanum.pt)',
            'max_tokens': 4096,
        }

        # Claude
        self.llm_config = {
            'api_key': os.getenv('ANTHROPIC_API_KEY', ''),
            'model': os.getenv('SANUM_LLM_MODEL', 'claude-sonnet-4-20250514'),
            'timeout': 60.0,
            'max_tokens': 4096,
        }

        # Report analysis
        self.analysis_config = {
            'max_tokens': 2048,
            'rule_based_fallback': True,  # analyse without Claude when no API key is set
            'moderate_deviation': 0.10,  # fraction of the bound beyond which low/high is "moderate"
        }

        # Requests per client per window
        self.rate_limit_config = {
            'parse': {'limit': 10, 'window_seconds': FIFTEEN_MINUTES},
            'analyze': {'limit': 20, 'window_seconds': FIFTEEN_MINUTES},
            'scan': {'limit': 20, 'window_seconds': FIFTEEN_MINUTES},
        }

        # Logging
        self.logging_config = {
            'level': os.getenv('LOG_LEVEL', 'INFO'),
            'format': '%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        }

    def get_pipeline_config(self, pipeline_name: str) -> Dict[str, Any]:
        """Get configuration for a specific pipeline"""
        config_map = {
            'lab_report': self.parser_config,
            'parser': self.parser_config,
            'website_scan': self.scan_config,
            'scan': self.scan_config,
            'llm': self.llm_config,
            'analysis': self.analysis_config,
        }
        return config_map.get(pipeline_name.lower(), {})

    def get_rate_limit(self, endpoint: str) -> Dict[str, Any]:
        return self.rate_limit_config[endpoint]

    def update_config(self, section: str, updates: Dict[str, Any]) -> None:
        """Update a configuration section"""
        if hasattr(self, f'{section}_config'):
            config = getattr(self, f'{section}_config')
            config.update(updates)
        else:
            raise ValueError(f"Unknown configuration section: {section}")

    def load_overrides(self, path: Union[str, Path]) -> None:
        """
        Merge a YAML file of overrides, one mapping per section:

            scan:
              fetch_timeout: 15
            rate_limit:
              parse: {limit: 5, window_seconds: 900}
        """
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config overrides in {path} must be a mapping")
        for section, updates in data.items():
            if not isinstance(updates, dict):
                raise ValueError(f"Section '{section}' in {path} must be a mapping")
            self.update_config(section, updates)
        logger.info("Loaded config overrides from %s (%s)", path, ", ".join(data))


def _load_config(overrides_path: Optional[str] = None) -> Config:
    cfg = Config()
    path = overrides_path or os.getenv('SANUM_CONFIG')
    if path:
        cfg.load_overrides(path)
    return cfg


# Global configuration instance
config = _load_config()
