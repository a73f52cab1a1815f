"""Website scan pipeline: social account discovery and brand metadata"""

from .fetch import fetch_html
from .pipeline import WebsiteScanPipeline

__all__ = ["WebsiteScanPipeline", "fetch_html"]
