"""Lab report pipeline: PDF to flagged marker report"""

from .pdf_text import extract_text
from .pipeline import LabReportPipeline, PdfUpload

__all__ = ["LabReportPipeline", "PdfUpload", "extract_text"]
