"""PDF text extraction with pdfplumber, keeping the column layout of lab tables."""

import io
import logging

import pdfplumber

from ...core.errors import TextExtractionError

logger = logging.getLogger(__name__)

UNREADABLE_MESSAGE = (
    "Não foi possível extrair texto do PDF. "
    "Verifica se o PDF não está protegido ou é scan."
)


def extract_text(pdf_bytes: bytes) -> str:
    """
    Extract the text of every page, layout preserved, pages joined by newlines.

    Raises:
        TextExtractionError: the document is encrypted or not a readable PDF
    """
    pages_text = []
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                text = page.extract_text(layout=True)
                if text:
                    pages_text.append(text)
    except Exception as e:
        # encrypted and corrupt files surface as assorted pdfminer errors
        logger.warning("PDF text extraction failed: %s", e, exc_info=True)
        raise TextExtractionError(UNREADABLE_MESSAGE) from e

    text = "\n".join(pages_text)
    logger.debug("Extracted %d characters from %d pages", len(text), len(pages_text))
    return text
