"""
Lab Report Pipeline
Turns an uploaded lab PDF into a flagged Report: text extraction, Claude
extraction of the marker table, then normalization against the Knowledge Base
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from ...core.base_pipeline import BasePipeline, PipelineResult
from ...core.config import config as app_config
from ...core.errors import (
    InvalidRequestError,
    LLMUnavailableError,
    PdfTooLargeError,
    TextExtractionError,
    UnsupportedMediaTypeError,
)
from ...core.llm import LLMClient
from ...core.markers.assembler import ReportAssembler
from ...core.markers.store import MarkerStore, get_default_store
from .pdf_text import UNREADABLE_MESSAGE, extract_text

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = """Analisa o seguinte texto extraído de um PDF de análises clínicas de um laboratório português.
Extrai TODOS os marcadores quantitativos encontrados.

Para cada marcador: name (nome português standard), originalName (exatamente como no PDF),
value (número), unit, refMin (número ou null), refMax (número ou null), refText (texto da referência)
e category (hematology, metabolism, renal, hepatic, thyroid, iron, vitamins, inflammation,
coagulation, lipids, electrolytes, hormones ou other).

Metadados: labName, reportDate (YYYY-MM-DD), patientName (omite se tiveres dúvidas),
patientAge (inteiro), patientSex ("M" ou "F").

Ignora resultados não numéricos ("Positivo", "Não Reactivo"). Se o valor vier como "< X" ou "> X",
usa X. NUNCA inventes valores.

Responde APENAS com JSON válido:
{{"labName": "...", "reportDate": "YYYY-MM-DD", "patientName": null, "patientAge": null,
  "patientSex": null, "markers": [{{"name": "...", "originalName": "...", "value": 0,
  "unit": "...", "refMin": null, "refMax": null, "refText": "...", "category": "..."}}]}}

TEXTO DO PDF:
{text}"""


@dataclass
class PdfUpload:
    content: bytes
    filename: str = "report.pdf"
    content_type: Optional[str] = "application/pdf"


class LabReportPipeline(BasePipeline):
    """
    PDF bytes -> text -> raw marker table (Claude) -> Report.

    Flags always come from the reference bounds printed on the report.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        llm: Optional[LLMClient] = None,
        store: Optional[MarkerStore] = None,
        text_extractor: Optional[Callable[[bytes], str]] = None,
    ):
        super().__init__(config)
        self.max_file_size = config.get('max_file_size', 10 * 1024 * 1024)
        self.allowed_content_types = config.get('allowed_content_types', ['application/pdf'])
        self.min_text_length = config.get('min_text_length', 50)
        self.llm = llm
        self.store = store
        self.text_extractor = text_extractor or extract_text
        self.assembler: Optional[ReportAssembler] = None

    def initialize(self) -> bool:
        if self.store is None:
            self.store = get_default_store()
        if self.llm is None:
            self.llm = LLMClient(app_config.llm_config)
        self.assembler = ReportAssembler(self.store)
        self.is_initialized = True
        logger.info(
            "Lab report pipeline initialized (%d known markers, llm=%s)",
            len(self.store),
            "on" if self.llm.is_available else "off",
        )
        return True

    def validate_input(self, upload: Any) -> None:
        if not isinstance(upload, PdfUpload) or not upload.content:
            raise InvalidRequestError("Nenhum ficheiro enviado")
        if upload.content_type not in self.allowed_content_types:
            raise UnsupportedMediaTypeError("Apenas ficheiros PDF são aceites")
        if len(upload.content) > self.max_file_size:
            raise PdfTooLargeError(
                f"Ficheiro demasiado grande (máx. {self.max_file_size // (1024 * 1024)}MB)"
            )

    def process(self, upload: PdfUpload) -> PipelineResult:
        """
        Parse one lab report PDF.

        Raises:
            InvalidRequestError / UnsupportedMediaTypeError / PdfTooLargeError: bad upload
            TextExtractionError: protected, scanned or empty PDF
            LLMUnavailableError / LLMResponseError: extraction by Claude failed
        """
        if not self.is_initialized:
            raise RuntimeError("Pipeline not initialized. Call initialize() first.")

        self.validate_input(upload)

        text = self.text_extractor(upload.content)
        if not text or len(text.strip()) < self.min_text_length:
            logger.info("PDF %s yielded %d characters of text", upload.filename, len((text or "").strip()))
            raise TextExtractionError(UNREADABLE_MESSAGE)

        if not self.llm.is_available:
            raise LLMUnavailableError("ANTHROPIC_API_KEY não configurada")
        raw = self.llm.complete_json(
            EXTRACTION_PROMPT.format(text=text),
            max_tokens=self.config.get('max_tokens', 4096),
        )

        result = self.assembler.assemble(raw)
        report = result.report
        logger.info(
            "Parsed %s: %d markers (%d unresolved, %d skipped)",
            upload.filename,
            len(report.markers),
            len(result.unresolved),
            len(result.warnings),
        )

        return PipelineResult(
            pipeline_name="LabReport",
            timestamp=datetime.now(),
            data={'report': report, 'unresolved': result.unresolved},
            warnings=result.warnings,
            metadata={
                'extraction_method': 'pdfplumber',
                'text_length': len(text),
                'filename': upload.filename,
            },
        )

    def cleanup(self) -> None:
        self.assembler = None
        self.is_initialized = False
