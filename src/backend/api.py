"""
FastAPI Backend for Sanum
Lab report parsing and analysis, marker lookup, and website social scans
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from slowapi.errors import RateLimitExceeded

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.core.analyst import ReportAnalyst, SocialAnalyst
from src.core.config import config
from src.core.errors import InvalidRequestError, MarkerNotFoundError, SanumError
from src.core.llm import LLMClient
from src.core.markers.models import Report, Sex
from src.core.markers.store import MarkerStore, get_default_store
from src.core.rate_limit import build_limiter, limit_value, rate_limit_exceeded_handler
from src.core.scan.models import PlatformLink
from src.pipelines.lab_report import LabReportPipeline, PdfUpload
from src.pipelines.website_scan import WebsiteScanPipeline

logging.basicConfig(
    level=config.logging_config['level'],
    format=config.logging_config['format'],
)
logger = logging.getLogger("sanum")

app = FastAPI(title="Sanum API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

LAB_RATE_LIMIT_MESSAGE = "Demasiados pedidos. Tenta novamente daqui a 15 minutos."
SCAN_RATE_LIMIT_MESSAGE = "Too many requests. Try again in 15 minutes."

# Global pipelines and collaborators, built on startup or handed in by configure()
lab_pipeline: Optional[LabReportPipeline] = None
scan_pipeline: Optional[WebsiteScanPipeline] = None
report_analyst: Optional[ReportAnalyst] = None
social_analyst: Optional[SocialAnalyst] = None
marker_store: Optional[MarkerStore] = None
rate_limits: Dict[str, Dict[str, Any]] = dict(config.rate_limit_config)

limiter = build_limiter()
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


def _limit(name: str):
    """Limit string read per request, so configure() can change it."""
    return lambda: limit_value(rate_limits[name])


def configure(
    lab: Optional[LabReportPipeline] = None,
    scan: Optional[WebsiteScanPipeline] = None,
    report: Optional[ReportAnalyst] = None,
    social: Optional[SocialAnalyst] = None,
    store: Optional[MarkerStore] = None,
    limits: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Install collaborators; anything not given is built from config."""
    global lab_pipeline, scan_pipeline, report_analyst, social_analyst, marker_store, rate_limits

    marker_store = store or get_default_store()
    llm = None
    if lab is None or report is None or social is None:
        llm = LLMClient(config.llm_config)

    if lab is None:
        lab = LabReportPipeline(config.get_pipeline_config('lab_report'), llm=llm, store=marker_store)
    if not lab.is_initialized:
        lab.initialize()
    lab_pipeline = lab

    if scan is None:
        scan = WebsiteScanPipeline(config.get_pipeline_config('website_scan'))
    if not scan.is_initialized:
        scan.initialize()
    scan_pipeline = scan

    report_analyst = report or ReportAnalyst(llm=llm, store=marker_store)
    social_analyst = social or SocialAnalyst(llm)
    rate_limits = {**config.rate_limit_config, **(limits or {})}
    limiter.reset()


class HealthResponse(BaseModel):
    status: str
    timestamp: str


@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting Sanum API...")
    if lab_pipeline is None or scan_pipeline is None:
        configure()
    logger.info(
        "Sanum API ready! markers=%d claude=%s",
        len(marker_store),
        "on" if report_analyst.uses_llm else "off",
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    for pipeline in (lab_pipeline, scan_pipeline):
        if pipeline is not None:
            pipeline.cleanup()
    logger.info("Sanum API shutdown")


# ----------------------------------------------------------------------
# Error handling
# ----------------------------------------------------------------------

@app.exception_handler(SanumError)
async def sanum_error_handler(request: Request, exc: SanumError):
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request data"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def _require(component: Any, name: str) -> Any:
    if component is None:
        raise SanumError(f"{name} not ready", status_code=503)
    return component


# ----------------------------------------------------------------------
# Health
# ----------------------------------------------------------------------

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat()
    )


@app.get("/ready")
async def ready_check():
    """Check whether the pipelines are ready"""
    return {
        "ready": bool(lab_pipeline and lab_pipeline.is_initialized
                      and scan_pipeline and scan_pipeline.is_initialized),
        "markers": len(marker_store) if marker_store is not None else 0,
        "llm": bool(report_analyst and report_analyst.uses_llm),
        "model": config.llm_config['model'],
    }


# ----------------------------------------------------------------------
# Lab reports
# ----------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    reports: List[Dict[str, Any]] = []
    patientAge: Optional[int] = None
    patientSex: Optional[str] = None


@app.post("/api/parse")
@limiter.limit(_limit("parse"), error_message=LAB_RATE_LIMIT_MESSAGE)
def parse_report(request: Request, file: Optional[UploadFile] = File(None)):
    """Parse an uploaded lab report PDF into a flagged report"""
    pipeline = _require(lab_pipeline, "Lab report pipeline")

    if file is None:
        raise InvalidRequestError("Nenhum ficheiro enviado")
    upload = PdfUpload(
        content=file.file.read(pipeline.max_file_size + 1),
        filename=file.filename or "report.pdf",
        content_type=file.content_type,
    )

    result = pipeline.process(upload)
    return {
        "success": True,
        "report": result.data['report'].to_dict(),
        "warnings": result.warnings,
        "extractionMethod": result.metadata['extraction_method'],
    }


@app.post("/api/analyze")
@limiter.limit(_limit("analyze"), error_message=LAB_RATE_LIMIT_MESSAGE)
def analyze_reports(request: Request, body: AnalyzeRequest):
    """Explain a parsed report in plain language"""
    analyst = _require(report_analyst, "Report analyst")

    if not body.reports:
        raise InvalidRequestError("Nenhum relatório fornecido")
    try:
        reports = [Report.from_dict(r) for r in body.reports]
    except (KeyError, TypeError, ValueError) as e:
        logger.info("Malformed report in analyze request: %s", e)
        raise InvalidRequestError("Relatório inválido") from e

    analysis = analyst.analyze(reports, patient_age=body.patientAge, patient_sex=Sex.parse(body.patientSex))
    return {"success": True, "analysis": analysis}


@app.get("/api/markers/{name}")
async def get_marker(name: str, sex: Optional[str] = None):
    """Knowledge Base entry for a marker name or alias"""
    store = _require(marker_store, "Marker store")
    info = store.resolve(name)
    if info is None:
        raise MarkerNotFoundError(f"Marcador desconhecido: {name}")

    entry = info.to_dict()
    entry["reference"] = store.get_reference(info, sex=Sex.parse(sex)).to_dict()
    return entry


# ----------------------------------------------------------------------
# Website scan
# ----------------------------------------------------------------------

class DiscoverRequest(BaseModel):
    url: Optional[str] = None


class ScanAnalyzeRequest(BaseModel):
    url: Optional[str] = None
    businessName: Optional[str] = None
    platforms: List[Dict[str, Any]] = []
    websiteData: Optional[Dict[str, Any]] = None
    userGoal: Optional[str] = None
    userAudience: Optional[str] = None


@app.post("/api/scan/discover")
@limiter.shared_limit(_limit("scan"), scope="scan", error_message=SCAN_RATE_LIMIT_MESSAGE)
def discover_platforms(request: Request, body: DiscoverRequest):
    """Find the social accounts a website links to"""
    pipeline = _require(scan_pipeline, "Website scan pipeline")

    result = pipeline.process(body.url)
    return result.data['discovery'].to_dict()


@app.post("/api/scan/analyze")
@limiter.shared_limit(_limit("scan"), scope="scan", error_message=SCAN_RATE_LIMIT_MESSAGE)
def analyze_presence(request: Request, body: ScanAnalyzeRequest):
    """Score the discovered social accounts"""
    analyst = _require(social_analyst, "Social analyst")

    if not body.url or not body.platforms:
        raise InvalidRequestError("Invalid request data")
    try:
        platforms = [PlatformLink.from_dict(p) for p in body.platforms]
    except (KeyError, TypeError, ValueError) as e:
        logger.info("Malformed platform in scan analyze request: %s", e)
        raise InvalidRequestError("Invalid request data") from e

    analysis = analyst.analyze(
        url=body.url,
        business_name=body.businessName or "Business",
        platforms=platforms,
        website_data=body.websiteData,
        user_goal=body.userGoal,
        user_audience=body.userAudience,
    )
    return analysis.to_dict()


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Sanum API Server on http://localhost:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
