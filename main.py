"""
Main application entry point
Parse a lab report PDF or scan a business website from the command line

    python main.py report.pdf [--analyze] [--json]
    python main.py https://example.com [--analyze] [--json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from src.core.analyst import ReportAnalyst, SocialAnalyst
from src.core.config import config
from src.core.errors import SanumError
from src.core.llm import LLMClient
from src.core.markers.store import get_default_store
from src.pipelines.lab_report import LabReportPipeline, PdfUpload
from src.pipelines.website_scan import WebsiteScanPipeline
from src.utils.formatting import (
    format_analysis,
    format_discovery,
    format_report,
    format_social_analysis,
)

logger = logging.getLogger("sanum")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Sanum - lab reports and social presence scans")
    p.add_argument("target", help="Path to a lab report PDF, or a website URL")
    p.add_argument("--analyze", action="store_true", help="Also run the plain-language analysis")
    p.add_argument("--json", action="store_true", help="Print the JSON shape instead of text")
    p.add_argument("--config", default=None, help="YAML file with config overrides")
    return p.parse_args(argv)


def run_report(path: Path, llm: LLMClient, analyze: bool, as_json: bool) -> None:
    store = get_default_store()
    pipeline = LabReportPipeline(config.get_pipeline_config('lab_report'), llm=llm, store=store)
    pipeline.initialize()
    try:
        result = pipeline.process(PdfUpload(content=path.read_bytes(), filename=path.name))
    finally:
        pipeline.cleanup()

    report = result.data['report']
    analysis = ReportAnalyst(llm=llm, store=store).analyze([report]) if analyze else None

    if as_json:
        payload = {"report": report.to_dict(), "warnings": result.warnings}
        if analysis is not None:
            payload["analysis"] = analysis
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(format_report(report, result.warnings))
    if analysis is not None:
        print(format_analysis(analysis))


def run_scan(url: str, llm: LLMClient, analyze: bool, as_json: bool) -> None:
    pipeline = WebsiteScanPipeline(config.get_pipeline_config('website_scan'))
    pipeline.initialize()
    try:
        discovery = pipeline.process(url).data['discovery']
    finally:
        pipeline.cleanup()

    analysis = None
    if analyze:
        analysis = SocialAnalyst(llm).analyze(
            url=discovery.url,
            business_name=discovery.business_name,
            platforms=discovery.platforms,
            website_data=discovery.website_data.to_dict(),
        )

    if as_json:
        payload = discovery.to_dict()
        if analysis is not None:
            payload["analysis"] = analysis.to_dict()
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(format_discovery(discovery))
    if analysis is not None:
        print(format_social_analysis(analysis))


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.config:
        config.load_overrides(args.config)

    logging.basicConfig(
        level=config.logging_config['level'],
        format=config.logging_config['format'],
    )

    llm = LLMClient(config.llm_config)
    target = args.target
    try:
        if target.lower().endswith(".pdf") or Path(target).is_file():
            run_report(Path(target), llm, args.analyze, args.json)
        else:
            run_scan(target, llm, args.analyze, args.json)
    except SanumError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
