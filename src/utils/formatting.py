"""
Plain-text rendering of reports, analyses and website scans for the CLI
"""

from typing import Any, Dict, List

from ..core.markers.flags import reference_position
from ..core.markers.models import CATEGORY_LABELS, FLAG_EMOJI, Marker, Report
from ..core.scan.models import DiscoveryResult, SocialAnalysis

RULE = "=" * 60
GAUGE_WIDTH = 20


def _format_value(value: float) -> str:
    return f"{value:g}"


def render_gauge(marker: Marker, width: int = GAUGE_WIDTH) -> str:
    """
    Text version of the reference bar: `[----|------]`, the tick placed at
    the marker's position inside its reference range.
    """
    position = reference_position(marker)
    tick = min(int(round(position / 100 * (width - 1))), width - 1)
    return "[" + "-" * tick + "|" + "-" * (width - 1 - tick) + "]"


def format_marker_line(marker: Marker) -> str:
    value = f"{_format_value(marker.value)} {marker.unit}".strip()
    line = f"  {FLAG_EMOJI[marker.flag]} {marker.name:<24} {value:<16} ref: {marker.ref_text}"
    if marker.ref_min is not None or marker.ref_max is not None:
        line += f"  {render_gauge(marker)}"
    return line


def format_report(report: Report, warnings: List[str] = None) -> str:
    """Group markers by category, flag emoji first, then the counts."""
    lines = [RULE, f"{report.lab_name} - {report.report_date}", RULE]

    patient = [p for p in (
        report.patient_name,
        f"{report.patient_age} anos" if report.patient_age is not None else None,
        report.patient_sex.value if report.patient_sex else None,
    ) if p]
    if patient:
        lines.append("Paciente: " + ", ".join(patient))

    for category, markers in report.markers_by_category().items():
        lines.append("")
        lines.append(CATEGORY_LABELS[category])
        lines.extend(format_marker_line(m) for m in markers)

    counts = report.flag_counts()
    lines.append("")
    lines.append(
        f"{counts['normal']} normais, {counts['warning']} a vigiar, {counts['critical']} críticos"
    )

    if warnings:
        lines.append("")
        lines.append("Avisos:")
        lines.extend(f"  - {w}" for w in warnings)

    return "\n".join(lines)


def format_analysis(analysis: Dict[str, Any]) -> str:
    lines = ["", RULE, "ANÁLISE", RULE, analysis.get("summary", "")]

    if analysis.get("positives"):
        lines.append("")
        lines.append("Pontos positivos:")
        lines.extend(f"  ✓ {p}" for p in analysis["positives"])

    if analysis.get("attentionItems"):
        lines.append("")
        lines.append("A ter em atenção:")
        for item in analysis["attentionItems"]:
            lines.append(f"  • [{item.get('severity', 'mild')}] {item.get('message', '')}")

    if analysis.get("correlations"):
        lines.append("")
        lines.append("Relações entre marcadores:")
        for corr in analysis["correlations"]:
            lines.append(f"  • {' + '.join(corr.get('markers', []))}: {corr.get('message', '')}")

    return "\n".join(lines)


def format_discovery(result: DiscoveryResult) -> str:
    meta = result.website_data
    lines = [RULE, f"{result.business_name} ({result.url})", RULE, "Social accounts:"]
    lines.extend(f"  • {p.platform.value:<16} {p.url}" for p in result.platforms)

    lines.append("")
    lines.append("Website:")
    for label, value in (
        ("Hero", meta.hero_text),
        ("Tagline", meta.tagline),
        ("Meta description", meta.meta_description),
        ("OG description", meta.og_description),
    ):
        if value:
            lines.append(f"  {label}: {value}")
    if meta.dominant_colors:
        lines.append(f"  Colors: {', '.join(meta.dominant_colors)}")
    lines.append(f"  Tone: {meta.detected_tone.value}")

    return "\n".join(lines)


def format_social_analysis(analysis: SocialAnalysis) -> str:
    lines = ["", RULE, f"SOCIAL PRESENCE: {analysis.overall_score}/100", RULE, analysis.overall_insight]
    for platform in analysis.platforms:
        lines.append("")
        lines.append(f"{platform.name} ({platform.score}/100)")
        lines.extend(f"  ✓ {g}" for g in platform.good)
        lines.extend(f"  ✗ {b}" for b in platform.bad)
        if platform.quick_win:
            lines.append(f"  Quick win: {platform.quick_win}")
    if analysis.missing_platforms:
        lines.append("")
        lines.append("Not found: " + ", ".join(analysis.missing_platforms))
    return "\n".join(lines)
