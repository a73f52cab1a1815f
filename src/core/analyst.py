"""
Analysts - natural-language readings of a lab report or a social presence scan.

ReportAnalyst asks Claude for a global reading of a lab report and falls
back to a rule-based reading from the flags and the Knowledge Base when
Claude is not configured. SocialAnalyst always needs Claude.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from .config import config as default_config
from .errors import InvalidRequestError, LLMUnavailableError
from .llm import LLMClient
from .markers.models import CATEGORY_LABELS, Marker, MarkerFlag, Report, Sex
from .markers.store import MarkerStore, get_default_store
from .scan.models import Platform, PlatformAnalysis, PlatformLink, SocialAnalysis

logger = logging.getLogger(__name__)

SEVERITIES = ("mild", "moderate", "significant")


# ----------------------------------------------------------------------
# Lab report analysis
# ----------------------------------------------------------------------

REPORT_PROMPT = """És um assistente que explica análises clínicas a pessoas sem formação médica.

Paciente:
- Idade: {age}
- Sexo: {sex}

Marcadores ({count} no total):
{markers}

Responde APENAS com JSON válido neste formato:
{{
  "summary": "2-4 frases sobre o estado geral, em linguagem simples",
  "positives": ["aspetos positivos"],
  "attentionItems": [
    {{"markerName": "...", "severity": "mild" | "moderate" | "significant", "message": "..."}}
  ],
  "correlations": [
    {{"markers": ["...", "..."], "message": "..."}}
  ]
}}

Usa "pode indicar", nunca diagnósticos definitivos."""

# (marker, flag direction) pairs that read together
CORRELATION_RULES = [
    (
        (("Ferro", "low"), ("Ferritina", "low")),
        "Ferro baixo com ferritina baixa sugere deficiência de ferro.",
    ),
    (
        (("Hemoglobina", "low"), ("V.G.M.", "low")),
        "Hemoglobina baixa com glóbulos pequenos (VGM baixo) é típico de anemia por falta de ferro.",
    ),
    (
        (("Hemoglobina", "low"), ("V.G.M.", "high")),
        "Hemoglobina baixa com glóbulos grandes (VGM alto) pode indicar falta de vitamina B12 ou ácido fólico.",
    ),
    (
        (("TSH", "high"), ("T4 Livre", "low")),
        "TSH alta com T4 livre baixa é o padrão típico de tiroide lenta (hipotiroidismo).",
    ),
    (
        (("TSH", "low"), ("T4 Livre", "high")),
        "TSH baixa com T4 livre alta é o padrão típico de tiroide acelerada (hipertiroidismo).",
    ),
    (
        (("Glicose", "high"), ("HbA1c", "high")),
        "Glicose e hemoglobina glicada altas em conjunto podem indicar diabetes ou pré-diabetes.",
    ),
]


def _direction(flag: MarkerFlag) -> str:
    if flag in (MarkerFlag.LOW, MarkerFlag.CRITICAL_LOW):
        return "low"
    if flag in (MarkerFlag.HIGH, MarkerFlag.CRITICAL_HIGH):
        return "high"
    return "normal"


class ReportAnalyst:
    """Global reading of a lab report: summary, positives, attention items, correlations."""

    def __init__(
        self,
        llm: Optional[LLMClient] = None,
        store: Optional[MarkerStore] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.config = config or default_config.analysis_config
        self.llm = llm
        self.store = store or get_default_store()

    @property
    def uses_llm(self) -> bool:
        return self.llm is not None and self.llm.is_available

    def analyze(
        self,
        reports: Sequence[Report],
        patient_age: Optional[int] = None,
        patient_sex: Optional[Sex] = None,
    ) -> Dict[str, Any]:
        if not reports:
            raise InvalidRequestError("Nenhum relatório fornecido")

        # one report per analysis for now
        report = reports[0]
        age = patient_age if patient_age is not None else report.patient_age
        sex = Sex.parse(patient_sex) or report.patient_sex

        if self.uses_llm:
            return self._llm_analysis(report, age, sex)
        if self.config.get("rule_based_fallback", True):
            logger.info("Claude not configured, using rule-based analysis")
            return self.rule_based_analysis(report)
        raise LLMUnavailableError("Análise indisponível: ANTHROPIC_API_KEY não configurada")

    # ------------------------------------------------------------------
    # Claude
    # ------------------------------------------------------------------

    def _llm_analysis(
        self, report: Report, age: Optional[int], sex: Optional[Sex]
    ) -> Dict[str, Any]:
        markers = [
            {
                "name": m.name,
                "value": m.value,
                "unit": m.unit,
                "refMin": m.ref_min,
                "refMax": m.ref_max,
                "flag": m.flag.value,
            }
            for m in report.markers
        ]
        prompt = REPORT_PROMPT.format(
            age=f"{age} anos" if age is not None else "não especificada",
            sex=sex.value if sex else "não especificado",
            count=len(markers),
            markers=json.dumps(markers, ensure_ascii=False, indent=2),
        )
        raw = self.llm.complete_json(prompt, max_tokens=self.config.get("max_tokens", 2048))
        analysis = self._normalize(raw)
        analysis["mode"] = "claude"
        return analysis

    @staticmethod
    def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
        items = []
        for item in raw.get("attentionItems") or []:
            if not isinstance(item, dict):
                continue
            severity = item.get("severity")
            items.append({
                "markerName": str(item.get("markerName", "")),
                "severity": severity if severity in SEVERITIES else "mild",
                "message": str(item.get("message", "")),
            })
        correlations = [
            {"markers": [str(n) for n in c.get("markers") or []], "message": str(c.get("message", ""))}
            for c in raw.get("correlations") or []
            if isinstance(c, dict)
        ]
        return {
            "summary": str(raw.get("summary") or ""),
            "positives": [str(p) for p in raw.get("positives") or []],
            "attentionItems": items,
            "correlations": correlations,
        }

    # ------------------------------------------------------------------
    # Rule-based fallback
    # ------------------------------------------------------------------

    def severity(self, marker: Marker) -> str:
        """mild / moderate / significant for a flagged marker."""
        if marker.flag.is_critical:
            return "significant"
        threshold = self.config.get("moderate_deviation", 0.10)
        if marker.flag is MarkerFlag.LOW and marker.ref_min:
            deviation = (marker.ref_min - marker.value) / abs(marker.ref_min)
        elif marker.flag is MarkerFlag.HIGH and marker.ref_max:
            deviation = (marker.value - marker.ref_max) / abs(marker.ref_max)
        else:
            deviation = 0.0
        return "moderate" if deviation > threshold else "mild"

    def rule_based_analysis(self, report: Report) -> Dict[str, Any]:
        flagged = [m for m in report.markers if m.flag is not MarkerFlag.NORMAL]

        attention_items = []
        for marker in flagged:
            attention_items.append({
                "markerName": marker.name,
                "severity": self.severity(marker),
                "message": self._explain(marker),
            })

        positives = []
        for category, markers in report.markers_by_category().items():
            if all(m.flag is MarkerFlag.NORMAL for m in markers):
                positives.append(f"{CATEGORY_LABELS[category]} sem alterações")

        directions = {m.name: _direction(m.flag) for m in report.markers}
        correlations = []
        for pairs, message in CORRELATION_RULES:
            if all(directions.get(name) == direction for name, direction in pairs):
                correlations.append({"markers": [name for name, _ in pairs], "message": message})

        counts = report.flag_counts()
        total = len(report.markers)
        if not flagged:
            summary = f"Os {total} marcadores analisados estão dentro dos valores de referência."
        else:
            summary = (
                f"Dos {total} marcadores analisados, {counts['normal']} estão dentro dos valores "
                f"de referência e {len(flagged)} merecem atenção"
            )
            if counts["critical"]:
                summary += f", {counts['critical']} dos quais bastante afastados da referência"
            summary += ". Fala com o teu médico sobre estes resultados."

        return {
            "summary": summary,
            "positives": positives,
            "attentionItems": attention_items,
            "correlations": correlations,
            "mode": "rule_based",
        }

    def _explain(self, marker: Marker) -> str:
        info = self.store.resolve(marker.name)
        low = _direction(marker.flag) == "low"
        trend = "abaixo" if low else "acima"
        message = f"{marker.name} ({marker.value:g} {marker.unit}) está {trend} da referência ({marker.ref_text})."
        if info:
            message += " " + (info.low_meaning if low else info.high_meaning)
        return message


# ----------------------------------------------------------------------
# Social presence analysis
# ----------------------------------------------------------------------

SOCIAL_PROMPT = """You are a social media analyst. Be direct, honest and kind, no buzzwords.

Business: {business}
Website: {url}
{website}
{user}
Social media accounts found:
{platforms}

For each account give a 0-100 score, realistic metric estimates, checkmarks
(good: max 3, bad: max 3, reflect: max 2) and one quick win for this week.
Also detect the positioning, the tone of voice and the visual consistency
(Consistent, Mostly Consistent or Inconsistent).

Respond ONLY with valid JSON in this format:
{{
  "detectedPositioning": "...",
  "detectedTone": "...",
  "visualConsistency": "...",
  "platforms": [
    {{
      "name": "Instagram", "url": "https://...", "handle": "...", "score": 45,
      "metrics": {{"followers": "~500", "posts": "~30", "engagement": "...", "lastPost": "...", "frequency": "..."}},
      "checkmarks": {{"good": ["..."], "bad": ["..."], "reflect": ["..."]}},
      "quickWin": "..."
    }}
  ],
  "overallScore": 52,
  "overallInsight": "..."{alignment}
}}"""


def _as_int(value: Any, default: Optional[int]) -> Optional[int]:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except ValueError:
            return default
    return default


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]


class SocialAnalyst:
    """Scores each discovered account and the presence overall."""

    def __init__(self, llm: LLMClient, config: Optional[Dict[str, Any]] = None):
        self.llm = llm
        self.config = config or default_config.scan_config

    def analyze(
        self,
        url: str,
        business_name: str,
        platforms: Sequence[PlatformLink],
        website_data: Optional[Dict[str, Any]] = None,
        user_goal: Optional[str] = None,
        user_audience: Optional[str] = None,
    ) -> SocialAnalysis:
        if not platforms:
            raise InvalidRequestError("No platforms to analyze")
        if not self.llm.is_available:
            raise LLMUnavailableError("Analysis unavailable: ANTHROPIC_API_KEY not configured")

        prompt = self._build_prompt(url, business_name, platforms, website_data, user_goal, user_audience)
        raw = self.llm.complete_json(prompt, max_tokens=self.config.get("max_tokens", 4096))

        found = {p.platform for p in platforms}
        # X is reported through Twitter, never listed as missing
        missing = [p.value for p in Platform if p not in found and p is not Platform.X]

        return SocialAnalysis(
            url=url,
            business_name=business_name,
            overall_score=_as_int(raw.get("overallScore"), None) or 50,
            overall_insight=raw.get("overallInsight") or "Analysis complete.",
            detected_positioning=raw.get("detectedPositioning") or "Unknown business positioning",
            detected_tone=raw.get("detectedTone") or "Unknown",
            visual_consistency=raw.get("visualConsistency") or "Unknown",
            platforms=[
                self._platform_analysis(p) for p in raw.get("platforms") or [] if isinstance(p, dict)
            ],
            missing_platforms=missing,
            alignment_score=_as_int(raw.get("alignmentScore"), None),
            alignment_insight=raw.get("alignmentInsight"),
        )

    @staticmethod
    def _platform_analysis(raw: Dict[str, Any]) -> PlatformAnalysis:
        checkmarks = raw.get("checkmarks")
        if not isinstance(checkmarks, dict):
            # older answers use strengths/weaknesses instead of checkmarks
            checkmarks = {
                "good": raw.get("strengths"),
                "bad": raw.get("weaknesses"),
                "reflect": raw.get("reflect"),
            }
        metrics = raw.get("metrics") if isinstance(raw.get("metrics"), dict) else {}
        return PlatformAnalysis(
            name=str(raw.get("name", "")),
            url=str(raw.get("url", "")),
            score=_as_int(raw.get("score"), 0),
            good=_str_list(checkmarks.get("good")),
            bad=_str_list(checkmarks.get("bad")),
            reflect=_str_list(checkmarks.get("reflect")),
            quick_win=str(raw.get("quickWin") or ""),
            handle=raw.get("handle") or None,
            metrics={k: str(v) for k, v in metrics.items()},
        )

    @staticmethod
    def _build_prompt(url, business_name, platforms, website_data, user_goal, user_audience) -> str:
        website = ""
        if website_data:
            colors = website_data.get("dominantColors") or []
            website = (
                "Website analysis:\n"
                f"- Hero text: \"{website_data.get('heroText') or 'Not found'}\"\n"
                f"- Tagline: \"{website_data.get('tagline') or 'Not found'}\"\n"
                f"- Meta description: \"{website_data.get('metaDescription') or 'Not found'}\"\n"
                f"- Detected tone: {website_data.get('detectedTone') or 'Unknown'}\n"
                f"- Dominant colors: {', '.join(colors) if colors else 'Not detected'}\n"
            )
        user = ""
        alignment = ""
        if user_goal or user_audience:
            user = "User-provided context (check alignment against it):\n"
            if user_goal:
                user += f"- Goal: \"{user_goal}\"\n"
            if user_audience:
                user += f"- Target audience: \"{user_audience}\"\n"
            alignment = ',\n  "alignmentScore": 65,\n  "alignmentInsight": "..."'
        return SOCIAL_PROMPT.format(
            business=business_name,
            url=url,
            website=website,
            user=user,
            platforms="\n".join(f"- {p.platform.value}: {p.url}" for p in platforms),
            alignment=alignment,
        )
