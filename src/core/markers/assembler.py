"""
ReportAssembler: turns the raw extraction returned by the LLM into a Report.

The raw object has the shape the extraction prompt asks for:
labName, reportDate, patientName, patientAge, patientSex and a list of
markers (name, originalName, value, unit, refMin, refMax, refText, category).
Flags are computed from the bounds printed on the report, never from the
Knowledge Base ranges.
"""

import logging
import math
import uuid
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from .flags import classify
from .models import AssemblyResult, Marker, MarkerCategory, Report, Sex
from .store import MarkerStore, get_default_store

logger = logging.getLogger(__name__)

UNKNOWN_LAB = "Laboratório desconhecido"
MISSING_BOUND = "—"


def _to_number(value: Any) -> Optional[float]:
    """Numeric value of an int, float or numeric string; None otherwise."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip().replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def format_bound(bound: Optional[float]) -> str:
    if bound is None:
        return MISSING_BOUND
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def format_ref_text(ref_min: Optional[float], ref_max: Optional[float]) -> str:
    return f"{format_bound(ref_min)} - {format_bound(ref_max)}"


class ReportAssembler:
    """Builds Reports against one MarkerStore."""

    def __init__(self, store: Optional[MarkerStore] = None):
        self.store = store or get_default_store()

    def assemble(
        self, raw: Dict[str, Any], today: Optional[date] = None
    ) -> AssemblyResult:
        """Assemble a Report; markers that cannot be used are listed as warnings."""
        warnings: List[str] = []
        unresolved: List[str] = []
        markers: List[Marker] = []

        raw_markers = raw.get("markers") or []
        if not isinstance(raw_markers, list):
            warnings.append("Lista de marcadores inválida na extração")
            raw_markers = []

        for position, raw_marker in enumerate(raw_markers):
            marker, problem = self._build_marker(raw_marker, position)
            if marker is None:
                logger.warning("Skipping marker %d: %s", position, problem)
                warnings.append(problem)
                continue
            if self.store.resolve(marker.name) is None:
                unresolved.append(marker.name)
            markers.append(marker)

        today = today or date.today()
        age = _to_number(raw.get("patientAge"))
        report = Report(
            id=str(uuid.uuid4()),
            lab_name=_text(raw.get("labName")) or UNKNOWN_LAB,
            report_date=_text(raw.get("reportDate")) or today.isoformat(),
            markers=tuple(markers),
            created_at=datetime.now(timezone.utc).isoformat(),
            patient_name=_text(raw.get("patientName")) or None,
            patient_age=int(age) if age is not None else None,
            patient_sex=Sex.parse(raw.get("patientSex")),
        )
        if unresolved:
            logger.debug("Unresolved markers kept with raw names: %s", unresolved)
        return AssemblyResult(report=report, warnings=warnings, unresolved=unresolved)

    def _build_marker(
        self, raw: Any, position: int
    ) -> Tuple[Optional[Marker], str]:
        if not isinstance(raw, dict):
            return None, f"Marcador #{position + 1} com formato inválido"

        raw_name = _text(raw.get("name")) or _text(raw.get("originalName"))
        if not raw_name:
            return None, f"Marcador #{position + 1} sem nome"

        value = _to_number(raw.get("value"))
        if value is None:
            return None, f"{raw_name}: valor não numérico ({raw.get('value')!r})"

        info = self.store.resolve(raw_name)
        ref_min = _to_number(raw.get("refMin"))
        ref_max = _to_number(raw.get("refMax"))

        category = MarkerCategory.parse(raw.get("category"))
        if category is None:
            category = info.category if info else MarkerCategory.OTHER

        original_name = raw.get("originalName")
        if not isinstance(original_name, str) or not original_name:
            original_name = raw.get("name") if isinstance(raw.get("name"), str) else raw_name

        marker = Marker(
            id=str(uuid.uuid4()),
            name=info.name if info else raw_name,
            original_name=original_name,
            value=value,
            unit=info.unit if info else _text(raw.get("unit")),
            ref_min=ref_min,
            ref_max=ref_max,
            ref_text=_text(raw.get("refText")) or format_ref_text(ref_min, ref_max),
            category=category,
            flag=classify(value, ref_min, ref_max),
        )
        return marker, ""


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def assemble_report(
    raw: Dict[str, Any],
    store: Optional[MarkerStore] = None,
    today: Optional[date] = None,
) -> Report:
    """Convenience wrapper returning only the Report."""
    return ReportAssembler(store).assemble(raw, today=today).report
