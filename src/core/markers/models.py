"""Data models for clinical lab markers and reports."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class MarkerCategory(Enum):
    HEMATOLOGY = "hematology"
    METABOLISM = "metabolism"
    RENAL = "renal"
    HEPATIC = "hepatic"
    THYROID = "thyroid"
    IRON = "iron"
    VITAMINS = "vitamins"
    INFLAMMATION = "inflammation"
    COAGULATION = "coagulation"
    LIPIDS = "lipids"
    ELECTROLYTES = "electrolytes"
    HORMONES = "hormones"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> Optional["MarkerCategory"]:
        """Return the category for a raw string, or None if it is not one."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class MarkerFlag(Enum):
    NORMAL = "normal"
    LOW = "low"
    HIGH = "high"
    CRITICAL_LOW = "critical_low"
    CRITICAL_HIGH = "critical_high"

    @property
    def is_critical(self) -> bool:
        return self in (MarkerFlag.CRITICAL_LOW, MarkerFlag.CRITICAL_HIGH)


class Sex(Enum):
    MALE = "M"
    FEMALE = "F"

    @classmethod
    def parse(cls, value: Any) -> Optional["Sex"]:
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().upper() in ("M", "F"):
            return cls(value.strip().upper())
        return None


CATEGORY_LABELS: Dict[MarkerCategory, str] = {
    MarkerCategory.HEMATOLOGY: "Hematologia",
    MarkerCategory.METABOLISM: "Metabolismo",
    MarkerCategory.RENAL: "Função Renal",
    MarkerCategory.HEPATIC: "Função Hepática",
    MarkerCategory.THYROID: "Função Tiroideia",
    MarkerCategory.IRON: "Metabolismo do Ferro",
    MarkerCategory.VITAMINS: "Vitaminas",
    MarkerCategory.INFLAMMATION: "Inflamação",
    MarkerCategory.COAGULATION: "Coagulação",
    MarkerCategory.LIPIDS: "Lípidos",
    MarkerCategory.ELECTROLYTES: "Eletrólitos",
    MarkerCategory.HORMONES: "Hormonas",
    MarkerCategory.OTHER: "Outros",
}

FLAG_EMOJI: Dict[MarkerFlag, str] = {
    MarkerFlag.NORMAL: "🟢",
    MarkerFlag.LOW: "🟡",
    MarkerFlag.HIGH: "🟡",
    MarkerFlag.CRITICAL_LOW: "🔴",
    MarkerFlag.CRITICAL_HIGH: "🔴",
}


@dataclass(frozen=True)
class ReferenceRange:
    min: Optional[float] = None
    max: Optional[float] = None
    sex: Optional[Sex] = None
    age_group: Optional[str] = None  # "adulto", "criança", ...

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "sex": self.sex.value if self.sex else None,
            "ageGroup": self.age_group,
        }


@dataclass(frozen=True)
class MarkerInfo:
    """A Knowledge Base entry: one known clinical marker."""
    name: str
    aliases: Tuple[str, ...]
    unit: str
    category: MarkerCategory
    references: Tuple[ReferenceRange, ...]
    what_is: str
    what_for: str
    high_meaning: str
    low_meaning: str
    common_causes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "aliases": list(self.aliases),
            "unit": self.unit,
            "category": self.category.value,
            "references": [r.to_dict() for r in self.references],
            "whatIs": self.what_is,
            "whatFor": self.what_for,
            "highMeaning": self.high_meaning,
            "lowMeaning": self.low_meaning,
            "commonCauses": list(self.common_causes),
        }


def _number(data: Dict[str, Any], key: str, required: bool = False) -> Optional[float]:
    """A finite JSON number from `data`, or None when absent and optional."""
    value = data[key] if required else data.get(key)
    if value is None and not required:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return value


@dataclass(frozen=True)
class Marker:
    """A single measured marker, owned by its Report."""
    id: str
    name: str
    original_name: str
    value: float
    unit: str
    ref_min: Optional[float]
    ref_max: Optional[float]
    ref_text: str
    category: MarkerCategory
    flag: MarkerFlag

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "originalName": self.original_name,
            "value": self.value,
            "unit": self.unit,
            "refMin": self.ref_min,
            "refMax": self.ref_max,
            "refText": self.ref_text,
            "category": self.category.value,
            "flag": self.flag.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Marker":
        return cls(
            id=data["id"],
            name=data["name"],
            original_name=data.get("originalName", data["name"]),
            value=_number(data, "value", required=True),
            unit=data.get("unit", ""),
            ref_min=_number(data, "refMin"),
            ref_max=_number(data, "refMax"),
            ref_text=data.get("refText", ""),
            category=MarkerCategory.parse(data.get("category")) or MarkerCategory.OTHER,
            flag=MarkerFlag(data.get("flag", MarkerFlag.NORMAL.value)),
        )


@dataclass(frozen=True)
class Report:
    """A parsed lab report. Held by the client only, never persisted."""
    id: str
    lab_name: str
    report_date: str  # ISO date
    markers: Tuple[Marker, ...]
    created_at: str
    patient_name: Optional[str] = None
    patient_age: Optional[int] = None
    patient_sex: Optional[Sex] = None

    def markers_by_category(self) -> Dict[MarkerCategory, List[Marker]]:
        groups: Dict[MarkerCategory, List[Marker]] = {}
        for marker in self.markers:
            groups.setdefault(marker.category, []).append(marker)
        return groups

    def flag_counts(self) -> Dict[str, int]:
        counts = {"normal": 0, "warning": 0, "critical": 0}
        for marker in self.markers:
            if marker.flag is MarkerFlag.NORMAL:
                counts["normal"] += 1
            elif marker.flag.is_critical:
                counts["critical"] += 1
            else:
                counts["warning"] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "labName": self.lab_name,
            "reportDate": self.report_date,
            "patientName": self.patient_name,
            "patientAge": self.patient_age,
            "patientSex": self.patient_sex.value if self.patient_sex else None,
            "markers": [m.to_dict() for m in self.markers],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Report":
        return cls(
            id=data["id"],
            lab_name=data.get("labName", ""),
            report_date=data.get("reportDate", ""),
            markers=tuple(Marker.from_dict(m) for m in data.get("markers", [])),
            created_at=data.get("createdAt", ""),
            patient_name=data.get("patientName"),
            patient_age=data.get("patientAge"),
            patient_sex=Sex.parse(data.get("patientSex")),
        )


@dataclass
class AssemblyResult:
    """Report plus the per-marker problems found while assembling it."""
    report: Report
    warnings: List[str] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)
