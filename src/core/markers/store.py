"""
MarkerStore: resolves raw marker names, as printed on a lab report, to
Knowledge Base entries.

Lookup is a trimmed, case-folded exact match. Canonical names are checked
before aliases, so an alias can never shadow another entry's canonical name.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from .models import MarkerInfo, ReferenceRange, Sex

logger = logging.getLogger(__name__)


def _fold(name: str) -> str:
    return name.strip().casefold()


class MarkerStore:
    """
    Immutable index over a table of MarkerInfo entries.

    Either pass the entries in (tests substitute fixture tables this way)
    or call initialize() to load the bundled Knowledge Base.
    """

    def __init__(self, entries: Optional[Iterable[MarkerInfo]] = None):
        self._entries: List[MarkerInfo] = []
        self._by_name: Dict[str, MarkerInfo] = {}
        self._by_alias: Dict[str, MarkerInfo] = {}
        self._loaded = False
        if entries is not None:
            self._build(entries)

    def initialize(self) -> None:
        """Load all Knowledge Base entries from the data modules."""
        from .data.hematology import HEMATOLOGY_MARKERS
        from .data.metabolism import METABOLISM_MARKERS
        from .data.organ_function import ORGAN_FUNCTION_MARKERS
        from .data.nutrition import NUTRITION_MARKERS
        from .data.chemistry import CHEMISTRY_MARKERS

        self._build(
            HEMATOLOGY_MARKERS
            + METABOLISM_MARKERS
            + ORGAN_FUNCTION_MARKERS
            + NUTRITION_MARKERS
            + CHEMISTRY_MARKERS
        )
        logger.info(
            "MarkerStore loaded %d markers in %d categories",
            len(self._entries),
            len({e.category for e in self._entries}),
        )

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, raw_name: object) -> bool:
        return isinstance(raw_name, str) and self.resolve(raw_name) is not None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, raw_name: str) -> Optional[MarkerInfo]:
        """Return the entry whose name or alias matches raw_name, or None."""
        if not isinstance(raw_name, str):
            return None
        key = _fold(raw_name)
        if not key:
            return None
        info = self._by_name.get(key) or self._by_alias.get(key)
        if info is None:
            logger.debug("No Knowledge Base entry for marker %r", raw_name)
        return info

    def normalize_name(self, raw_name: str) -> str:
        """Canonical name for raw_name, or raw_name itself when unknown."""
        info = self.resolve(raw_name)
        return info.name if info else raw_name

    @staticmethod
    def get_reference(
        info: MarkerInfo,
        age: Optional[int] = None,
        sex: Optional[Sex] = None,
    ) -> ReferenceRange:
        """
        Pick the reference range that applies to a patient.

        A single range is returned as is. Otherwise an exact sex match wins
        and the first listed range is the fallback. Age is accepted for
        callers that have it; no entry is age-banded yet.
        """
        if len(info.references) == 1:
            return info.references[0]
        sex = Sex.parse(sex)
        if sex is not None:
            for ref in info.references:
                if ref.sex is sex:
                    return ref
        return info.references[0]

    def canonical_names(self) -> List[str]:
        return [e.name for e in self._entries]

    def entries(self) -> List[MarkerInfo]:
        return list(self._entries)

    # ------------------------------------------------------------------
    # Index building
    # ------------------------------------------------------------------

    def _build(self, entries: Iterable[MarkerInfo]) -> None:
        self._entries = list(entries)
        self._by_name = {}
        self._by_alias = {}
        for info in self._entries:
            self._index(self._by_name, info.name, info)
            for alias in info.aliases:
                self._index(self._by_alias, alias, info)
        self._loaded = True

    @staticmethod
    def _index(table: Dict[str, MarkerInfo], key: str, info: MarkerInfo) -> None:
        folded = _fold(key)
        existing = table.get(folded)
        if existing is None:
            table[folded] = info
        elif existing is not info:
            # first-listed entry keeps the key
            logger.warning(
                "Duplicate marker key %r: kept %s, ignored %s",
                key, existing.name, info.name,
            )


_default_store: Optional[MarkerStore] = None
_default_lock = threading.Lock()


def get_default_store() -> MarkerStore:
    """Process-wide store over the bundled Knowledge Base, built on first use."""
    global _default_store
    if _default_store is None:
        with _default_lock:
            if _default_store is None:
                store = MarkerStore()
                store.initialize()
                _default_store = store
    return _default_store
