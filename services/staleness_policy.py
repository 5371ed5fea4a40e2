# services/staleness_policy.py
import enum
from datetime import date, timedelta
from typing import Dict, Iterable, Optional

from domain.word import FacetType, Word


class FacetStatus(str, enum.Enum):
    FRESH = "fresh"
    STALE = "stale"
    ABSENT = "absent"


class StalenessPolicy:
    """
    Decides per (word, facet type, source) whether cached data is still usable.
    Rule: no provenance from the source -> ABSENT; most recent fetch older
    than the window -> STALE; otherwise FRESH.
    """

    def __init__(self, staleness_days: int = 90):
        if staleness_days < 0:
            raise ValueError("staleness_days must not be negative")
        self.window = timedelta(days=staleness_days)

    def status_for(self, word: Word, source_name: str, facet_type: FacetType,
                   today: date) -> Optional[FacetStatus]:
        """Returns None when there is nothing to check (examples of a word without examples)."""
        facets = word.facets(facet_type)

        if facet_type == FacetType.EXAMPLE:
            if not facets:
                return None
            # Every example must have been translated by this source
            if any(not e.has_outer_source(source_name) for e in facets):
                return FacetStatus.ABSENT
            dates = [e.get_recent_update_date(source_name) for e in facets]
            return self._by_age(min(dates), today)

        dates = [f.get_recent_update_date(source_name) for f in facets]
        dates = [d for d in dates if d is not None]
        if not dates:
            return FacetStatus.ABSENT
        return self._by_age(max(dates), today)

    def statuses(self, word: Word, source_name: str, facet_types: Iterable[FacetType],
                 today: date) -> Dict[FacetType, FacetStatus]:
        result = {}
        for facet_type in facet_types:
            status = self.status_for(word, source_name, facet_type, today)
            if status is not None:
                result[facet_type] = status
        return result

    def needs_fetch(self, word: Word, source_name: str, facet_types: Iterable[FacetType],
                    today: date) -> bool:
        """
        A source is asked again when any of its facet types is STALE, when an
        example still lacks its translation, or when it never answered for the
        word's shared facets. A shared facet type that is ABSENT next to a
        FRESH one means the source's last answer simply had nothing for it.
        """
        statuses = self.statuses(word, source_name, facet_types, today)
        if any(s == FacetStatus.STALE for s in statuses.values()):
            return True
        if statuses.get(FacetType.EXAMPLE) == FacetStatus.ABSENT:
            return True

        shared = [s for t, s in statuses.items() if t != FacetType.EXAMPLE]
        return bool(shared) and all(s == FacetStatus.ABSENT for s in shared)

    def _by_age(self, recent_update_date: date, today: date) -> FacetStatus:
        if today - recent_update_date > self.window:
            return FacetStatus.STALE
        return FacetStatus.FRESH
