# agents/enrichment_source.py
from abc import ABC, abstractmethod
from typing import FrozenSet

from domain.supplementation import SupplementedWord
from domain.word import FacetType, Word


class EnrichmentSource(ABC):
    """
    One outer provider of transcriptions, interpretations, translations or
    example translations. Implementations do not touch the enrichment cache;
    staleness and persistence are handled by the orchestrator.
    """

    name: str = ""
    facet_types: FrozenSet[FacetType] = frozenset(FacetType)

    @abstractmethod
    def supplement(self, word: Word) -> SupplementedWord:
        """
        Returns what this source knows about the word right now.
        Raises SourceUnavailable on network, parse or rate-limit failure.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
