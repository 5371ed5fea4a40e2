# File: domain/word.py
"""
Word aggregate and its facet value types.

A facet is one of: transcription, interpretation, translation, example.
Facets of the same type are compared only through ``normalized_key()``
(case-insensitive value, or origin for examples). Every facet carries the
provenance entries of the external sources that confirmed it; facets
authored by the user may carry none.
"""
import enum
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional


class FacetType(str, enum.Enum):
    TRANSCRIPTION = "transcription"
    INTERPRETATION = "interpretation"
    TRANSLATION = "translation"
    EXAMPLE = "example"


def normalize_key(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def same_source_name(a: Optional[str], b: Optional[str]) -> bool:
    return a == b or (a is not None and b is not None and a.lower() == b.lower())


@dataclass(frozen=True)
class OuterSource:
    """One fetch event for a transcription, interpretation or translation."""
    url: Optional[str]
    source_name: str
    recent_update_date: date


@dataclass(frozen=True)
class ExampleOuterSource:
    """One fetch event for the translation of an example."""
    url: Optional[str]
    source_name: str
    recent_update_date: date
    translate: Optional[str]


class _SourcedFacet(ABC):
    """Provenance helpers shared by all facet types."""

    outer_source: list

    @abstractmethod
    def normalized_key(self) -> str:
        """Case-insensitive identity of the facet value."""

    def same_as(self, other) -> bool:
        return self.normalized_key() == other.normalized_key()

    def add_source_info(self, info):
        self.outer_source.append(info)
        return self

    def has_outer_source(self, source_name: str) -> bool:
        return any(same_source_name(s.source_name, source_name) for s in self.outer_source)

    def get_recent_update_date(self, source_name: str) -> Optional[date]:
        dates = [
            s.recent_update_date
            for s in self.outer_source
            if same_source_name(s.source_name, source_name)
        ]
        return max(dates) if dates else None

    def _merge_outer_source(self, other) -> None:
        # One entry per source survives; the most recent fetch wins.
        for info in other.outer_source:
            index = next(
                (i for i, s in enumerate(self.outer_source)
                 if same_source_name(s.source_name, info.source_name)),
                None
            )
            if index is None:
                self.outer_source.append(info)
            elif info.recent_update_date >= self.outer_source[index].recent_update_date:
                self.outer_source[index] = info

    def merge(self, other) -> bool:
        if not self.same_as(other):
            return False
        self._merge_outer_source(other)
        return True

    def copy(self):
        return replace(self, outer_source=list(self.outer_source))


@dataclass
class WordTranscription(_SourcedFacet):
    value: str
    note: Optional[str] = None
    outer_source: List[OuterSource] = field(default_factory=list)

    def normalized_key(self) -> str:
        return normalize_key(self.value)


@dataclass
class WordInterpretation(_SourcedFacet):
    value: str
    outer_source: List[OuterSource] = field(default_factory=list)

    def normalized_key(self) -> str:
        return normalize_key(self.value)


@dataclass
class WordTranslation(_SourcedFacet):
    value: str
    note: Optional[str] = None
    outer_source: List[OuterSource] = field(default_factory=list)

    def normalized_key(self) -> str:
        return normalize_key(self.value)


@dataclass
class WordExample(_SourcedFacet):
    origin: str
    translate: Optional[str] = None
    note: Optional[str] = None
    outer_source: List[ExampleOuterSource] = field(default_factory=list)

    def normalized_key(self) -> str:
        return normalize_key(self.origin)

    def merge(self, other) -> bool:
        """
        Merges translations of the same example received from outer sources.
        The user's own translation is kept; an empty one is filled from the
        earliest fetched translation, so the primary translation stays put as
        more sources answer. Entries without a translation record that the
        source was asked and had none.
        """
        if not super().merge(other):
            return False
        if self.translate is None:
            translated = [s for s in self.outer_source if s.translate is not None]
            if translated:
                self.translate = min(translated, key=lambda s: s.recent_update_date).translate
        return True


@dataclass
class Word:
    value: str
    user_id: Optional[str] = None
    id: Optional[str] = None
    note: Optional[str] = None
    interpretations: List[WordInterpretation] = field(default_factory=list)
    transcriptions: List[WordTranscription] = field(default_factory=list)
    translations: List[WordTranslation] = field(default_factory=list)
    examples: List[WordExample] = field(default_factory=list)

    def generate_id_if_absent(self) -> str:
        if self.id is None:
            self.id = str(uuid.uuid4())
        return self.id

    def add_interpretation(self, interpretation: WordInterpretation) -> "Word":
        self.interpretations.append(interpretation)
        return self

    def add_transcription(self, transcription: WordTranscription) -> "Word":
        self.transcriptions.append(transcription)
        return self

    def add_translation(self, translation: WordTranslation) -> "Word":
        self.translations.append(translation)
        return self

    def add_example(self, example: WordExample) -> "Word":
        self.examples.append(example)
        return self

    def set_examples(self, examples: List[WordExample]) -> "Word":
        self.examples = list(examples)
        return self

    def remove_example_by(self, origin: str) -> "Word":
        key = normalize_key(origin)
        self.examples = [e for e in self.examples if e.normalized_key() != key]
        return self

    def contains_example_by(self, origin: str) -> bool:
        key = normalize_key(origin)
        return any(e.normalized_key() == key for e in self.examples)

    def get_examples_origins(self) -> List[str]:
        return [e.origin for e in self.examples]

    def merge_transcription(self, transcription: WordTranscription) -> WordTranscription:
        return _merge_or_append(self.transcriptions, transcription)

    def merge_interpretation(self, interpretation: WordInterpretation) -> WordInterpretation:
        return _merge_or_append(self.interpretations, interpretation)

    def merge_translation(self, translation: WordTranslation) -> WordTranslation:
        return _merge_or_append(self.translations, translation)

    def merge_example_if_present(self, example: WordExample) -> bool:
        """Example sentences are user-authored: unknown origins are never added."""
        return any(existing.merge(example) for existing in self.examples)

    def facets(self, facet_type: FacetType) -> list:
        if facet_type == FacetType.TRANSCRIPTION:
            return self.transcriptions
        if facet_type == FacetType.INTERPRETATION:
            return self.interpretations
        if facet_type == FacetType.TRANSLATION:
            return self.translations
        return self.examples


def _merge_or_append(facets: list, facet):
    for existing in facets:
        if existing.merge(facet):
            return existing
    added = facet.copy()
    added.outer_source = []
    added._merge_outer_source(facet)
    facets.append(added)
    return added
