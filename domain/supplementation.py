# File: domain/supplementation.py
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from domain.word import (
    WordExample,
    WordInterpretation,
    WordTranscription,
    WordTranslation,
    normalize_key,
    same_source_name,
)


@dataclass
class SupplementedWordExample(WordExample):
    """An example of a word translated by an outer source."""
    outer_source_url: Optional[str] = None


@dataclass
class SupplementedWord:
    """
    Everything one outer source returned for one word at one point in time.
    Created fresh on every call to a source and discarded after merging.
    Identified by (value, outer_source_name).
    """
    examples_owner_id: Optional[str]
    value: str
    outer_source_name: str
    recent_update_date: date
    outer_source_url: Optional[str] = None
    interpretations: List[WordInterpretation] = field(default_factory=list)
    transcriptions: List[WordTranscription] = field(default_factory=list)
    translations: List[WordTranslation] = field(default_factory=list)
    examples: List[SupplementedWordExample] = field(default_factory=list)

    # ------------------------------------------------------------
    # Builders (dedup within a single source response)
    # ------------------------------------------------------------
    def add_transcription(self, transcription: WordTranscription) -> "SupplementedWord":
        _add_unique(self.transcriptions, transcription)
        return self

    def add_transcriptions(self, transcriptions: Iterable[WordTranscription]) -> "SupplementedWord":
        for t in transcriptions:
            self.add_transcription(t)
        return self

    def add_interpretation(self, interpretation: WordInterpretation) -> "SupplementedWord":
        _add_unique(self.interpretations, interpretation)
        return self

    def add_interpretations(self, interpretations: Iterable[WordInterpretation]) -> "SupplementedWord":
        for i in interpretations:
            self.add_interpretation(i)
        return self

    def add_translation(self, translation: WordTranslation) -> "SupplementedWord":
        _add_unique(self.translations, translation)
        return self

    def add_translations(self, translations: Iterable[WordTranslation]) -> "SupplementedWord":
        for t in translations:
            self.add_translation(t)
        return self

    def add_example(self, example: SupplementedWordExample) -> "SupplementedWord":
        _add_unique(self.examples, example)
        return self

    def add_examples(self, examples: Iterable[SupplementedWordExample]) -> "SupplementedWord":
        for e in examples:
            self.add_example(e)
        return self

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def get_missing_examples(self, examples: Iterable[WordExample]) -> List[WordExample]:
        """Examples from the given list whose origin this contribution does not contain."""
        return [e for e in examples if not self.contains_example_by(e.origin)]

    def contains_example_by(self, origin: str) -> bool:
        key = normalize_key(origin)
        return any(e.normalized_key() == key for e in self.examples)

    def contains_examples_without_translate(self) -> bool:
        return any(e.translate is None for e in self.examples)

    def outer_source_name_is(self, outer_source_name: Optional[str]) -> bool:
        return same_source_name(outer_source_name, self.outer_source_name)

    def get_days_after_recent_update_date(self, today: date) -> int:
        return (today - self.recent_update_date).days

    def get_months_after_recent_update_date(self, today: date) -> int:
        start = self.recent_update_date
        months = (today.year - start.year) * 12 + (today.month - start.month)
        # Only whole months count
        if months > 0 and today.day < start.day:
            months -= 1
        elif months < 0 and today.day > start.day:
            months += 1
        return months

    def is_empty(self) -> bool:
        return not (self.transcriptions or self.interpretations or self.translations or self.examples)

    # ------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------
    def remove_transcription_by(self, value: str) -> "SupplementedWord":
        self.transcriptions = _without(self.transcriptions, value)
        return self

    def remove_interpretation_by(self, value: str) -> "SupplementedWord":
        self.interpretations = _without(self.interpretations, value)
        return self

    def remove_translation_by(self, value: str) -> "SupplementedWord":
        self.translations = _without(self.translations, value)
        return self

    def remove_example_by(self, origin: str) -> "SupplementedWord":
        self.examples = _without(self.examples, origin)
        return self

    def replace_example(self, origin: str, new_example: SupplementedWordExample) -> "SupplementedWord":
        key = normalize_key(origin)
        for i, example in enumerate(self.examples):
            if example.normalized_key() == key:
                self.examples[i] = new_example
                break
        return self


def _add_unique(facets: list, facet) -> None:
    if not any(existing.same_as(facet) for existing in facets):
        facets.append(facet)


def _without(facets: list, value: str) -> list:
    key = normalize_key(value)
    return [f for f in facets if f.normalized_key() != key]
