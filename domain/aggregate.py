# File: domain/aggregate.py
import logging
from typing import Dict, List, Union

from domain.supplementation import SupplementedWord
from domain.word import (
    ExampleOuterSource,
    OuterSource,
    Word,
    WordExample,
    WordInterpretation,
    WordTranscription,
    WordTranslation,
)

logger = logging.getLogger(__name__)

Facet = Union[WordTranscription, WordInterpretation, WordTranslation, WordExample]


class AggregateSupplementedWord:
    """
    Canonical merged view of one word across any number of outer sources.

    Seeded from the word's own facets (user-authored content plus whatever the
    cache already hydrated into them). Merges are additive only: canonical
    lists never lose an entry and every merge appends a provenance entry, even
    when the same source re-confirms a value it already supplied.

    Not thread-safe. Contributions fetched concurrently must be folded in
    from a single thread.
    """

    def __init__(self, word: Word):
        self.word = word
        self._transcriptions: List[WordTranscription] = [t.copy() for t in word.transcriptions]
        self._interpretations: List[WordInterpretation] = [i.copy() for i in word.interpretations]
        self._translations: List[WordTranslation] = [t.copy() for t in word.translations]
        self._examples: List[WordExample] = [e.copy() for e in word.examples]

        self._transcriptions_outer_source: Dict[str, List[OuterSource]] = _seed(self._transcriptions)
        self._interpretations_outer_source: Dict[str, List[OuterSource]] = _seed(self._interpretations)
        self._translations_outer_source: Dict[str, List[OuterSource]] = _seed(self._translations)
        self._examples_outer_source: Dict[str, List[ExampleOuterSource]] = _seed(self._examples)

    def merge(self, contribution: SupplementedWord) -> "AggregateSupplementedWord":
        source = OuterSource(
            url=contribution.outer_source_url,
            source_name=contribution.outer_source_name,
            recent_update_date=contribution.recent_update_date,
        )

        _merge_facets(contribution.transcriptions, self._transcriptions,
                      self._transcriptions_outer_source, source)
        _merge_facets(contribution.interpretations, self._interpretations,
                      self._interpretations_outer_source, source)
        _merge_facets(contribution.translations, self._translations,
                      self._translations_outer_source, source)

        for example in contribution.examples:
            bucket = self._examples_outer_source.get(example.normalized_key())
            if bucket is None:
                logger.debug(
                    f"Ignoring example '{example.origin}' from {contribution.outer_source_name}: "
                    f"word '{self.word.value}' has no such example"
                )
                continue
            bucket.append(ExampleOuterSource(
                url=example.outer_source_url or contribution.outer_source_url,
                source_name=contribution.outer_source_name,
                recent_update_date=contribution.recent_update_date,
                translate=example.translate,
            ))

        return self

    def get_transcriptions(self) -> List[WordTranscription]:
        return list(self._transcriptions)

    def get_interpretations(self) -> List[WordInterpretation]:
        return list(self._interpretations)

    def get_translations(self) -> List[WordTranslation]:
        return list(self._translations)

    def get_examples(self) -> List[WordExample]:
        return list(self._examples)

    def get_outer_source(self, facet: Facet) -> list:
        """Provenance of a canonical facet value; empty when no source confirmed it."""
        if isinstance(facet, WordExample):
            bucket = self._examples_outer_source.get(facet.normalized_key())
        elif isinstance(facet, WordTranscription):
            bucket = self._transcriptions_outer_source.get(facet.normalized_key())
        elif isinstance(facet, WordInterpretation):
            bucket = self._interpretations_outer_source.get(facet.normalized_key())
        elif isinstance(facet, WordTranslation):
            bucket = self._translations_outer_source.get(facet.normalized_key())
        else:
            raise TypeError(f"Unsupported facet type: {type(facet).__name__}")
        return list(bucket) if bucket else []

    def apply_to_word(self) -> Word:
        """
        Folds the canonical view back into the owning word.
        The word keeps one provenance entry per source for each facet (the
        most recent one), which is the shape the enrichment cache stores.
        """
        for t in self._transcriptions:
            self.word.merge_transcription(
                _with_sources(t, self._transcriptions_outer_source[t.normalized_key()]))
        for i in self._interpretations:
            self.word.merge_interpretation(
                _with_sources(i, self._interpretations_outer_source[i.normalized_key()]))
        for t in self._translations:
            self.word.merge_translation(
                _with_sources(t, self._translations_outer_source[t.normalized_key()]))
        for e in self._examples:
            self.word.merge_example_if_present(
                _with_sources(e, self._examples_outer_source[e.normalized_key()]))
        return self.word

    def __repr__(self) -> str:
        return (
            f"AggregateSupplementedWord(value={self.word.value!r}, "
            f"transcriptions={len(self._transcriptions)}, "
            f"interpretations={len(self._interpretations)}, "
            f"translations={len(self._translations)}, "
            f"examples={len(self._examples)})"
        )


def _seed(facets: list) -> dict:
    buckets = {}
    for facet in facets:
        buckets.setdefault(facet.normalized_key(), []).extend(facet.outer_source)
    return buckets


def _merge_facets(incoming: list, canonical: list, buckets: dict, source: OuterSource) -> None:
    for facet in incoming:
        key = facet.normalized_key()
        if key not in buckets:
            added = facet.copy()
            added.outer_source = []
            canonical.append(added)
            buckets[key] = []
        buckets[key].append(source)


def _with_sources(facet, sources: list):
    merged = facet.copy()
    merged.outer_source = list(sources)
    return merged
