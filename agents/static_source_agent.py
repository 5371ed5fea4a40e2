# agents/static_source_agent.py
from datetime import date
from typing import Callable, Dict, FrozenSet, Optional

from agents.enrichment_source import EnrichmentSource
from domain.supplementation import SupplementedWord, SupplementedWordExample
from domain.word import FacetType, Word, WordInterpretation, WordTranscription, WordTranslation, normalize_key


class StaticSourceAgent(EnrichmentSource):
    """
    In-process source answering from a fixed dictionary, keyed by word value:

        {"run": {"transcriptions": [...], "interpretations": [...],
                 "translations": [...], "examples": {"I run": "Я бегаю"}}}

    Used for local development and as a deterministic source in tests.
    """

    def __init__(
        self,
        name: str,
        entries: Dict[str, Dict],
        url: Optional[str] = None,
        facet_types: Optional[FrozenSet[FacetType]] = None,
        today: Callable[[], date] = date.today,
    ):
        self.name = name
        self.entries = {normalize_key(k): v for k, v in entries.items()}
        self.url = url
        self.facet_types = frozenset(facet_types) if facet_types else frozenset(FacetType)
        self.today = today
        self.calls = 0

    def supplement(self, word: Word) -> SupplementedWord:
        self.calls += 1
        entry = self.entries.get(normalize_key(word.value), {})

        result = SupplementedWord(
            examples_owner_id=word.user_id,
            value=word.value,
            outer_source_name=self.name,
            recent_update_date=self.today(),
            outer_source_url=self.url,
        )
        if FacetType.TRANSCRIPTION in self.facet_types:
            result.add_transcriptions(WordTranscription(v) for v in entry.get("transcriptions", []))
        if FacetType.INTERPRETATION in self.facet_types:
            result.add_interpretations(WordInterpretation(v) for v in entry.get("interpretations", []))
        if FacetType.TRANSLATION in self.facet_types:
            result.add_translations(WordTranslation(v) for v in entry.get("translations", []))
        if FacetType.EXAMPLE in self.facet_types:
            examples = {normalize_key(k): v for k, v in entry.get("examples", {}).items()}
            for example in word.examples:
                translate = examples.get(example.normalized_key())
                result.add_example(SupplementedWordExample(origin=example.origin, translate=translate))
        return result
