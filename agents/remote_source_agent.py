# agents/remote_source_agent.py
import logging
from datetime import date
from typing import Callable, Dict, FrozenSet, List, Optional

import requests

from agents.enrichment_source import EnrichmentSource
from clients.enrichment_api_client import fetch_word_enrichment
from domain.errors import SourceUnavailable
from domain.supplementation import SupplementedWord, SupplementedWordExample
from domain.word import FacetType, Word, WordInterpretation, WordTranscription, WordTranslation
from utils.sanitization import clean_optional_text, clean_text_list
from utils.settings import ENRICHMENT_SOURCES, SOURCE_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class RemoteSourceAgent(EnrichmentSource):
    """
    Enrichment source backed by an HTTP endpoint speaking the neutral JSON
    format of clients.enrichment_api_client. Vendor-specific scrapers sit
    behind such endpoints.
    """

    def __init__(
        self,
        name: str,
        endpoint: str,
        facet_types: Optional[FrozenSet[FacetType]] = None,
        timeout: float = SOURCE_TIMEOUT_SECONDS,
        today: Callable[[], date] = date.today,
        session: Optional[requests.Session] = None,
    ):
        self.name = name
        self.endpoint = endpoint
        self.facet_types = frozenset(facet_types) if facet_types else frozenset(FacetType)
        self.timeout = timeout
        self.today = today
        self.session = session

    def supplement(self, word: Word) -> SupplementedWord:
        logger.info(f"📡 {self.name}: supplementing '{word.value}'")

        wanted_examples = word.get_examples_origins() if FacetType.EXAMPLE in self.facet_types else []
        data = fetch_word_enrichment(
            self.name,
            self.endpoint,
            word.value,
            examples=wanted_examples,
            timeout=self.timeout,
            session=self.session,
        )

        try:
            result = self._to_contribution(word, data)
        except (TypeError, AttributeError, KeyError) as e:
            raise SourceUnavailable(self.name, f"unparsable response: {e}", e)

        logger.info(
            f"📘 {self.name} returned {len(result.transcriptions)} transcriptions, "
            f"{len(result.interpretations)} interpretations, {len(result.translations)} translations, "
            f"{len(result.examples)} examples for '{word.value}'"
        )
        return result

    def _to_contribution(self, word: Word, data: Dict) -> SupplementedWord:
        result = SupplementedWord(
            examples_owner_id=word.user_id,
            value=word.value,
            outer_source_name=self.name,
            recent_update_date=self.today(),
            outer_source_url=clean_optional_text(data.get("url")) or self.endpoint,
        )

        if FacetType.TRANSCRIPTION in self.facet_types:
            result.add_transcriptions(
                WordTranscription(v) for v in clean_text_list(data.get("transcriptions")))
        if FacetType.INTERPRETATION in self.facet_types:
            result.add_interpretations(
                WordInterpretation(v) for v in clean_text_list(data.get("interpretations")))
        if FacetType.TRANSLATION in self.facet_types:
            result.add_translations(
                WordTranslation(v) for v in clean_text_list(data.get("translations")))
        if FacetType.EXAMPLE in self.facet_types:
            result.add_examples(self._examples(word, data.get("examples") or []))
            # Asked but untranslated examples are kept so the answer is cached too
            result.add_examples(
                SupplementedWordExample(origin=e.origin) for e in result.get_missing_examples(word.examples))

        return result

    def _examples(self, word: Word, raw_examples: List) -> List[SupplementedWordExample]:
        examples = []
        for raw in raw_examples:
            origin = clean_optional_text(raw.get("origin"))
            translate = clean_optional_text(raw.get("translate"))
            if not origin or not translate:
                continue
            if not word.contains_example_by(origin):
                continue
            examples.append(SupplementedWordExample(
                origin=origin,
                translate=translate,
                outer_source_url=clean_optional_text(raw.get("url")),
            ))
        return examples


def parse_source_config(raw: str) -> List[Dict]:
    """
    Parses "Name=https://endpoint[|facet+facet],Other=..." into
    [{"name", "endpoint", "facet_types"}]. Without a facet list the source
    serves every facet type (facet_types is None).

        Oxford=https://host/oxford|transcription+interpretation+translation
    """
    sources = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        name, sep, rest = part.partition("=")
        endpoint, _, facets = rest.partition("|")
        if not sep or not name.strip() or not endpoint.strip():
            raise ValueError(f"Invalid ENRICHMENT_SOURCES entry: {part!r}")
        sources.append({
            "name": name.strip(),
            "endpoint": endpoint.strip(),
            "facet_types": _parse_facet_types(facets, part),
        })
    return sources


def _parse_facet_types(raw: str, entry: str) -> Optional[FrozenSet[FacetType]]:
    names = [n.strip().lower() for n in raw.split("+") if n.strip()]
    if not names:
        return None
    try:
        return frozenset(FacetType(n) for n in names)
    except ValueError:
        raise ValueError(f"Unknown facet type in ENRICHMENT_SOURCES entry: {entry!r}")


def build_sources_from_settings(raw: str = ENRICHMENT_SOURCES) -> List[EnrichmentSource]:
    sources = [
        RemoteSourceAgent(s["name"], s["endpoint"], facet_types=s["facet_types"])
        for s in parse_source_config(raw)
    ]
    if not sources:
        logger.warning("No enrichment sources configured (ENRICHMENT_SOURCES is empty)")
    for source in sources:
        logger.info(f"🔌 Enrichment source {source.name}: {sorted(t.value for t in source.facet_types)}")
    return sources
