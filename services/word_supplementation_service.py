# File: services/word_supplementation_service.py
import copy
import logging
from dataclasses import fields
from datetime import date
from typing import Callable, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from agents.enrichment_source import EnrichmentSource
from database.db import SessionLocal
from domain.aggregate import AggregateSupplementedWord
from domain.errors import PersistenceFailure, SourceUnavailable
from domain.validation import validate_word
from domain.word import Word
from services.staleness_policy import StalenessPolicy
from services.word_outer_source_buffer import WordOuterSourceBuffer
from utils.settings import STALENESS_DAYS

logger = logging.getLogger(__name__)


class WordSupplementationService:
    """
    Enriches a word with data from outer sources through the enrichment cache.

    PIPELINE:
    0. Validate the input word before any I/O
    1. Read transaction: hydrate the word from the cache
    2. No transaction: ask every non-fresh source, one after another
    3. Fold contributions into the word and validate it
    4. Write transaction: persist the merged outer source data

    Network calls never run inside a database transaction. The given word
    is updated only when every step succeeded.
    """

    def __init__(
        self,
        buffer: WordOuterSourceBuffer,
        sources: Sequence[EnrichmentSource],
        session_factory: Callable = SessionLocal,
        today: Callable[[], date] = date.today,
        staleness_days: int = STALENESS_DAYS,
    ):
        self.buffer = buffer
        self.sources: List[EnrichmentSource] = list(sources)
        self.session_factory = session_factory
        self.today = today
        self.policy = StalenessPolicy(staleness_days)

    def supplement(self, word: Word) -> Word:
        self.supplement_aggregate(word)
        return word

    def supplement_aggregate(self, word: Word) -> AggregateSupplementedWord:
        """
        Runs the pipeline and returns the canonical view with full provenance.
        The pipeline works on a copy; the given word receives the result only
        after it passed validation, so a ValidationFailure leaves it untouched.
        """
        validate_word(word)
        working = copy.deepcopy(word)

        # --------------------------------------------
        # 1. Cached data
        # --------------------------------------------
        self._in_transaction("read", lambda db: self.buffer.merge_from_outer_source(db, working))

        # --------------------------------------------
        # 2. Outer sources (fail-open)
        # --------------------------------------------
        aggregate = AggregateSupplementedWord(working)
        today = self.today()
        fetched = 0

        for source in self.sources:
            if not self.policy.needs_fetch(working, source.name, source.facet_types, today):
                logger.info(f"Skip {source.name} for '{word.value}': cached data is fresh")
                continue

            try:
                contribution = source.supplement(working)
            except SourceUnavailable as e:
                logger.warning(f"Source {source.name} unavailable for '{word.value}': {e.reason}")
                continue
            except Exception as e:
                logger.error(f"Source {source.name} failed for '{word.value}': {e}", exc_info=True)
                continue

            if contribution is None:
                continue
            aggregate.merge(contribution)
            fetched += 1

        # --------------------------------------------
        # 3. Fold + validate (nothing written on failure)
        # --------------------------------------------
        aggregate.apply_to_word()
        validate_word(working)

        # --------------------------------------------
        # 4. Write back
        # --------------------------------------------
        self._in_transaction("write", lambda db: self.buffer.save_data_from_outer_source(db, working))

        for f in fields(Word):
            setattr(word, f.name, getattr(working, f.name))
        aggregate.word = word

        logger.info(f"📦 '{word.value}' supplemented ({fetched}/{len(self.sources)} sources fetched)")
        return aggregate

    def cleanup_orphaned_example_cache(self) -> int:
        """Maintenance: drops cached translations of examples no word owns anymore."""
        return self._in_transaction("cleanup", self.buffer.delete_unused_outer_source_examples)

    def _in_transaction(self, operation: str, work: Callable):
        try:
            with self.session_factory() as db:
                with db.begin():
                    return work(db)
        except SQLAlchemyError as e:
            logger.error(f"❌ Enrichment cache {operation} failed: {e}", exc_info=True)
            raise PersistenceFailure(operation, e) from e


def build_default_service(sources: Optional[Sequence[EnrichmentSource]] = None) -> WordSupplementationService:
    from agents.remote_source_agent import build_sources_from_settings

    return WordSupplementationService(
        buffer=WordOuterSourceBuffer(),
        sources=sources if sources is not None else build_sources_from_settings(),
    )
