# File: services/word_outer_source_buffer.py
import logging
from typing import Callable, Iterable, List, Type

from sqlalchemy import delete, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from database.models.outer_source_model import (
    ExampleOuterSourceRow,
    InterpretationOuterSource,
    TranscriptionOuterSource,
    TranslationOuterSource,
)
from database.models.word_model import WordExampleRow
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


class WordOuterSourceBuffer:
    """
    Durable cache of the transcriptions, interpretations, translations and
    example translations received from outer sources.

    Every method works inside the session it is given; the caller owns the
    transaction. Shared facets are replaced wholesale per word value, while
    example translations are upserted per (word id, example, source).
    """

    # ------------------------------------------------------------
    # READ
    # ------------------------------------------------------------
    def merge_from_outer_source(self, db: Session, word: Word) -> Word:
        """Hydrates the word with everything previously cached for it."""
        for t in self._read_shared(db, TranscriptionOuterSource, TranscriptionOuterSource.transcription,
                                   word.value, lambda v: WordTranscription(v)):
            word.merge_transcription(t)

        for i in self._read_shared(db, InterpretationOuterSource, InterpretationOuterSource.interpretation,
                                   word.value, lambda v: WordInterpretation(v)):
            word.merge_interpretation(i)

        for t in self._read_shared(db, TranslationOuterSource, TranslationOuterSource.translation,
                                   word.value, lambda v: WordTranslation(v)):
            word.merge_translation(t)

        for e in self._read_examples(db, word):
            word.merge_example_if_present(e)

        return word

    def _read_shared(self, db: Session, model: Type, value_column, word_value: str,
                     factory: Callable[[str], object]) -> List:
        rows = db.scalars(
            select(model)
            .where(model.word_value == word_value)
            .order_by(value_column, model.outer_source_name)
        ).all()

        facets = []
        current = None
        current_value = None
        for row in rows:
            value = getattr(row, value_column.key)
            if current is None or value != current_value:
                current = factory(value)
                current_value = value
                facets.append(current)

            current.add_source_info(OuterSource(
                url=row.outer_source_url,
                source_name=row.outer_source_name,
                recent_update_date=row.recent_update_date,
            ))
        return facets

    def _read_examples(self, db: Session, word: Word) -> List[WordExample]:
        origins = word.get_examples_origins()
        if word.id is None or not origins:
            return []

        rows = db.scalars(
            select(ExampleOuterSourceRow)
            .where(
                ExampleOuterSourceRow.word_id == word.id,
                ExampleOuterSourceRow.example.in_(origins),
            )
            .order_by(ExampleOuterSourceRow.example, ExampleOuterSourceRow.outer_source_name)
        ).all()

        examples = []
        current = None
        for row in rows:
            if current is None or row.example != current.origin:
                current = WordExample(origin=row.example)
                examples.append(current)

            current.add_source_info(ExampleOuterSource(
                url=row.outer_source_url,
                source_name=row.outer_source_name,
                recent_update_date=row.recent_update_date,
                translate=row.example_translate,
            ))
        return examples

    # ------------------------------------------------------------
    # WRITE
    # ------------------------------------------------------------
    def save_data_from_outer_source(self, db: Session, word: Word) -> None:
        """Persists every facet of the word that carries outer source data."""
        self._replace_shared(db, TranscriptionOuterSource, "transcription", word.value, word.transcriptions)
        self._replace_shared(db, InterpretationOuterSource, "interpretation", word.value, word.interpretations)
        self._replace_shared(db, TranslationOuterSource, "translation", word.value, word.translations)
        self._upsert_examples(db, word)

    def _replace_shared(self, db: Session, model: Type, value_field: str,
                        word_value: str, facets: Iterable) -> None:
        db.execute(delete(model).where(model.word_value == word_value))

        rows = [
            {
                "word_value": word_value,
                value_field: facet.value,
                "outer_source_name": info.source_name,
                "outer_source_url": info.url,
                "recent_update_date": info.recent_update_date,
            }
            for facet in facets
            for info in facet.outer_source
        ]
        if rows:
            db.execute(insert(model), rows)

        logger.debug(f"Replaced {len(rows)} {model.__tablename__} rows for '{word_value}'")

    def _upsert_examples(self, db: Session, word: Word) -> None:
        sourced = [e for e in word.examples if e.outer_source]
        if not sourced:
            return
        if word.id is None:
            raise ValueError(f"Word '{word.value}' has example translations but no id")

        dialect_insert = _dialect_insert(db)
        for example in sourced:
            for info in example.outer_source:
                values = {
                    "word_id": word.id,
                    "example": example.origin,
                    "outer_source_name": info.source_name,
                    "example_translate": info.translate,
                    "outer_source_url": info.url,
                    "recent_update_date": info.recent_update_date,
                }
                stmt = dialect_insert(ExampleOuterSourceRow).values(**values).on_conflict_do_update(
                    index_elements=["word_id", "example", "outer_source_name"],
                    set_={
                        "example_translate": info.translate,
                        "outer_source_url": info.url,
                        "recent_update_date": info.recent_update_date,
                    }
                )
                db.execute(stmt)

    # ------------------------------------------------------------
    # MAINTENANCE
    # ------------------------------------------------------------
    def delete_unused_outer_source_examples(self, db: Session) -> int:
        """
        Removes cached example translations whose example sentence is no longer
        owned by any word. Returns the number of deleted rows.
        """
        result = db.execute(
            delete(ExampleOuterSourceRow)
            .where(ExampleOuterSourceRow.example.not_in(select(WordExampleRow.origin)))
            .execution_options(synchronize_session=False)
        )
        deleted = result.rowcount or 0

        logger.info(f"Delete unused examples from outer source. {deleted} rows was deleted.")
        return deleted


def _dialect_insert(db: Session):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise NotImplementedError(f"Example upsert is not supported for dialect '{dialect}'")
