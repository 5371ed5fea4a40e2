# File: services/word_repository.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from database.models.word_model import (
    WordExampleRow,
    WordInterpretationRow,
    WordRow,
    WordTranscriptionRow,
    WordTranslationRow,
)
from domain.word import (
    Word,
    WordExample,
    WordInterpretation,
    WordTranscription,
    WordTranslation,
)


class WordRepository:
    """
    Minimal persistence of the word aggregate: the facets authored by the
    user, without outer source data (that lives in the enrichment cache).
    """

    def find_by_id(self, db: Session, word_id: str) -> Optional[Word]:
        row = db.get(WordRow, word_id)
        if row is None:
            return None
        return _to_domain(row)

    def find_by_value(self, db: Session, user_id: str, value: str) -> Optional[Word]:
        row = db.scalars(
            select(WordRow).where(WordRow.user_id == user_id, WordRow.value == value)
        ).first()
        return _to_domain(row) if row else None

    def save(self, db: Session, word: Word) -> Word:
        word.generate_id_if_absent()

        row = db.get(WordRow, word.id)
        if row is None:
            row = WordRow(word_id=word.id)
            db.add(row)

        row.user_id = word.user_id
        row.value = word.value
        row.note = word.note

        # Children are keyed by position: drop the old rows before reusing indexes
        row.examples.clear()
        row.transcriptions.clear()
        row.interpretations.clear()
        row.translations.clear()
        db.flush()

        row.examples = [
            WordExampleRow(index=i, origin=e.origin, translate=e.translate, note=e.note)
            for i, e in enumerate(word.examples)
        ]
        row.transcriptions = [
            WordTranscriptionRow(index=i, value=t.value, note=t.note)
            for i, t in enumerate(word.transcriptions)
        ]
        row.interpretations = [
            WordInterpretationRow(index=i, value=it.value)
            for i, it in enumerate(word.interpretations)
        ]
        row.translations = [
            WordTranslationRow(index=i, value=t.value, note=t.note)
            for i, t in enumerate(word.translations)
        ]
        db.flush()
        return word

    def delete_by_id(self, db: Session, word_id: str) -> bool:
        row = db.get(WordRow, word_id)
        if row is None:
            return False
        db.delete(row)
        db.flush()
        return True


def _to_domain(row: WordRow) -> Word:
    return Word(
        id=row.word_id,
        user_id=row.user_id,
        value=row.value,
        note=row.note,
        examples=[WordExample(origin=e.origin, translate=e.translate, note=e.note) for e in row.examples],
        transcriptions=[WordTranscription(value=t.value, note=t.note) for t in row.transcriptions],
        interpretations=[WordInterpretation(value=i.value) for i in row.interpretations],
        translations=[WordTranslation(value=t.value, note=t.note) for t in row.translations],
    )
