# tests/test_outer_source_buffer.py
from datetime import date

import pytest
from sqlalchemy import func, select

from database.models.outer_source_model import ExampleOuterSourceRow, TranscriptionOuterSource
from domain.word import (
    ExampleOuterSource,
    OuterSource,
    Word,
    WordExample,
    WordTranscription,
    WordTranslation,
)
from services.word_outer_source_buffer import WordOuterSourceBuffer
from services.word_repository import WordRepository

buffer = WordOuterSourceBuffer()


def _source(name, day=date(2024, 6, 1)):
    return OuterSource(url=f"https://{name.lower()}.example", source_name=name, recent_update_date=day)


def _example_source(name, translate, day=date(2024, 6, 1)):
    return ExampleOuterSource(url=None, source_name=name, recent_update_date=day, translate=translate)


def _save(session_factory, word):
    with session_factory() as db, db.begin():
        buffer.save_data_from_outer_source(db, word)


def _hydrate(session_factory, word):
    with session_factory() as db, db.begin():
        return buffer.merge_from_outer_source(db, word)


def _count(session_factory, model):
    with session_factory() as db:
        return db.scalar(select(func.count()).select_from(model))


def test_shared_facets_roundtrip_grouped_by_value(session_factory):
    word = Word("run", transcriptions=[
        WordTranscription("rʌn", outer_source=[_source("Oxford"), _source("Cambridge")]),
    ], translations=[WordTranslation("бежать", outer_source=[_source("Reverso")])])
    _save(session_factory, word)

    hydrated = _hydrate(session_factory, Word("run"))

    assert [t.value for t in hydrated.transcriptions] == ["rʌn"]
    assert [s.source_name for s in hydrated.transcriptions[0].outer_source] == ["Cambridge", "Oxford"]
    assert hydrated.translations[0].outer_source == [_source("Reverso")]
    assert hydrated.interpretations == []


def test_shared_facets_are_replaced_not_accumulated(session_factory):
    _save(session_factory, Word("run", transcriptions=[
        WordTranscription("rʌn", outer_source=[_source("Oxford")]),
    ]))
    _save(session_factory, Word("run", transcriptions=[
        WordTranscription("rən", outer_source=[_source("Oxford", date(2024, 7, 1))]),
    ]))

    hydrated = _hydrate(session_factory, Word("run"))

    assert [t.value for t in hydrated.transcriptions] == ["rən"]
    assert _count(session_factory, TranscriptionOuterSource) == 1


def test_user_facets_without_sources_are_not_cached(session_factory):
    _save(session_factory, Word("run", transcriptions=[WordTranscription("rʌn", note="mine")]))
    assert _count(session_factory, TranscriptionOuterSource) == 0


def test_cache_is_shared_between_users_of_the_same_word(session_factory):
    _save(session_factory, Word("run", user_id="u1", translations=[
        WordTranslation("бежать", outer_source=[_source("Reverso")]),
    ]))

    other = _hydrate(session_factory, Word("run", user_id="u2", translations=[WordTranslation("Бежать")]))

    assert len(other.translations) == 1
    assert other.translations[0].value == "Бежать"
    assert other.translations[0].has_outer_source("Reverso")


def test_example_translations_are_upserted(session_factory):
    word = Word("run", id="w1", examples=[
        WordExample("I run", outer_source=[_example_source("Reverso", "Я бегаю", date(2024, 1, 1))]),
    ])
    _save(session_factory, word)

    word.examples[0].outer_source = [_example_source("Reverso", "Я бегу", date(2024, 6, 1))]
    _save(session_factory, word)

    with session_factory() as db:
        rows = db.scalars(select(ExampleOuterSourceRow)).all()
        assert len(rows) == 1
        assert rows[0].example_translate == "Я бегу"
        assert rows[0].recent_update_date == date(2024, 6, 1)


def test_examples_hydrate_only_current_origins_of_the_word(session_factory):
    _save(session_factory, Word("run", id="w1", examples=[
        WordExample("I run", outer_source=[_example_source("Reverso", "Я бегаю")]),
        WordExample("We run", outer_source=[_example_source("Reverso", "Мы бежим")]),
    ]))

    hydrated = _hydrate(session_factory, Word("run", id="w1", examples=[WordExample("I run")]))
    stranger = _hydrate(session_factory, Word("run", id="w2", examples=[WordExample("I run")]))

    assert hydrated.get_examples_origins() == ["I run"]
    assert hydrated.examples[0].translate == "Я бегаю"
    assert stranger.examples[0].outer_source == []


def test_example_translations_need_word_id(session_factory):
    word = Word("run", examples=[WordExample("I run", outer_source=[_example_source("Reverso", "Я бегаю")])])

    with pytest.raises(ValueError):
        _save(session_factory, word)


def test_delete_unused_outer_source_examples(session_factory):
    with session_factory() as db, db.begin():
        WordRepository().save(db, Word("run", id="w1", user_id="u1", examples=[WordExample("I run")]))

    _save(session_factory, Word("run", id="w1", examples=[
        WordExample("I run", outer_source=[_example_source("Reverso", "Я бегаю")]),
        WordExample("Removed one", outer_source=[_example_source("Reverso", "Удалено")]),
    ]))
    # An origin still owned by any word keeps its rows
    _save(session_factory, Word("run", id="w2", examples=[
        WordExample("I run", outer_source=[_example_source("Reverso", "Я бегаю")]),
    ]))

    with session_factory() as db, db.begin():
        deleted = buffer.delete_unused_outer_source_examples(db)

    assert deleted == 1
    with session_factory() as db:
        remaining = db.scalars(select(ExampleOuterSourceRow)).all()
        assert sorted((r.word_id, r.example) for r in remaining) == [("w1", "I run"), ("w2", "I run")]
