from datetime import date

import pytest

from domain.word import (
    ExampleOuterSource,
    OuterSource,
    Word,
    WordExample,
    WordTranscription,
    _SourcedFacet,
    normalize_key,
    same_source_name,
)


def _oxford(day):
    return OuterSource(url="https://oxford.example/run", source_name="Oxford", recent_update_date=day)


def test_normalized_key_ignores_case_and_spaces():
    assert normalize_key("  RʌN ") == "rʌn"
    assert WordTranscription("Run").same_as(WordTranscription(" run"))
    assert WordExample("I run").normalized_key() == "i run"


def test_source_names_compare_case_insensitively():
    assert same_source_name("Oxford", "oxford")
    assert same_source_name(None, None)
    assert not same_source_name("Oxford", None)


def test_merge_keeps_one_entry_per_source_newest_wins():
    existing = WordTranscription("rʌn").add_source_info(_oxford(date(2024, 1, 1)))
    incoming = WordTranscription("RʌN").add_source_info(_oxford(date(2024, 5, 1)))

    assert existing.merge(incoming)
    assert existing.outer_source == [_oxford(date(2024, 5, 1))]

    older = WordTranscription("rʌn").add_source_info(_oxford(date(2023, 1, 1)))
    existing.merge(older)
    assert existing.get_recent_update_date("OXFORD") == date(2024, 5, 1)


def test_merge_rejects_different_values():
    assert not WordTranscription("rʌn").merge(WordTranscription("ran"))


def test_word_merge_appends_copy_when_value_is_new():
    word = Word("run")
    incoming = WordTranscription("rʌn").add_source_info(_oxford(date(2024, 1, 1)))

    added = word.merge_transcription(incoming)

    assert word.transcriptions == [added]
    assert added is not incoming
    incoming.outer_source.clear()
    assert len(added.outer_source) == 1


def test_example_translate_filled_only_when_empty():
    info = ExampleOuterSource(url=None, source_name="Reverso",
                              recent_update_date=date(2024, 1, 1), translate="Я бегаю")

    empty = WordExample("I run")
    empty.merge(WordExample("i run", outer_source=[info]))
    assert empty.translate == "Я бегаю"

    own = WordExample("I run", translate="Я бегу")
    own.merge(WordExample("I run", outer_source=[info]))
    assert own.translate == "Я бегу"
    assert own.has_outer_source("reverso")


def test_unknown_examples_are_never_added():
    word = Word("run", examples=[WordExample("I run")])

    assert not word.merge_example_if_present(WordExample("They run"))
    assert word.get_examples_origins() == ["I run"]


def test_example_helpers():
    word = Word("run").add_example(WordExample("I run")).add_example(WordExample("We run"))

    assert word.contains_example_by("i RUN")
    word.remove_example_by("I run")
    assert word.get_examples_origins() == ["We run"]


def test_generate_id_only_once():
    word = Word("run")
    first = word.generate_id_if_absent()
    assert word.generate_id_if_absent() == first


def test_earliest_translation_becomes_primary():
    reverso = ExampleOuterSource(url=None, source_name="Reverso",
                                 recent_update_date=date(2024, 6, 1), translate="Я бегаю ежедневно")
    yandex = ExampleOuterSource(url=None, source_name="Yandex",
                                recent_update_date=date(2024, 5, 1), translate="Я бегаю каждый день")
    untranslated = ExampleOuterSource(url=None, source_name="Oxford",
                                      recent_update_date=date(2024, 4, 1), translate=None)

    example = WordExample("I run")
    example.merge(WordExample("I run", outer_source=[untranslated, reverso, yandex]))

    assert example.translate == "Я бегаю каждый день"
    assert len(example.outer_source) == 3


def test_facet_base_requires_normalized_key():
    with pytest.raises(TypeError):
        _SourcedFacet()
