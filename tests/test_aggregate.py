from datetime import date

import pytest

from domain.aggregate import AggregateSupplementedWord
from domain.supplementation import SupplementedWord, SupplementedWordExample
from domain.word import OuterSource, Word, WordExample, WordTranscription, WordTranslation


def _contribution(source, day=date(2024, 6, 1), **facets):
    word = SupplementedWord(examples_owner_id="u1", value="run", outer_source_name=source,
                            recent_update_date=day, outer_source_url=f"https://{source.lower()}.example")
    word.add_transcriptions(WordTranscription(v) for v in facets.get("transcriptions", []))
    word.add_translations(WordTranslation(v) for v in facets.get("translations", []))
    word.add_examples(SupplementedWordExample(o, translate=t) for o, t in facets.get("examples", {}).items())
    return word


def test_same_value_from_two_sources_is_one_canonical_entry():
    aggregate = AggregateSupplementedWord(Word("run"))

    aggregate.merge(_contribution("Oxford", transcriptions=["rʌn"]))
    aggregate.merge(_contribution("Cambridge", transcriptions=["RʌN"]))

    transcriptions = aggregate.get_transcriptions()
    assert [t.value for t in transcriptions] == ["rʌn"]
    sources = aggregate.get_outer_source(transcriptions[0])
    assert [s.source_name for s in sources] == ["Oxford", "Cambridge"]


def test_merge_only_grows():
    aggregate = AggregateSupplementedWord(Word("run", translations=[WordTranslation("бежать")]))
    sizes = []
    for contribution in [
        _contribution("Oxford", translations=["бегать"]),
        _contribution("Cambridge", translations=[]),
        _contribution("Reverso", translations=["бежать", "работать"]),
    ]:
        aggregate.merge(contribution)
        sizes.append(len(aggregate.get_translations()))

    assert sizes == [2, 2, 3]


def test_reconfirmation_keeps_duplicate_provenance_until_folded():
    word = Word("run")
    aggregate = AggregateSupplementedWord(word)

    aggregate.merge(_contribution("Oxford", day=date(2024, 1, 1), transcriptions=["rʌn"]))
    aggregate.merge(_contribution("Oxford", day=date(2024, 6, 1), transcriptions=["rʌn"]))

    canonical = aggregate.get_transcriptions()[0]
    assert len(aggregate.get_outer_source(canonical)) == 2

    aggregate.apply_to_word()
    assert len(word.transcriptions) == 1
    assert word.transcriptions[0].outer_source == [
        OuterSource(url="https://oxford.example", source_name="Oxford", recent_update_date=date(2024, 6, 1))
    ]


def test_user_facets_without_sources_have_empty_provenance():
    word = Word("run", transcriptions=[WordTranscription("rʌn", note="mine")])
    aggregate = AggregateSupplementedWord(word)

    assert aggregate.get_outer_source(aggregate.get_transcriptions()[0]) == []
    assert aggregate.get_outer_source(WordTranscription("unknown")) == []


def test_examples_only_for_owned_origins():
    word = Word("run", id="w1", examples=[WordExample("I run")])
    aggregate = AggregateSupplementedWord(word)

    aggregate.merge(_contribution("Reverso", examples={"i run": "Я бегаю", "They run": "Они бегут"}))

    assert [e.origin for e in aggregate.get_examples()] == ["I run"]
    sources = aggregate.get_outer_source(word.examples[0])
    assert sources[0].translate == "Я бегаю"
    assert sources[0].url == "https://reverso.example"

    aggregate.apply_to_word()
    assert word.examples[0].translate == "Я бегаю"


def test_getters_return_copies():
    aggregate = AggregateSupplementedWord(Word("run"))
    aggregate.merge(_contribution("Oxford", transcriptions=["rʌn"]))

    aggregate.get_transcriptions().clear()
    aggregate.get_outer_source(WordTranscription("rʌn")).clear()

    assert len(aggregate.get_transcriptions()) == 1
    assert len(aggregate.get_outer_source(WordTranscription("rʌn"))) == 1


def test_unsupported_facet_type():
    with pytest.raises(TypeError):
        AggregateSupplementedWord(Word("run")).get_outer_source("rʌn")
