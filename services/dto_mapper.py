# File: services/dto_mapper.py
from api.models.supplementation_models import (
    ExampleOuterSourceResponse,
    OuterSourceResponse,
    SupplementedExampleResponse,
    SupplementedInterpretationResponse,
    SupplementedTranscriptionResponse,
    SupplementedTranslationResponse,
    SupplementedWordResponse,
    WordSupplementRequest,
)
from domain.aggregate import AggregateSupplementedWord
from domain.word import Word, WordExample, WordInterpretation, WordTranscription, WordTranslation
from utils.sanitization import clean_optional_text, clean_text


def to_word(request: WordSupplementRequest) -> Word:
    return Word(
        id=request.word_id,
        user_id=request.user_id,
        value=clean_text(request.value),
        note=clean_optional_text(request.note),
        transcriptions=[WordTranscription(clean_text(t.value), clean_optional_text(t.note))
                        for t in request.transcriptions],
        interpretations=[WordInterpretation(clean_text(i.value)) for i in request.interpretations],
        translations=[WordTranslation(clean_text(t.value), clean_optional_text(t.note))
                      for t in request.translations],
        examples=[WordExample(clean_text(e.origin), clean_optional_text(e.translate), clean_optional_text(e.note))
                  for e in request.examples],
    )


def _source(info) -> OuterSourceResponse:
    return OuterSourceResponse(
        source_name=info.source_name,
        url=info.url,
        recent_update_date=info.recent_update_date,
    )


def _example_source(info) -> ExampleOuterSourceResponse:
    return ExampleOuterSourceResponse(
        source_name=info.source_name,
        url=info.url,
        recent_update_date=info.recent_update_date,
        translate=info.translate,
    )


def to_supplemented_word_response(aggregate: AggregateSupplementedWord) -> SupplementedWordResponse:
    """Canonical facets with every provenance entry collected during the request."""
    word = aggregate.word
    translates = {e.normalized_key(): e.translate for e in word.examples}

    return SupplementedWordResponse(
        word_id=word.id,
        user_id=word.user_id,
        value=word.value,
        note=word.note,
        transcriptions=[
            SupplementedTranscriptionResponse(
                value=t.value, note=t.note,
                outer_source=[_source(s) for s in aggregate.get_outer_source(t)],
            )
            for t in aggregate.get_transcriptions()
        ],
        interpretations=[
            SupplementedInterpretationResponse(
                value=i.value,
                outer_source=[_source(s) for s in aggregate.get_outer_source(i)],
            )
            for i in aggregate.get_interpretations()
        ],
        translations=[
            SupplementedTranslationResponse(
                value=t.value, note=t.note,
                outer_source=[_source(s) for s in aggregate.get_outer_source(t)],
            )
            for t in aggregate.get_translations()
        ],
        examples=[
            SupplementedExampleResponse(
                origin=e.origin,
                translate=translates.get(e.normalized_key(), e.translate),
                note=e.note,
                outer_source=[_example_source(s) for s in aggregate.get_outer_source(e)],
            )
            for e in aggregate.get_examples()
        ],
    )
