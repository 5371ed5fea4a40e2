# File: domain/validation.py
from typing import List

from domain.errors import ValidationFailure
from domain.word import FacetType, Word
from utils.sanitization import is_nonempty_text


def collect_word_errors(word: Word) -> List[str]:
    errors: List[str] = []

    if not is_nonempty_text(word.value):
        errors.append("Word.value must not be blank")
    if word.note is not None and not is_nonempty_text(word.note):
        errors.append("Word.note must be null or not blank")
    if word.examples and word.id is None:
        # Example translations are cached per word id
        errors.append("Word.id must be set when the word has examples")

    for facet_type in FacetType:
        facets = word.facets(facet_type)
        seen = set()
        for index, facet in enumerate(facets):
            label = f"Word.{facet_type.value}[{index}]"
            if facet is None:
                errors.append(f"{label} must not be null")
                continue

            key = facet.normalized_key()
            if not key:
                errors.append(f"{label} must not be blank")
            elif key in seen:
                errors.append(f"{label} duplicates '{key}'")
            seen.add(key)

            for info in facet.outer_source:
                if not is_nonempty_text(info.source_name):
                    errors.append(f"{label} has an outer source without a name")
                if info.recent_update_date is None:
                    errors.append(f"{label} has an outer source without an update date")

    return errors


def validate_word(word: Word) -> Word:
    """Raises ValidationFailure listing every violated invariant."""
    errors = collect_word_errors(word)
    if errors:
        raise ValidationFailure(errors)
    return word
