# File: api/routers/supplementation.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.dependencies.supplementation import get_db, get_supplementation_service, get_word_repository
from api.models.supplementation_models import CleanupResponse, SupplementedWordResponse, WordSupplementRequest
from domain.errors import PersistenceFailure, ValidationFailure
from domain.word import Word
from services.dto_mapper import to_supplemented_word_response, to_word
from services.word_repository import WordRepository
from services.word_supplementation_service import WordSupplementationService

router = APIRouter()
logger = logging.getLogger(__name__)


def _supplement(service: WordSupplementationService, word: Word) -> SupplementedWordResponse:
    try:
        aggregate = service.supplement_aggregate(word)
        return to_supplemented_word_response(aggregate)

    except ValidationFailure as e:
        logger.warning(f"Supplemented word '{word.value}' is invalid: {e.errors}")
        raise HTTPException(status_code=400, detail={"errors": e.errors})

    except PersistenceFailure:
        raise HTTPException(status_code=503, detail="Enrichment cache unavailable")

    except Exception:
        logger.error(f"Error supplementing '{word.value}'", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/", response_model=SupplementedWordResponse)
def supplement_word(
    payload: WordSupplementRequest,
    service: WordSupplementationService = Depends(get_supplementation_service),
) -> SupplementedWordResponse:
    return _supplement(service, to_word(payload))


@router.post("/words/{word_id}", response_model=SupplementedWordResponse)
def supplement_stored_word(
    word_id: str,
    db: Session = Depends(get_db),
    repository: WordRepository = Depends(get_word_repository),
    service: WordSupplementationService = Depends(get_supplementation_service),
) -> SupplementedWordResponse:
    word = repository.find_by_id(db, word_id)
    if word is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return _supplement(service, word)


@router.post("/cleanup", response_model=CleanupResponse)
def cleanup_example_cache(
    service: WordSupplementationService = Depends(get_supplementation_service),
) -> CleanupResponse:
    try:
        deleted = service.cleanup_orphaned_example_cache()
    except PersistenceFailure:
        raise HTTPException(status_code=503, detail="Enrichment cache unavailable")
    return CleanupResponse(status="success", deleted_rows=deleted)
