# File: api/dependencies/supplementation.py
from functools import lru_cache

from database.db import SessionLocal
from services.word_repository import WordRepository
from services.word_supplementation_service import WordSupplementationService, build_default_service


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache(maxsize=1)
def get_supplementation_service() -> WordSupplementationService:
    return build_default_service()


def get_word_repository() -> WordRepository:
    return WordRepository()
