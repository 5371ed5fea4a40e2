# File: api/routers/health.py
from fastapi import APIRouter
from sqlalchemy import text

from database.db import engine


router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/health/db")
def database_health_check():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        return {"status": "degraded", "database": str(e)}
    return {"status": "ok", "database": "ok"}
