# File: utils/settings.py
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

APP_ENV = os.getenv("APP_ENV", "local")
if APP_ENV == "local":
    load_dotenv(".env.local")
else:
    load_dotenv(".env")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("POSTGRES_USER")
    password = os.getenv("POSTGRES_PASSWORD")
    name = os.getenv("POSTGRES_DB")
    if user and password and name:
        host = os.getenv("POSTGRES_HOST", "localhost")
        port = os.getenv("POSTGRES_PORT", "5432")
        return f"postgresql://{quote_plus(user)}:{quote_plus(password)}@{host}:{port}/{quote_plus(name)}"

    return "sqlite:///./flashcards.db"


DATABASE_URL = _database_url()

# Cached facets older than this are fetched again from their source
STALENESS_DAYS = _int_env("STALENESS_DAYS", 90)

SOURCE_TIMEOUT_SECONDS = _int_env("SOURCE_TIMEOUT_SECONDS", 10)

# "Oxford=https://host/oxford|transcription+interpretation,Reverso=https://host/reverso"
# A source without a "|facet+facet" suffix serves every facet type
ENRICHMENT_SOURCES = os.getenv("ENRICHMENT_SOURCES", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]
