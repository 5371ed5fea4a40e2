# api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils.settings import ALLOWED_ORIGINS, APP_ENV, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)
logger.info(f"🔧 Loaded environment: {APP_ENV}")

from database.db import init_db
from api.routers import health, supplementation


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting Flashcards enrichment backend: initializing DB")
    try:
        init_db()
    except Exception as e:
        logger.error(f"❌ Failed to initialize database: {e}", exc_info=True)
        raise
    yield
    logger.info("🛑 Shutting down Flashcards enrichment backend")


app = FastAPI(
    title="Flashcards - Word Enrichment API",
    version="1.0.0",
    description="Supplements vocabulary words with data from outer dictionary sources.",
    lifespan=lifespan
)

# CORS Configuration
if APP_ENV == "local":
    origins = ["http://localhost:3000", "http://localhost:5173"]
else:
    origins = ALLOWED_ORIGINS

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health.router)
app.include_router(supplementation.router, prefix="/supplementation", tags=["Supplementation"])


@app.get("/")
async def root():
    return {"message": "Flashcards enrichment backend running 🚀"}
