# tests/test_supplementation_api.py
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from agents.static_source_agent import StaticSourceAgent
from api.dependencies.supplementation import get_db, get_supplementation_service
from api.main import app
from domain.errors import PersistenceFailure
from domain.word import Word, WordExample
from services.word_outer_source_buffer import WordOuterSourceBuffer
from services.word_repository import WordRepository
from services.word_supplementation_service import WordSupplementationService

ENTRIES = {
    "run": {
        "transcriptions": ["rʌn"],
        "translations": ["бежать"],
        "examples": {"I run": "Я бегаю"},
    }
}


@pytest.fixture
def service(session_factory, today):
    source = StaticSourceAgent("Reverso", ENTRIES, url="https://reverso.example", today=lambda: today)
    return WordSupplementationService(
        buffer=WordOuterSourceBuffer(),
        sources=[source],
        session_factory=session_factory,
        today=lambda: today,
    )


@pytest.fixture
def client(session_factory, service):
    def override_db():
        with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_supplementation_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_supplement_word(client, today):
    resp = client.post("/supplementation/", json={
        "word_id": "w1",
        "user_id": "u1",
        "value": " run ",
        "examples": [{"origin": "I run"}],
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["value"] == "run"
    assert body["transcriptions"] == [{
        "value": "rʌn",
        "note": None,
        "outer_source": [{
            "source_name": "Reverso",
            "url": "https://reverso.example",
            "recent_update_date": today.isoformat(),
        }],
    }]
    example = body["examples"][0]
    assert example["translate"] == "Я бегаю"
    assert example["outer_source"][0]["translate"] == "Я бегаю"


def test_invalid_word_is_rejected(client):
    resp = client.post("/supplementation/", json={"value": "   "})

    assert resp.status_code == 400
    assert "Word.value must not be blank" in resp.json()["detail"]["errors"]


def test_supplement_stored_word(client, session_factory):
    with session_factory() as db, db.begin():
        WordRepository().save(db, Word("run", id="w1", user_id="u1", examples=[WordExample("I run")]))

    resp = client.post("/supplementation/words/w1")

    assert resp.status_code == 200
    assert resp.json()["examples"][0]["translate"] == "Я бегаю"


def test_unknown_word(client):
    assert client.post("/supplementation/words/missing").status_code == 404


def test_cleanup(client):
    client.post("/supplementation/", json={"word_id": "w9", "value": "run", "examples": [{"origin": "I run"}]})

    resp = client.post("/supplementation/cleanup")

    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "deleted_rows": 1}


def test_cache_outage(client):
    broken = MagicMock()
    broken.supplement_aggregate.side_effect = PersistenceFailure("read")
    app.dependency_overrides[get_supplementation_service] = lambda: broken

    resp = client.post("/supplementation/", json={"value": "run"})

    assert resp.status_code == 503


def test_examples_without_word_id_are_rejected(client):
    resp = client.post("/supplementation/", json={"value": "run", "examples": [{"origin": "I run"}]})

    assert resp.status_code == 400
    assert resp.json()["detail"]["errors"] == ["Word.id must be set when the word has examples"]
