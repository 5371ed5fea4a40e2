# clients/enrichment_api_client.py
import logging
from typing import Dict, List, Optional

import requests
from requests.exceptions import RequestException

from domain.errors import SourceUnavailable
from utils.settings import SOURCE_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def fetch_word_enrichment(
    source_name: str,
    endpoint: str,
    word: str,
    examples: Optional[List[str]] = None,
    timeout: float = SOURCE_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> Dict:
    """
    Asks an enrichment endpoint about one English word.

    Request:  POST {endpoint} {"word": ..., "examples": [...]}
    Response: {"url": ..., "transcriptions": [...], "interpretations": [...],
               "translations": [...], "examples": [{"origin", "translate", "url"}]}

    Any transport, HTTP or decoding failure is raised as SourceUnavailable.
    Rate limiting (429) is not retried: the next stale request is the retry.
    """
    http = session or requests
    payload = {"word": word, "examples": examples or []}

    try:
        resp = http.post(endpoint, json=payload, timeout=timeout)
    except RequestException as e:
        raise SourceUnavailable(source_name, f"request failed: {e}", e)

    if resp.status_code == 429:
        raise SourceUnavailable(source_name, "rate limited (429)")

    try:
        resp.raise_for_status()
    except RequestException as e:
        raise SourceUnavailable(source_name, f"HTTP error: {e}", e)

    try:
        data = resp.json()
    except ValueError as e:
        raise SourceUnavailable(source_name, "response is not valid JSON", e)

    if not isinstance(data, dict):
        raise SourceUnavailable(source_name, f"unexpected response type: {type(data).__name__}")

    logger.debug(f"{source_name} answered for '{word}' with keys {sorted(data.keys())}")
    return data
