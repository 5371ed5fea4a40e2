# scripts/cleanup_example_cache.py
import sys
import os
import logging

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from utils.settings import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("cleanup_example_cache")

from domain.errors import PersistenceFailure
from services.word_supplementation_service import build_default_service


def cleanup_example_cache() -> int:
    """
    Deletes cached example translations whose example no longer belongs to
    the word they were fetched for. Meant to be run periodically (cron).
    """
    service = build_default_service(sources=[])
    try:
        deleted = service.cleanup_orphaned_example_cache()
    except PersistenceFailure as e:
        logger.error(f"❌ Cleanup failed: {e}")
        return -1

    print(f"✅ Removed {deleted} orphaned example translations.")
    return deleted


if __name__ == "__main__":
    sys.exit(0 if cleanup_example_cache() >= 0 else 1)
