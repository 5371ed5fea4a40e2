# utils/sanitization.py
from typing import Iterable, List, Optional
import re

CONTROL_CHARS = r"[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]"


def clean_text(value: Optional[str]) -> str:
    if value is None:
        return ""

    text = re.sub(CONTROL_CHARS, "", value)
    return re.sub(r"\s+", " ", text).strip()


def is_nonempty_text(value: Optional[str]) -> bool:
    return bool(clean_text(value))


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """Cleans the text; blank input becomes None."""
    text = clean_text(value)
    return text or None


def clean_text_list(values: Optional[Iterable]) -> List[str]:
    """Cleans every string of a raw list received from an outer source, dropping blanks."""
    if not values:
        return []
    result = []
    for v in values:
        if isinstance(v, str) and is_nonempty_text(v):
            result.append(clean_text(v))
    return result
