"""Unicode normalization for blind index inputs."""

import unicodedata


def normalize_for_blind_index(text: str) -> str:
    """Return ``text`` NFC-normalized, stripped of surrounding whitespace and lowercased.

    Visually identical strings therefore produce the same blind index.
    """
    return unicodedata.normalize("NFC", text).strip().lower()