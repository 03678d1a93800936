from __future__ import annotations

import hashlib
import re


_WS_RE = re.compile(r"\s+")
_LABEL_STRIP = " \t\r\n\"'`.,;:!*"


def normalize_text(t: str) -> str:
    """Lowercase, trim, squash whitespace."""
    return _WS_RE.sub(" ", t.strip().lower())


def sha256_hex(t: str) -> str:
    return hashlib.sha256(t.encode("utf-8")).hexdigest()


def normalize_label(raw: str) -> str:
    """'Quick Money.' -> 'quick_money'"""
    s = normalize_text(raw).strip(_LABEL_STRIP)
    return s.replace(" ", "_").replace("-", "_")
