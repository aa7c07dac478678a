from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import PRICE_SURCHARGE


DOT_RE = re.compile(r"DOT(\d{4})")
DOT_CODE_RE = re.compile(r"DOT\d{4}")
PRICE_JUNK_RE = re.compile(r"[^\d.]")
SPACES_RE = re.compile(r"\s+")


def check_item_name(
    words: Sequence[str],
    bad_words: Iterable[str],
    del_words: Iterable[str],
) -> Tuple[Optional[List[str]], bool]:
    """Drop blacklisted tokens from a product name.

    Returns (filtered_words, False), or (None, True) when the remaining name
    contains one of ``del_words`` and the product must be skipped.
    Both comparisons are case-sensitive.
    """
    bad = set(bad_words)
    filtered = [word for word in words if word not in bad]

    name = " ".join(filtered)
    for fragment in del_words:
        if fragment in name:
            return None, True

    return filtered, False


def normalize_name(name: str) -> str:
    name = DOT_CODE_RE.sub("", name)
    return SPACES_RE.sub(" ", name).strip().lower()


def parse_year(text: str) -> Optional[int]:
    m = DOT_RE.search(text or "")
    if not m:
        return None
    return int(m.group(1))


def parse_price(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    text = text.replace(",", ".").replace("\u00a0", "")
    text = PRICE_JUNK_RE.sub("", text)
    try:
        return float(text)
    except ValueError:
        return None


def round_float(value: float, precision: int) -> float:
    # Half-up on the scaled value; int() truncates toward zero.
    ratio = 10 ** precision
    return int(value * ratio + 0.5) / ratio


def apply_markup(raw_price: float, percent: float) -> float:
    return round_float(raw_price * (1 + percent / 100) + PRICE_SURCHARGE, 2)
