from __future__ import annotations

import json
import os
from typing import List, Optional

from .types import Category


def load_categories(path: str) -> List[Category]:
    """Read the category list; a missing or unreadable file means no categories."""
    if not os.path.exists(path):
        return []
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return []
    if not isinstance(data, list):
        return []

    categories: List[Category] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        url = item.get("url")
        name = item.get("name")
        if not url or not name:
            continue
        categories.append(Category(url=str(url), name=str(name)))
    return categories


def save_categories(path: str, categories: List[Category]) -> None:
    payload = [{"url": c.url, "name": c.name} for c in categories]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=4, ensure_ascii=False)
        f.write("\n")


def add_category(path: str, url: str, name: str) -> Category:
    category = Category(url=url, name=name)
    categories = load_categories(path)
    categories.append(category)
    save_categories(path, categories)
    return category


def remove_category(path: str, number: int) -> Optional[Category]:
    """Remove the category at 1-based `number`; None when out of range."""
    categories = load_categories(path)
    if number < 1 or number > len(categories):
        return None
    removed = categories.pop(number - 1)
    save_categories(path, categories)
    return removed


def load_words_from_file(path: str) -> List[str]:
    if not os.path.exists(path):
        return []
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]
