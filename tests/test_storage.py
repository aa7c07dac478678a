import json

from tires_parser.storage import (
    add_category,
    load_categories,
    load_words_from_file,
    remove_category,
    save_categories,
)
from tires_parser.types import Category


def test_load_categories_missing_file(tmp_path):
    assert load_categories(str(tmp_path / "categories.json")) == []


def test_load_categories_invalid_json(tmp_path):
    path = tmp_path / "categories.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_categories(str(path)) == []


def test_load_categories_skips_incomplete_entries(tmp_path):
    path = tmp_path / "categories.json"
    path.write_text(
        json.dumps([{"url": "https://a", "name": "A"}, {"url": "https://b"}, "junk"]),
        encoding="utf-8",
    )
    assert load_categories(str(path)) == [Category(url="https://a", name="A")]


def test_save_categories_format(tmp_path):
    path = tmp_path / "categories.json"
    save_categories(str(path), [Category(url="https://a", name="Літні")])
    text = path.read_text(encoding="utf-8")
    assert '"name": "Літні"' in text
    assert json.loads(text) == [{"url": "https://a", "name": "Літні"}]


def test_add_and_remove_category(tmp_path):
    path = str(tmp_path / "categories.json")
    add_category(path, "https://a", "A")
    add_category(path, "https://b", "B")

    assert remove_category(path, 3) is None
    assert remove_category(path, 0) is None
    assert remove_category(path, 1) == Category(url="https://a", name="A")
    assert load_categories(path) == [Category(url="https://b", name="B")]


def test_load_words_from_file(tmp_path):
    path = tmp_path / "bad_words.txt"
    path.write_text("Mudster\n\n  DOT2019  \n\t\nUsed\n", encoding="utf-8")
    assert load_words_from_file(str(path)) == ["Mudster", "DOT2019", "Used"]
    assert load_words_from_file(str(tmp_path / "missing.txt")) == []
