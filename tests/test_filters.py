import pytest

from tires_parser.filters import (
    apply_markup,
    check_item_name,
    normalize_name,
    parse_price,
    parse_year,
    round_float,
)


def test_check_item_name_drops_blacklisted_tokens():
    words, discard = check_item_name(["SuperTire", "DOT1234", "Mudster"], ["Mudster"], [])
    assert words == ["SuperTire", "DOT1234"]
    assert discard is False


def test_check_item_name_substring_match_is_case_sensitive():
    assert check_item_name(["Demo", "Tire"], [], ["demo"]) == (["Demo", "Tire"], False)
    assert check_item_name(["Demo", "Tire"], [], ["Demo"]) == (None, True)


def test_check_item_name_matches_fragment_across_tokens():
    words, discard = check_item_name(["Nokian", "Used", "set", "R16"], [], ["Used set"])
    assert words is None
    assert discard is True


def test_check_item_name_token_match_is_exact():
    words, _ = check_item_name(["Mudster", "Mudsters", "mudster"], ["Mudster"], [])
    assert words == ["Mudsters", "mudster"]


def test_check_item_name_all_tokens_removed():
    assert check_item_name(["A", "B"], ["A", "B"], ["x"]) == ([], False)


@pytest.mark.parametrize(
    "words",
    [
        ["SuperTire", "DOT1234", "Mudster"],
        ["Mudster", "Mudster"],
        ["Hakkapeliitta", "R9", "205/55R16"],
        [],
    ],
)
def test_check_item_name_is_idempotent(words):
    bad, delete = ["Mudster", "R9"], ["demo"]
    once, discard = check_item_name(words, bad, delete)
    assert not discard
    assert check_item_name(once, bad, delete) == (once, False)


def test_normalize_name():
    assert normalize_name("Brand X DOT2021  Model") == "brand x model"
    assert normalize_name("  Nokian\tHakka   R5 ") == "nokian hakka r5"


def test_normalize_name_is_idempotent():
    once = normalize_name("Brand X DOT2021  Model DOT1999")
    assert normalize_name(once) == once


def test_normalize_name_keeps_short_date_codes():
    assert normalize_name("Tire DOT21") == "tire dot21"


def test_round_float_half_up():
    assert round_float(12.345, 2) == 12.35
    assert round_float(1.234, 2) == 1.23
    assert round_float(2.5, 0) == 3.0


def test_round_float_truncates_toward_zero():
    assert round_float(-0.005, 2) == 0.0


def test_apply_markup():
    assert apply_markup(100.0, 9) == 129.0
    assert apply_markup(50.0, 0) == 70.0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("95,00", 95.0),
        ("1 234,50", 1234.5),
        ("€ 120.99", 120.99),
        ("", None),
        ("Call us", None),
        ("1.2.3", None),
    ],
)
def test_parse_price(text, expected):
    assert parse_price(text) == expected


def test_parse_year():
    assert parse_year("Nokian Hakka R5 DOT2021 205/55R16") == 2021
    assert parse_year("Nokian Hakka R5") is None
    assert parse_year("dot2021") is None
