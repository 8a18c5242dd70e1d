import pytest
from iban_guard import (
    InvalidShapeError,
    UnknownCountryError,
    available_countries,
    electronic_format,
    from_bban,
    is_valid,
    is_valid_bban,
    print_format,
    to_bban,
)

_EXAMPLES = [s.example for s in available_countries().values()]


# ---------------------------------------------------------------------------
# is_valid
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [1, [], {}, True, None, b"BE68539007547034"])
def test_is_valid_non_string(value):
    assert is_valid(value) is False


def test_is_valid_unknown_country():
    assert is_valid("ZZ68539007547034") is False


def test_is_valid_empty():
    assert is_valid("") is False


@pytest.mark.parametrize(
    "iban",
    [
        "BE68539007547034",
        "NL86INGB0002445588",
        "MD75EX0900002374642125EU",
        "LC55HEMM000100010012001200023015",
        "CI93CI0080111301134291200589",
        "EG800002000156789012345180002",
        "GB29NWBK60161331926819",
    ],
)
def test_is_valid_known_ibans(iban):
    assert is_valid(iban) is True


def test_is_valid_incorrect_check_digit():
    assert is_valid("BE68539007547035") is False


def test_is_valid_print_format_and_lowercase():
    assert is_valid("be68 5390 0754 7034") is True
    assert is_valid("BE68-5390-0754-7034") is True


@pytest.mark.parametrize("example", _EXAMPLES)
def test_all_examples_valid(example):
    assert is_valid(example) is True


@pytest.mark.parametrize("example", _EXAMPLES)
def test_all_examples_invalid_after_changing_last_char(example):
    last = example[-1]
    replacement = str((int(last) + 1) % 10) if last.isdigit() else "0"
    assert is_valid(example[:-1] + replacement) is False


# ---------------------------------------------------------------------------
# electronic_format / print_format
# ---------------------------------------------------------------------------


def test_electronic_format():
    assert electronic_format("BE68539007547034") == "BE68539007547034"
    assert electronic_format("BE68 5390 0754 7034") == "BE68539007547034"
    assert electronic_format(" be68-5390.0754/7034\n") == "BE68539007547034"


def test_electronic_format_strips_non_ascii():
    assert electronic_format("BE68 5390 0754 7034 ü") == "BE68539007547034"


@pytest.mark.parametrize("value", ["be68 5390 0754 7034", "  a-b_c  ", "", "DE89370400440532013000"])
def test_electronic_format_idempotent(value):
    once = electronic_format(value)
    assert electronic_format(once) == once


def test_print_format():
    assert print_format("BE68539007547034") == "BE68 5390 0754 7034"
    assert print_format("BE68 5390 0754 7034") == "BE68 5390 0754 7034"


def test_print_format_partial_last_group():
    assert print_format("DE89370400440532013000") == "DE89 3704 0044 0532 0130 00"


def test_print_format_custom_separator():
    assert print_format("BE68539007547034", "-") == "BE68-5390-0754-7034"
    assert print_format("BE68539007547034", "\\") == "BE68\\5390\\0754\\7034"


@pytest.mark.parametrize("value", ["be68539007547034", "GB29 NWBK 6016 1331 9268 19", "ab"])
def test_print_format_inverse(value):
    assert electronic_format(print_format(value)) == electronic_format(value)


# ---------------------------------------------------------------------------
# to_bban / from_bban
# ---------------------------------------------------------------------------


def test_to_bban():
    assert to_bban("BE68 5390 0754 7034", "-") == "539-0075470-34"


def test_to_bban_default_separator():
    assert to_bban("BE68 5390 0754 7034") == "539 0075470 34"


def test_to_bban_unknown_country():
    with pytest.raises(UnknownCountryError):
        to_bban("ZZ68539007547034")


def test_to_bban_invalid_shape():
    with pytest.raises(InvalidShapeError, match="Invalid IBAN"):
        to_bban("BE68 A390 0754 7034")


def test_from_bban():
    assert from_bban("BE", "539007547034") == "BE68539007547034"


def test_from_bban_ignores_format():
    assert from_bban("BE", "539-0075470-34") == "BE68539007547034"


def test_from_bban_invalid():
    with pytest.raises(InvalidShapeError, match="Invalid BBAN"):
        from_bban("BE", "1539-0075470-34")


def test_from_bban_unknown_country():
    with pytest.raises(UnknownCountryError):
        from_bban("ZZ", "539007547034")


@pytest.mark.parametrize("example", _EXAMPLES)
def test_from_bban_roundtrip(example):
    bban = to_bban(example, "")
    assert from_bban(example[:2], bban) == example


# ---------------------------------------------------------------------------
# is_valid_bban
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [1, {}, [], True, None])
def test_is_valid_bban_non_string(value):
    assert is_valid_bban("BE", value) is False


@pytest.mark.parametrize("country_code", [["BE"], {"BE": 1}, None, 1, b"BE"])
def test_is_valid_bban_non_string_country(country_code):
    assert is_valid_bban(country_code, "539007547034") is False


def test_is_valid_bban_belgian():
    assert is_valid_bban("BE", "539007547034") is True


def test_is_valid_bban_dutch():
    assert is_valid_bban("NL", "INGB0002445588") is True


def test_is_valid_bban_ignores_format():
    assert is_valid_bban("BE", "539-0075470-34") is True


def test_is_valid_bban_length():
    assert is_valid_bban("BE", "1539-0075470-34") is False


def test_is_valid_bban_format():
    assert is_valid_bban("BE", "ABC-0075470-34") is False


def test_is_valid_bban_unknown_country():
    assert is_valid_bban("ZZ", "539007547034") is False


# ---------------------------------------------------------------------------
# available_countries
# ---------------------------------------------------------------------------


def test_available_countries():
    countries = available_countries()
    assert "BE" in countries
    assert countries["BE"].country_code == "BE"
    with pytest.raises(TypeError):
        countries["XX"] = countries["BE"]  # type: ignore[index]
