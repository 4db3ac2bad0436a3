import pytest

from smokesignal.http.middleware_i18n import (
    AcceptedLanguage,
    parse_accept_language,
    select_language,
)
from smokesignal.i18n import InvalidLanguageError, LanguageIdentifier

EN_US = LanguageIdentifier.parse("en-US")
FR_CA = LanguageIdentifier.parse("fr-CA")
SUPPORTED = [EN_US, FR_CA]


def test_parse_with_quality():
    lang = AcceptedLanguage.parse(" en-US;q=0.8 ")
    assert lang.value == "en-US"
    assert lang.quality == 0.8


def test_parse_default_quality():
    assert AcceptedLanguage.parse("fr").quality == 1.0
    assert AcceptedLanguage.parse("fr;q=abc").quality == 1.0
    assert AcceptedLanguage.parse("fr;level=1").quality == 1.0


def test_parse_clamps_quality():
    assert AcceptedLanguage.parse("fr;q=2").quality == 1.0
    assert AcceptedLanguage.parse("fr;q=-1").quality == 0.0


@pytest.mark.parametrize("text", ["", "   ", ";q=0.5"])
def test_parse_empty_is_invalid(text):
    with pytest.raises(InvalidLanguageError):
        AcceptedLanguage.parse(text)


def test_ordering_and_equality():
    low = AcceptedLanguage.parse("de;q=0.1")
    high = AcceptedLanguage.parse("en;q=0.9")
    assert low < high
    assert high > low
    assert AcceptedLanguage.parse("en;q=0.9") == high


def test_parse_accept_language_sorted():
    langs = parse_accept_language("fr;q=0.5, en;q=0.9, de, , es;q=0.5")
    assert [lang.value for lang in langs] == ["de", "en", "fr", "es"]
    qualities = [lang.quality for lang in langs]
    assert qualities == sorted(qualities, reverse=True)


def test_profile_language_wins_even_if_unsupported():
    chosen = select_language(SUPPORTED, "de-DE", "fr-CA", "fr-CA")
    assert chosen == LanguageIdentifier.parse("de-DE")


def test_invalid_profile_falls_through_to_cookie():
    assert select_language(SUPPORTED, "!!", "xx-YY,fr-ca", None) == FR_CA


def test_cookie_without_region_does_not_match():
    assert select_language(SUPPORTED, None, "fr", None) == EN_US


def test_accept_language_header():
    chosen = select_language(SUPPORTED, None, None, "de;q=1.0, fr-CA;q=0.7, en-US;q=0.2")
    assert chosen == FR_CA


def test_default_language():
    assert select_language(SUPPORTED, None, None, None) == EN_US
    assert select_language(list(reversed(SUPPORTED)), None, "zz", "qq") == FR_CA


def test_no_supported_languages():
    with pytest.raises(ValueError):
        select_language([], None, None, None)