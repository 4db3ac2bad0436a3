"""Choosing the language for a request."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from smokesignal.i18n import InvalidLanguageError, LanguageIdentifier

logger = logging.getLogger(__name__)

COOKIE_LANG = "lang"

_QUALITY_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class AcceptedLanguage:
    """One entry of an Accept-Language header; ordered by quality."""

    value: str
    quality: float

    @classmethod
    def parse(cls, text: str) -> "AcceptedLanguage":
        parts = text.strip().split(";")
        value = parts[0].strip()
        if not value:
            raise InvalidLanguageError(text)
        quality = 1.0
        if len(parts) > 1:
            candidate = parts[1].strip()
            if candidate.startswith("q="):
                number = candidate[2:]
                if _QUALITY_RE.fullmatch(number):
                    quality = float(number)
        return cls(value, min(max(quality, 0.0), 1.0))

    def __lt__(self, other: "AcceptedLanguage") -> bool:
        return self.quality < other.quality

    def __le__(self, other: "AcceptedLanguage") -> bool:
        return self.quality <= other.quality

    def __gt__(self, other: "AcceptedLanguage") -> bool:
        return self.quality > other.quality

    def __ge__(self, other: "AcceptedLanguage") -> bool:
        return self.quality >= other.quality


def parse_accept_language(header: str) -> list[AcceptedLanguage]:
    """Parse a header into entries, highest quality first, ties kept in order."""
    languages = []
    for part in header.split(","):
        try:
            languages.append(AcceptedLanguage.parse(part))
        except InvalidLanguageError:
            logger.debug("Failed to parse language from header: %r", part)
    return sorted(
        languages,
        key=lambda lang: -lang.quality if not math.isnan(lang.quality) else 0.0,
    )


def _parse_tag(text: str) -> Optional[LanguageIdentifier]:
    try:
        return LanguageIdentifier.parse(text)
    except InvalidLanguageError:
        return None


def _first_supported(
    supported_languages: Sequence[LanguageIdentifier], candidate: LanguageIdentifier
) -> Optional[LanguageIdentifier]:
    return next(
        (lang for lang in supported_languages if lang.matches(candidate, True, False)),
        None,
    )


def select_language(
    supported_languages: Sequence[LanguageIdentifier],
    profile_language: Optional[str] = None,
    cookie_value: Optional[str] = None,
    accept_language: Optional[str] = None,
) -> LanguageIdentifier:
    """Pick from profile setting, cookie, Accept-Language, then the first supported."""
    if profile_language is not None:
        profile = _parse_tag(profile_language)
        if profile is not None:
            logger.debug("Using language from user profile: %s", profile)
            return profile

    if cookie_value is not None:
        for part in cookie_value.split(","):
            candidate = _parse_tag(part)
            if candidate is None:
                continue
            found = _first_supported(supported_languages, candidate)
            if found is not None:
                logger.debug("Using language from cookie: %s", found)
                return found

    if accept_language is not None:
        for accepted in parse_accept_language(accept_language):
            candidate = _parse_tag(accepted.value)
            if candidate is None:
                continue
            found = _first_supported(supported_languages, candidate)
            if found is not None:
                logger.debug("Using language from Accept-Language header: %s", found)
                return found

    if not supported_languages:
        raise ValueError("no supported languages configured")
    return supported_languages[0]