"""Localised message bundles and language identifiers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

logger = logging.getLogger(__name__)

LOCALE_FILES = ("errors",)

_FSI = "\u2068"
_PDI = "\u2069"


class I18nError(Exception):
    """Base class for internationalisation failures."""

    message = "error-i18n Internationalisation failure"

    def __str__(self) -> str:
        return self.message


class InvalidLanguageError(I18nError, ValueError):
    """A language tag is malformed or not configured."""

    message = "error-i18n-1 Invalid language"


class LanguageResourceError(I18nError):
    """A localisation resource could not be parsed."""

    message = "error-i18n-2 Language resource failed"

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__(self.errors)


class BundleLoadError(I18nError):
    """Entries of a resource could not be added to a bundle."""

    message = "error-i18n-3 Bundle load failed"

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__(self.errors)


_LANGUAGE_RE = re.compile(r"[a-zA-Z]{2,3}|[a-zA-Z]{5,8}")
_SCRIPT_RE = re.compile(r"[a-zA-Z]{4}")
_REGION_RE = re.compile(r"[a-zA-Z]{2}|[0-9]{3}")
_VARIANT_RE = re.compile(r"[a-zA-Z0-9]{5,8}|[0-9][a-zA-Z0-9]{3}")


def _subtag_matches(first, second, first_as_range: bool, second_as_range: bool) -> bool:
    return (
        (first_as_range and not first)
        or (second_as_range and not second)
        or first == second
    )


@dataclass(frozen=True)
class LanguageIdentifier:
    """A BCP 47 language identifier in canonical case."""

    language: Optional[str] = None
    script: Optional[str] = None
    region: Optional[str] = None
    variants: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "LanguageIdentifier":
        """Parse a tag such as ``en-US`` or ``zh_Hant_TW``."""
        if not text:
            raise InvalidLanguageError(text)
        first, *rest = re.split(r"[-_]", text)
        if first.lower() == "und":
            language = None
        elif _LANGUAGE_RE.fullmatch(first):
            language = first.lower()
        else:
            raise InvalidLanguageError(text)

        script = region = None
        variants: list[str] = []
        stage = 1
        for subtag in rest:
            if stage <= 1 and _SCRIPT_RE.fullmatch(subtag):
                script = subtag.title()
                stage = 2
            elif stage <= 2 and _REGION_RE.fullmatch(subtag):
                region = subtag.upper()
                stage = 3
            elif _VARIANT_RE.fullmatch(subtag):
                variants.append(subtag.lower())
                stage = 3
            else:
                raise InvalidLanguageError(text)
        return cls(language, script, region, tuple(sorted(variants)))

    def matches(
        self,
        other: "LanguageIdentifier",
        self_as_range: bool,
        other_as_range: bool,
    ) -> bool:
        """Compare subtags; a missing subtag on a side used as a range matches anything."""
        return (
            _subtag_matches(self.language, other.language, self_as_range, other_as_range)
            and _subtag_matches(self.script, other.script, self_as_range, other_as_range)
            and _subtag_matches(self.region, other.region, self_as_range, other_as_range)
            and _subtag_matches(self.variants, other.variants, self_as_range, other_as_range)
        )

    def __str__(self) -> str:
        parts = [self.language or "und", self.script, self.region, *self.variants]
        return "-".join(part for part in parts if part)


# --- message resources ------------------------------------------------------


class _ParseError(Exception):
    pass


@dataclass(frozen=True)
class _Text:
    value: str


@dataclass(frozen=True)
class _Literal:
    value: str


@dataclass(frozen=True)
class _Number:
    value: str


@dataclass(frozen=True)
class _Variable:
    name: str


@dataclass(frozen=True)
class _Reference:
    name: str
    attribute: Optional[str]
    is_term: bool

    @property
    def label(self) -> str:
        prefix = "-" if self.is_term else ""
        suffix = f".{self.attribute}" if self.attribute else ""
        return f"{prefix}{self.name}{suffix}"


_Element = Union[_Text, _Literal, _Number, _Variable, _Reference]
_Pattern = tuple


@dataclass(frozen=True)
class _Entry:
    name: str
    is_term: bool
    value: Optional[_Pattern]
    attributes: Mapping[str, _Pattern] = field(default_factory=dict)


_IDENT = r"[a-zA-Z][a-zA-Z0-9_-]*"
_ENTRY_RE = re.compile(rf"(-?)({_IDENT})[ \t]*=[ \t]*(.*)")
_ATTR_RE = re.compile(rf"\.({_IDENT})[ \t]*=[ \t]*(.*)")
_ESCAPE = r'\\(?:["\\]|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{6})'
_STRING_RE = re.compile(rf'"((?:[^"\\\n]|{_ESCAPE})*)"')
_ESCAPE_RE = re.compile(_ESCAPE)
_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_VARIABLE_RE = re.compile(rf"\$({_IDENT})")
_REFERENCE_RE = re.compile(rf"(-?)({_IDENT})(?:\.({_IDENT}))?")


def _unescape(body: str) -> str:
    def replace(match: re.Match) -> str:
        escape = match.group(0)
        if len(escape) == 2:
            return escape[1]
        try:
            return chr(int(escape[2:], 16))
        except ValueError as exc:
            raise _ParseError(f"invalid unicode escape {escape}") from exc

    return _ESCAPE_RE.sub(replace, body)


def _parse_expression(content: str) -> _Element:
    if not content:
        raise _ParseError("empty placeable")
    if match := _STRING_RE.fullmatch(content):
        return _Literal(_unescape(match.group(1)))
    if _NUMBER_RE.fullmatch(content):
        return _Number(content)
    if match := _VARIABLE_RE.fullmatch(content):
        return _Variable(match.group(1))
    if match := _REFERENCE_RE.fullmatch(content):
        return _Reference(match.group(2), match.group(3), match.group(1) == "-")
    raise _ParseError(f"unsupported expression: {content}")


def _scan_placeable(text: str, start: int) -> tuple[_Element, int]:
    in_string = False
    position = start
    while position < len(text):
        char = text[position]
        if in_string:
            if char == "\\":
                position += 2
                continue
            if char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            raise _ParseError("nested placeables are not supported")
        elif char == "}":
            return _parse_expression(text[start:position].strip()), position + 1
        position += 1
    raise _ParseError("unclosed placeable")


def _parse_pattern(text: str) -> _Pattern:
    elements: list[_Element] = []
    buffer: list[str] = []
    position = 0
    while position < len(text):
        char = text[position]
        if char == "{":
            if buffer:
                elements.append(_Text("".join(buffer)))
                buffer = []
            element, position = _scan_placeable(text, position + 1)
            elements.append(element)
        elif char == "}":
            raise _ParseError("unbalanced closing brace")
        else:
            buffer.append(char)
            position += 1
    if buffer:
        elements.append(_Text("".join(buffer)))
    return tuple(elements)


def _build_pattern(first: str, lines: list[str]) -> Optional[_Pattern]:
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()
    indents = [len(line) - len(line.lstrip(" ")) for line in lines if line.strip()]
    common = min(indents, default=0)
    block = [line[common:] if line.strip() else "" for line in lines]
    if first.strip():
        block.insert(0, first)
    else:
        while block and not block[0]:
            block.pop(0)
    text = "\n".join(block).rstrip()
    if not text:
        return None
    return _parse_pattern(text)


def _build_entry(is_term: bool, name: str, first: str, body: list[str]) -> _Entry:
    value_lines: list[str] = []
    current = value_lines
    attribute_parts: list[tuple[str, str, list[str]]] = []
    for line in body:
        match = _ATTR_RE.fullmatch(line.lstrip(" ")) if line.strip() else None
        if match:
            current = []
            attribute_parts.append((match.group(1), match.group(2), current))
        else:
            current.append(line)

    value = _build_pattern(first, value_lines)
    attributes: dict[str, _Pattern] = {}
    for attribute, attribute_first, lines in attribute_parts:
        pattern = _build_pattern(attribute_first, lines)
        if pattern is None:
            raise _ParseError(f"attribute {attribute!r} has no value")
        attributes[attribute] = pattern
    if value is None and (is_term or not attributes):
        kind = "term" if is_term else "message"
        raise _ParseError(f"{kind} {name!r} has no value")
    return _Entry(name, is_term, value, attributes)


def _parse_resource(source: str) -> tuple[list[_Entry], list[str]]:
    entries: list[_Entry] = []
    errors: list[str] = []
    pending: Optional[tuple[int, bool, str, str, list[str]]] = None

    def finish() -> None:
        nonlocal pending
        if pending is None:
            return
        lineno, is_term, name, first, body = pending
        pending = None
        try:
            entries.append(_build_entry(is_term, name, first, body))
        except _ParseError as exc:
            errors.append(f"line {lineno}: {exc}")

    for lineno, line in enumerate(source.replace("\r\n", "\n").split("\n"), 1):
        if not line.strip(" \t"):
            if pending is not None:
                pending[4].append("")
            continue
        if line.startswith(" "):
            if pending is None:
                errors.append(f"line {lineno}: unexpected indented line")
            else:
                pending[4].append(line)
            continue
        finish()
        if line.startswith("#"):
            continue
        match = _ENTRY_RE.fullmatch(line)
        if match is None:
            errors.append(f"line {lineno}: expected a message or term")
            continue
        pending = (lineno, match.group(1) == "-", match.group(2), match.group(3), [])
    finish()
    return entries, errors


def _format_value(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class _Bundle:
    """Messages and terms for a single locale."""

    def __init__(self, locale: LanguageIdentifier) -> None:
        self.locale = locale
        self.messages: dict[str, _Entry] = {}
        self.terms: dict[str, _Entry] = {}

    def add_entries(self, entries: Iterable[_Entry]) -> list[str]:
        errors = []
        for entry in entries:
            target = self.terms if entry.is_term else self.messages
            if entry.name in target:
                kind = "term" if entry.is_term else "message"
                errors.append(f"attempted to override an existing {kind}: {entry.name}")
                continue
            target[entry.name] = entry
        return errors

    def format(self, pattern: _Pattern, args: Optional[Mapping[str, object]]) -> str:
        return self._resolve(pattern, args, frozenset())

    def _resolve(self, pattern: _Pattern, args, seen: frozenset) -> str:
        isolate = len(pattern) > 1
        parts = []
        for element in pattern:
            if isinstance(element, (_Text, _Literal)):
                parts.append(element.value)
            elif isinstance(element, _Reference):
                parts.append(self._resolve_reference(element, args, seen))
            else:
                if isinstance(element, _Number):
                    text = element.value
                elif args is not None and element.name in args:
                    text = _format_value(args[element.name])
                else:
                    text = f"{{${element.name}}}"
                parts.append(f"{_FSI}{text}{_PDI}" if isolate else text)
        return "".join(parts)

    def _resolve_reference(self, reference: _Reference, args, seen: frozenset) -> str:
        label = reference.label
        if label in seen:
            return "{???}"
        entries = self.terms if reference.is_term else self.messages
        entry = entries.get(reference.name)
        pattern = None
        if entry is not None:
            pattern = (
                entry.attributes.get(reference.attribute)
                if reference.attribute
                else entry.value
            )
        if pattern is None:
            return f"{{{label}}}"
        scoped_args = None if reference.is_term else args
        return self._resolve(pattern, scoped_args, seen | {label})


class Locales:
    """Message bundles keyed by language."""

    def __init__(self, locales: Iterable[LanguageIdentifier]) -> None:
        self.bundles: dict[LanguageIdentifier, _Bundle] = {
            locale: _Bundle(locale) for locale in locales
        }

    def add_bundle(self, locale: LanguageIdentifier, content: str) -> None:
        """Parse ``content`` and add its messages to the bundle for ``locale``."""
        bundle = self.bundles.get(locale)
        if bundle is None:
            raise InvalidLanguageError(str(locale))
        entries, parse_errors = _parse_resource(content)
        if parse_errors:
            raise LanguageResourceError(parse_errors)
        load_errors = bundle.add_entries(entries)
        if load_errors:
            raise BundleLoadError(load_errors)

    def _message_value(self, locale: LanguageIdentifier, message_id: str):
        bundle = self.bundles.get(locale)
        if bundle is None:
            return None, None
        entry = bundle.messages.get(message_id)
        if entry is None or entry.value is None:
            return bundle, None
        return bundle, entry.value

    def format_error(self, locale: LanguageIdentifier, bare: str, partial: str) -> str:
        """Translate error ``bare``, falling back to ``partial``."""
        bundle, pattern = self._message_value(locale, bare)
        if pattern is None:
            return partial
        return bundle.format(pattern, None)

    def format_message(
        self,
        locale: LanguageIdentifier,
        message: str,
        args: Optional[Mapping[str, object]] = None,
    ) -> str:
        """Translate ``message`` with ``args``, falling back to the message id."""
        bundle, pattern = self._message_value(locale, message)
        if pattern is None:
            return message
        return bundle.format(pattern, dict(args or {}))


def populate_locale(
    supported_locales: Iterable[LanguageIdentifier],
    locales: Locales,
    directory: Union[str, Path],
) -> None:
    """Load ``<directory>/<locale>/<file>.ftl`` for every supported locale."""
    for locale in supported_locales:
        locale_dir = Path(directory) / str(locale).lower()
        for name in LOCALE_FILES:
            source_file = locale_dir / f"{name}.ftl"
            logger.info("Loading locale file: %s", source_file)
            content = source_file.read_bytes().decode("utf-8")
            locales.add_bundle(locale, content)