from __future__ import annotations

import re
from dataclasses import dataclass

from scholarpage.core.latex import clean_latex
from scholarpage.domain.models.publication import PUBLICATION_TYPE, Publication

MONTH_ABBREVIATIONS = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)
VENUE_FIELDS = ("journal", "booktitle", "publisher")
VENUE_FALLBACK = "Preprint"

_ENTRY_MARKER_RE = re.compile(r"@\w+\s*\{")
_LEADING_DIGITS_RE = re.compile(r"\d+")
_BARE_WORD_RE = re.compile(r"[A-Za-z]+")


@dataclass(slots=True)
class _RawField:
    value: str
    delimited: bool


def count_entry_markers(text: str) -> int:
    return len(_ENTRY_MARKER_RE.findall(text or ""))


def parse_publications(text: str) -> list[Publication]:
    """Parse BibTeX text into publications, newest first.

    Malformed entries never raise: an entry without an identifier comma or
    without a usable title is skipped and the rest of the file still parses.
    """
    publications: list[Publication] = []

    # Segment 0 is whatever precedes the first marker (comments, preamble).
    for segment in _ENTRY_MARKER_RE.split(text or "")[1:]:
        publication = _parse_entry(segment)
        if publication is not None:
            publications.append(publication)

    return sorted(publications, key=_sort_key)


def month_ordinal(month: str | None) -> int:
    normalized = (month or "").strip().lower()
    if not normalized:
        return -1

    for index, abbreviation in enumerate(MONTH_ABBREVIATIONS):
        if normalized.startswith(abbreviation):
            return index

    digits = _LEADING_DIGITS_RE.match(normalized)
    if digits:
        number = int(digits.group(0))
        if 1 <= number <= 12:
            return number - 1
    return -1


def year_number(year: str | None) -> int:
    digits = _LEADING_DIGITS_RE.match((year or "").strip())
    return int(digits.group(0)) if digits else 0


def _sort_key(publication: Publication) -> tuple[int, int, str]:
    return (-year_number(publication.year), -month_ordinal(publication.month), publication.title)


def _parse_entry(segment: str) -> Publication | None:
    block = segment.strip()
    if not block:
        return None

    comma_idx = block.find(",")
    if comma_idx == -1:
        return None
    cite_key = block[:comma_idx].strip()
    if not cite_key:
        return None

    fields = _parse_fields(block[comma_idx + 1 :])

    title = _field_value(fields, "title")
    if not title:
        return None

    venue = VENUE_FALLBACK
    for name in VENUE_FIELDS:
        candidate = _field_value(fields, name)
        if candidate:
            venue = candidate
            break

    return Publication(
        id=cite_key,
        title=title,
        author=_field_value(fields, "author"),
        year=_field_value(fields, "year"),
        month=_field_value(fields, "month"),
        venue=venue,
        url=_field_value(fields, "url"),
        type=PUBLICATION_TYPE,
    )


def _field_value(fields: dict[str, _RawField], name: str) -> str:
    raw = fields.get(name)
    if raw is None:
        return ""
    if raw.delimited:
        return clean_latex(raw.value)

    digits = _LEADING_DIGITS_RE.match(raw.value)
    if digits:
        return digits.group(0)
    if name == "month" and _BARE_WORD_RE.fullmatch(raw.value):
        return raw.value
    return ""


def _parse_fields(text: str) -> dict[str, _RawField]:
    fields: dict[str, _RawField] = {}
    i = 0
    n = len(text)

    while i < n:
        while i < n and (text[i].isspace() or text[i] == ","):
            i += 1
        # A closing brace at field level ends the entry.
        if i >= n or text[i] == "}":
            break

        name_start = i
        while i < n and (text[i].isalnum() or text[i] in "-_"):
            i += 1
        name = text[name_start:i].lower()

        while i < n and text[i].isspace():
            i += 1
        if i >= n or text[i] != "=":
            i = _skip_field(text, i)
            continue

        i += 1
        while i < n and text[i].isspace():
            i += 1

        raw, i = _parse_value(text, i)
        if name and name not in fields:
            fields[name] = raw

    return fields


def _skip_field(text: str, start_idx: int) -> int:
    i = start_idx
    n = len(text)
    depth = 0
    while i < n:
        ch = text[i]
        if depth == 0 and ch in ",}":
            break
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        i += 1
    return i


def _parse_value(text: str, start_idx: int) -> tuple[_RawField, int]:
    i = start_idx
    n = len(text)
    if i >= n:
        return _RawField("", delimited=False), i

    ch = text[i]
    if ch == "{":
        i += 1
        depth = 1
        value_start = i
        while i < n:
            if text[i] == "{":
                depth += 1
            elif text[i] == "}":
                depth -= 1
                if depth == 0:
                    return _RawField(text[value_start:i], delimited=True), i + 1
            i += 1
        # Unbalanced: keep what is there rather than losing the entry.
        return _RawField(text[value_start:], delimited=True), n

    if ch == '"':
        i += 1
        depth = 0
        escaped = False
        value_start = i
        while i < n:
            current = text[i]
            if current == '"' and depth == 0 and not escaped:
                return _RawField(text[value_start:i], delimited=True), i + 1
            if current == "{":
                depth += 1
            elif current == "}":
                depth = max(depth - 1, 0)
            escaped = current == "\\" and not escaped
            i += 1
        return _RawField(text[value_start:], delimited=True), n

    value_start = i
    while i < n and text[i] not in ",}\n":
        i += 1
    return _RawField(text[value_start:i].strip(), delimited=False), i
