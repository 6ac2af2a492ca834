"""Parse post metadata (TOML) into a flat field mapping.

Two layouts are accepted and are equivalent::

    [metadata]                      title = "Hello"
    title = "Hello"                 date = 2026-02-11
    date = 2026-02-11

When a ``[metadata]`` table exists it wins over top-level keys.
"""

import datetime
import tomllib
from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

from dateutil import parser as date_parser

from tlog.errors import InvalidDate, MalformedMetadata

METADATA_SECTION = "metadata"
METADATA_FIELDS = ("title", "description", "date", "tags", "draft", "image")

# A free-form date must name its own year, month and day. Parsing against two
# unrelated defaults exposes any component that was filled in by the parser.
_PARSE_DEFAULTS = (datetime.datetime(2000, 1, 1), datetime.datetime(2001, 2, 2))


@runtime_checkable
class SupportsToDatetime(Protocol):
    def to_datetime(self) -> datetime.datetime: ...


@dataclass(frozen=True)
class NativeInstant:
    value: datetime.datetime


@dataclass(frozen=True)
class ConvertibleDate:
    value: Union[datetime.date, SupportsToDatetime]


@dataclass(frozen=True)
class TextDate:
    value: str
    raw: Any


RawDate = Union[NativeInstant, ConvertibleDate, TextDate]


def classify_raw_date(value: Any) -> RawDate:
    if isinstance(value, datetime.datetime):
        return NativeInstant(value)
    if isinstance(value, datetime.date) or isinstance(value, SupportsToDatetime):
        return ConvertibleDate(value)
    return TextDate(str(value), value)


def resolve_raw_date(raw: RawDate) -> datetime.datetime:
    if isinstance(raw, NativeInstant):
        return _as_utc(raw.value)
    if isinstance(raw, ConvertibleDate):
        if isinstance(raw.value, datetime.date):
            return _as_utc(datetime.datetime.combine(raw.value, datetime.time()))
        return _as_utc(raw.value.to_datetime())
    return _parse_text_date(raw)


def coerce_date(value: Any) -> datetime.datetime:
    """Coerce a native datetime, a convertible value or a date string.

    Raises ``InvalidDate`` with the offending value when nothing applies.
    """
    return resolve_raw_date(classify_raw_date(value))


def _parse_text_date(raw: TextDate) -> datetime.datetime:
    offending = raw.raw
    text = raw.value.strip()
    if not text:
        raise InvalidDate(offending)

    try:
        return _as_utc(date_parser.isoparse(text))
    except (ValueError, OverflowError, TypeError):
        pass

    try:
        first, second = (
            date_parser.parse(text, default=default, dayfirst=False)
            for default in _PARSE_DEFAULTS
        )
    except (ValueError, OverflowError, TypeError):
        raise InvalidDate(offending) from None
    if first.date() != second.date():
        raise InvalidDate(offending)
    return _as_utc(first)


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    # naive values are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def select_metadata_table(parsed: dict) -> dict:
    section = parsed.get(METADATA_SECTION)
    if isinstance(section, dict):
        return section
    return parsed


def parse_metadata(text: str, source: str = "<metadata>") -> dict:
    """Parse TOML metadata text and return the recognised fields.

    Absent fields map to ``None``; ``date`` is always coerced.
    """
    try:
        parsed = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise MalformedMetadata(source, str(e)) from e

    metadata = select_metadata_table(parsed)
    fields = {name: metadata.get(name) for name in METADATA_FIELDS}
    fields["date"] = coerce_date(metadata.get("date"))
    return fields
