# SitemapGen — W3C datetime formatting and parsing
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import ConfigError, FormatError


UTC = timezone.utc

Temporal = Union[date, datetime]

_W3C_RE = re.compile(
	r"^(?P<year>\d{4})"
	r"(?:-(?P<month>\d{2})"
	r"(?:-(?P<day>\d{2})"
	r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})"
	r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
	r"(?P<offset>Z|[+-]\d{2}:\d{2})?"
	r")?)?)?$"
)


class Precision(Enum):
	"""Output layouts of the W3C datetime profile, coarsest first."""

	YEAR = "yyyy"
	MONTH = "yyyy-MM"
	DAY = "yyyy-MM-dd"
	MINUTE = "yyyy-MM-dd'T'HH:mm[XXX]"
	SECOND = "yyyy-MM-dd'T'HH:mm:ss[XXX]"
	MILLISECOND = "yyyy-MM-dd'T'HH:mm:ss.SSS[XXX]"

	@property
	def has_time(self) -> bool:
		return self in (Precision.MINUTE, Precision.SECOND, Precision.MILLISECOND)

	@classmethod
	def from_name(cls, name: str) -> "Precision":
		try:
			return cls[name.strip().upper()]
		except KeyError:
			choices = ", ".join(p.name.lower() for p in cls)
			raise ConfigError(f"Unknown date pattern {name!r}; expected one of {choices}") from None


def coerce_zone(zone: Union[tzinfo, str, None]) -> tzinfo:
	if zone is None:
		return UTC
	if isinstance(zone, tzinfo):
		return zone
	name = zone.strip()
	if name.upper() in ("UTC", "GMT", "Z", "ZULU"):
		return UTC
	try:
		return ZoneInfo(name)
	except (ZoneInfoNotFoundError, ValueError) as e:
		raise ConfigError(f"Unknown time zone {zone!r}") from e


def _format_offset(offset: timedelta) -> str:
	total = int(offset.total_seconds())
	if total == 0:
		return "Z"
	sign = "+" if total > 0 else "-"
	hours, rem = divmod(abs(total), 3600)
	return f"{sign}{hours:02d}:{rem // 60:02d}"


def _render(value: Temporal, precision: Precision, offset: str) -> str:
	out = f"{value.year:04d}"
	if precision is Precision.YEAR:
		return out
	out += f"-{value.month:02d}"
	if precision is Precision.MONTH:
		return out
	out += f"-{value.day:02d}"
	if precision is Precision.DAY:
		return out
	out += f"T{value.hour:02d}:{value.minute:02d}"
	if precision is not Precision.MINUTE:
		out += f":{value.second:02d}"
	if precision is Precision.MILLISECOND:
		out += f".{value.microsecond // 1000:03d}"
	return out + offset


def _precision_of(match: "re.Match[str]") -> Precision:
	if match.group("month") is None:
		return Precision.YEAR
	if match.group("day") is None:
		return Precision.MONTH
	if match.group("hour") is None:
		return Precision.DAY
	if match.group("second") is None:
		return Precision.MINUTE
	if match.group("fraction") is None:
		return Precision.SECOND
	return Precision.MILLISECOND


class W3CDateTimeFormatter:
	"""Formats and parses timestamps in the W3C datetime profile used by sitemaps.

	With no pattern, output precision follows the value's type: ``date`` prints
	the day, naive and aware ``datetime`` print milliseconds. Aware values are
	converted to ``zone`` and carry their offset (``Z`` for UTC); naive values
	are printed as-is without an offset. A ``date`` at a time precision is
	midnight of that day in ``zone``.
	"""

	def __init__(self, pattern: Union[Precision, str, None] = None, zone: Union[tzinfo, str, None] = None) -> None:
		if isinstance(pattern, str):
			pattern = Precision.from_name(pattern)
		self.pattern: Optional[Precision] = pattern
		self.zone: tzinfo = coerce_zone(zone)

	def __repr__(self) -> str:
		name = self.pattern.name if self.pattern else "auto"
		return f"W3CDateTimeFormatter(pattern={name}, zone={self.zone})"

	def format(self, value: Temporal) -> str:
		if isinstance(value, datetime):
			precision = self.pattern or Precision.MILLISECOND
			offset = ""
			if value.utcoffset() is not None:
				value = value.astimezone(self.zone)
				offset = _format_offset(value.utcoffset())
			return _render(value, precision, offset)
		if isinstance(value, date):
			precision = self.pattern or Precision.DAY
			if precision.has_time:
				# midnight of that day in the configured zone
				midnight = datetime(value.year, value.month, value.day, tzinfo=self.zone)
				return _render(midnight, precision, _format_offset(midnight.utcoffset()))
			return _render(value, precision, "")
		raise FormatError(f"No W3C formatter for values of type {type(value).__name__}")

	def parse(self, text: str) -> Temporal:
		"""Parse into the most specific type the text matches.

		Date-only text gives a ``date``; a trailing ``Z`` gives an aware UTC
		``datetime``; a ``+HH:MM``/``-HH:MM`` suffix keeps that fixed offset;
		anything else is a naive ``datetime``.
		"""
		if not isinstance(text, str):
			raise FormatError(f"Expected a string, got {type(text).__name__}")
		m = _W3C_RE.match(text.strip())
		if not m:
			raise FormatError(f"Not a W3C datetime: {text!r}")
		precision = _precision_of(m)
		if self.pattern is not None and precision is not self.pattern:
			raise FormatError(f"{text!r} does not match the {self.pattern.name} pattern {self.pattern.value}")
		try:
			if not precision.has_time:
				return date(int(m.group("year")), int(m.group("month") or 1), int(m.group("day") or 1))
			fraction = (m.group("fraction") or "").ljust(6, "0")[:6]
			parsed = datetime(
				int(m.group("year")),
				int(m.group("month")),
				int(m.group("day")),
				int(m.group("hour")),
				int(m.group("minute")),
				int(m.group("second") or 0),
				int(fraction),
			)
		except ValueError as e:
			raise FormatError(f"Invalid W3C datetime {text!r}: {e}") from e
		offset = m.group("offset")
		if offset is None:
			return parsed
		if offset == "Z":
			return parsed.replace(tzinfo=UTC)
		sign = -1 if offset[0] == "-" else 1
		delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
		return parsed.replace(tzinfo=timezone(sign * delta))

	def parse_date(self, text: str) -> date:
		value = self.parse(text)
		if isinstance(value, datetime):
			return value.date()
		return value

	def parse_datetime(self, text: str) -> datetime:
		"""Naive datetime; a parsed offset is dropped, not applied."""
		value = self.parse(text)
		if isinstance(value, datetime):
			return value.replace(tzinfo=None)
		return datetime(value.year, value.month, value.day)

	def parse_zoned(self, text: str) -> datetime:
		"""Aware datetime expressed in the configured zone.

		Text without an offset is taken to be in the configured zone.
		"""
		value = self.parse(text)
		if not isinstance(value, datetime):
			value = datetime(value.year, value.month, value.day)
		if value.utcoffset() is None:
			return value.replace(tzinfo=self.zone)
		return value.astimezone(self.zone)

	def parse_instant(self, text: str) -> datetime:
		return self.parse_zoned(text).astimezone(UTC)


__all__ = [
	"UTC",
	"Precision",
	"W3CDateTimeFormatter",
	"coerce_zone",
]
