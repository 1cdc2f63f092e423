# SitemapGen — Sitemap index generation
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Union

from .datetimes import W3CDateTimeFormatter
from .entries import SitemapIndexUrl, coerce_temporal
from .render import SITEMAP_NS, XML_DECLARATION, escape_xml
from .validator import SchemaKind, SitemapValidator
from ..errors import CapacityExceededError, ConfigError, EmptyNotAllowedError
from ..utils.urls import check_host, require_absolute, resolve

logger = logging.getLogger(__name__)


DEFAULT_INDEX_FILE_NAME = "sitemap_index.xml"
MAX_SITEMAPS_PER_INDEX = 50000

_TODAY = object()


class SitemapIndexGenerator:
	"""Builds a ``<sitemapindex>`` listing sitemap files.

	Entries without their own ``last_mod`` fall back to ``default_last_mod``,
	which is today's date unless it is passed explicitly (``None`` turns the
	fallback off).
	"""

	def __init__(
		self,
		base_url: str,
		sink: Any = None,
		filename: str = DEFAULT_INDEX_FILE_NAME,
		date_formatter: Optional[W3CDateTimeFormatter] = None,
		allow_empty_index: bool = False,
		max_urls: int = MAX_SITEMAPS_PER_INDEX,
		default_last_mod: Any = _TODAY,
		auto_validate: bool = False,
		validator: Optional[SitemapValidator] = None,
	) -> None:
		self.base_url = require_absolute(base_url)
		if not filename:
			raise ConfigError("Index file name must not be empty")
		if not 1 <= max_urls <= MAX_SITEMAPS_PER_INDEX:
			raise ConfigError(f"You can't have more than {MAX_SITEMAPS_PER_INDEX} sitemaps per index, got {max_urls}")
		if default_last_mod is _TODAY:
			default_last_mod = date.today()
		try:
			self.default_last_mod = coerce_temporal(default_last_mod)
		except ValueError as e:
			raise ConfigError(f"Invalid default_last_mod: {e}") from e
		self.sink = sink
		self.filename = filename
		self.date_formatter = date_formatter or W3CDateTimeFormatter()
		self.allow_empty_index = allow_empty_index
		self.max_urls = max_urls
		self.auto_validate = auto_validate
		self.validator = validator
		if auto_validate and validator is None:
			self.validator = SitemapValidator()
		self._urls: List[SitemapIndexUrl] = []

	def __len__(self) -> int:
		return len(self._urls)

	def add(self, url: Union[SitemapIndexUrl, str], last_mod: Any = None) -> None:
		if not isinstance(url, SitemapIndexUrl):
			url = SitemapIndexUrl(url, last_mod)
		check_host(url.url, self.base_url)
		if len(self._urls) >= self.max_urls:
			raise CapacityExceededError(f"More than {self.max_urls} sitemaps in the index; allowed {self.max_urls}")
		self._urls.append(url)

	def add_all(self, urls: Iterable[Union[SitemapIndexUrl, str]]) -> None:
		for url in urls:
			self.add(url)

	def add_numbered(self, prefix: str, suffix: str, count: int) -> None:
		"""Add ``prefix1suffix`` .. ``prefixNsuffix``, or ``prefixsuffix`` when count is 0."""
		if count == 0:
			self.add(resolve(self.base_url, prefix + suffix))
			return
		for i in range(1, count + 1):
			self.add(resolve(self.base_url, f"{prefix}{i}{suffix}"))

	def as_string(self) -> str:
		parts = [XML_DECLARATION, f'<sitemapindex xmlns="{SITEMAP_NS}">\n']
		for url in self._urls:
			parts.append("  <sitemap>\n")
			parts.append(f"    <loc>{escape_xml(url.url)}</loc>\n")
			last_mod = url.last_mod if url.last_mod is not None else self.default_last_mod
			if last_mod is not None:
				parts.append(f"    <lastmod>{self.date_formatter.format(last_mod)}</lastmod>\n")
			parts.append("  </sitemap>\n")
		parts.append("</sitemapindex>")
		return "".join(parts)

	def write(self) -> Any:
		"""Write the index to the sink and return the sink's location for it."""
		if not self._urls and not self.allow_empty_index:
			raise EmptyNotAllowedError("No URLs added, sitemap index would be empty; you must add some URLs")
		if self.sink is None:
			raise ConfigError("No sink configured; cannot write the sitemap index")
		data = self.as_string().encode("utf-8")
		location = self.sink.write(self.filename, data, compress=False)
		logger.info("Wrote index %s with %d sitemaps", self.filename, len(self._urls))
		if self.auto_validate:
			self.validator.validate(data, SchemaKind.SITEMAP_INDEX, self.filename)
		return location


__all__ = [
	"DEFAULT_INDEX_FILE_NAME",
	"MAX_SITEMAPS_PER_INDEX",
	"SitemapIndexGenerator",
]
