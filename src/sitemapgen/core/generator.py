# SitemapGen — Sitemap generators: buffering, splitting and writing documents
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from .datetimes import W3CDateTimeFormatter
from .entries import ImageUrl, WebUrl
from .index import DEFAULT_INDEX_FILE_NAME, SitemapIndexGenerator
from .render import SITEMAP_NS, XML_DECLARATION, ImageRenderer, NewsRenderer, UrlRenderer, VideoRenderer
from .validator import SchemaKind, SitemapValidator
from ..errors import (
	AlreadyFinalizedError,
	CapacityExceededError,
	ConfigError,
	EmptyNotAllowedError,
	ValidationError,
)
from ..utils.urls import check_host, require_absolute

logger = logging.getLogger(__name__)


MAX_URLS_PER_SITEMAP = 50000
MAX_URLS_PER_NEWS_SITEMAP = 1000


class GeneratorOptions:
	"""Options shared by every sitemap flavor.

	- file_name_prefix: sitemap file names start with this ("sitemap")
	- suffix_pattern: text between the number and ".xml", e.g. "01"
	- allow_empty_sitemap: finish() writes an empty urlset instead of raising
	- allow_multiple_sitemaps: split at max_urls instead of raising
	- max_urls: URLs per file, 1..50000; None takes the flavor default
	  (50000, or 1000 for news)
	- auto_validate: validate each document after writing it
	- gzip: write ".xml.gz" files
	"""

	def __init__(
		self,
		file_name_prefix: str = "sitemap",
		suffix_pattern: Optional[str] = None,
		allow_empty_sitemap: bool = False,
		allow_multiple_sitemaps: bool = True,
		date_formatter: Optional[W3CDateTimeFormatter] = None,
		max_urls: Optional[int] = None,
		auto_validate: bool = False,
		gzip: bool = False,
	) -> None:
		if not file_name_prefix:
			raise ConfigError("file_name_prefix must not be empty")
		if max_urls is not None and not 1 <= max_urls <= MAX_URLS_PER_SITEMAP:
			raise ConfigError(
				f"You can only have {MAX_URLS_PER_SITEMAP} URLs per sitemap; "
				f"max_urls must be between 1 and {MAX_URLS_PER_SITEMAP}, got {max_urls}"
			)
		self.file_name_prefix = file_name_prefix
		self.suffix_pattern = suffix_pattern
		self.allow_empty_sitemap = allow_empty_sitemap
		self.allow_multiple_sitemaps = allow_multiple_sitemaps
		self.date_formatter = date_formatter or W3CDateTimeFormatter()
		self.max_urls = max_urls
		self.auto_validate = auto_validate
		self.gzip = gzip

	@property
	def file_name_suffix(self) -> str:
		return (self.suffix_pattern or "") + (".xml.gz" if self.gzip else ".xml")

	def file_name(self, number: int) -> str:
		"""``sitemap.xml`` for 0, ``sitemap{number}.xml`` otherwise."""
		return f"{self.file_name_prefix}{number if number > 0 else ''}{self.file_name_suffix}"


@dataclass(frozen=True)
class SitemapDocument:
	filename: str
	url_count: int
	created_at: datetime
	location: Any = None


class SitemapGenerator:
	"""Collects URL entries and writes them out as one or more sitemap files.

	Entries are buffered until ``max_urls`` is reached; the next ``add`` then
	flushes the buffer to the sink as a numbered file. ``finish`` writes the
	rest. A generator is single-use: after ``finish`` it only serves the index.

	Without a sink nothing is written and the buffer grows past ``max_urls``,
	which is what ``render_as_strings`` slices into documents.
	"""

	entry_factory: Optional[Callable[[str], WebUrl]] = None
	default_max_urls = MAX_URLS_PER_SITEMAP

	def __init__(
		self,
		base_url: str,
		renderer: UrlRenderer,
		options: Optional[GeneratorOptions] = None,
		sink: Any = None,
		validator: Optional[SitemapValidator] = None,
	) -> None:
		self.base_url = require_absolute(base_url)
		self.renderer = renderer
		self.options = options or GeneratorOptions()
		self.max_urls = self.options.max_urls or self.default_max_urls
		self.sink = sink
		self.validator = validator
		if self.options.auto_validate and validator is None:
			self.validator = SitemapValidator()
		self._urls: List[WebUrl] = []
		self._map_count = 0
		self._finished = False
		self._documents: List[SitemapDocument] = []

	@property
	def finished(self) -> bool:
		return self._finished

	@property
	def documents(self) -> List[SitemapDocument]:
		return list(self._documents)

	def add(self, entry: Union[WebUrl, str]) -> None:
		if self._finished:
			raise AlreadyFinalizedError("Sitemap already printed; you must create a new generator to make more sitemaps")
		if isinstance(entry, str):
			entry = self._from_string(entry)
		entry_type = self.renderer.entry_type
		if not isinstance(entry, entry_type):
			logger.debug("Rejected %r: not a %s", entry, entry_type.__name__)
			raise ValidationError(f"{type(self).__name__} accepts {entry_type.__name__} entries, got {type(entry).__name__}")
		try:
			check_host(entry.url, self.base_url)
		except ValidationError:
			logger.debug("Rejected %s: outside %s", entry.url, self.base_url)
			raise
		if len(self._urls) >= self.max_urls:
			if not self.options.allow_multiple_sitemaps:
				raise CapacityExceededError(
					f"More than {self.max_urls} URLs, but allow_multiple_sitemaps is off; "
					"enable it or add fewer URLs"
				)
			if self.sink is not None:
				if self._map_count == 0:
					self._map_count = 1
				filename, data = self._write_buffer()
				self._map_count += 1
				self._urls.clear()
				self._validate(filename, data)
		self._urls.append(entry)

	def add_all(self, entries: Iterable[Union[WebUrl, str]]) -> None:
		for entry in entries:
			self.add(entry)

	def finish(self) -> List[SitemapDocument]:
		"""Write the remaining entries and return every document written."""
		if self._finished:
			raise AlreadyFinalizedError("Sitemap already printed; you must create a new generator to make more sitemaps")
		if not self._urls and self._map_count == 0 and not self.options.allow_empty_sitemap:
			raise EmptyNotAllowedError("No URLs added, sitemap would be empty; you must add some URLs with add")
		if self.sink is None:
			raise ConfigError("No sink configured; use render_as_strings() to get the documents instead")
		written = None
		if self._urls or (self._map_count == 0 and self.options.allow_empty_sitemap):
			written = self._write_buffer()
		self._finished = True
		if written is not None:
			self._validate(*written)
		return list(self._documents)

	def render_as_strings(self) -> List[str]:
		"""Render the buffered entries as documents of at most ``max_urls`` each.

		With a sink, entries already flushed on overflow are not in the buffer;
		only the unwritten tail is rendered.
		"""
		size = self.max_urls
		return [self._render_document(self._urls[i:i + size]) for i in range(0, len(self._urls), size)]

	def write_index(self, filename: str = DEFAULT_INDEX_FILE_NAME) -> Any:
		return self._index(self.sink, filename).write()

	def index_as_string(self) -> str:
		return self._index(None, DEFAULT_INDEX_FILE_NAME).as_string()

	def _index(self, sink: Any, filename: str) -> SitemapIndexGenerator:
		if not self._finished:
			raise ConfigError("Sitemaps not generated yet; call finish() first")
		index = SitemapIndexGenerator(
			self.base_url,
			sink=sink,
			filename=filename,
			date_formatter=self.options.date_formatter,
			auto_validate=self.options.auto_validate,
			validator=self.validator,
		)
		index.add_numbered(self.options.file_name_prefix, self.options.file_name_suffix, self._map_count)
		return index

	def _from_string(self, url: str) -> WebUrl:
		if self.entry_factory is None:
			raise ValidationError(
				f"{type(self).__name__} needs full {self.renderer.entry_type.__name__} entries, not bare URL strings"
			)
		return self.entry_factory(url)

	def _render_document(self, urls: List[WebUrl]) -> str:
		parts = [XML_DECLARATION, f'<urlset xmlns="{SITEMAP_NS}" ']
		if self.renderer.namespaces:
			parts.append(self.renderer.namespaces + " ")
		parts.append(">\n")
		formatter = self.options.date_formatter
		parts.extend(self.renderer.render(url, formatter) for url in urls)
		parts.append("</urlset>")
		return "".join(parts)

	def _write_buffer(self) -> Tuple[str, bytes]:
		filename = self.options.file_name(self._map_count)
		data = self._render_document(self._urls).encode("utf-8")
		location = self.sink.write(filename, data, compress=self.options.gzip)
		self._documents.append(
			SitemapDocument(
				filename=filename,
				url_count=len(self._urls),
				created_at=datetime.now(timezone.utc),
				location=location,
			)
		)
		logger.info("Wrote %s with %d URLs", filename, len(self._urls))
		return filename, data

	def _validate(self, filename: str, data: bytes) -> None:
		if self.options.auto_validate:
			self.validator.validate(data, SchemaKind.SITEMAP, filename)


class WebSitemapGenerator(SitemapGenerator):
	entry_factory = WebUrl

	def __init__(self, base_url: str, options: Optional[GeneratorOptions] = None, sink: Any = None, validator: Optional[SitemapValidator] = None) -> None:
		super().__init__(base_url, UrlRenderer(), options, sink, validator)


class ImageSitemapGenerator(SitemapGenerator):
	entry_factory = ImageUrl

	def __init__(self, base_url: str, options: Optional[GeneratorOptions] = None, sink: Any = None, validator: Optional[SitemapValidator] = None) -> None:
		super().__init__(base_url, ImageRenderer(), options, sink, validator)


class VideoSitemapGenerator(SitemapGenerator):
	def __init__(self, base_url: str, options: Optional[GeneratorOptions] = None, sink: Any = None, validator: Optional[SitemapValidator] = None) -> None:
		super().__init__(base_url, VideoRenderer(), options, sink, validator)


class NewsSitemapGenerator(SitemapGenerator):
	"""Google News sitemaps hold at most 1000 URLs per file."""

	default_max_urls = MAX_URLS_PER_NEWS_SITEMAP

	def __init__(self, base_url: str, options: Optional[GeneratorOptions] = None, sink: Any = None, validator: Optional[SitemapValidator] = None) -> None:
		if options is not None and options.max_urls is not None and options.max_urls > MAX_URLS_PER_NEWS_SITEMAP:
			raise ConfigError(
				f"Google News sitemaps can have only {MAX_URLS_PER_NEWS_SITEMAP} URLs per sitemap, got {options.max_urls}"
			)
		super().__init__(base_url, NewsRenderer(), options, sink, validator)


__all__ = [
	"MAX_URLS_PER_SITEMAP",
	"MAX_URLS_PER_NEWS_SITEMAP",
	"GeneratorOptions",
	"SitemapDocument",
	"SitemapGenerator",
	"WebSitemapGenerator",
	"ImageSitemapGenerator",
	"VideoSitemapGenerator",
	"NewsSitemapGenerator",
]
