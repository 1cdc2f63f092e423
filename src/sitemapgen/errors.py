# SitemapGen — Error taxonomy
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional


class SitemapError(Exception):
	"""Base error for all sitemap generation failures."""


class ConfigError(SitemapError):
	"""Invalid generator options or a missing collaborator (sink, finished state)."""


class ValidationError(SitemapError, ValueError):
	"""Malformed or out-of-range entry field, raised at construction time."""


class HostMismatchError(ValidationError):
	"""Entry URL does not live on the generator's base host."""

	def __init__(self, url: str, base_url: str) -> None:
		super().__init__(f"Domain of URL {url} doesn't match base URL {base_url}")
		self.url = url
		self.base_url = base_url


class FormatError(SitemapError, ValueError):
	"""A value cannot be formatted as, or parsed from, a W3C datetime."""


class CapacityExceededError(SitemapError):
	"""A hard URL cap was reached and splitting is not permitted."""


class EmptyNotAllowedError(SitemapError):
	"""Finishing or writing with zero entries while empty output is disabled."""


class AlreadyFinalizedError(SitemapError):
	"""The generator was already finished; create a new one."""


class SinkError(SitemapError, OSError):
	"""Writing a document to the sink failed."""

	def __init__(self, filename: str, message: str) -> None:
		super().__init__(f"Problem writing sitemap file {filename}: {message}")
		self.filename = filename


class SchemaValidationError(SitemapError):
	"""A written document failed validation."""

	def __init__(self, message: str, filename: Optional[str] = None) -> None:
		where = f" ({filename})" if filename else ""
		super().__init__(f"Sitemap failed to validate{where}: {message}")
		self.filename = filename
