# SitemapGen — URL utilities: absolute-URL checks and host scope
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from urllib.parse import urlparse, urljoin

from ..errors import HostMismatchError, ValidationError


ALLOWED_SCHEMES = {"http", "https"}


def require_absolute(url: str) -> str:
	"""Return url unchanged if it is an absolute http(s) URL with a host.

	Raises ValidationError otherwise.
	"""
	if not isinstance(url, str) or not url.strip():
		raise ValidationError(f"URL must be a non-empty string: {url!r}")
	try:
		p = urlparse(url)
		host = p.hostname
	except ValueError as e:
		raise ValidationError(f"Malformed URL {url!r}: {e}") from e
	if p.scheme.lower() not in ALLOWED_SCHEMES:
		raise ValidationError(f"URL must use http or https: {url!r}")
	if not host:
		raise ValidationError(f"URL has no host: {url!r}")
	return url


def host_of(url: str) -> str:
	return (urlparse(url).hostname or "").lower()


def same_host(url_a: str, url_b: str) -> bool:
	"""Compare hosts case-insensitively; scheme and port are ignored."""
	try:
		return host_of(url_a) == host_of(url_b)
	except ValueError:
		return False


def check_host(url: str, base_url: str) -> None:
	if not host_of(base_url):
		raise ValidationError(f"base URL has no host: {base_url!r}")
	if not same_host(url, base_url):
		raise HostMismatchError(url, base_url)


def resolve(base_url: str, name: str) -> str:
	"""Resolve a file name against the base URL (``sitemap1.xml`` -> ``https://host/sitemap1.xml``)."""
	return require_absolute(urljoin(base_url, name))


__all__ = [
	"require_absolute",
	"host_of",
	"same_host",
	"check_host",
	"resolve",
]
