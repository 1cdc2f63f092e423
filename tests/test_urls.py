import pytest

from sitemapgen.errors import HostMismatchError, ValidationError
from sitemapgen.utils.urls import check_host, require_absolute, resolve, same_host


def test_require_absolute():
	assert require_absolute("https://example.com/a") == "https://example.com/a"
	for bad in ("", "/a", "mailto:me@example.com", "https://", None):
		with pytest.raises(ValidationError):
			require_absolute(bad)


def test_same_host_ignores_scheme_and_case():
	assert same_host("http://WWW.Example.com/a", "https://www.example.com")
	assert not same_host("https://example.com/a", "https://www.example.com")


def test_check_host():
	check_host("https://www.example.com/a", "https://www.example.com")
	with pytest.raises(HostMismatchError) as err:
		check_host("https://example.com/index.html", "https://www.example.com")
	assert "doesn't match base URL" in str(err.value)


def test_resolve():
	assert resolve("https://www.example.com", "sitemap1.xml") == "https://www.example.com/sitemap1.xml"
	assert resolve("https://www.example.com/blog/", "sitemap.xml") == "https://www.example.com/blog/sitemap.xml"
