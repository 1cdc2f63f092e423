import pytest
from datetime import date

from sitemapgen.core.index import SitemapIndexGenerator
from sitemapgen.errors import CapacityExceededError, ConfigError, EmptyNotAllowedError, HostMismatchError
from sitemapgen.storage.writers import MemorySink

BASE = "https://www.example.com"
HEADER = (
	'<?xml version="1.0" encoding="UTF-8"?>\n'
	'<sitemapindex xmlns="https://www.sitemaps.org/schemas/sitemap/0.9">\n'
)


def test_numbered_index():
	idx = SitemapIndexGenerator(BASE, default_last_mod=date(1970, 1, 1))
	idx.add_numbered("sitemap", ".xml", 10)
	expected = HEADER + "".join(
		"  <sitemap>\n"
		f"    <loc>https://www.example.com/sitemap{i}.xml</loc>\n"
		"    <lastmod>1970-01-01</lastmod>\n"
		"  </sitemap>\n"
		for i in range(1, 11)
	) + "</sitemapindex>"
	assert idx.as_string() == expected
	assert len(idx) == 10


def test_numbered_zero_is_unnumbered():
	idx = SitemapIndexGenerator(BASE, default_last_mod=None)
	idx.add_numbered("sitemap", ".xml.gz", 0)
	assert idx.as_string() == HEADER + (
		"  <sitemap>\n"
		"    <loc>https://www.example.com/sitemap.xml.gz</loc>\n"
		"  </sitemap>\n"
		"</sitemapindex>"
	)


def test_empty_index():
	idx = SitemapIndexGenerator(BASE, sink=MemorySink())
	assert idx.as_string() == HEADER + "</sitemapindex>"
	with pytest.raises(EmptyNotAllowedError):
		idx.write()


def test_empty_index_allowed():
	sink = MemorySink()
	SitemapIndexGenerator(BASE, sink=sink, allow_empty_index=True, filename="idx.xml").write()
	assert sink.read_text("idx.xml") == HEADER + "</sitemapindex>"


def test_entry_last_mod_wins():
	idx = SitemapIndexGenerator(BASE, default_last_mod=date(1970, 1, 1))
	idx.add(f"{BASE}/a.xml", last_mod="2025-01-31")
	idx.add(f"{BASE}/b.xml")
	out = idx.as_string()
	assert "<lastmod>2025-01-31</lastmod>" in out
	assert "<lastmod>1970-01-01</lastmod>" in out


def test_default_last_mod_is_today():
	idx = SitemapIndexGenerator(BASE)
	idx.add(f"{BASE}/a.xml")
	assert f"<lastmod>{date.today().isoformat()}</lastmod>" in idx.as_string()


def test_capacity():
	idx = SitemapIndexGenerator(BASE, max_urls=2)
	idx.add_all([f"{BASE}/a.xml", f"{BASE}/b.xml"])
	with pytest.raises(CapacityExceededError):
		idx.add(f"{BASE}/c.xml")


def test_host_mismatch():
	with pytest.raises(HostMismatchError):
		SitemapIndexGenerator(BASE).add("https://example.com/sitemap.xml")


def test_write_needs_sink():
	idx = SitemapIndexGenerator(BASE)
	idx.add(f"{BASE}/a.xml")
	with pytest.raises(ConfigError):
		idx.write()


def test_write_with_validation():
	sink = MemorySink()
	idx = SitemapIndexGenerator(BASE, sink=sink, auto_validate=True)
	idx.add_numbered("sitemap", ".xml", 3)
	assert idx.write() == "sitemap_index.xml"
	assert sink.read_text("sitemap_index.xml").count("<sitemap>") == 3


@pytest.mark.parametrize("max_urls", [0, 50001])
def test_max_urls_bounds(max_urls):
	with pytest.raises(ConfigError):
		SitemapIndexGenerator(BASE, max_urls=max_urls)
