from datetime import date, datetime, timezone

from sitemapgen.core.datetimes import Precision, W3CDateTimeFormatter
from sitemapgen.core.entries import Image, ImageUrl, NewsPublication, NewsUrl, VideoUrl
from sitemapgen.core.generator import (
	GeneratorOptions,
	ImageSitemapGenerator,
	NewsSitemapGenerator,
	VideoSitemapGenerator,
)
from sitemapgen.storage.writers import MemorySink

BASE = "https://www.example.com"
PAGE = "https://www.example.com/index.html"


def urlset(ns):
	return (
		'<?xml version="1.0" encoding="UTF-8"?>\n'
		f'<urlset xmlns="https://www.sitemaps.org/schemas/sitemap/0.9" {ns} >\n'
	)


def test_image_sitemap():
	gen = ImageSitemapGenerator(BASE)
	gen.add(ImageUrl(PAGE, images=[Image(
		"https://cdn.example.com/a.jpg",
		caption="A & B",
		title="Cat",
		geo_location="Limerick, Ireland",
		license="https://www.example.com/license",
	)]))
	assert gen.render_as_strings() == [
		urlset('xmlns:image="http://www.google.com/schemas/sitemap-image/1.1"')
		+ "  <url>\n"
		"    <loc>https://www.example.com/index.html</loc>\n"
		"    <image:image>\n"
		"      <image:loc>https://cdn.example.com/a.jpg</image:loc>\n"
		"      <image:caption>A &amp; B</image:caption>\n"
		"      <image:title>Cat</image:title>\n"
		"      <image:geo_location>Limerick, Ireland</image:geo_location>\n"
		"      <image:license>https://www.example.com/license</image:license>\n"
		"    </image:image>\n"
		"  </url>\n"
		"</urlset>"
	]


def test_image_sitemap_skips_unset_image_fields():
	gen = ImageSitemapGenerator(BASE)
	gen.add(ImageUrl(PAGE, images=["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"]))
	doc = gen.render_as_strings()[0]
	assert doc.count("<image:image>") == 2
	assert "<image:caption>" not in doc


def test_video_sitemap():
	sink = MemorySink()
	gen = VideoSitemapGenerator(BASE, sink=sink)
	gen.add(VideoUrl(
		PAGE,
		"https://www.example.com/index.flv",
		player_url="https://www.example.com/index.swf",
		allow_embed=True,
		thumbnail_url="https://www.example.com/thumbnail.jpg",
		title="Grilling steaks for summer",
		description="Alkis shows you how to get perfectly done steaks every time",
		rating=5.0,
		view_count=100000,
		publication_date=date(1970, 1, 1),
		tags=["steak", "summer", "outdoor"],
		category="Grilling",
		family_friendly=False,
		duration=1800,
	))
	gen.finish()
	assert sink.read_text("sitemap.xml") == (
		urlset('xmlns:video="http://www.google.com/schemas/sitemap-video/1.1"')
		+ "  <url>\n"
		"    <loc>https://www.example.com/index.html</loc>\n"
		"    <video:video>\n"
		"      <video:content_loc>https://www.example.com/index.flv</video:content_loc>\n"
		'      <video:player_loc allow_embed="Yes">https://www.example.com/index.swf</video:player_loc>\n'
		"      <video:thumbnail_loc>https://www.example.com/thumbnail.jpg</video:thumbnail_loc>\n"
		"      <video:title>Grilling steaks for summer</video:title>\n"
		"      <video:description>Alkis shows you how to get perfectly done steaks every time</video:description>\n"
		"      <video:rating>5.0</video:rating>\n"
		"      <video:view_count>100000</video:view_count>\n"
		"      <video:publication_date>1970-01-01</video:publication_date>\n"
		"      <video:tag>steak</video:tag>\n"
		"      <video:tag>summer</video:tag>\n"
		"      <video:tag>outdoor</video:tag>\n"
		"      <video:category>Grilling</video:category>\n"
		"      <video:family_friendly>No</video:family_friendly>\n"
		"      <video:duration>1800</video:duration>\n"
		"    </video:video>\n"
		"  </url>\n"
		"</urlset>"
	)


def test_video_minimal():
	gen = VideoSitemapGenerator(BASE)
	gen.add(VideoUrl(PAGE, "https://www.example.com/index.flv"))
	assert gen.render_as_strings()[0].endswith(
		"    <video:video>\n"
		"      <video:content_loc>https://www.example.com/index.flv</video:content_loc>\n"
		"    </video:video>\n"
		"  </url>\n"
		"</urlset>"
	)


def test_news_sitemap():
	options = GeneratorOptions(max_urls=1000, date_formatter=W3CDateTimeFormatter(Precision.SECOND))
	gen = NewsSitemapGenerator(BASE, options)
	gen.add(NewsUrl(
		PAGE,
		datetime(1970, 1, 1, tzinfo=timezone.utc),
		"Article title",
		NewsPublication("Example", "en"),
		keywords=["Klaatu", "Barrata", "Nicto"],
		genres="PressRelease",
	))
	assert gen.render_as_strings() == [
		urlset('xmlns:news="http://www.google.com/schemas/sitemap-news/0.9"')
		+ "  <url>\n"
		"    <loc>https://www.example.com/index.html</loc>\n"
		"    <news:news>\n"
		"      <news:publication>\n"
		"        <news:name>Example</news:name>\n"
		"        <news:language>en</news:language>\n"
		"      </news:publication>\n"
		"      <news:genres>PressRelease</news:genres>\n"
		"      <news:publication_date>1970-01-01T00:00:00Z</news:publication_date>\n"
		"      <news:title>Article title</news:title>\n"
		"      <news:keywords>Klaatu, Barrata, Nicto</news:keywords>\n"
		"    </news:news>\n"
		"  </url>\n"
		"</urlset>"
	]
