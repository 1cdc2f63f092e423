# SitemapGen — XML rendering of sitemap entries (web, image, video, news)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from typing import Any, List, Optional, Type

from .datetimes import W3CDateTimeFormatter
from .entries import ImageUrl, NewsUrl, VideoUrl, WebUrl


SITEMAP_NS = "https://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

_XML_ENTITIES = {
	"&": "&amp;",
	"'": "&apos;",
	'"': "&quot;",
	">": "&gt;",
	"<": "&lt;",
}
_XML_SPECIAL_RE = re.compile(r"[&'\"><]")


def escape_xml(text: str) -> str:
	"""Escape the five reserved XML characters in one left-to-right pass."""
	return _XML_SPECIAL_RE.sub(lambda m: _XML_ENTITIES[m.group(0)], text)


def format_decimal(value: float) -> str:
	"""Decimal text with at least one fractional digit (``1.0``, ``0.25``)."""
	text = repr(float(value))
	if "e" in text or "E" in text:
		text = f"{value:.10f}".rstrip("0")
		if text.endswith("."):
			text += "0"
	return text


def yes_no(flag: bool) -> str:
	return "Yes" if flag else "No"


def _text(value: Any) -> str:
	if isinstance(value, bool):
		return yes_no(value)
	if isinstance(value, float):
		return format_decimal(value)
	return str(value)


class UrlRenderer:
	"""Renders one plain web sitemap ``<url>`` block.

	Flavor renderers override ``render_extension`` to append their own
	namespaced elements, and set ``namespaces`` to the declarations the
	enclosing ``<urlset>`` needs.
	"""

	entry_type: Type[WebUrl] = WebUrl
	namespaces: Optional[str] = None

	def render(self, entry: WebUrl, formatter: W3CDateTimeFormatter) -> str:
		return self.render_url(entry, formatter, self.render_extension(entry, formatter))

	def render_extension(self, entry: WebUrl, formatter: W3CDateTimeFormatter) -> str:
		return ""

	def render_url(self, entry: WebUrl, formatter: W3CDateTimeFormatter, extension: str = "") -> str:
		out: List[str] = ["  <url>\n", f"    <loc>{escape_xml(entry.url)}</loc>\n"]
		if entry.last_mod is not None:
			out.append(f"    <lastmod>{formatter.format(entry.last_mod)}</lastmod>\n")
		if entry.change_freq is not None:
			out.append(f"    <changefreq>{entry.change_freq.value}</changefreq>\n")
		if entry.priority is not None:
			out.append(f"    <priority>{format_decimal(entry.priority)}</priority>\n")
		out.append(extension)
		out.append("  </url>\n")
		return "".join(out)

	@staticmethod
	def tag(namespace: str, name: str, value: Any, indent: str = "      ") -> str:
		"""One ``<ns:name>`` element, or nothing when the value is unset or empty."""
		if value is None or value == "":
			return ""
		return f"{indent}<{namespace}:{name}>{escape_xml(_text(value))}</{namespace}:{name}>\n"


class ImageRenderer(UrlRenderer):
	entry_type = ImageUrl
	namespaces = 'xmlns:image="http://www.google.com/schemas/sitemap-image/1.1"'

	def render_extension(self, entry: ImageUrl, formatter: W3CDateTimeFormatter) -> str:
		out: List[str] = []
		for image in entry.images:
			out.append("    <image:image>\n")
			out.append(self.tag("image", "loc", image.url))
			out.append(self.tag("image", "caption", image.caption))
			out.append(self.tag("image", "title", image.title))
			out.append(self.tag("image", "geo_location", image.geo_location))
			out.append(self.tag("image", "license", image.license))
			out.append("    </image:image>\n")
		return "".join(out)


class VideoRenderer(UrlRenderer):
	entry_type = VideoUrl
	namespaces = 'xmlns:video="http://www.google.com/schemas/sitemap-video/1.1"'

	def render_extension(self, entry: VideoUrl, formatter: W3CDateTimeFormatter) -> str:
		out: List[str] = ["    <video:video>\n"]
		out.append(self.tag("video", "content_loc", entry.content_url))
		if entry.player_url:
			out.append(
				f'      <video:player_loc allow_embed="{yes_no(entry.allow_embed)}">'
				f"{escape_xml(entry.player_url)}</video:player_loc>\n"
			)
		out.append(self.tag("video", "thumbnail_loc", entry.thumbnail_url))
		out.append(self.tag("video", "title", entry.title))
		out.append(self.tag("video", "description", entry.description))
		out.append(self.tag("video", "rating", entry.rating))
		out.append(self.tag("video", "view_count", entry.view_count))
		if entry.publication_date is not None:
			out.append(self.tag("video", "publication_date", formatter.format(entry.publication_date)))
		for tag in entry.tags:
			out.append(self.tag("video", "tag", tag))
		out.append(self.tag("video", "category", entry.category))
		out.append(self.tag("video", "family_friendly", entry.family_friendly))
		out.append(self.tag("video", "duration", entry.duration))
		out.append("    </video:video>\n")
		return "".join(out)


class NewsRenderer(UrlRenderer):
	entry_type = NewsUrl
	namespaces = 'xmlns:news="http://www.google.com/schemas/sitemap-news/0.9"'

	def render_extension(self, entry: NewsUrl, formatter: W3CDateTimeFormatter) -> str:
		out: List[str] = ["    <news:news>\n", "      <news:publication>\n"]
		out.append(self.tag("news", "name", entry.publication.name, indent="        "))
		out.append(self.tag("news", "language", entry.publication.language, indent="        "))
		out.append("      </news:publication>\n")
		out.append(self.tag("news", "genres", entry.genres))
		out.append(self.tag("news", "publication_date", formatter.format(entry.publication_date)))
		out.append(self.tag("news", "title", entry.title))
		out.append(self.tag("news", "keywords", entry.keywords))
		out.append("    </news:news>\n")
		return "".join(out)


__all__ = [
	"SITEMAP_NS",
	"XML_DECLARATION",
	"escape_xml",
	"format_decimal",
	"UrlRenderer",
	"ImageRenderer",
	"VideoRenderer",
	"NewsRenderer",
]
