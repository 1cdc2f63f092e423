# SitemapGen — Structural validation of written sitemap documents
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .datetimes import W3CDateTimeFormatter
from .entries import ChangeFreq
from ..errors import FormatError, SchemaValidationError, ValidationError
from ..utils.urls import require_absolute

logger = logging.getLogger(__name__)


SITEMAP_NAMESPACES = {
	"http://www.sitemaps.org/schemas/sitemap/0.9",
	"https://www.sitemaps.org/schemas/sitemap/0.9",
}
MAX_LOC_LENGTH = 2048
MAX_CHILDREN = 50000


class SchemaKind(str, Enum):
	SITEMAP = "sitemap"
	SITEMAP_INDEX = "sitemapindex"


# root element, child element, allowed child fields
_LAYOUT: Dict[SchemaKind, Tuple[str, str, Tuple[str, ...]]] = {
	SchemaKind.SITEMAP: ("urlset", "url", ("loc", "lastmod", "changefreq", "priority")),
	SchemaKind.SITEMAP_INDEX: ("sitemapindex", "sitemap", ("loc", "lastmod")),
}

_CHANGE_FREQS = {c.value for c in ChangeFreq}


def _split(tag: str) -> Tuple[str, str]:
	if tag.startswith("{"):
		ns, _, local = tag[1:].partition("}")
		return ns, local
	return "", tag


class SitemapValidator:
	"""Checks a sitemap or sitemap index document against the sitemaps.org layout.

	Only elements in the sitemaps.org namespace are inspected; image, video and
	news extension elements are left alone. Each call is independent, so one
	instance can be shared by any number of generators.
	"""

	def __init__(self, max_children: int = MAX_CHILDREN) -> None:
		self.max_children = max_children
		self._formatter = W3CDateTimeFormatter()

	def validate(self, data: bytes, kind: SchemaKind = SchemaKind.SITEMAP, filename: Optional[str] = None) -> None:
		problems = self.problems(data, SchemaKind(kind))
		if problems:
			logger.warning("Validation failed for %s: %s", filename or "<document>", problems[0])
			shown = "; ".join(problems[:5])
			if len(problems) > 5:
				shown += f"; and {len(problems) - 5} more"
			raise SchemaValidationError(shown, filename)

	def problems(self, data: bytes, kind: SchemaKind) -> List[str]:
		"""Every problem found in the document; empty when it is valid."""
		try:
			root = ET.fromstring(data)
		except ET.ParseError as e:
			return [f"not well-formed XML: {e}"]

		root_name, child_name, fields = _LAYOUT[kind]
		ns, local = _split(root.tag)
		out: List[str] = []
		if ns not in SITEMAP_NAMESPACES:
			out.append(f"root element is not in the sitemaps.org namespace: {ns or '(none)'}")
		if local != root_name:
			out.append(f"root element must be <{root_name}>, found <{local}>")
		if out:
			return out

		children = [c for c in root if _split(c.tag)[0] == ns]
		if len(children) > self.max_children:
			out.append(f"{len(children)} <{child_name}> elements, at most {self.max_children} allowed")
		for i, child in enumerate(children, 1):
			name = _split(child.tag)[1]
			if name != child_name:
				out.append(f"unexpected <{name}> at position {i}")
				continue
			out.extend(f"<{child_name}> {i}: {p}" for p in self._check_fields(child, ns, fields))
		return out

	def _check_fields(self, element: ET.Element, ns: str, allowed: Tuple[str, ...]) -> List[str]:
		out: List[str] = []
		values: Dict[str, str] = {}
		for el in element:
			el_ns, name = _split(el.tag)
			if el_ns != ns:
				continue
			if name not in allowed:
				out.append(f"unexpected <{name}>")
				continue
			if name in values:
				out.append(f"duplicate <{name}>")
				continue
			values[name] = (el.text or "").strip()

		loc = values.get("loc")
		if not loc:
			out.append("missing or empty <loc>")
		elif len(loc) > MAX_LOC_LENGTH:
			out.append(f"<loc> longer than {MAX_LOC_LENGTH} characters")
		else:
			try:
				require_absolute(loc)
			except ValidationError as e:
				out.append(str(e))

		if "lastmod" in values:
			try:
				self._formatter.parse(values["lastmod"])
			except FormatError:
				out.append(f"<lastmod> is not a W3C datetime: {values['lastmod']!r}")

		if "changefreq" in values and values["changefreq"] not in _CHANGE_FREQS:
			out.append(f"unknown <changefreq> {values['changefreq']!r}")

		if "priority" in values:
			try:
				priority = float(values["priority"])
			except ValueError:
				priority = -1.0
			if not 0.0 <= priority <= 1.0:
				out.append(f"<priority> must be between 0.0 and 1.0: {values['priority']!r}")
		return out


__all__ = [
	"SchemaKind",
	"SitemapValidator",
]
