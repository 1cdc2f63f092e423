# SitemapGen — Sinks that receive finished sitemap documents
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import gzip
import logging
from pathlib import Path
from typing import Dict, Union

from ..errors import SinkError
from ..utils.io import ensure_dirs

logger = logging.getLogger(__name__)


class DirectorySink:
	"""Writes each document as a file under out_dir."""

	def __init__(self, out_dir: Union[str, Path] = "sitemaps") -> None:
		self.out_dir = Path(out_dir)

	def write(self, filename: str, data: bytes, compress: bool = False) -> Path:
		path = self.out_dir / filename
		try:
			ensure_dirs(str(self.out_dir))
			with open(path, "wb") as f:
				if compress:
					# mtime=0 keeps repeated runs byte-identical
					with gzip.GzipFile(filename=filename, mode="wb", fileobj=f, mtime=0) as gz:
						gz.write(data)
				else:
					f.write(data)
		except OSError as e:
			raise SinkError(filename, str(e)) from e
		logger.debug("Wrote %s (%d bytes%s)", path, len(data), ", gzip" if compress else "")
		return path


class MemorySink:
	"""Keeps documents in memory, exactly as they would land on disk."""

	def __init__(self) -> None:
		self.files: Dict[str, bytes] = {}

	def write(self, filename: str, data: bytes, compress: bool = False) -> str:
		self.files[filename] = gzip.compress(data, mtime=0) if compress else bytes(data)
		logger.debug("Stored %s in memory (%d bytes)", filename, len(data))
		return filename

	def read_text(self, filename: str) -> str:
		data = self.files[filename]
		if data[:2] == b"\x1f\x8b":
			data = gzip.decompress(data)
		return data.decode("utf-8")


__all__ = ["DirectorySink", "MemorySink"]
