# SitemapGen — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import sys
import typer
from typing import Iterable, Iterator, Optional
from rich import print

from .config import Settings
from .core.datetimes import W3CDateTimeFormatter
from .core.entries import WebUrl
from .core.generator import GeneratorOptions, WebSitemapGenerator
from .errors import SitemapError
from .logging_config import configure_logging
from .storage.writers import DirectorySink

app = typer.Typer(add_completion=False, no_args_is_help=True)

_FIELDS = ("url", "last_mod", "change_freq", "priority")


def read_entries(lines: Iterable[str]) -> Iterator[WebUrl]:
	"""Parse ``url[\\tlastmod[\\tchangefreq[\\tpriority]]]`` lines, skipping blanks and # comments."""
	for n, raw in enumerate(lines, 1):
		line = raw.strip()
		if not line or line.startswith("#"):
			continue
		values = [v.strip() for v in line.split("\t")]
		if len(values) > len(_FIELDS):
			raise SitemapError(f"line {n}: expected at most {len(_FIELDS)} tab-separated fields, got {len(values)}")
		data = {k: v for k, v in zip(_FIELDS, values) if v}
		if "change_freq" in data:
			data["change_freq"] = data["change_freq"].lower()
		try:
			yield WebUrl(**data)
		except SitemapError as e:
			raise SitemapError(f"line {n}: {e}") from e


@app.command()
def generate(
	source: str = typer.Argument("-", help="File with one URL per line, or - for stdin"),
	base_url: Optional[str] = typer.Option(None, help="Base URL; every entry must share its host"),
	out_dir: Optional[str] = typer.Option(None, help="Output directory"),
	prefix: Optional[str] = typer.Option(None, help="Sitemap file name prefix"),
	suffix_pattern: Optional[str] = typer.Option(None, help="Text between the file number and .xml"),
	max_urls: Optional[int] = typer.Option(None, help="URLs per sitemap file (1-50000)"),
	allow_empty: bool = typer.Option(None, help="Write an empty sitemap when no URLs are given"),
	allow_multiple: bool = typer.Option(None, help="Split into several files at max-urls"),
	gzip: bool = typer.Option(None, help="Write .xml.gz files"),
	auto_validate: bool = typer.Option(None, help="Validate each file after writing it"),
	write_index: bool = typer.Option(None, help="Also write a sitemap index"),
	index_file_name: Optional[str] = typer.Option(None, help="Sitemap index file name"),
	date_pattern: Optional[str] = typer.Option(None, help="lastmod precision: year, month, day, minute, second, millisecond"),
	time_zone: Optional[str] = typer.Option(None, help="Zone lastmod timestamps are written in"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	log_dir: Optional[str] = typer.Option(None, help="Log directory"),
):
	"""Generate web sitemaps (and an index) from a list of URLs."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=log_dir or cfg.log_dir)
	base = base_url or cfg.base_url
	if not base:
		print("[red]A base URL is required (--base-url or SITEMAPGEN_BASE_URL)[/red]")
		raise typer.Exit(code=2)
	target = out_dir or cfg.out_dir
	try:
		options = GeneratorOptions(
			file_name_prefix=prefix or cfg.file_name_prefix,
			suffix_pattern=suffix_pattern if suffix_pattern is not None else cfg.suffix_pattern,
			allow_empty_sitemap=allow_empty if allow_empty is not None else cfg.allow_empty,
			allow_multiple_sitemaps=allow_multiple if allow_multiple is not None else cfg.allow_multiple,
			date_formatter=W3CDateTimeFormatter(date_pattern or cfg.date_pattern, time_zone or cfg.time_zone),
			max_urls=max_urls if max_urls is not None else cfg.max_urls,
			auto_validate=auto_validate if auto_validate is not None else cfg.auto_validate,
			gzip=gzip if gzip is not None else cfg.gzip,
		)
		gen = WebSitemapGenerator(base, options, sink=DirectorySink(target))
		if source == "-":
			gen.add_all(read_entries(sys.stdin))
		else:
			with open(source, encoding="utf-8") as f:
				gen.add_all(read_entries(f))
		docs = gen.finish()
		index_path = None
		if write_index if write_index is not None else cfg.write_index:
			index_path = gen.write_index(index_file_name or cfg.index_file_name)
	except (SitemapError, OSError) as e:
		print(f"[red]Error:[/red] {e}")
		raise typer.Exit(code=1)
	print(f"[bold]Wrote {len(docs)} sitemap file(s) to[/bold] {target}")
	print({
		"urls": sum(d.url_count for d in docs),
		"files": [d.filename for d in docs],
		"index": str(index_path) if index_path else None,
	})


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
