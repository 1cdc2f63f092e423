import gzip
from typer.testing import CliRunner

from sitemapgen.cli import app, read_entries
from sitemapgen.core.entries import ChangeFreq

runner = CliRunner()
BASE = "https://www.example.com"


def test_read_entries():
	lines = ["# pages\n", "\n", f"{BASE}/\n", f"{BASE}/a\t2025-01-31\tWeekly\t0.8\n"]
	entries = list(read_entries(lines))
	assert [e.url for e in entries] == [f"{BASE}/", f"{BASE}/a"]
	assert entries[1].change_freq is ChangeFreq.WEEKLY
	assert entries[1].priority == 0.8


def test_generate_from_file(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	source = tmp_path / "urls.txt"
	source.write_text(f"# pages\n\n{BASE}/\n{BASE}/a\t2025-01-31\tweekly\t0.8\n", encoding="utf-8")
	out = tmp_path / "out"
	result = runner.invoke(app, [
		"generate", str(source),
		"--base-url", BASE,
		"--out-dir", str(out),
		"--log-dir", str(tmp_path / "logs"),
	])
	assert result.exit_code == 0, result.output
	text = (out / "sitemap.xml").read_text(encoding="utf-8")
	assert "<lastmod>2025-01-31</lastmod>" in text
	assert "<changefreq>weekly</changefreq>" in text
	assert "<priority>0.8</priority>" in text
	assert "<loc>https://www.example.com/sitemap.xml</loc>" in (out / "sitemap_index.xml").read_text(encoding="utf-8")
	assert (tmp_path / "logs" / "sitemapgen.log").exists()


def test_generate_from_stdin_splits(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	out = tmp_path / "out"
	result = runner.invoke(app, [
		"generate", "-",
		"--base-url", BASE,
		"--out-dir", str(out),
		"--log-dir", str(tmp_path / "logs"),
		"--max-urls", "1",
		"--gzip",
		"--no-write-index",
	], input=f"{BASE}/a\n{BASE}/b\n")
	assert result.exit_code == 0, result.output
	assert sorted(p.name for p in out.iterdir()) == ["sitemap1.xml.gz", "sitemap2.xml.gz"]
	with gzip.open(out / "sitemap2.xml.gz", "rt", encoding="utf-8") as f:
		assert f"<loc>{BASE}/b</loc>" in f.read()


def test_generate_reports_errors(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	result = runner.invoke(app, [
		"generate", "-",
		"--base-url", BASE,
		"--out-dir", str(tmp_path / "out"),
		"--log-dir", str(tmp_path / "logs"),
	], input="https://example.com/elsewhere\n")
	assert result.exit_code == 1
	assert "Error" in result.output
	assert "match" in " ".join(result.output.split())


def test_generate_needs_base_url(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	monkeypatch.delenv("SITEMAPGEN_BASE_URL", raising=False)
	result = runner.invoke(app, ["generate", "-", "--log-dir", str(tmp_path / "logs")], input="")
	assert result.exit_code == 2


def test_print_config(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv("SITEMAPGEN_OUT_DIR", "public")
	result = runner.invoke(app, ["print-config"])
	assert result.exit_code == 0
	assert "public" in result.output


def test_generate_with_time_pattern(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	out = tmp_path / "out"
	result = runner.invoke(app, [
		"generate", "-",
		"--base-url", BASE,
		"--out-dir", str(out),
		"--log-dir", str(tmp_path / "logs"),
		"--date-pattern", "second",
	], input=f"{BASE}/a\t2025-01-31\n")
	assert result.exit_code == 0, result.output
	assert "<lastmod>2025-01-31T00:00:00Z</lastmod>" in (out / "sitemap.xml").read_text(encoding="utf-8")
	assert "T00:00:00Z</lastmod>" in (out / "sitemap_index.xml").read_text(encoding="utf-8")
