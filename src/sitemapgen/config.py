# SitemapGen — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with SITEMAPGEN_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="SITEMAPGEN_", env_file=".env", extra="ignore")

	base_url: Optional[str] = Field(default=None)
	out_dir: str = Field(default="sitemaps")
	file_name_prefix: str = Field(default="sitemap")
	suffix_pattern: Optional[str] = Field(default=None)
	max_urls: int = Field(default=50000, ge=1, le=50000)
	allow_empty: bool = Field(default=False)
	allow_multiple: bool = Field(default=True)
	gzip: bool = Field(default=False)
	auto_validate: bool = Field(default=False)
	write_index: bool = Field(default=True)
	index_file_name: str = Field(default="sitemap_index.xml")
	date_pattern: Optional[str] = Field(default=None)
	time_zone: str = Field(default="UTC")
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")
