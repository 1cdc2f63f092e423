# SitemapGen — URL entries (web, image, video, news) as validated models
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from datetime import date
from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .datetimes import W3CDateTimeFormatter
from ..errors import ValidationError
from ..utils.urls import require_absolute


MAX_IMAGES_PER_URL = 1000
MAX_VIDEO_TAGS = 32
MAX_VIDEO_TITLE_LENGTH = 100
MAX_VIDEO_DESCRIPTION_LENGTH = 2048
MAX_VIDEO_CATEGORY_LENGTH = 256
MAX_VIDEO_DURATION = 8 * 60 * 60
MAX_VIDEO_RATING = 5.0


class ChangeFreq(str, Enum):
	"""How often a page is likely to change; a crawler hint, not a command."""

	ALWAYS = "always"
	HOURLY = "hourly"
	DAILY = "daily"
	WEEKLY = "weekly"
	MONTHLY = "monthly"
	YEARLY = "yearly"
	NEVER = "never"

	def __str__(self) -> str:
		return self.value


def _describe(err: PydanticValidationError) -> str:
	parts = []
	for e in err.errors():
		loc = ".".join(str(p) for p in e.get("loc", ())) or "value"
		parts.append(f"{loc}: {e.get('msg')}")
	return "; ".join(parts)


def coerce_temporal(value: Any) -> Any:
	"""Accept date/datetime as-is, parse W3C strings, reject everything else."""
	if value is None or isinstance(value, date):
		return value
	if isinstance(value, str):
		return W3CDateTimeFormatter().parse(value)
	raise ValueError(f"expected a date, datetime or W3C datetime string, got {type(value).__name__}")


def _join_list(value: Any) -> Any:
	if isinstance(value, (list, tuple)):
		value = ", ".join(str(v) for v in value)
	if isinstance(value, str) and not value:
		return None
	return value


class _SitemapModel(BaseModel):
	"""Frozen pydantic model whose construction errors surface as ValidationError.

	Leading constructor arguments may be passed positionally, in the order of
	``positional_fields``.
	"""

	model_config = ConfigDict(frozen=True, extra="forbid")

	positional_fields: ClassVar[Tuple[str, ...]] = ()

	def __init__(self, *args: Any, **data: Any) -> None:
		names = type(self).positional_fields
		if len(args) > len(names):
			raise ValidationError(f"{type(self).__name__} takes at most {len(names)} positional arguments")
		data.update(zip(names, args))
		try:
			super().__init__(**data)
		except PydanticValidationError as e:
			raise ValidationError(f"Invalid {type(self).__name__}: {_describe(e)}") from e


class WebUrl(_SitemapModel):
	"""A single URL in a plain web sitemap.

	``last_mod`` takes a ``date``, a naive or aware ``datetime``, or a W3C
	datetime string (parsed into the most specific type).
	"""

	positional_fields: ClassVar[Tuple[str, ...]] = ("url",)

	url: str
	last_mod: Any = None
	change_freq: Optional[ChangeFreq] = None
	priority: Optional[float] = Field(default=None, ge=0.0, le=1.0)

	@field_validator("url")
	@classmethod
	def check_url(cls, value: str) -> str:
		return require_absolute(value)

	@field_validator("last_mod")
	@classmethod
	def check_last_mod(cls, value: Any) -> Any:
		return coerce_temporal(value)


class Image(_SitemapModel):
	positional_fields: ClassVar[Tuple[str, ...]] = ("url",)

	url: str
	caption: Optional[str] = None
	title: Optional[str] = None
	geo_location: Optional[str] = None
	license: Optional[str] = None

	@field_validator("url")
	@classmethod
	def check_url(cls, value: str) -> str:
		return require_absolute(value)


class ImageUrl(WebUrl):
	"""A page URL with up to 1000 associated images."""

	images: List[Image] = Field(default_factory=list)

	@field_validator("images", mode="before")
	@classmethod
	def coerce_images(cls, value: Any) -> Any:
		if isinstance(value, (list, tuple)):
			if len(value) > MAX_IMAGES_PER_URL:
				raise ValueError(f"A URL cannot have more than {MAX_IMAGES_PER_URL} image tags")
			return [Image(v) if isinstance(v, str) else v for v in value]
		return value


class VideoUrl(WebUrl):
	"""A landing page URL describing one video.

	Construct as ``VideoUrl(page_url, content_url, title=..., ...)``.
	"""

	positional_fields: ClassVar[Tuple[str, ...]] = ("url", "content_url")

	content_url: str
	player_url: Optional[str] = None
	allow_embed: bool = False
	thumbnail_url: Optional[str] = None
	title: Optional[str] = Field(default=None, max_length=MAX_VIDEO_TITLE_LENGTH)
	description: Optional[str] = Field(default=None, max_length=MAX_VIDEO_DESCRIPTION_LENGTH)
	rating: Optional[float] = Field(default=None, ge=0.0, le=MAX_VIDEO_RATING)
	view_count: Optional[int] = Field(default=None, ge=0)
	publication_date: Any = None
	tags: List[str] = Field(default_factory=list, max_length=MAX_VIDEO_TAGS)
	category: Optional[str] = Field(default=None, max_length=MAX_VIDEO_CATEGORY_LENGTH)
	family_friendly: Optional[bool] = None
	duration: Optional[int] = Field(default=None, ge=0, le=MAX_VIDEO_DURATION)

	@field_validator("content_url", "player_url", "thumbnail_url")
	@classmethod
	def check_media_url(cls, value: Optional[str]) -> Optional[str]:
		if value is None:
			return value
		return require_absolute(value)

	@field_validator("publication_date")
	@classmethod
	def check_publication_date(cls, value: Any) -> Any:
		return coerce_temporal(value)


class NewsPublication(_SitemapModel):
	positional_fields: ClassVar[Tuple[str, ...]] = ("name", "language")

	name: str
	language: str


class NewsUrl(WebUrl):
	"""A Google News article.

	Publication, publication date and title are mandatory. ``keywords`` and
	``genres`` take a comma-delimited string or a list, joined with ``", "``.
	"""

	positional_fields: ClassVar[Tuple[str, ...]] = ("url", "publication_date", "title", "publication")

	publication_date: Any
	title: str
	publication: NewsPublication
	keywords: Optional[str] = None
	genres: Optional[str] = None

	@field_validator("publication_date")
	@classmethod
	def check_publication_date(cls, value: Any) -> Any:
		if value is None:
			raise ValueError("publication_date must not be None")
		return coerce_temporal(value)

	@field_validator("publication", mode="before")
	@classmethod
	def coerce_publication(cls, value: Any) -> Any:
		if isinstance(value, (list, tuple)) and len(value) == 2:
			return NewsPublication(*value)
		return value

	@field_validator("keywords", "genres", mode="before")
	@classmethod
	def join_lists(cls, value: Any) -> Any:
		return _join_list(value)


class SitemapIndexUrl(_SitemapModel):
	"""One sitemap file referenced from an index."""

	positional_fields: ClassVar[Tuple[str, ...]] = ("url", "last_mod")

	url: str
	last_mod: Any = None

	@field_validator("url")
	@classmethod
	def check_url(cls, value: str) -> str:
		return require_absolute(value)

	@field_validator("last_mod")
	@classmethod
	def check_last_mod(cls, value: Any) -> Any:
		return coerce_temporal(value)


__all__ = [
	"ChangeFreq",
	"WebUrl",
	"Image",
	"ImageUrl",
	"VideoUrl",
	"NewsPublication",
	"NewsUrl",
	"SitemapIndexUrl",
	"coerce_temporal",
	"MAX_IMAGES_PER_URL",
	"MAX_VIDEO_TAGS",
]
