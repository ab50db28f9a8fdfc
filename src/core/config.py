"""Configuration models and YAML loader for the LinkedIn jobs toolkit."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.schemas import DatePosted, ExperienceLevel, JobType, SortBy, WorkplaceType

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class JobSearchParams(BaseModel):
    """Filters for a single job search request."""

    keywords: str | None = None
    location: str | None = None
    geo_id: str | None = None
    distance: int | None = Field(default=None, ge=0)
    job_type: list[JobType] = Field(default_factory=list)
    experience_level: list[ExperienceLevel] = Field(default_factory=list)
    workplace_type: list[WorkplaceType] = Field(default_factory=list)
    date_posted: DatePosted | None = None
    company_ids: list[str] = Field(default_factory=list)
    easy_apply: bool = False
    under_ten_applicants: bool = False
    sort_by: SortBy | None = None
    start: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)

    @field_validator("keywords", "location")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class HttpConfig(BaseModel):
    """HTTP session configuration."""

    base_url: str = "https://www.linkedin.com"
    timeout_ms: int = Field(default=30000, ge=1000)
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "en-US,en;q=0.5"
    cookies_path: str | None = None


class SearchDefaults(BaseModel):
    """Result-count limits applied to job searches."""

    default_limit: int = Field(default=25, ge=1)
    max_limit: int = Field(default=50, ge=1)

    @field_validator("max_limit")
    @classmethod
    def max_not_below_default(cls, v: int, info: ValidationInfo) -> int:
        default = info.data.get("default_limit")
        if default is not None and v < default:
            msg = "max_limit must be >= default_limit"
            raise ValueError(msg)
        return v


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    http: HttpConfig = Field(default_factory=HttpConfig)
    search: SearchDefaults = Field(default_factory=SearchDefaults)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
