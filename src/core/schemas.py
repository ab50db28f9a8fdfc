"""Core data models for LinkedIn job and company extraction."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_id(v: str) -> str:
    if not v.strip():
        msg = "id must not be empty"
        raise ValueError(msg)
    return v.strip()


class WorkplaceType(str, Enum):
    ON_SITE = "on-site"
    REMOTE = "remote"
    HYBRID = "hybrid"
    UNKNOWN = "unknown"


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    TEMPORARY = "temporary"
    INTERNSHIP = "internship"
    VOLUNTEER = "volunteer"
    OTHER = "other"


class ExperienceLevel(str, Enum):
    """Seniority buckets. There is no "unknown" member; absence is None."""

    INTERNSHIP = "internship"
    ENTRY_LEVEL = "entry-level"
    ASSOCIATE = "associate"
    MID_SENIOR = "mid-senior"
    DIRECTOR = "director"
    EXECUTIVE = "executive"


class DatePosted(str, Enum):
    PAST_24_HOURS = "past-24-hours"
    PAST_WEEK = "past-week"
    PAST_MONTH = "past-month"
    ANY_TIME = "any-time"


class SortBy(str, Enum):
    MOST_RELEVANT = "most-relevant"
    MOST_RECENT = "most-recent"


class JobSummary(BaseModel):
    """A job as it appears on a search-result card.

    Frozen, built once per parse call. ``url`` is always synthesized from
    ``id``, never scraped.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = "Unknown Title"
    company: str = "Unknown Company"
    company_logo: str | None = None
    location: str = "Unknown Location"
    workplace_type: WorkplaceType = WorkplaceType.UNKNOWN
    job_type: JobType = JobType.FULL_TIME
    posted_date: str = ""
    posted_time_ago: str = "Unknown"
    salary: str | None = None
    url: str
    is_easy_apply: bool = False
    is_promoted: bool = False

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, v: str) -> str:
        return _require_id(v)


class JobDetail(JobSummary):
    """Full job page record. Detail-only fields are None when the node is missing."""

    full_description: str = ""
    experience_level: ExperienceLevel | None = None
    applicants: str | None = None
    seniority_level: str | None = None
    employment_type: str | None = None
    industries: list[str] | None = None
    job_functions: list[str] | None = None
    company_linkedin_url: str | None = None
    application_url: str | None = None


class Company(BaseModel):
    """A company profile page."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = "Unknown Company"
    description: str | None = None
    logo: str | None = None
    industry: str | None = None
    website: str | None = None
    linkedin_url: str

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, v: str) -> str:
        return _require_id(v)


class CompanySearchEntry(BaseModel):
    """One row of a company search result list."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    industry: str | None = None
    logo: str | None = None
    linkedin_url: str

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, v: str) -> str:
        return _require_id(v)


class SearchResultPage(BaseModel):
    """Paged envelope assembled by the adapter around parsed job cards."""

    model_config = ConfigDict(frozen=True)

    jobs: list[JobSummary] = Field(default_factory=list)
    total_results: int = Field(default=0, ge=0)
    current_page: int = Field(default=1, ge=1)
    has_more: bool = False
    search_params: dict[str, Any] = Field(default_factory=dict)
