"""LinkedIn URL builder and pagination helpers.

Pure functions with no network dependency.
"""

import logging
from urllib.parse import urlencode

from src.core.config import JobSearchParams
from src.core.schemas import (
    DatePosted,
    ExperienceLevel,
    JobType,
    SortBy,
    WorkplaceType,
)
from src.platforms.linkedin.identifiers import LINKEDIN_BASE

logger = logging.getLogger(__name__)

RESULTS_PER_PAGE = 25

JOBS_GUEST_API = "/jobs-guest/jobs/api"

# --- Mapping dicts (URL concern) ---

JOB_TYPE_CODES: dict[JobType, str] = {
    JobType.FULL_TIME: "F",
    JobType.PART_TIME: "P",
    JobType.CONTRACT: "C",
    JobType.TEMPORARY: "T",
    JobType.INTERNSHIP: "I",
    JobType.VOLUNTEER: "V",
    JobType.OTHER: "O",
}

EXPERIENCE_LEVEL_CODES: dict[ExperienceLevel, str] = {
    ExperienceLevel.INTERNSHIP: "1",
    ExperienceLevel.ENTRY_LEVEL: "2",
    ExperienceLevel.ASSOCIATE: "3",
    ExperienceLevel.MID_SENIOR: "4",
    ExperienceLevel.DIRECTOR: "5",
    ExperienceLevel.EXECUTIVE: "6",
}

WORKPLACE_TYPE_CODES: dict[WorkplaceType, str] = {
    WorkplaceType.ON_SITE: "1",
    WorkplaceType.REMOTE: "2",
    WorkplaceType.HYBRID: "3",
}

DATE_POSTED_CODES: dict[DatePosted, str] = {
    DatePosted.PAST_24_HOURS: "r86400",
    DatePosted.PAST_WEEK: "r604800",
    DatePosted.PAST_MONTH: "r2592000",
}


def build_job_search_url(params: JobSearchParams) -> str:
    """Build the guest-API search path that returns bare job cards.

    Args:
        params: Search filters. ``start`` is the result offset (omitted at 0).

    Returns:
        ``seeMoreJobPostings/search`` path, resolved against the session base URL.
    """
    query: dict[str, str] = {}

    if params.keywords:
        query["keywords"] = params.keywords
    if params.location:
        query["location"] = params.location
    if params.geo_id:
        query["geoId"] = params.geo_id
    if params.distance:
        query["distance"] = str(params.distance)

    _add_filter_codes(query, params)

    if params.under_ten_applicants:
        query["f_EA"] = "true"
    if params.company_ids:
        query["f_C"] = ",".join(params.company_ids)

    query["sortBy"] = "DD" if params.sort_by == SortBy.MOST_RECENT else "R"

    if params.start > 0:
        query["start"] = str(params.start)

    return f"{JOBS_GUEST_API}/seeMoreJobPostings/search?{urlencode(query)}"


def build_public_search_url(params: JobSearchParams) -> str:
    """Build the browser-facing LinkedIn jobs search URL."""
    query: dict[str, str] = {}
    if params.keywords:
        query["keywords"] = params.keywords
    if params.location:
        query["location"] = params.location

    _add_filter_codes(query, params)

    return f"{LINKEDIN_BASE}/jobs/search/?{urlencode(query)}"


def build_company_search_url(keywords: str) -> str:
    """Build the company search results path (requires a logged-in session)."""
    return f"/search/results/companies/?{urlencode({'keywords': keywords})}"


def build_job_posting_path(job_id: str) -> str:
    """Guest jobPosting endpoint path for a job id."""
    return f"{JOBS_GUEST_API}/jobPosting/{job_id}"


def build_job_page_path(job_id: str) -> str:
    return f"/jobs/view/{job_id}"


def build_company_page_path(company_id: str) -> str:
    return f"/company/{company_id}"


def current_page(start: int) -> int:
    """1-based page number for a result offset."""
    return start // RESULTS_PER_PAGE + 1


def has_more(cards_found: int) -> bool:
    """Return True if another page is likely.

    LinkedIn serves 25 results per page. Fewer than 25 means last page.
    """
    return cards_found >= RESULTS_PER_PAGE


def _add_filter_codes(query: dict[str, str], params: JobSearchParams) -> None:
    """Add the f_JT / f_E / f_WT / f_TPR / f_AL filters shared by both URL shapes."""
    if params.job_type:
        query["f_JT"] = ",".join(JOB_TYPE_CODES[t] for t in params.job_type)

    if params.experience_level:
        query["f_E"] = ",".join(EXPERIENCE_LEVEL_CODES[e] for e in params.experience_level)

    wt_codes = _workplace_codes(params.workplace_type)
    if wt_codes:
        query["f_WT"] = ",".join(wt_codes)

    if params.date_posted is not None and params.date_posted != DatePosted.ANY_TIME:
        query["f_TPR"] = DATE_POSTED_CODES[params.date_posted]

    if params.easy_apply:
        query["f_AL"] = "true"


def _workplace_codes(values: list[WorkplaceType]) -> list[str]:
    """Map workplace types to URL codes; ``unknown`` has no code and is skipped."""
    codes: list[str] = []
    for v in values:
        code = WORKPLACE_TYPE_CODES.get(v)
        if code is None:
            logger.warning("Workplace type '%s' has no LinkedIn filter code, skipping", v.value)
        else:
            codes.append(code)
    return codes
