"""LinkedIn platform adapter over the guest endpoints."""

import json
import logging

from src.core.config import JobSearchParams, SearchDefaults
from src.core.schemas import (
    Company,
    CompanySearchEntry,
    DatePosted,
    ExperienceLevel,
    JobDetail,
    SearchResultPage,
    WorkplaceType,
)
from src.platforms.base import PlatformAdapter
from src.platforms.linkedin.parser import (
    extract_total_results,
    parse_api_job_details,
    parse_company,
    parse_company_search_results,
    parse_job_details,
    parse_job_listings,
)
from src.platforms.linkedin.searcher import (
    build_company_page_path,
    build_company_search_url,
    build_job_page_path,
    build_job_posting_path,
    build_job_search_url,
    current_page,
    has_more,
)
from src.transport.session import FetchError, HttpSession, NotFoundError

logger = logging.getLogger(__name__)


class LinkedInAdapter(PlatformAdapter):
    """LinkedIn jobs/company adapter over the public guest endpoints.

    Requires an entered HttpSession injected via constructor.
    """

    def __init__(self, session: HttpSession, defaults: SearchDefaults | None = None) -> None:
        self._session = session
        self._defaults = defaults or SearchDefaults()

    @property
    def platform_id(self) -> str:
        return "linkedin"

    async def search_jobs(self, params: JobSearchParams) -> SearchResultPage:
        """Fetch one page of job cards and assemble the paged envelope."""
        url = build_job_search_url(params)
        logger.info("Searching jobs: %s", url)
        try:
            html = await self._session.get_text(url)
        except FetchError as e:
            msg = f"LinkedIn search failed: {e}"
            raise FetchError(msg, status_code=e.status_code) from e

        jobs = parse_job_listings(html)
        limit = min(params.limit or self._defaults.default_limit, self._defaults.max_limit)
        total = extract_total_results(html) or len(jobs) + params.start

        logger.info("Parsed %d jobs (total %d), returning up to %d", len(jobs), total, limit)
        return SearchResultPage(
            jobs=jobs[:limit],
            total_results=total,
            current_page=current_page(params.start),
            has_more=has_more(len(jobs)),
            search_params=params.model_dump(mode="json", exclude_defaults=True),
        )

    async def search_remote_jobs(
        self,
        keywords: str,
        *,
        date_posted: DatePosted = DatePosted.PAST_WEEK,
        experience_level: list[ExperienceLevel] | None = None,
        limit: int | None = None,
    ) -> SearchResultPage:
        """Search remote-only jobs posted within ``date_posted``."""
        return await self.search_jobs(JobSearchParams(
            keywords=keywords,
            workplace_type=[WorkplaceType.REMOTE],
            date_posted=date_posted,
            experience_level=experience_level or [],
            limit=limit,
        ))

    async def search_entry_level_jobs(
        self,
        keywords: str,
        *,
        location: str | None = None,
        include_internships: bool = True,
        date_posted: DatePosted = DatePosted.PAST_WEEK,
        limit: int | None = None,
    ) -> SearchResultPage:
        """Search entry-level jobs, plus internships unless excluded."""
        levels = [ExperienceLevel.ENTRY_LEVEL]
        if include_internships:
            levels.append(ExperienceLevel.INTERNSHIP)
        return await self.search_jobs(JobSearchParams(
            keywords=keywords,
            location=location,
            experience_level=levels,
            date_posted=date_posted,
            limit=limit,
        ))

    async def get_job_details(self, job_id: str) -> JobDetail | None:
        """Fetch a job from the guest jobPosting endpoint, falling back to the job page.

        Returns None when the job page is 404. Other failures raise FetchError.
        """
        detail = await self._fetch_job_posting(job_id)
        if detail is not None:
            return detail

        logger.info("Falling back to job page for %s", job_id)
        try:
            html = await self._session.get_text(build_job_page_path(job_id))
        except NotFoundError:
            logger.info("Job %s not found", job_id)
            return None
        except FetchError as e:
            msg = f"Failed to get job details: {e}"
            raise FetchError(msg, status_code=e.status_code) from e
        return parse_job_details(html, job_id)

    async def get_company(self, company_id: str) -> Company | None:
        """Fetch a company profile page. Returns None on 404."""
        try:
            html = await self._session.get_text(build_company_page_path(company_id))
        except NotFoundError:
            logger.info("Company %s not found", company_id)
            return None
        except FetchError as e:
            msg = f"Failed to get company: {e}"
            raise FetchError(msg, status_code=e.status_code) from e
        return parse_company(html, company_id)

    async def search_companies(self, query: str) -> list[CompanySearchEntry]:
        """Search companies. The results page needs an authenticated (cookie) session."""
        try:
            html = await self._session.get_text(build_company_search_url(query))
        except FetchError as e:
            msg = f"Company search failed: {e}"
            raise FetchError(msg, status_code=e.status_code) from e
        companies = parse_company_search_results(html)
        logger.info("Company search '%s': %d results", query, len(companies))
        return companies

    async def get_company_jobs(
        self,
        company_id: str,
        *,
        keywords: str | None = None,
        limit: int | None = None,
    ) -> SearchResultPage:
        """Search open jobs at one company (numeric company id)."""
        return await self.search_jobs(JobSearchParams(
            keywords=keywords,
            company_ids=[company_id],
            limit=limit,
        ))

    async def _fetch_job_posting(self, job_id: str) -> JobDetail | None:
        """Try the guest jobPosting endpoint. Any failure returns None.

        The endpoint answers with JSON for some sessions and with the job
        page markup for others; both shapes are handled.
        """
        try:
            body = await self._session.get_text(build_job_posting_path(job_id))
        except FetchError:
            logger.debug("jobPosting endpoint failed for %s", job_id, exc_info=True)
            return None

        stripped = body.strip()
        if stripped.startswith("{") and stripped.endswith("}"):
            try:
                return parse_api_job_details(json.loads(stripped), job_id)
            except json.JSONDecodeError:
                logger.debug("jobPosting body for %s is not valid JSON", job_id)
                return None
        return parse_job_details(body, job_id)
