"""LinkedIn markup parsers: convert fetched HTML/JSON into record models.

Pure, synchronous functions with no shared state:
  - Summary fields always fall back to literal "Unknown ..." text.
  - Detail-only fields are None when their node is missing.
  - Batch parsers isolate each item: a failing or id-less item is omitted,
    the rest of the batch is kept in order.
  - Single-document parsers return None instead of a partial record.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from bs4 import Tag

from src.core.schemas import (
    Company,
    CompanySearchEntry,
    JobDetail,
    JobSummary,
    JobType,
    WorkplaceType,
)
from src.platforms.linkedin.fields import (
    detect_workplace_type,
    map_experience_level,
    map_job_type,
    parse_number,
    split_list,
)
from src.platforms.linkedin.identifiers import (
    build_company_url,
    build_job_url,
    extract_company_slug,
    extract_id_from_url,
    extract_id_from_urn,
)
from src.platforms.linkedin.query import (
    find_first,
    first_attr,
    first_non_empty_text,
    load,
    node_text,
)
from src.platforms.linkedin.selectors import (
    CARD_COMPANY_SELECTORS,
    CARD_LINK_SELECTORS,
    CARD_LOCATION_SELECTORS,
    CARD_LOGO_ATTR,
    CARD_LOGO_SELECTORS,
    CARD_SALARY_SELECTORS,
    CARD_SELECTOR,
    CARD_TIME_SELECTORS,
    CARD_TITLE_SELECTORS,
    CARD_URN_ATTR,
    COMPANY_DESCRIPTION_SELECTORS,
    COMPANY_INDUSTRY_SELECTORS,
    COMPANY_LOGO_SELECTORS,
    COMPANY_NAME_SELECTORS,
    COMPANY_RESULT_INDUSTRY_SELECTORS,
    COMPANY_RESULT_LINK_SELECTORS,
    COMPANY_RESULT_LOGO_SELECTORS,
    COMPANY_RESULT_NAME_SELECTORS,
    COMPANY_RESULT_SELECTOR,
    COMPANY_WEBSITE_SELECTORS,
    CRITERIA_ITEM_SELECTOR,
    CRITERIA_LABEL_SELECTOR,
    CRITERIA_VALUE_SELECTOR,
    DETAIL_APPLICANTS_SELECTORS,
    DETAIL_APPLY_BUTTON_SELECTORS,
    DETAIL_COMPANY_LINK_SELECTORS,
    DETAIL_COMPANY_SELECTORS,
    DETAIL_DESCRIPTION_SELECTORS,
    DETAIL_LOCATION_SELECTORS,
    DETAIL_LOGO_SELECTORS,
    DETAIL_POSTED_SELECTORS,
    DETAIL_SALARY_SELECTORS,
    DETAIL_TITLE_SELECTORS,
    TOTAL_RESULTS_SELECTORS,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Keys of the guest jobPosting JSON payload.
API_COMPANY_KEY = "com.linkedin.voyager.deco.jobs.web.shared.WebCompactJobPostingCompany"
API_ONSITE_APPLY_KEY = "com.linkedin.voyager.jobs.ComplexOnsiteApply"
API_OFFSITE_APPLY_KEY = "com.linkedin.voyager.jobs.OffsiteApply"


# --- Job search results ---


def parse_job_listings(html: str) -> list[JobSummary]:
    """Parse every job card on a search results page.

    An ``<li>`` and the ``div.base-card`` inside it describe the same job, so
    records are de-duplicated by id, keeping the first occurrence.
    """
    soup = load(html)
    jobs = _parse_each(soup.select(CARD_SELECTOR), parse_job_card, "job card")

    seen: set[str] = set()
    unique: list[JobSummary] = []
    for job in jobs:
        if job.id not in seen:
            seen.add(job.id)
            unique.append(job)
    return unique


def parse_job_card(card: Tag) -> JobSummary | None:
    """Parse a single search-result card.

    Returns None if no job id can be derived from the URN or the card link.
    """
    job_id = extract_id_from_urn(_attr(card, CARD_URN_ATTR))
    if job_id is None:
        job_id = extract_id_from_url(first_attr(card, CARD_LINK_SELECTORS, "href"))
    if job_id is None:
        logger.debug("Card without a job id, skipping")
        return None

    card_text = card.get_text().lower()
    time_el = find_first(card, CARD_TIME_SELECTORS)

    return JobSummary(
        id=job_id,
        title=first_non_empty_text(card, CARD_TITLE_SELECTORS) or "Unknown Title",
        company=first_non_empty_text(card, CARD_COMPANY_SELECTORS) or "Unknown Company",
        company_logo=first_attr(card, CARD_LOGO_SELECTORS, CARD_LOGO_ATTR),
        location=first_non_empty_text(card, CARD_LOCATION_SELECTORS) or "Unknown Location",
        workplace_type=detect_workplace_type(card_text),
        job_type=JobType.FULL_TIME,
        posted_date=_attr(time_el, "datetime"),
        posted_time_ago=first_non_empty_text(card, CARD_TIME_SELECTORS) or "Unknown",
        salary=first_non_empty_text(card, CARD_SALARY_SELECTORS) or None,
        url=build_job_url(job_id),
        is_easy_apply="easy apply" in card_text,
        is_promoted="promoted" in card_text,
    )


def extract_total_results(html: str) -> int | None:
    """Read the result count header of a search page; None when absent or zero."""
    count = parse_number(first_non_empty_text(load(html), TOTAL_RESULTS_SELECTORS))
    return count if count > 0 else None


# --- Job detail ---


def parse_job_details(html: str, job_id: str) -> JobDetail | None:
    """Parse a full job view page. Returns None if the page cannot be interpreted."""
    job_id = job_id.strip()
    try:
        soup = load(html)
        criteria = extract_job_criteria(soup)
        seniority = criteria.get("seniority level") or None
        employment = criteria.get("employment type") or None
        apply_text = first_non_empty_text(soup, DETAIL_APPLY_BUTTON_SELECTORS).lower()
        page_text = (soup.body or soup).get_text()

        return JobDetail(
            id=job_id,
            title=first_non_empty_text(soup, DETAIL_TITLE_SELECTORS) or "Unknown Title",
            company=first_non_empty_text(soup, DETAIL_COMPANY_SELECTORS) or "Unknown Company",
            company_logo=first_attr(soup, DETAIL_LOGO_SELECTORS, CARD_LOGO_ATTR),
            location=first_non_empty_text(soup, DETAIL_LOCATION_SELECTORS) or "Unknown Location",
            workplace_type=detect_workplace_type(page_text),
            job_type=map_job_type(employment),
            experience_level=map_experience_level(seniority),
            posted_date="",
            posted_time_ago=first_non_empty_text(soup, DETAIL_POSTED_SELECTORS) or "Unknown",
            applicants=first_non_empty_text(soup, DETAIL_APPLICANTS_SELECTORS) or None,
            salary=first_non_empty_text(soup, DETAIL_SALARY_SELECTORS) or None,
            url=build_job_url(job_id),
            is_easy_apply="easy apply" in apply_text,
            is_promoted=False,
            full_description=first_non_empty_text(
                soup, DETAIL_DESCRIPTION_SELECTORS, separator="\n",
            ),
            seniority_level=seniority,
            employment_type=employment,
            industries=_criteria_list(criteria, "industries"),
            job_functions=_criteria_list(criteria, "job function"),
            company_linkedin_url=first_attr(soup, DETAIL_COMPANY_LINK_SELECTORS, "href"),
        )
    except Exception:
        logger.warning("Failed to parse job page for %s", job_id, exc_info=True)
        return None


def extract_job_criteria(soup: Tag) -> dict[str, str]:
    """Collect the label→value criteria list, keyed by lowercased label."""
    criteria: dict[str, str] = {}
    for item in soup.select(CRITERIA_ITEM_SELECTOR):
        label = node_text(item.select_one(CRITERIA_LABEL_SELECTOR)).rstrip(":").strip().lower()
        value = node_text(item.select_one(CRITERIA_VALUE_SELECTOR))
        if label:
            criteria[label] = value
    return criteria


def parse_api_job_details(data: Any, job_id: str) -> JobDetail | None:
    """Parse the JSON shape of the guest jobPosting API.

    Non-mapping payloads (e.g. an HTML body) return None.
    """
    if not isinstance(data, Mapping):
        return None
    job_id = job_id.strip()
    try:
        company_info = _get_mapping(_get_mapping(data, "companyDetails"), API_COMPANY_KEY)
        company_name = _get_mapping(company_info, "companyResolutionResult").get("name")
        apply_method = _get_mapping(data, "applyMethod")
        offsite = _get_mapping(apply_method, API_OFFSITE_APPLY_KEY)
        description = _get_mapping(data, "description")

        return JobDetail(
            id=job_id,
            title=str(data.get("title") or "Unknown Title"),
            company=str(company_name or "Unknown Company"),
            location=str(data.get("formattedLocation") or "Unknown Location"),
            workplace_type=WorkplaceType.UNKNOWN,
            job_type=JobType.FULL_TIME,
            posted_time_ago=str(data.get("listedAt") or "Unknown"),
            url=build_job_url(job_id),
            is_easy_apply=bool(apply_method.get(API_ONSITE_APPLY_KEY)),
            is_promoted=False,
            full_description=str(description.get("text") or ""),
            application_url=offsite.get("companyApplyUrl") or None,
        )
    except Exception:
        logger.warning("Failed to parse jobPosting JSON for %s", job_id, exc_info=True)
        return None


# --- Company ---


def parse_company(html: str, company_id: str) -> Company | None:
    """Parse a company profile page. Returns None if the page cannot be interpreted."""
    company_id = company_id.strip()
    try:
        soup = load(html)
        return Company(
            id=company_id,
            name=first_non_empty_text(soup, COMPANY_NAME_SELECTORS) or "Unknown Company",
            description=first_non_empty_text(soup, COMPANY_DESCRIPTION_SELECTORS) or None,
            logo=first_attr(soup, COMPANY_LOGO_SELECTORS, "src"),
            industry=first_non_empty_text(soup, COMPANY_INDUSTRY_SELECTORS) or None,
            website=first_attr(soup, COMPANY_WEBSITE_SELECTORS, "href"),
            linkedin_url=build_company_url(company_id),
        )
    except Exception:
        logger.warning("Failed to parse company page for %s", company_id, exc_info=True)
        return None


def parse_company_search_results(html: str) -> list[CompanySearchEntry]:
    """Parse company search results; entries without a /company/<slug> link are omitted."""
    soup = load(html)
    return _parse_each(
        soup.select(COMPANY_RESULT_SELECTOR), parse_company_search_entry, "company result",
    )


def parse_company_search_entry(item: Tag) -> CompanySearchEntry | None:
    slug = extract_company_slug(first_attr(item, COMPANY_RESULT_LINK_SELECTORS, "href"))
    if slug is None:
        return None
    return CompanySearchEntry(
        id=slug,
        name=first_non_empty_text(item, COMPANY_RESULT_NAME_SELECTORS),
        industry=first_non_empty_text(item, COMPANY_RESULT_INDUSTRY_SELECTORS) or None,
        logo=first_attr(item, COMPANY_RESULT_LOGO_SELECTORS, "src"),
        linkedin_url=build_company_url(slug),
    )


# --- Private helpers ---


def _parse_each(
    items: Iterable[Tag], parse_one: Callable[[Tag], T | None], kind: str,
) -> list[T]:
    """Parse items independently; None results and exceptions drop only that item."""
    results: list[T] = []
    for index, item in enumerate(items):
        try:
            parsed = parse_one(item)
        except Exception:
            logger.debug("Failed to parse %s #%d, skipping", kind, index, exc_info=True)
            continue
        if parsed is not None:
            results.append(parsed)
    return results


def _attr(el: Tag | None, name: str) -> str:
    """Attribute value as a trimmed string ("" when missing)."""
    if el is None:
        return ""
    value = el.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def _criteria_list(criteria: dict[str, str], label: str) -> list[str] | None:
    return split_list(criteria.get(label)) or None


def _get_mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}
