"""Job / company identifier extraction and canonical URL synthesis.

LinkedIn embeds job IDs inconsistently across link, query-string and URN
forms, so URL extraction is a best-effort cascade: patterns are tried in
order and the first match wins. Pure functions with no markup dependency.
"""

import re

LINKEDIN_BASE = "https://www.linkedin.com"

_URN_RE = re.compile(r"jobPosting:(\d+)")

URL_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"/jobs/view/(\d+)"),
    re.compile(r"currentJobId=(\d+)"),
    re.compile(r"jobId=(\d+)"),
    re.compile(r"/(\d{10,})"),
)

_COMPANY_SLUG_RE = re.compile(r"/company/([^/?#]+)")


def extract_id_from_urn(urn: str | None) -> str | None:
    """Return the numeric id from ``urn:li:jobPosting:<digits>``, else None."""
    if not urn:
        return None
    match = _URN_RE.search(urn)
    return match.group(1) if match else None


def extract_id_from_url(url: str | None) -> str | None:
    """Return the job id from any known LinkedIn URL shape, else None."""
    if not url:
        return None
    for pattern in URL_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def extract_company_slug(href: str | None) -> str | None:
    """Return the ``/company/<slug>`` path segment of a link, else None."""
    if not href:
        return None
    match = _COMPANY_SLUG_RE.search(href)
    return match.group(1) if match else None


def build_job_url(job_id: str) -> str:
    """Build the canonical LinkedIn job URL."""
    return f"{LINKEDIN_BASE}/jobs/view/{job_id}"


def build_company_url(company_id: str) -> str:
    """Build the canonical LinkedIn company URL."""
    return f"{LINKEDIN_BASE}/company/{company_id}"
