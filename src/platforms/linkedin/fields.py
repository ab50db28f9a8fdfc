"""Free-text → controlled vocabulary classifiers.

Each classifier is a case-insensitive substring cascade. Rule order is a
contract: ambiguous text ("senior director") resolves to whichever rule comes
first.

Pure functions that never raise. Absence of signal is a normal outcome.
"""

import re
from typing import TypeVar

from src.core.schemas import ExperienceLevel, JobType, WorkplaceType

WORKPLACE_RULES: tuple[tuple[tuple[str, ...], WorkplaceType], ...] = (
    (("remote",), WorkplaceType.REMOTE),
    (("hybrid",), WorkplaceType.HYBRID),
    (("on-site", "onsite"), WorkplaceType.ON_SITE),
)

JOB_TYPE_RULES: tuple[tuple[tuple[str, ...], JobType], ...] = (
    (("full-time", "full time"), JobType.FULL_TIME),
    (("part-time", "part time"), JobType.PART_TIME),
    (("contract",), JobType.CONTRACT),
    (("temporary",), JobType.TEMPORARY),
    (("internship",), JobType.INTERNSHIP),
    (("volunteer",), JobType.VOLUNTEER),
)

EXPERIENCE_RULES: tuple[tuple[tuple[str, ...], ExperienceLevel], ...] = (
    (("internship",), ExperienceLevel.INTERNSHIP),
    (("entry",), ExperienceLevel.ENTRY_LEVEL),
    (("associate",), ExperienceLevel.ASSOCIATE),
    (("mid", "senior"), ExperienceLevel.MID_SENIOR),
    (("director",), ExperienceLevel.DIRECTOR),
    (("executive",), ExperienceLevel.EXECUTIVE),
)

_NUMBER_RE = re.compile(r"\d[\d,]*")

T = TypeVar("T")


def _match_rules(text: str | None, rules: tuple[tuple[tuple[str, ...], T], ...]) -> T | None:
    lower = (text or "").lower()
    for keywords, value in rules:
        if any(k in lower for k in keywords):
            return value
    return None


def detect_workplace_type(text: str | None) -> WorkplaceType:
    """Classify workplace type from any text; keyword may appear anywhere."""
    workplace = _match_rules(text, WORKPLACE_RULES)
    return workplace if workplace is not None else WorkplaceType.UNKNOWN


def map_job_type(text: str | None) -> JobType:
    """Map an employment-type string ("Full-time") to a JobType."""
    job_type = _match_rules(text, JOB_TYPE_RULES)
    return job_type if job_type is not None else JobType.OTHER


def map_experience_level(text: str | None) -> ExperienceLevel | None:
    """Map a seniority string ("Mid-Senior level") to an ExperienceLevel, or None."""
    return _match_rules(text, EXPERIENCE_RULES)


def parse_number(text: str | None) -> int:
    """Parse the first comma-grouped number in text ("1,234 results" → 1234).

    Returns 0 when there are no digits.
    """
    match = _NUMBER_RE.search(text or "")
    if match is None:
        return 0
    return int(match.group(0).replace(",", ""))


def split_list(text: str | None) -> list[str]:
    """Split a comma-separated criteria value, trimming items and dropping blanks."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]
