"""CLI entry point for the LinkedIn jobs toolkit."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from src.core.config import JobSearchParams, Settings
from src.core.schemas import DatePosted, ExperienceLevel, JobType, SortBy, WorkplaceType
from src.platforms.linkedin.adapter import LinkedInAdapter
from src.platforms.linkedin.reference import (
    INDUSTRIES,
    JOB_FUNCTIONS,
    POPULAR_LOCATIONS,
    find_location,
)
from src.platforms.linkedin.searcher import build_public_search_url
from src.transport.session import FetchError, HttpSession

# Subcommands that never touch the network.
OFFLINE_COMMANDS = ("build-url", "locations", "industries", "job-functions")


def _values(enum_cls: Any) -> list[str]:
    return [member.value for member in enum_cls]


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    """Filters shared by `search` and `build-url`."""
    parser.add_argument("--keywords", "-k", help="Search keywords")
    parser.add_argument("--location", "-l", help="Free-text location (e.g. 'Berlin')")
    parser.add_argument("--job-type", nargs="+", choices=_values(JobType), default=[])
    parser.add_argument(
        "--experience-level", nargs="+", choices=_values(ExperienceLevel), default=[],
    )
    parser.add_argument("--workplace-type", nargs="+", choices=_values(WorkplaceType), default=[])
    parser.add_argument("--date-posted", choices=_values(DatePosted))
    parser.add_argument("--easy-apply", action="store_true", help="Only Easy Apply jobs")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="LinkedIn jobs toolkit - search public job and company pages",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (default: built-in settings)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- search ---
    search_parser = subparsers.add_parser("search", help="Search jobs (one page)")
    _add_filter_args(search_parser)
    search_parser.add_argument("--geo-id", help="LinkedIn geoId (see `locations`)")
    search_parser.add_argument("--distance", type=int, help="Radius in miles")
    search_parser.add_argument(
        "--company-id", action="append", default=[], dest="company_ids",
        help="Numeric company id filter (repeatable)",
    )
    search_parser.add_argument("--under-ten-applicants", action="store_true")
    search_parser.add_argument("--sort-by", choices=_values(SortBy))
    search_parser.add_argument("--start", type=int, default=0, help="Result offset")
    search_parser.add_argument("--limit", type=int, help="Max jobs to return")

    # --- remote ---
    remote_parser = subparsers.add_parser("remote", help="Search remote jobs")
    remote_parser.add_argument("keywords")
    remote_parser.add_argument(
        "--date-posted", choices=_values(DatePosted), default=DatePosted.PAST_WEEK.value,
    )
    remote_parser.add_argument(
        "--experience-level", nargs="+", choices=_values(ExperienceLevel), default=[],
    )
    remote_parser.add_argument("--limit", type=int)

    # --- entry-level ---
    entry_parser = subparsers.add_parser("entry-level", help="Search entry-level jobs")
    entry_parser.add_argument("keywords")
    entry_parser.add_argument("--location", "-l")
    entry_parser.add_argument(
        "--no-internships", action="store_true", help="Exclude internship positions",
    )
    entry_parser.add_argument(
        "--date-posted", choices=_values(DatePosted), default=DatePosted.PAST_WEEK.value,
    )
    entry_parser.add_argument("--limit", type=int)

    # --- job / company lookups ---
    job_parser = subparsers.add_parser("job", help="Get job details by id")
    job_parser.add_argument("job_id")

    company_parser = subparsers.add_parser("company", help="Get a company by id or vanity name")
    company_parser.add_argument("company_id")

    company_search_parser = subparsers.add_parser(
        "company-search", help="Search companies (needs cookies)",
    )
    company_search_parser.add_argument("query")

    company_jobs_parser = subparsers.add_parser("company-jobs", help="Jobs at one company")
    company_jobs_parser.add_argument("company_id")
    company_jobs_parser.add_argument("--keywords", "-k")
    company_jobs_parser.add_argument("--limit", type=int)

    # --- offline helpers ---
    build_url_parser = subparsers.add_parser(
        "build-url", help="Print a browser search URL for the given filters",
    )
    _add_filter_args(build_url_parser)
    subparsers.add_parser("locations", help="List popular locations and their geoIds")
    subparsers.add_parser("industries", help="List industry names")
    subparsers.add_parser("job-functions", help="List job function names")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def search_params_from_args(args: argparse.Namespace) -> JobSearchParams:
    """Build validated search params from parsed CLI flags.

    A location matching a popular location also sets its geoId.
    """
    fields = (
        "keywords", "location", "geo_id", "distance", "job_type", "experience_level",
        "workplace_type", "date_posted", "company_ids", "easy_apply",
        "under_ten_applicants", "sort_by", "start", "limit",
    )
    raw = {f: getattr(args, f) for f in fields if getattr(args, f, None) is not None}
    if raw.get("location") and "geo_id" not in raw:
        known = find_location(raw["location"])
        if known is not None:
            raw["geo_id"] = known.geo_id
    return JobSearchParams.model_validate(raw)


def run_offline(args: argparse.Namespace) -> Any:
    """Handle subcommands that need no HTTP session."""
    if args.command == "build-url":
        url = build_public_search_url(search_params_from_args(args))
        return {"url": url, "message": "Open this URL in a browser to see the job search results"}
    if args.command == "locations":
        return {
            "locations": [
                {"name": loc.name, "geo_id": loc.geo_id} for loc in POPULAR_LOCATIONS
            ],
        }
    if args.command == "industries":
        return {"industries": list(INDUSTRIES)}
    return {"job_functions": list(JOB_FUNCTIONS)}


async def run(args: argparse.Namespace, settings: Settings) -> Any:
    """Run a network subcommand and return a JSON-ready value.

    Raises LookupError when a single job or company does not exist.
    """
    async with HttpSession(settings.http) as session:
        adapter = LinkedInAdapter(session, settings.search)

        if args.command == "search":
            page = await adapter.search_jobs(search_params_from_args(args))
            return page.model_dump(mode="json")

        if args.command == "remote":
            page = await adapter.search_remote_jobs(
                args.keywords,
                date_posted=DatePosted(args.date_posted),
                experience_level=[ExperienceLevel(e) for e in args.experience_level],
                limit=args.limit,
            )
            return page.model_dump(mode="json")

        if args.command == "entry-level":
            page = await adapter.search_entry_level_jobs(
                args.keywords,
                location=args.location,
                include_internships=not args.no_internships,
                date_posted=DatePosted(args.date_posted),
                limit=args.limit,
            )
            return page.model_dump(mode="json")

        if args.command == "job":
            job = await adapter.get_job_details(args.job_id)
            if job is None:
                msg = f"Job {args.job_id} not found"
                raise LookupError(msg)
            return job.model_dump(mode="json")

        if args.command == "company":
            company = await adapter.get_company(args.company_id)
            if company is None:
                msg = f"Company {args.company_id} not found"
                raise LookupError(msg)
            return company.model_dump(mode="json")

        if args.command == "company-search":
            companies = await adapter.search_companies(args.query)
            return {
                "companies": [c.model_dump(mode="json") for c in companies],
                "total_results": len(companies),
            }

        # company-jobs
        page = await adapter.get_company_jobs(
            args.company_id, keywords=args.keywords, limit=args.limit,
        )
        return page.model_dump(mode="json")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings.from_yaml(args.config) if args.config else Settings()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command in OFFLINE_COMMANDS:
            result = run_offline(args)
        else:
            result = asyncio.run(run(args, settings))
    except ValidationError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        sys.exit(1)
    except (FetchError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
