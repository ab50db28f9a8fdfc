"""Static LinkedIn reference data: geo ids, industry and job function names."""

from typing import NamedTuple


class Location(NamedTuple):
    name: str
    geo_id: str


POPULAR_LOCATIONS: tuple[Location, ...] = (
    Location("United States", "103644278"),
    Location("New York, NY", "102571732"),
    Location("San Francisco Bay Area", "90000084"),
    Location("Los Angeles, CA", "102448103"),
    Location("Seattle, WA", "104116203"),
    Location("Austin, TX", "104472866"),
    Location("Chicago, IL", "103112676"),
    Location("Boston, MA", "102380872"),
    Location("Denver, CO", "103203548"),
    Location("United Kingdom", "101165590"),
    Location("London, UK", "102257491"),
    Location("Canada", "101174742"),
    Location("Toronto, Canada", "100025096"),
    Location("Germany", "101282230"),
    Location("India", "102713980"),
)

INDUSTRIES: tuple[str, ...] = (
    "Technology, Information and Internet",
    "Hospitals and Health Care",
    "Financial Services",
    "IT Services and IT Consulting",
    "Software Development",
    "Retail",
    "Staffing and Recruiting",
    "Manufacturing",
    "Higher Education",
    "Banking",
    "Insurance",
    "Real Estate",
    "Construction",
    "Marketing Services",
    "Telecommunications",
    "Automotive",
    "Entertainment Providers",
    "Non-profit Organizations",
    "Government Administration",
    "Legal Services",
)

JOB_FUNCTIONS: tuple[str, ...] = (
    "Engineering",
    "Information Technology",
    "Sales",
    "Marketing",
    "Human Resources",
    "Finance",
    "Operations",
    "Product Management",
    "Design",
    "Data Science",
    "Project Management",
    "Business Development",
    "Customer Service",
    "Legal",
    "Research",
    "Quality Assurance",
    "Administrative",
    "Consulting",
    "Writing/Editing",
    "Healthcare Services",
)


def find_location(name: str) -> Location | None:
    """Case-insensitive lookup of a popular location by name."""
    key = name.strip().lower()
    for location in POPULAR_LOCATIONS:
        if location.name.lower() == key:
            return location
    return None
