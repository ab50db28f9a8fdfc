"""Tests for core schemas: JobSummary, JobDetail, Company, SearchResultPage."""

import pytest
from pydantic import ValidationError

from src.core.schemas import (
    Company,
    CompanySearchEntry,
    ExperienceLevel,
    JobDetail,
    JobSummary,
    JobType,
    SearchResultPage,
    WorkplaceType,
)


def _make_summary(**overrides: object) -> JobSummary:
    defaults: dict[str, object] = {
        "id": "3812345678",
        "title": "Senior Python Engineer",
        "company": "Acme Corp",
        "location": "Remote",
        "url": "https://www.linkedin.com/jobs/view/3812345678",
        "workplace_type": "remote",
    }
    defaults.update(overrides)
    return JobSummary(**defaults)  # type: ignore[arg-type]


class TestJobSummary:
    def test_create_with_required_fields(self) -> None:
        j = JobSummary(id="1", url="https://www.linkedin.com/jobs/view/1")
        assert j.title == "Unknown Title"
        assert j.company == "Unknown Company"
        assert j.location == "Unknown Location"
        assert j.posted_time_ago == "Unknown"
        assert j.posted_date == ""
        assert j.workplace_type == WorkplaceType.UNKNOWN
        assert j.job_type == JobType.FULL_TIME
        assert j.salary is None
        assert j.is_easy_apply is False

    def test_id_stripped(self) -> None:
        assert _make_summary(id=" 42 ").id == "42"

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_summary(id="   ")

    def test_frozen(self) -> None:
        j = _make_summary()
        with pytest.raises(ValidationError):
            j.title = "Changed"  # type: ignore[misc]

    def test_invalid_workplace_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_summary(workplace_type="office")

    def test_json_dump_uses_enum_values(self) -> None:
        data = _make_summary().model_dump(mode="json")
        assert data["workplace_type"] == "remote"
        assert data["job_type"] == "full-time"


class TestJobDetail:
    def test_detail_defaults(self) -> None:
        d = JobDetail(id="1", url="https://www.linkedin.com/jobs/view/1")
        assert d.full_description == ""
        assert d.experience_level is None
        assert d.industries is None
        assert d.job_functions is None
        assert d.application_url is None

    def test_is_a_summary(self) -> None:
        d = JobDetail(
            id="1",
            url="https://www.linkedin.com/jobs/view/1",
            experience_level=ExperienceLevel.DIRECTOR,
        )
        assert isinstance(d, JobSummary)
        assert d.model_dump(mode="json")["experience_level"] == "director"


class TestCompany:
    def test_defaults(self) -> None:
        c = Company(id="acme", linkedin_url="https://www.linkedin.com/company/acme")
        assert c.name == "Unknown Company"
        assert c.description is None
        assert c.website is None

    def test_blank_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Company(id="  ", linkedin_url="https://www.linkedin.com/company/")

    def test_id_stripped(self) -> None:
        c = Company(id=" acme ", linkedin_url="https://www.linkedin.com/company/acme")
        assert c.id == "acme"

    def test_search_entry_blank_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CompanySearchEntry(id="", linkedin_url="https://www.linkedin.com/company/")

    def test_search_entry(self) -> None:
        e = CompanySearchEntry(
            id="acme", name="Acme", linkedin_url="https://www.linkedin.com/company/acme",
        )
        assert e.industry is None
        assert e.logo is None


class TestSearchResultPage:
    def test_defaults(self) -> None:
        page = SearchResultPage()
        assert page.jobs == []
        assert page.total_results == 0
        assert page.current_page == 1
        assert page.has_more is False
        assert page.search_params == {}

    def test_page_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SearchResultPage(current_page=0)

    def test_total_not_negative(self) -> None:
        with pytest.raises(ValidationError):
            SearchResultPage(total_results=-1)
