"""Abstract base class for platform adapters."""

from abc import ABC, abstractmethod

from src.core.config import JobSearchParams
from src.core.schemas import Company, CompanySearchEntry, JobDetail, SearchResultPage


class PlatformAdapter(ABC):
    """Base class that every platform adapter must implement."""

    @property
    @abstractmethod
    def platform_id(self) -> str:
        """Unique identifier for this platform (e.g. 'linkedin')."""

    @abstractmethod
    async def search_jobs(self, params: JobSearchParams) -> SearchResultPage:
        """Run one search page and return the parsed envelope."""

    @abstractmethod
    async def get_job_details(self, job_id: str) -> JobDetail | None:
        """Fetch one job; None when it does not exist."""

    @abstractmethod
    async def get_company(self, company_id: str) -> Company | None:
        """Fetch one company profile; None when it does not exist."""

    @abstractmethod
    async def search_companies(self, query: str) -> list[CompanySearchEntry]:
        """Search companies by keyword."""
