"""LinkedIn markup selector constants with fallbacks.

Each constant is a tuple evaluated in order until one yields a non-empty
value. Order decides which markup variant wins when several match, so treat
it as part of the contract.
"""

from src.platforms.linkedin.query import Query

# --- Search result page (guest seeMoreJobPostings endpoint) ---
CARD_SELECTOR: str = "div.base-card, li"
CARD_URN_ATTR: str = "data-entity-urn"

CARD_LINK_SELECTORS: tuple[str, ...] = (
    "a.base-card__full-link",
    "a",
)

CARD_TITLE_SELECTORS: tuple[str, ...] = (
    "h3.base-search-card__title",
    ".base-search-card__title",
)

CARD_COMPANY_SELECTORS: tuple[str, ...] = (
    "h4.base-search-card__subtitle a",
    "h4.base-search-card__subtitle",
)

CARD_LOGO_SELECTORS: tuple[str, ...] = (
    "img.artdeco-entity-image",
    "img",
)
CARD_LOGO_ATTR: str = "data-delayed-url"

CARD_LOCATION_SELECTORS: tuple[str, ...] = (".job-search-card__location",)
CARD_TIME_SELECTORS: tuple[str, ...] = ("time",)
CARD_SALARY_SELECTORS: tuple[str, ...] = (".job-search-card__salary-info",)

TOTAL_RESULTS_SELECTORS: tuple[str, ...] = ("span.results-context-header__job-count",)

# --- Job view page ---
DETAIL_TITLE_SELECTORS: tuple[str, ...] = (
    "h1.top-card-layout__title",
    "h1.topcard__title",
    "h2.top-card-layout__title",
    ".top-card-layout__title",
    "h1",
)

DETAIL_COMPANY_SELECTORS: tuple[str, ...] = (
    "a.topcard__org-name-link",
    ".topcard__flavor--black-link",
    'a[data-tracking-control-name="public_jobs_topcard-org-name"]',
    ".top-card-layout__second-subline a",
)

DETAIL_LOCATION_SELECTORS: tuple[str | Query, ...] = (
    "span.topcard__flavor--bullet",
    ".top-card-layout__bullet",
    Query(".topcard__flavor", nth=1),
)

DETAIL_DESCRIPTION_SELECTORS: tuple[str, ...] = (
    "div.show-more-less-html__markup",
    ".description__text",
    ".show-more-less-html",
    "section.description",
)

DETAIL_LOGO_SELECTORS: tuple[str, ...] = (
    "img.artdeco-entity-image",
    "img.top-card-layout__entity-image",
)

DETAIL_POSTED_SELECTORS: tuple[str, ...] = ("span.posted-time-ago__text",)
DETAIL_APPLICANTS_SELECTORS: tuple[str, ...] = (
    "span.num-applicants__caption",
    "figcaption.num-applicants__caption",
)
DETAIL_SALARY_SELECTORS: tuple[str, ...] = ("div.salary-main-rail",)
DETAIL_COMPANY_LINK_SELECTORS: tuple[str, ...] = ("a.topcard__org-name-link",)
DETAIL_APPLY_BUTTON_SELECTORS: tuple[str, ...] = ("button.jobs-apply-button",)

CRITERIA_ITEM_SELECTOR: str = "li.description__job-criteria-item"
CRITERIA_LABEL_SELECTOR: str = "h3"
CRITERIA_VALUE_SELECTOR: str = "span"

# --- Company page ---
COMPANY_NAME_SELECTORS: tuple[str, ...] = (
    "h1.org-top-card-summary__title",
    "h1.top-card-layout__title",
)

COMPANY_DESCRIPTION_SELECTORS: tuple[str, ...] = (
    "p.org-top-card-summary__tagline",
    ".org-about-company-module__description",
)

COMPANY_LOGO_SELECTORS: tuple[str, ...] = ("img.org-top-card-primary-content__logo",)
COMPANY_INDUSTRY_SELECTORS: tuple[str, ...] = ("div.org-top-card-summary-info-list__info-item",)
COMPANY_WEBSITE_SELECTORS: tuple[str, ...] = ("a.org-top-card-primary-actions__action",)

# --- Company search results ---
COMPANY_RESULT_SELECTOR: str = "li.reusable-search__result-container"
COMPANY_RESULT_LINK_SELECTORS: tuple[str, ...] = ("a.app-aware-link",)
COMPANY_RESULT_NAME_SELECTORS: tuple[str, ...] = (".entity-result__title-text",)
COMPANY_RESULT_INDUSTRY_SELECTORS: tuple[str, ...] = (".entity-result__primary-subtitle",)
COMPANY_RESULT_LOGO_SELECTORS: tuple[str, ...] = ("img.EntityPhoto-square-3",)
