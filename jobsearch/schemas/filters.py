"""Search filter shapes and the page/offset arithmetic the UI relies on."""

from __future__ import annotations

import math
from datetime import datetime

from pydantic import BaseModel, Field

from jobsearch.enums import EmploymentType, ExperienceLevel, JobFunction, Language, Location, Province, WorkMode
from jobsearch.schemas.job import ApiPagination


DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

# Every filter except the free-text query.
ACTIVE_FILTER_KEYS: tuple[str, ...] = (
    "experience_level",
    "employment_type",
    "location",
    "work_mode",
    "province",
    "job_function",
    "language",
    "company",
    "date_from",
    "date_to",
)


class FilterState(BaseModel):
    """Filters as held by the UI while the user is still building them."""

    query: str | None = None
    experience_level: ExperienceLevel | None = None
    employment_type: EmploymentType | None = None
    location: Location | None = None
    work_mode: WorkMode | None = None
    province: Province | None = None
    job_function: JobFunction | None = None
    language: Language | None = None
    company: str | None = None
    # ISO 8601; a bare date means midnight of that day.
    date_from: datetime | None = None
    date_to: datetime | None = None


class JobSearchFilters(FilterState):
    query: str


class JobSearchPagination(BaseModel):
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)


class SearchJobsRpcParams(BaseModel):
    """Parameter shape of the ``search_jobs`` remote procedure."""

    search_query: str
    p_limit: int = DEFAULT_PAGE_SIZE
    p_offset: int = 0
    p_experience_level: ExperienceLevel | None = None
    p_employment_type: EmploymentType | None = None
    p_location: Location | None = None
    p_work_mode: WorkMode | None = None
    p_province: Province | None = None
    p_job_function: JobFunction | None = None
    p_company: str | None = None
    p_date_from: datetime | None = None
    p_date_to: datetime | None = None
    # None selects the configured default language.
    p_language: Language | None = None


def calculate_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def calculate_total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


def has_more_pages(current_page: int, total_count: int, page_size: int) -> bool:
    return current_page < calculate_total_pages(total_count, page_size)


def get_default_pagination() -> JobSearchPagination:
    return JobSearchPagination(page=DEFAULT_PAGE, page_size=DEFAULT_PAGE_SIZE)


def to_search_jobs_rpc_params(
    filters: JobSearchFilters,
    pagination: JobSearchPagination | None = None,
) -> SearchJobsRpcParams:
    """Convert UI filters plus a 1-indexed page into ``search_jobs`` parameters."""

    pagination = pagination or get_default_pagination()
    return SearchJobsRpcParams(
        search_query=filters.query,
        p_limit=pagination.page_size,
        p_offset=calculate_offset(pagination.page, pagination.page_size),
        p_experience_level=filters.experience_level,
        p_employment_type=filters.employment_type,
        p_location=filters.location,
        p_work_mode=filters.work_mode,
        p_province=filters.province,
        p_job_function=filters.job_function,
        p_company=filters.company,
        p_date_from=filters.date_from,
        p_date_to=filters.date_to,
        p_language=filters.language,
    )


def count_active_filters(filters: FilterState) -> int:
    return sum(1 for key in ACTIVE_FILTER_KEYS if getattr(filters, key) is not None)


def has_active_filters(filters: FilterState) -> bool:
    return count_active_filters(filters) > 0


def clear_filters(preserve_query: bool = False, current_query: str | None = None) -> FilterState:
    if preserve_query and current_query:
        return FilterState(query=current_query)
    return FilterState()


def build_pagination(total: int, limit: int, offset: int) -> ApiPagination:
    page = offset // limit + 1
    return ApiPagination(
        total=total,
        limit=limit,
        offset=offset,
        has_more=has_more_pages(page, total, limit),
        page=page,
        total_pages=calculate_total_pages(total, limit),
    )
