from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from jobsearch.config import settings
from jobsearch.database import dialect_name
from jobsearch.db.postgres import translate_db_errors
from jobsearch.enums import EmploymentType, ExperienceLevel, JobFunction, Language, Location, Province, WorkMode
from jobsearch.models.company import Company
from jobsearch.models.job import Job
from jobsearch.schemas.filters import DEFAULT_PAGE_SIZE, SearchJobsRpcParams
from jobsearch.schemas.job import JobOut
from jobsearch.services.text_search import match_clause


logger = logging.getLogger(__name__)


class InvalidSearchParameters(ValueError):
    pass


@dataclass(frozen=True)
class SearchJobsParams:
    query: str
    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0
    experience_level: ExperienceLevel | None = None
    employment_type: EmploymentType | None = None
    location: Location | None = None
    work_mode: WorkMode | None = None
    province: Province | None = None
    job_function: JobFunction | None = None
    company: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    # None selects settings.default_language.
    language: Language | None = None

    @classmethod
    def from_rpc(cls, rpc: SearchJobsRpcParams) -> SearchJobsParams:
        return cls(
            query=rpc.search_query,
            limit=rpc.p_limit,
            offset=rpc.p_offset,
            experience_level=rpc.p_experience_level,
            employment_type=rpc.p_employment_type,
            location=rpc.p_location,
            work_mode=rpc.p_work_mode,
            province=rpc.p_province,
            job_function=rpc.p_job_function,
            company=rpc.p_company,
            date_from=rpc.p_date_from,
            date_to=rpc.p_date_to,
            language=rpc.p_language,
        )

    def active_filters(self) -> dict[str, Any]:
        skip = {"query", "limit", "offset"}
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in skip and getattr(self, f.name) is not None}


@dataclass(frozen=True)
class SearchJobsResult:
    items: list[JobOut]
    total_count: int
    limit: int
    offset: int


# Optional equality filters: params attribute -> jobs column.
_EQUALITY_FILTERS = (
    ("experience_level", Job.experience_level),
    ("employment_type", Job.employment_type),
    ("location", Job.location),
    ("work_mode", Job.work_mode),
    ("province", Job.province),
    ("job_function", Job.job_function),
)

# Every job column except search_vector, plus the company display name.
_PROJECTION = (
    Job.id,
    Job.company_id,
    Job.title,
    Job.description,
    Job.responsibilities,
    Job.skill_must_have,
    Job.skill_nice_have,
    Job.main_technologies,
    Job.benefits,
    Job.experience_level,
    Job.employment_type,
    Job.location,
    Job.city,
    Job.province,
    Job.work_mode,
    Job.job_function,
    Job.language,
    Job.application_url,
    Job.is_active,
    Job.created_at,
    Job.updated_at,
    Company.name.label("company_name"),
)


def _naive_utc(value: datetime | None) -> datetime | None:
    # jobs.created_at is a timezone-less timestamp holding UTC.
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _validate(params: SearchJobsParams, *, max_page_size: int) -> None:
    if params.limit < 1 or params.limit > max_page_size:
        raise InvalidSearchParameters(f"limit must be between 1 and {max_page_size}")
    if params.offset < 0:
        raise InvalidSearchParameters("offset must be >= 0")
    date_from, date_to = _naive_utc(params.date_from), _naive_utc(params.date_to)
    if date_from is not None and date_to is not None and date_from > date_to:
        raise InvalidSearchParameters("date_from must not be after date_to")


def build_filter_clauses(dialect: str, params: SearchJobsParams, language: Language) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = [
        Job.is_active.is_(True),
        match_clause(dialect, Job.search_vector, params.query, language),
        Job.language == language,
    ]

    for attr, column in _EQUALITY_FILTERS:
        value = getattr(params, attr)
        if value is not None:
            clauses.append(column == value)

    if params.company is not None:
        clauses.append(func.lower(Company.name) == func.lower(params.company))

    date_from = _naive_utc(params.date_from)
    if date_from is not None:
        clauses.append(Job.created_at >= date_from)

    date_to = _naive_utc(params.date_to)
    if date_to is not None:
        clauses.append(Job.created_at <= date_to)

    return clauses


def build_search_statement(dialect: str, params: SearchJobsParams, language: Language) -> Select:
    return (
        select(*_PROJECTION, func.count().over().label("total_count"))
        .join(Company, Job.company_id == Company.id)
        .where(*build_filter_clauses(dialect, params, language))
        .order_by(Job.created_at.desc(), Job.id.desc())
        .limit(params.limit)
        .offset(params.offset)
    )


def build_count_statement(dialect: str, params: SearchJobsParams, language: Language) -> Select:
    return (
        select(func.count())
        .select_from(Job)
        .join(Company, Job.company_id == Company.id)
        .where(*build_filter_clauses(dialect, params, language))
    )


def _to_job_out(mapping: Any) -> JobOut:
    data = {key: value for key, value in mapping.items() if key != "total_count"}
    for key in ("responsibilities", "skill_must_have", "skill_nice_have", "main_technologies", "benefits"):
        if data.get(key) is None:
            data[key] = []
    return JobOut.model_validate(data)


def search_jobs(db: Session, params: SearchJobsParams) -> SearchJobsResult:
    """Filtered, paginated full-text search over active jobs, newest first.

    ``total_count`` counts every row that passes the filters, independent of
    limit/offset. A query with no searchable terms matches nothing.
    """

    _validate(params, max_page_size=settings.max_page_size)
    language = Language(params.language or settings.default_language)
    dialect = dialect_name(db)

    with translate_db_errors("search_jobs"):
        rows = db.execute(build_search_statement(dialect, params, language)).mappings().all()
        if rows:
            total_count = int(rows[0]["total_count"])
        elif params.offset > 0:
            # Past the last page the window count has no row to ride on.
            total_count = int(db.execute(build_count_statement(dialect, params, language)).scalar_one())
        else:
            total_count = 0

    items = [_to_job_out(row) for row in rows]
    logger.debug(
        "search_jobs q=%r language=%s filters=%s limit=%s offset=%s total=%s",
        params.query,
        language.value,
        params.active_filters(),
        params.limit,
        params.offset,
        total_count,
    )
    return SearchJobsResult(items=items, total_count=total_count, limit=params.limit, offset=params.offset)


def get_job(db: Session, job_id: int) -> JobOut | None:
    stmt = (
        select(*_PROJECTION)
        .join(Company, Job.company_id == Company.id)
        .where(Job.id == job_id, Job.is_active.is_(True))
        .limit(1)
    )
    with translate_db_errors("get_job"):
        row = db.execute(stmt).mappings().first()
    return _to_job_out(row) if row else None
