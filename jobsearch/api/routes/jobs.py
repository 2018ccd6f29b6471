from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobsearch.config import settings
from jobsearch.database import get_db
from jobsearch.db.postgres import DatabaseConnectionError, DatabaseQueryError
from jobsearch.enums import EmploymentType, ExperienceLevel, JobFunction, Language, Location, Province, WorkMode
from jobsearch.schemas.filters import (
    JobSearchFilters,
    JobSearchPagination,
    SearchJobsRpcParams,
    build_pagination,
    to_search_jobs_rpc_params,
)
from jobsearch.schemas.job import JobOut, JobSearchPage, SearchJobsResponse
from jobsearch.services.job_search_service import (
    InvalidSearchParameters,
    SearchJobsParams,
    SearchJobsResult,
    get_job,
    search_jobs,
)


router = APIRouter(tags=["jobs"])

logger = logging.getLogger(__name__)


def _run_search(db: Session, params: SearchJobsParams) -> SearchJobsResult:
    try:
        return search_jobs(db, params)
    except InvalidSearchParameters as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except DatabaseConnectionError as exc:
        logger.warning("search_jobs database unavailable: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Search is temporarily unavailable") from exc
    except DatabaseQueryError as exc:
        logger.warning("search_jobs query failed: %s", exc.__cause__)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Job search query failed") from exc


@router.post("/rpc/search_jobs", response_model=SearchJobsResponse)
def search_jobs_rpc(payload: SearchJobsRpcParams, db: Session = Depends(get_db)) -> SearchJobsResponse:
    result = _run_search(db, SearchJobsParams.from_rpc(payload))
    return SearchJobsResponse(
        items=result.items,
        total_count=result.total_count,
        limit=result.limit,
        offset=result.offset,
    )


@router.get("/jobs/search", response_model=JobSearchPage)
def search_jobs_page(
    q: str = Query(default="", min_length=0),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=settings.max_page_size),
    experience_level: ExperienceLevel | None = None,
    employment_type: EmploymentType | None = None,
    location: Location | None = None,
    work_mode: WorkMode | None = None,
    province: Province | None = None,
    job_function: JobFunction | None = None,
    company: str | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    language: Language | None = None,
    db: Session = Depends(get_db),
) -> JobSearchPage:
    filters = JobSearchFilters(
        query=q,
        experience_level=experience_level,
        employment_type=employment_type,
        location=location,
        work_mode=work_mode,
        province=province,
        job_function=job_function,
        company=(company or "").strip() or None,
        date_from=date_from,
        date_to=date_to,
        language=language,
    )
    pagination = JobSearchPagination(page=page, page_size=page_size or settings.default_page_size)
    rpc = to_search_jobs_rpc_params(filters, pagination)

    if not q.strip():
        result = SearchJobsResult(items=[], total_count=0, limit=rpc.p_limit, offset=rpc.p_offset)
    else:
        result = _run_search(db, SearchJobsParams.from_rpc(rpc))

    return JobSearchPage(
        jobs=result.items,
        pagination=build_pagination(result.total_count, result.limit, result.offset),
    )


@router.get("/jobs/{job_id}", response_model=JobOut)
def get_job_detail(job_id: int, db: Session = Depends(get_db)) -> JobOut:
    try:
        job = get_job(db, job_id)
    except DatabaseConnectionError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except DatabaseQueryError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Job lookup failed") from exc

    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job
