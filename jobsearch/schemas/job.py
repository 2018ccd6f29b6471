from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from jobsearch.enums import EmploymentType, ExperienceLevel, JobFunction, Language, Location, Province, WorkMode


class JobOut(BaseModel):
    """Full job projection as returned to the UI, joined with the company display name."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    title: str
    description: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    skill_must_have: list[str] = Field(default_factory=list)
    skill_nice_have: list[str] = Field(default_factory=list)
    main_technologies: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel | None = None
    employment_type: EmploymentType | None = None
    location: Location | None = None
    city: str | None = None
    province: Province | None = None
    work_mode: WorkMode | None = None
    job_function: JobFunction | None = None
    language: Language
    application_url: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    company_name: str


class SearchJobsResponse(BaseModel):
    # Total matches over the whole filtered set, not just this page.
    items: list[JobOut]
    total_count: int
    limit: int
    offset: int


class ApiPagination(BaseModel):
    total: int
    limit: int
    offset: int
    has_more: bool
    page: int
    total_pages: int


class JobSearchPage(BaseModel):
    jobs: list[JobOut]
    pagination: ApiPagination
