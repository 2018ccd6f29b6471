from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, Field
from sqlalchemy import func
from sqlalchemy.orm import Session

from jobsearch.enums import EmploymentType, ExperienceLevel, JobFunction, Language, Location, Province, WorkMode
from jobsearch.models.company import Company
from jobsearch.models.job import Job
from jobsearch.services.job_indexer import index_job


class JobSeed(BaseModel):
    company: str = Field(min_length=1)
    title: str = Field(min_length=1)
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
    language: Language = Language.ENGLISH
    application_url: str | None = None
    is_active: bool = True
    created_at: datetime | None = None


def load_seed_file(path: Path) -> list[JobSeed]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    return [JobSeed.model_validate(item) for item in raw]


def _get_or_create_company(db: Session, name: str, cache: dict[str, Company]) -> Company:
    key = name.strip().lower()
    company = cache.get(key)
    if company is None:
        company = db.query(Company).filter(func.lower(Company.name) == key).first()
    if company is None:
        company = Company(name=name.strip())
        db.add(company)
        db.flush()
    cache[key] = company
    return company


def seed_jobs(db: Session, seeds: Iterable[JobSeed]) -> list[Job]:
    """Insert jobs (creating companies by name) with their search vectors populated."""

    companies: dict[str, Company] = {}
    created: list[Job] = []
    for seed in seeds:
        company = _get_or_create_company(db, seed.company, companies)
        data = seed.model_dump(exclude={"company", "created_at"})
        job = Job(company_id=company.id, **data)
        if seed.created_at is not None:
            job.created_at = seed.created_at
            job.updated_at = seed.created_at
        index_job(db, job)
        db.add(job)
        created.append(job)
    db.commit()
    return created
