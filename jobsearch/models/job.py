from __future__ import annotations

from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, TSVECTOR
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobsearch.database import Base
from jobsearch.enums import EmploymentType, ExperienceLevel, JobFunction, Language, Location, Province, WorkMode


# TEXT[] on Postgres, JSON list elsewhere (sqlite dev/test databases).
StringList = JSON().with_variant(ARRAY(Text), "postgresql")

# tsvector on Postgres; space-padded lexemes elsewhere (see services.text_search).
SearchVector = Text().with_variant(TSVECTOR(), "postgresql")


def _enum_column(enum_cls, name: str) -> Enum:
    # Store the enum *values* ("entry-level"), not the member names.
    return Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e], validate_strings=True)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    responsibilities = Column(StringList, nullable=False, default=list)
    skill_must_have = Column(StringList, nullable=False, default=list)
    skill_nice_have = Column(StringList, nullable=False, default=list)
    main_technologies = Column(StringList, nullable=False, default=list)
    benefits = Column(StringList, nullable=False, default=list)

    experience_level = Column(_enum_column(ExperienceLevel, "experience_level_enum"), nullable=True)
    employment_type = Column(_enum_column(EmploymentType, "employment_type_enum"), nullable=True)
    location = Column(_enum_column(Location, "location_enum"), nullable=True)
    city = Column(String(255), nullable=True)
    province = Column(_enum_column(Province, "province_enum"), nullable=True)
    work_mode = Column(_enum_column(WorkMode, "work_mode_enum"), nullable=True)
    job_function = Column(_enum_column(JobFunction, "job_function_enum"), nullable=True)
    language = Column(_enum_column(Language, "language_enum"), nullable=False, default=Language.ENGLISH)

    application_url = Column(String(2048), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    # Written only by services.job_indexer.index_job, using this row's language.
    search_vector = Column(SearchVector, nullable=True)

    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        Index("ix_jobs_search_vector", "search_vector", postgresql_using="gin"),
        Index("ix_jobs_language_active_created", "language", "is_active", "created_at"),
    )
