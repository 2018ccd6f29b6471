from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from jobsearch.database import dialect_name
from jobsearch.db.postgres import translate_db_errors
from jobsearch.enums import Language
from jobsearch.models.job import Job
from jobsearch.services.text_search import vector_value


logger = logging.getLogger(__name__)


_LIST_FIELDS = ("responsibilities", "skill_must_have", "skill_nice_have", "main_technologies", "benefits")


def _flatten(values: Iterable[str] | None) -> list[str]:
    return [str(v).strip() for v in (values or []) if v and str(v).strip()]


def build_search_document(job: Job) -> str:
    parts: list[str] = [job.title or "", job.description or ""]
    for field in _LIST_FIELDS:
        parts.extend(_flatten(getattr(job, field, None)))
    return " ".join(p for p in parts if p)


def index_job(db: Session, job: Job) -> Job:
    """Set ``job.search_vector`` from its searchable text, tokenized in the job's own language."""

    language = Language(job.language or Language.ENGLISH)
    job.search_vector = vector_value(dialect_name(db), build_search_document(job), language)
    return job


def reindex_jobs(db: Session, *, only_missing: bool = False, batch_size: int = 500) -> int:
    count = 0
    last_id = 0
    with translate_db_errors("reindex_jobs"):
        while True:
            query = db.query(Job).filter(Job.id > last_id)
            if only_missing:
                query = query.filter(Job.search_vector.is_(None))
            batch = query.order_by(Job.id).limit(batch_size).all()
            if not batch:
                break
            last_id = batch[-1].id
            for job in batch:
                index_job(db, job)
            db.commit()
            count += len(batch)

    logger.info("reindex_jobs done count=%s only_missing=%s", count, only_missing)
    return count
