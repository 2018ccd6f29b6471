from __future__ import annotations

from pathlib import Path

from jobsearch.data.seed import load_seed_file, seed_jobs
from jobsearch.enums import Language
from jobsearch.models.company import Company
from jobsearch.models.job import Job
from jobsearch.services.job_indexer import build_search_document, index_job, reindex_jobs
from jobsearch.services.job_search_service import SearchJobsParams, search_jobs


def test_search_document_includes_list_fields() -> None:
    job = Job(
        title="Backend Engineer",
        description="APIs",
        responsibilities=["Code review"],
        skill_must_have=["Python"],
        skill_nice_have=None,
        main_technologies=["FastAPI", ""],
        benefits=["Gym"],
    )

    assert build_search_document(job) == "Backend Engineer APIs Code review Python FastAPI Gym"


def test_vector_uses_the_jobs_own_language(db, add_jobs) -> None:
    (job,) = add_jobs({"title": "Ingenieros de la nube", "language": "spanish"})

    assert " de " not in job.search_vector
    assert " ingenier " in job.search_vector

    job.language = Language.ENGLISH
    index_job(db, job)
    # English configuration keeps Spanish stop words.
    assert " de " in job.search_vector


def test_reindex_only_missing(db, add_jobs) -> None:
    first, second = add_jobs({"title": "Cloud Engineer"}, {"title": "Cloud Architect"})
    first.search_vector = None
    db.commit()

    assert search_jobs(db, SearchJobsParams(query="cloud")).total_count == 1

    assert reindex_jobs(db, only_missing=True) == 1
    assert search_jobs(db, SearchJobsParams(query="cloud")).total_count == 2


def test_reindex_all_in_batches(db, add_jobs) -> None:
    add_jobs(*[{"title": f"Engineer {i}"} for i in range(5)])

    assert reindex_jobs(db, batch_size=2) == 5


def test_sample_seed_file_loads_and_is_searchable(db) -> None:
    path = Path(__file__).resolve().parents[1] / "scripts" / "data" / "sample_jobs.json"

    created = seed_jobs(db, load_seed_file(path))

    assert len(created) == 4
    assert db.query(Company).count() == 2
    english = search_jobs(db, SearchJobsParams(query="engineer"))
    assert [job.title for job in english.items] == ["Senior Backend Engineer"]
    spanish = search_jobs(db, SearchJobsParams(query="datos", language=Language.SPANISH))
    assert [job.title for job in spanish.items] == ["Ingeniera de Datos"]
