# __init__.py
from jobsearch.data.seed import JobSeed, load_seed_file, seed_jobs

__all__ = [
    "JobSeed",
    "load_seed_file",
    "seed_jobs",
]
