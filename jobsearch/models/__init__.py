# __init__.py
from jobsearch.models.company import Company
from jobsearch.models.job import Job

__all__ = [
	"Company",
	"Job",
]
