# __init__.py
from jobsearch.schemas.filters import FilterState, JobSearchFilters, JobSearchPagination, SearchJobsRpcParams
from jobsearch.schemas.job import ApiPagination, JobOut, JobSearchPage, SearchJobsResponse

__all__ = [
	"ApiPagination",
	"FilterState",
	"JobOut",
	"JobSearchFilters",
	"JobSearchPage",
	"JobSearchPagination",
	"SearchJobsResponse",
	"SearchJobsRpcParams",
]
