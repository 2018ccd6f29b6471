from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobsearch.database import SessionLocal  # noqa: E402
from jobsearch.services.job_indexer import reindex_jobs  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Rebuild jobs.search_vector using each job's own language configuration."
    )
    parser.add_argument("--only-missing", action="store_true", help="Only rows with an empty search_vector.")
    parser.add_argument("--batch-size", type=int, default=500)
    args = parser.parse_args(argv)

    with SessionLocal() as db:
        count = reindex_jobs(db, only_missing=args.only_missing, batch_size=args.batch_size)

    print("reindexed", count, "jobs")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
