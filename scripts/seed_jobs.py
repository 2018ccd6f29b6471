from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobsearch.data.seed import load_seed_file, seed_jobs  # noqa: E402
from jobsearch.database import Base, SessionLocal, engine  # noqa: E402
from jobsearch.models.company import Company  # noqa: E402
from jobsearch.models.job import Job  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed companies and jobs from a JSON file (development only).")
    parser.add_argument(
        "--file",
        default=str(Path(__file__).resolve().parent / "data" / "sample_jobs.json"),
    )
    parser.add_argument("--truncate", action="store_true")
    args = parser.parse_args(argv)

    if engine.dialect.name == "sqlite":
        Base.metadata.create_all(bind=engine)

    seeds = load_seed_file(Path(args.file))

    with SessionLocal() as db:
        if args.truncate:
            db.query(Job).delete()
            db.query(Company).delete()
            db.commit()

        created = seed_jobs(db, seeds)

    print("seeded", len(created), "jobs from", args.file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
