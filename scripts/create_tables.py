from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine, inspect  # noqa: E402

from jobsearch.config import Settings, build_sqlalchemy_db_url, normalize_postgres_url, settings  # noqa: E402
from jobsearch.database import Base  # noqa: E402
from jobsearch.db.postgres import mask_db_url  # noqa: E402
import jobsearch.models  # noqa: F401,E402


def resolve_target_url(db_url: str | None, cfg: Settings = settings) -> str:
    """Explicit URLs get the same Supabase/psycopg rewrite as the configured one."""

    if db_url:
        return normalize_postgres_url(db_url, sslmode=cfg.db_sslmode)
    return build_sqlalchemy_db_url(cfg)


def create_schema(url: str) -> tuple[list[str], list[str]]:
    """Create missing tables (and Postgres enum types). Returns (created, existing)."""

    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, future=True, connect_args=connect_args)
    try:
        before = set(inspect(engine).get_table_names())
        Base.metadata.create_all(bind=engine, checkfirst=True)
    finally:
        engine.dispose()

    names = [table.name for table in Base.metadata.sorted_tables]
    return [n for n in names if n not in before], [n for n in names if n in before]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the companies and jobs tables. Issues DDL.")
    parser.add_argument("--db-url", default=None, help="Override the configured DATABASE_URL.")
    parser.add_argument("--i-understand", action="store_true", help="Required; refuses to issue DDL without it.")
    args = parser.parse_args(argv)

    if not args.i_understand:
        print("refusing to issue DDL without --i-understand")
        return 2

    url = resolve_target_url(args.db_url)
    created, existing = create_schema(url)
    print("target:", mask_db_url(url))
    print("created:", ", ".join(created) or "-")
    print("already present:", ", ".join(existing) or "-")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
