from __future__ import annotations

from sqlalchemy.dialects import postgresql

from jobsearch.enums import Language
from jobsearch.models.job import Job
from jobsearch.services.text_search import match_clause, regconfig_for, to_lexemes, vector_value


def test_lexemes_drop_stop_words_and_share_stems() -> None:
    assert to_lexemes("The developers are developing", Language.ENGLISH) == ["develop"]


def test_lexemes_are_lowercased_and_deduplicated_in_order() -> None:
    assert to_lexemes("Python, PYTHON and SQL", "english") == ["python", "sql"]


def test_stop_words_only_yields_nothing() -> None:
    assert to_lexemes("the and of to", Language.ENGLISH) == []
    assert to_lexemes("__ -- !!", Language.ENGLISH) == []
    assert to_lexemes(None, Language.ENGLISH) == []


def test_stop_words_are_language_specific() -> None:
    assert to_lexemes("the", Language.SPANISH) == ["the"]
    assert to_lexemes("los de la", Language.SPANISH) == []
    assert to_lexemes("Los ingenieros de datos", Language.SPANISH) == ["ingenier", "dat"]


def test_word_forms_share_one_stem() -> None:
    assert to_lexemes("engineer", Language.ENGLISH) == ["engine"]
    assert to_lexemes("engineers", Language.ENGLISH) == ["engine"]
    assert to_lexemes("engineering", Language.ENGLISH) == ["engine"]
    assert to_lexemes("Engineering engineers", Language.ENGLISH) == ["engine"]


def test_short_words_are_not_over_stemmed() -> None:
    assert to_lexemes("users", Language.ENGLISH) == ["user"]
    assert to_lexemes("companies company", Language.ENGLISH) == ["company"]


def test_vector_value_pads_lexemes_for_like_matching() -> None:
    assert vector_value("sqlite", "Python Engineer", Language.ENGLISH) == " python engine "
    assert vector_value("sqlite", "the", Language.ENGLISH) == ""


def test_regconfig_follows_language() -> None:
    assert regconfig_for(Language.ENGLISH) == "english"
    assert regconfig_for("spanish") == "spanish"


def test_postgres_match_uses_plainto_tsquery_with_regconfig() -> None:
    clause = match_clause("postgresql", Job.search_vector, "senior python", Language.SPANISH)
    compiled = clause.compile(dialect=postgresql.dialect())
    sql = str(compiled)

    assert "@@ plainto_tsquery(CAST(" in sql
    assert "AS REGCONFIG)" in sql
    assert "spanish" in compiled.params.values()
    assert "senior python" in compiled.params.values()


def test_postgres_vector_uses_to_tsvector() -> None:
    expr = vector_value("postgresql", "Python Engineer", Language.ENGLISH)
    sql = str(expr.compile(dialect=postgresql.dialect()))

    assert sql.startswith("to_tsvector(CAST(")
