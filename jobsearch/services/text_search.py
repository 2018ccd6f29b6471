"""Full-text search configuration per language.

On Postgres the database does the work: vectors come from ``to_tsvector`` and queries
from ``plainto_tsquery``, both with the language's regconfig. Other dialects (the sqlite
databases used for local development and tests) get an in-process equivalent: the same
``to_lexemes`` function tokenizes the stored document and the incoming query, and the
match is a conjunction of ``LIKE`` probes against the space-padded lexeme string.
"""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy import and_, cast, false, func
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.sql.elements import ColumnElement

from jobsearch.enums import Language


_REGCONFIG: dict[Language, str] = {
    Language.ENGLISH: "english",
    Language.SPANISH: "spanish",
}

_WORD_RE = re.compile(r"[^\W_]+", re.UNICODE)

_STOP_WORDS: dict[Language, frozenset[str]] = {
    Language.ENGLISH: frozenset(
        """
        a about above after again against all am an and any are as at be because been before
        being below between both but by can could did do does doing down during each few for
        from further had has have having he her here hers herself him himself his how i if in
        into is it its itself just me more most my myself no nor not now of off on once only or
        other our ours ourselves out over own same she should so some such than that the their
        theirs them themselves then there these they this those through to too under until up
        very was we were what when where which while who whom why will with would you your
        yours yourself yourselves
        """.split()
    ),
    Language.SPANISH: frozenset(
        """
        a al algo algunas algunos ante antes como con contra cual cuando de del desde donde
        durante e el ella ellas ellos en entre era erais eran eras eres es esa esas ese eso
        esos esta estaba estado estar estas este esto estos fue fueron ha han hasta hay la las
        le les lo los mas me mi mis mucho muy nada ni no nos nosotros o os otra otras otro
        otros para pero poco por porque que quien quienes se sea ser si sin sobre su sus suya
        también tanto te tiene tienen todo todos tu tus un una uno unos y ya yo
        """.split()
    ),
}

# (suffix, replacement), longest first. Applied only if at least three characters remain.
_SUFFIXES: dict[Language, tuple[tuple[str, str], ...]] = {
    Language.ENGLISH: (
        ("ations", ""), ("ation", ""), ("ments", ""), ("ment", ""), ("ings", ""), ("ing", ""),
        ("ies", "y"), ("ers", ""), ("er", ""), ("ed", ""), ("s", ""),
    ),
    Language.SPANISH: (
        ("aciones", ""), ("ación", ""), ("acion", ""), ("mente", ""), ("ores", "or"), ("ados", ""),
        ("idas", ""), ("idos", ""), ("ado", ""), ("ida", ""), ("ido", ""), ("es", ""), ("os", ""),
        ("as", ""), ("s", ""),
    ),
}

_MIN_STEM = 3


def regconfig_for(language: Language | str) -> str:
    return _REGCONFIG[Language(language)]


def _strip_suffix(word: str, language: Language) -> str:
    for suffix, replacement in _SUFFIXES[language]:
        if word.endswith(suffix) and len(word) - len(suffix) >= _MIN_STEM:
            return word[: -len(suffix)] + replacement
    return word


def _stem(word: str, language: Language) -> str:
    # Strip until stable so "engineering", "engineers" and "engineer" share a stem.
    stemmed = _strip_suffix(word, language)
    while stemmed != word:
        word, stemmed = stemmed, _strip_suffix(stemmed, language)
    return stemmed


def to_lexemes(text: str | None, language: Language | str) -> list[str]:
    """Tokenize ``text`` into ordered, de-duplicated lexemes for ``language``."""

    lang = Language(language)
    stop_words = _STOP_WORDS[lang]
    lexemes: list[str] = []
    seen: set[str] = set()
    for word in _WORD_RE.findall((text or "").lower()):
        if word in stop_words:
            continue
        lexeme = _stem(word, lang)
        if lexeme in seen:
            continue
        seen.add(lexeme)
        lexemes.append(lexeme)
    return lexemes


def vector_value(dialect_name: str, document: str, language: Language | str) -> Any:
    """Value (or SQL expression) to store in ``jobs.search_vector``."""

    if dialect_name == "postgresql":
        return func.to_tsvector(cast(regconfig_for(language), REGCONFIG), document)

    lexemes = to_lexemes(document, language)
    return f" {' '.join(lexemes)} " if lexemes else ""


def match_clause(dialect_name: str, vector_column: Any, query: str, language: Language | str) -> ColumnElement[bool]:
    """Boolean clause: ``vector_column`` matches the tokenized ``query``.

    A query that tokenizes to nothing matches no row on either path.
    """

    if dialect_name == "postgresql":
        tsquery = func.plainto_tsquery(cast(regconfig_for(language), REGCONFIG), query)
        return vector_column.bool_op("@@")(tsquery)

    lexemes = to_lexemes(query, language)
    if not lexemes:
        return false()
    return and_(*[vector_column.like(f"% {lexeme} %") for lexeme in lexemes])
