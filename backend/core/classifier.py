"""
Query classifier — maps free text to an analytic intent.

Rules are tried in declared order against the lower-cased query; the first
rule with any keyword phrase contained in the query wins. There is no
scoring: a query mentioning both "translator" and "popular language" goes
to whichever rule is declared first.
"""
import logging
from typing import Callable, NamedTuple, Sequence

from core import analytics
from models.chat import Answer, Intent
from models.journal import JournalEntry

logger = logging.getLogger(__name__)

Handler = Callable[[Sequence[JournalEntry], str], Answer]

FALLBACK_MESSAGE = "I'm not sure how to answer that specific question about the data."
PERIOD_PROMPT = "Please specify a specific decade or year."


class IntentRule(NamedTuple):
    intent: Intent
    patterns: tuple[str, ...]
    handler: Handler

    def matches(self, lower_query: str) -> bool:
        return any(p in lower_query for p in self.patterns)


def _journals_by_period(rows: Sequence[JournalEntry], query: str) -> Answer:
    period = analytics.extract_period(query)
    if period is None:
        return Answer(text=PERIOD_PROMPT)
    return analytics.count_journals_by_period(rows, period)


def _unrecognized(rows: Sequence[JournalEntry], query: str) -> Answer:
    return Answer(text=FALLBACK_MESSAGE)


RULES: tuple[IntentRule, ...] = (
    IntentRule(
        "popular_language",
        ("popular language", "most common language"),
        analytics.popular_languages,
    ),
    IntentRule(
        "authors_by_country",
        ("author from australia", "australian authors", "authors in australia"),
        lambda rows, query: analytics.authors_from_country(rows, "Australia"),
    ),
    IntentRule(
        "journals_by_period",
        ("journals in", "publications in", "articles published in"),
        _journals_by_period,
    ),
    IntentRule(
        "translator_activity",
        ("translator", "translators", "translation work"),
        lambda rows, query: analytics.translator_activity(rows),
    ),
    IntentRule(
        "most_prolific_author",
        ("most prolific author", "author with most publications", "top author"),
        lambda rows, query: analytics.most_prolific_author(rows),
    ),
    IntentRule(
        "countries_represented",
        ("countries", "countries represented", "author nationalities"),
        lambda rows, query: analytics.countries_represented(rows),
    ),
    IntentRule(
        "article_keyword_search",
        ("article about", "articles containing", "publications on"),
        analytics.search_articles,
    ),
    IntentRule(
        "most_active_decade",
        ("most active decade", "decade with most publications", "busiest decade"),
        lambda rows, query: analytics.most_active_decade(rows),
    ),
)


def classify(text: str) -> tuple[Intent, Handler]:
    """Returns (intent, handler). Never raises; unmatched text is 'unrecognized'."""
    lower_query = text.lower()
    for rule in RULES:
        if rule.matches(lower_query):
            return rule.intent, rule.handler
    return "unrecognized", _unrecognized


def answer_query(text: str, rows: Sequence[JournalEntry]) -> tuple[Intent, Answer]:
    """Classify the query and run its handler against the rows."""
    intent, handler = classify(text)
    logger.info("Chat intent: %s for query: %s", intent, text[:80])
    return intent, handler(rows, text.lower())
