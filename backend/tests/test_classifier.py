import pytest
from core.classifier import RULES, FALLBACK_MESSAGE, PERIOD_PROMPT, answer_query, classify


@pytest.mark.parametrize("query, expected", [
    ("What was the most popular language of translation in the 1960s?", "popular_language"),
    ("Most common language overall", "popular_language"),
    ("Show me all Australian authors", "authors_by_country"),
    ("Is there an author from Australia?", "authors_by_country"),
    ("How many journals in 1965?", "journals_by_period"),
    ("Articles published in the 1970s", "journals_by_period"),
    ("Who are the busiest translators?", "translator_activity"),
    ("Who is the most prolific author?", "most_prolific_author"),
    ("Which countries are represented?", "countries_represented"),
    ("Find an article about war", "article_keyword_search"),
    ("What was the busiest decade?", "most_active_decade"),
    ("hello there", "unrecognized"),
    ("", "unrecognized"),
])
def test_classify_intents(query, expected):
    intent, _ = classify(query)
    assert intent == expected


def test_classify_is_case_insensitive():
    assert classify("MOST ACTIVE DECADE")[0] == "most_active_decade"


def test_first_declared_rule_wins():
    # Mentions both the language rule and the translator rule
    intent, _ = classify("popular language among translators")
    assert intent == "popular_language"
    # "publications in" (period rule) is declared before "countries"
    assert classify("publications in countries of 1960s")[0] == "journals_by_period"


def test_rule_order_is_fixed():
    assert [r.intent for r in RULES] == [
        "popular_language",
        "authors_by_country",
        "journals_by_period",
        "translator_activity",
        "most_prolific_author",
        "countries_represented",
        "article_keyword_search",
        "most_active_decade",
    ]


def test_classify_is_deterministic():
    query = "Who is the top author among the countries?"
    assert {classify(query)[0] for _ in range(5)} == {"most_prolific_author"}


def test_unrecognized_answer_has_no_chart(make_rows):
    intent, answer = answer_query("what is the weather", make_rows({"journal_year": "1961"}))
    assert intent == "unrecognized"
    assert answer.text == FALLBACK_MESSAGE
    assert answer.chart is None


def test_period_rule_without_token_asks_for_period(make_rows):
    intent, answer = answer_query("How many journals in the archive?", make_rows({"journal_year": "1961"}))
    assert intent == "journals_by_period"
    assert answer.text == PERIOD_PROMPT
    assert answer.chart is None


def test_period_rule_extracts_year(make_rows):
    rows = make_rows(
        {"journal_id": "J1", "journal_year": "1950"},
        {"journal_id": "J1", "journal_year": "1950"},
        {"journal_id": "J2", "journal_year": "1950"},
    )
    _, answer = answer_query("publications in 1950", rows)
    assert answer.text == "There were 2 unique journal issues published in year 1950."


def test_country_rule_targets_australia(make_rows):
    rows = make_rows(
        {"author": "Henry Lawson", "country_latin": "Australia"},
        {"author": "Pablo Neruda", "country_latin": "Chile"},
    )
    _, answer = answer_query("list australian authors", rows)
    assert answer.text == "Authors from Australia in the collection:\n\nHenry Lawson"
