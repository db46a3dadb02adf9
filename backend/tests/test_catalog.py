import pytest
from core.catalog import decade_label, journal_detail, journals_in_decade, list_decades, search, visualization_data


@pytest.fixture
def rows(make_rows):
    return make_rows(
        {"journal_id": "V1962-03", "journal_name": "Vsesvit", "journal_year": "1962", "journal_number": "3",
         "article_name": "Poems of Spring", "author": "Pablo Neruda", "translator": "Mykola Lukash",
         "country": "Chile", "country_latin": "Chile", "language_latin": "Spanish"},
        {"journal_id": "V1961-01", "journal_name": "Vsesvit", "journal_year": "1961", "journal_number": "1",
         "article_name": "The Great Revolution", "author": "Henry Lawson", "translator": "Ivan Koval",
         "country": "Australia", "country_latin": "Australia", "language_latin": "English"},
        {"journal_id": "V1961-01", "journal_name": "Vsesvit (renamed)", "journal_year": "1961", "journal_number": "1",
         "article_name": "Bush Tales", "author": "Henry Lawson", "translator": "-",
         "country": "Australia", "country_latin": "Australia", "language_latin": " "},
        {"journal_id": "V1970-05", "journal_name": "Vsesvit", "journal_year": "1970", "journal_number": "5",
         "article_name": "Letters from New York", "author": "John Updike", "translator": "Mykola Lukash",
         "country": "USA", "country_latin": "USA, New York", "language_latin": "English"},
        {"journal_id": "X-UNDATED", "journal_year": "", "article_name": "Lost issue"},
    )


def test_list_decades_sorted_with_issue_counts(rows):
    decades = list_decades(rows)
    assert [(d.decade, d.issue_count) for d in decades] == [("0s", 1), ("1960s", 2), ("1970s", 1)]


def test_journals_in_decade_unique_and_sorted(rows):
    issues = journals_in_decade(rows, "1960s")
    assert [i.journal_id for i in issues] == ["V1961-01", "V1962-03"]
    # last row for an id supplies the metadata
    assert issues[0].journal_name == "Vsesvit (renamed)"


def test_journals_in_unknown_decade(rows):
    assert journals_in_decade(rows, "1880s") == []


@pytest.mark.parametrize("year, expected", [
    ("1961", "1960s"),
    (" 1975 ", "1970s"),
    ("1961.5", "1960s"),
    ("1961a", "0s"),
    ("n/a", "0s"),
    ("", "0s"),
])
def test_decade_label_reads_whole_value(year, expected):
    assert decade_label(year) == expected


def test_malformed_year_is_browsed_as_undated(make_rows):
    rows = make_rows(
        {"journal_id": "J1", "journal_year": "1961"},
        {"journal_id": "J2", "journal_year": "1961a"},
    )
    assert [(d.decade, d.issue_count) for d in list_decades(rows)] == [("0s", 1), ("1960s", 1)]
    assert [i.journal_id for i in journals_in_decade(rows, "0s")] == ["J2"]


def test_journal_detail(rows):
    detail = journal_detail(rows, "V1961-01")
    assert detail.issue.journal_name == "Vsesvit"
    assert [a.article_name for a in detail.articles] == ["The Great Revolution", "Bush Tales"]
    assert journal_detail(rows, "nope") is None


def test_search_blocks_in_first_fill_order(rows):
    results = search(rows, "LUKASH")
    assert [b.field for b in results.blocks] == ["Translator"]
    assert [r.journal_id for r in results.blocks[0].results] == ["V1962-03", "V1970-05"]


def test_search_multiple_fields(rows):
    results = search(rows, "lawson")
    assert [b.field for b in results.blocks] == ["Author"]
    assert len(results.blocks[0].results) == 2

    results = search(rows, "o")
    assert [b.field for b in results.blocks] == ["Translator", "Article Name", "Author"]


def test_search_empty_term(rows):
    assert search(rows, "  ").blocks == []


def test_visualization_data(rows):
    data = visualization_data(rows)

    shares = {s.decade: s.shares for s in data.country_share_by_decade}
    assert shares["1960s"] == pytest.approx({"Chile": 100 / 3, "Australia": 200 / 3})
    assert shares["1970s"] == {"USA": 100.0}

    assert [(a.decade, a.count) for a in data.unique_authors_by_decade] == [("1960s", 2), ("1970s", 1)]
    assert data.country_contributions == {"Chile": 1, "Australia": 2, "USA": 1}
    assert data.language_distribution == {"Spanish": 1, "English": 2}
