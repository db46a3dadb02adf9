"""
Catalog — browsing views over the journal rows: issues by decade, issue
detail, field search, and the aggregates behind the visualization page.
"""
import logging
import math
import re
from collections import Counter, defaultdict
from typing import Optional, Sequence

from models.journal import (
    DecadeSummary, JournalDetail, JournalEntry, JournalIssue, SearchBlock, SearchResults,
)
from models.visualization import DecadeAuthorCount, DecadeCountryShare, VisualizationData

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def browse_year(value: str) -> float:
    """
    Whole-value numeric year for decade browsing. Blank or non-numeric
    values ('1961a', 'n/a') count as year 0.
    """
    value = value.strip()
    return float(value) if _NUMERIC.fullmatch(value) else 0.0


def decade_label(journal_year: str) -> str:
    """'1961' -> '1960s'. Undated issues fall into the '0s' bucket."""
    return f"{math.floor(browse_year(journal_year) / 10) * 10}s"


def _issue(row: JournalEntry) -> JournalIssue:
    return JournalIssue(
        journal_id=row.journal_id,
        journal_name=row.journal_name,
        journal_year=row.journal_year,
        journal_number=row.journal_number,
    )


def _issue_rows(rows: Sequence[JournalEntry]) -> list[JournalEntry]:
    """One row per journal_id: first position kept, last row's metadata wins."""
    by_id: dict[str, JournalEntry] = {}
    for r in rows:
        by_id[r.journal_id] = r
    return list(by_id.values())


# ── Decade browsing ───────────────────────────────────────────────────────────

def list_decades(rows: Sequence[JournalEntry]) -> list[DecadeSummary]:
    counts = Counter(decade_label(r.journal_year) for r in _issue_rows(rows))
    return [DecadeSummary(decade=d, issue_count=counts[d]) for d in sorted(counts)]


def journals_in_decade(rows: Sequence[JournalEntry], decade: str) -> list[JournalIssue]:
    issues = [r for r in _issue_rows(rows) if decade_label(r.journal_year) == decade]
    issues.sort(key=lambda r: r.journal_id)
    return [_issue(r) for r in issues]


def journal_detail(rows: Sequence[JournalEntry], journal_id: str) -> Optional[JournalDetail]:
    articles = [r for r in rows if r.journal_id == journal_id]
    if not articles:
        return None
    return JournalDetail(issue=_issue(articles[0]), articles=articles)


# ── Search ────────────────────────────────────────────────────────────────────

def search(rows: Sequence[JournalEntry], term: str) -> SearchResults:
    """
    Case-insensitive substring search over translator, article name and author.
    Blocks appear in the order they are first filled; rows are ordered by journal_id.
    """
    needle = term.strip().lower()
    if not needle:
        return SearchResults(query=term)

    blocks: dict[str, list[JournalEntry]] = {}
    for r in sorted(rows, key=lambda r: r.journal_id):
        if r.translator and needle in r.translator.lower():
            blocks.setdefault("Translator", []).append(r)
        if needle in r.article_name.lower():
            blocks.setdefault("Article Name", []).append(r)
        if r.author and needle in r.author.lower():
            blocks.setdefault("Author", []).append(r)

    logger.debug("Search '%s' matched %d blocks", needle, len(blocks))
    return SearchResults(
        query=term,
        blocks=[SearchBlock(field=name, results=found) for name, found in blocks.items()],
    )


# ── Visualization aggregates ──────────────────────────────────────────────────

def _country_share_by_decade(rows: Sequence[JournalEntry]) -> list[DecadeCountryShare]:
    per_decade: dict[int, Counter] = defaultdict(Counter)
    for r in rows:
        if r.year is not None and r.country:
            per_decade[r.year // 10 * 10][r.country] += 1

    result = []
    for decade in sorted(per_decade):
        counts = per_decade[decade]
        total = sum(counts.values())
        result.append(DecadeCountryShare(
            decade=f"{decade}s",
            shares={country: n / total * 100 for country, n in counts.items()},
        ))
    return result


def _unique_authors_by_decade(rows: Sequence[JournalEntry]) -> list[DecadeAuthorCount]:
    authors: dict[int, set[str]] = defaultdict(set)
    for r in rows:
        if r.year is not None and r.author:
            authors[r.year // 10 * 10].add(r.author)
    return [DecadeAuthorCount(decade=f"{d}s", count=len(authors[d])) for d in sorted(authors)]


def _country_contributions(rows: Sequence[JournalEntry]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for r in rows:
        if not r.country_latin:
            continue
        # "USA, New York" and the like all count as USA on the map
        counts["USA" if "USA" in r.country_latin else r.country_latin] += 1
    return dict(counts)


def visualization_data(rows: Sequence[JournalEntry]) -> VisualizationData:
    return VisualizationData(
        country_share_by_decade=_country_share_by_decade(rows),
        unique_authors_by_decade=_unique_authors_by_decade(rows),
        country_contributions=_country_contributions(rows),
        language_distribution=dict(Counter(
            r.language_latin for r in rows if r.language_latin.strip()
        )),
    )
