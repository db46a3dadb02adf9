"""
Analytic handlers for the chat assistant.

Each handler is a pure function of the dataset rows plus whatever parameters
were parsed from the query. It returns an Answer: reply text and, for most
intents, a chart description for the frontend widget.
"""
import re
from collections import Counter
from typing import Optional, Sequence

from models.chart import PALETTE, ChartOptions, ChartSeries, ChartSpec
from models.chat import Answer
from models.journal import JournalEntry


NO_VALUE = "-"

DECADES: dict[str, tuple[int, int]] = {
    f"{start}s": (start, start + 10) for start in range(1920, 2010, 10)
}

_PERIOD_PATTERN = re.compile(r"\b(1[89]\d0s?|20\d0s?|\d{4})\b", re.ASCII)


# ── Query parameter parsing ───────────────────────────────────────────────────

def detect_decade(query: str) -> Optional[str]:
    """First decade in DECADES mentioned as '1960s' or '1960'."""
    for decade in DECADES:
        if decade in query or decade[:-1] in query:
            return decade
    return None


def extract_period(query: str) -> Optional[str]:
    """A decade token ('1960s') or a four-digit year, or None."""
    match = _PERIOD_PATTERN.search(query)
    return match.group(0) if match else None


def extract_keywords(query: str) -> list[str]:
    return [word for word in query.lower().split() if len(word) > 3]


# ── Chart builders ────────────────────────────────────────────────────────────

def _pie_chart(title: str, ranked: list[tuple[str, int]]) -> ChartSpec:
    return ChartSpec(
        type="pie",
        title=title,
        labels=[name for name, _ in ranked],
        series=[ChartSeries(values=[n for _, n in ranked], colors=PALETTE[:len(ranked)])],
        options=ChartOptions(show_axes=False, legend_position="right"),
    )


def _bar_chart(title: str, label: str, ranked: list[tuple[str, int]], color: str, horizontal: bool = False) -> ChartSpec:
    return ChartSpec(
        type="bar",
        title=title,
        labels=[name for name, _ in ranked],
        series=[ChartSeries(label=label, values=[n for _, n in ranked], colors=[color])],
        options=ChartOptions(orientation="horizontal" if horizontal else "vertical"),
    )


# ── Handlers ──────────────────────────────────────────────────────────────────

def popular_languages(rows: Sequence[JournalEntry], query: str) -> Answer:
    """Top 5 source languages, optionally restricted to a decade named in the query."""
    decade = detect_decade(query)
    if decade:
        start, end = DECADES[decade]
        rows = [r for r in rows if r.year is not None and start <= r.year < end]

    top = Counter(r.language_name for r in rows if r.language_name).most_common(5)
    if not top:
        return Answer(text="No language data found for the specified period.")

    period = f" in the {decade}" if decade else ""
    listing = ", ".join(f"{language} ({n} publications)" for language, n in top)
    return Answer(
        text=f"Most popular languages{period}: {listing}",
        chart=_pie_chart(f"Most Popular Languages{period}", top),
    )


def authors_from_country(rows: Sequence[JournalEntry], country: str) -> Answer:
    # dict keys keep first-encounter order and collapse duplicates
    authors = dict.fromkeys(
        r.author for r in rows
        if r.author and (r.country == country or r.country_latin == country)
    )
    if not authors:
        return Answer(text=f"I couldn't find any authors from {country} in the collection.")
    return Answer(text=f"Authors from {country} in the collection:\n\n" + "\n".join(authors))


def count_journals_by_period(rows: Sequence[JournalEntry], period: str) -> Answer:
    """
    Decade tokens ('1960s') count articles and chart every year of the decade,
    zero years included. Bare years count distinct journal issues.
    """
    if period.endswith("s"):
        start = int(period[:4])
        matched = [r for r in rows if r.year is not None and start <= r.year < start + 10]
        per_year = {year: 0 for year in range(start, start + 10)}
        for r in matched:
            per_year[r.year] += 1

        chart = _bar_chart(
            f"Publications in the {period}",
            "Publications",
            [(str(year), n) for year, n in per_year.items()],
            "rgba(75, 192, 192, 0.7)",
        )
        return Answer(text=f"There were {len(matched)} articles published in {period}.", chart=chart)

    issues = {r.journal_id for r in rows if r.journal_year == period and r.journal_id}
    return Answer(text=f"There were {len(issues)} unique journal issues published in year {period}.")


def translator_activity(rows: Sequence[JournalEntry]) -> Answer:
    top = Counter(
        r.translator for r in rows if r.translator and r.translator != NO_VALUE
    ).most_common(10)
    if not top:
        return Answer(text="I couldn't find any translator data in the collection.")

    # Summary text covers the same top 10 as the chart.
    listing = "\n".join(f"{name} ({n} translations)" for name, n in top)
    return Answer(
        text=f"The most active translators in the collection were:\n\n{listing}",
        chart=_bar_chart("Most Active Translators", "Number of Translations", top,
                         "rgba(54, 162, 235, 0.7)", horizontal=True),
    )


def most_prolific_author(rows: Sequence[JournalEntry]) -> Answer:
    top = Counter(r.author for r in rows if r.author).most_common(5)
    if not top:
        return Answer(text="I couldn't determine the most prolific author from the data.")

    author, count = top[0]
    works = [
        f'"{r.article_name or "Untitled"}" ({r.journal_year or "Unknown year"})'
        for r in rows if r.author == author
    ]
    return Answer(
        text=f"The most prolific author in the collection is {author} with {count} publications:\n\n"
             + "\n".join(works),
        chart=_bar_chart("Most Prolific Authors", "Number of Publications", top, "rgba(255, 99, 132, 0.7)"),
    )


def countries_represented(rows: Sequence[JournalEntry]) -> Answer:
    ranked = Counter(r.country for r in rows if r.country and r.country != NO_VALUE).most_common()
    if not ranked:
        return Answer(text="I couldn't find any country data in the collection.")

    listing = "\n".join(f"{country} ({n} articles)" for country, n in ranked)
    return Answer(
        text=f"Countries represented in the collection:\n\n{listing}",
        chart=_pie_chart("Top 10 Countries Represented", ranked[:10]),
    )


def search_articles(rows: Sequence[JournalEntry], query: str) -> Answer:
    keywords = extract_keywords(query)
    matches = [
        r for r in rows
        if r.article_name and any(k in r.article_name.lower() for k in keywords)
    ]
    if not matches:
        return Answer(text="I couldn't find any articles matching your query in the collection.")

    listing = "\n".join(
        f'"{r.article_name}" by {r.author or "Unknown"} ({r.journal_year or "Unknown year"})'
        for r in matches[:10]
    )
    return Answer(text=f"Found {len(matches)} articles that might match your query:\n\n{listing}")


def most_active_decade(rows: Sequence[JournalEntry]) -> Answer:
    """
    Headline names the busiest decade, then every decade by descending count.
    The line chart runs over the same decades in chronological order.
    """
    counts: Counter[int] = Counter()
    for r in rows:
        year = r.year
        if year is not None:
            counts[year // 10 * 10] += 1
    if not counts:
        return Answer(text="I couldn't find any publication years in the collection.")

    chronological = sorted(counts.items())
    top_decade, max_count = 0, 0
    for decade, n in chronological:
        if n > max_count:
            top_decade, max_count = decade, n

    by_activity = sorted(chronological, key=lambda kv: kv[1], reverse=True)
    listing = "\n".join(f"{decade}s: {n} articles" for decade, n in by_activity)
    chart = ChartSpec(
        type="line",
        title="Publication Activity Over Time",
        labels=[f"{decade}s" for decade, _ in chronological],
        series=[ChartSeries(
            label="Number of Publications",
            values=[n for _, n in chronological],
            colors=["rgba(75, 192, 192, 1)"],
        )],
        options=ChartOptions(x_axis_title="Decade", y_axis_title="Number of Publications"),
    )
    return Answer(
        text=f"The most active decade for publications was the {top_decade}s with {max_count} articles.\n\n"
             f"Publication activity by decade:\n{listing}",
        chart=chart,
    )
