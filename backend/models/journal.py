"""Pydantic schemas for journal rows and catalog views."""
import re
from typing import Optional
from pydantic import BaseModel, ConfigDict

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_year(value: Optional[str]) -> Optional[int]:
    """Leading-integer parse: '1961' and '1961a' -> 1961, '' or 'n/a' -> None."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class JournalEntry(BaseModel):
    """One CSV row: a single article in a single journal issue."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    journal_id: str = ""
    journal_name: str = ""
    journal_year: str = ""
    journal_number: str = ""
    article_name: str = ""
    author: str = ""
    translator: str = ""            # "-" means no translator
    language_name: str = ""
    language_latin: str = ""
    country: str = ""
    country_latin: str = ""

    @property
    def year(self) -> Optional[int]:
        return parse_year(self.journal_year)


class JournalIssue(BaseModel):
    journal_id: str
    journal_name: str
    journal_year: str
    journal_number: str


class DecadeSummary(BaseModel):
    decade: str                     # "1960s"
    issue_count: int


class JournalDetail(BaseModel):
    issue: JournalIssue
    articles: list[JournalEntry]


class SearchBlock(BaseModel):
    field: str                      # Translator | Article Name | Author
    results: list[JournalEntry]


class SearchResults(BaseModel):
    query: str
    blocks: list[SearchBlock] = []
