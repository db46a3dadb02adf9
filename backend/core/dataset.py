"""
Dataset loader — fetches the archive CSV and parses it into JournalEntry rows.
The source is either an http(s) URL or a local file path. The result is an
immutable snapshot that is loaded once at startup and handed to every query.
"""
import io
import logging
import warnings
from pathlib import Path
from typing import Optional

import httpx
import pandas as pd
from pydantic import BaseModel, ConfigDict

from config import settings
from models.journal import JournalEntry

logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """Raised when the dataset cannot be fetched or parsed."""


class DatasetSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    rows: tuple[JournalEntry, ...] = ()
    loaded: bool = False
    error: Optional[str] = None


def fetch_csv_text(source: str, timeout: float) -> str:
    """Return the raw CSV text from a URL or a file path."""
    if source.startswith(("http://", "https://")):
        try:
            resp = httpx.get(source, timeout=timeout, follow_redirects=True)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise DatasetLoadError(f"Failed to fetch dataset from {source}: {e}") from e
        return resp.text

    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise DatasetLoadError(f"Failed to read dataset file {source}: {e}") from e


def parse_csv(text: str) -> tuple[JournalEntry, ...]:
    """
    Parse header-driven CSV text. Every value is kept as text, blank lines are
    skipped, unknown columns are dropped and missing ones default to "".
    Fields past the header width (trailing commas, stray extra cells) are
    dropped row by row; the first column is never taken as an index.
    """
    if not text.strip():
        return ()
    try:
        width = len(pd.read_csv(io.StringIO(text), nrows=0).columns)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            df = pd.read_csv(
                io.StringIO(text),
                engine="python",
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
                on_bad_lines=lambda fields: fields[:width],
            )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetLoadError(f"Could not parse dataset CSV: {e}") from e

    # Short rows come back as NaN even with keep_default_na=False
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    known = [c for c in df.columns if c in JournalEntry.model_fields]
    records = df[known].to_dict("records")
    return tuple(JournalEntry(**r) for r in records)


def load_dataset(source: Optional[str] = None, timeout: Optional[float] = None) -> DatasetSnapshot:
    """Fetch and parse the dataset. Failures are recorded on the snapshot, never raised."""
    source = source or settings.DATASET_SOURCE
    timeout = timeout or settings.DATASET_TIMEOUT_SECONDS
    try:
        rows = parse_csv(fetch_csv_text(source, timeout))
    except DatasetLoadError as e:
        logger.error("Error loading dataset: %s", e)
        return DatasetSnapshot(source=source, error=str(e))

    logger.info("Loaded %d journal rows from %s", len(rows), source)
    return DatasetSnapshot(source=source, rows=rows, loaded=True)
