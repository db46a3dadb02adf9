import os
import sys

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Serve the fixture CSV instead of the remote dataset
SAMPLE_CSV = os.path.join(os.path.dirname(__file__), "data", "journals.csv")
os.environ["DATASET_SOURCE"] = SAMPLE_CSV

import pytest
from fastapi.testclient import TestClient

from main import app
from models.journal import JournalEntry


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_rows():
    """Build JournalEntry rows from keyword dicts."""
    def _make(*specs: dict) -> tuple[JournalEntry, ...]:
        return tuple(JournalEntry(**spec) for spec in specs)
    return _make
