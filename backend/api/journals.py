"""GET /api/decades, /api/decades/{decade}/journals, /api/journals/{journal_id} — issue browsing."""
from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_dataset
from core.catalog import journal_detail, journals_in_decade, list_decades
from core.dataset import DatasetSnapshot
from models.journal import DecadeSummary, JournalDetail, JournalIssue

router = APIRouter()


@router.get("/decades", response_model=list[DecadeSummary])
def get_decades(dataset: DatasetSnapshot = Depends(get_dataset)):
    return list_decades(dataset.rows)


@router.get("/decades/{decade}/journals", response_model=list[JournalIssue])
def get_decade_journals(decade: str, dataset: DatasetSnapshot = Depends(get_dataset)):
    return journals_in_decade(dataset.rows, decade)


@router.get("/journals/{journal_id}", response_model=JournalDetail)
def get_journal(journal_id: str, dataset: DatasetSnapshot = Depends(get_dataset)):
    detail = journal_detail(dataset.rows, journal_id)
    if detail is None:
        raise HTTPException(404, detail=f"Journal '{journal_id}' not found.")
    return detail
