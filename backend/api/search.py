"""GET /api/search — substring search over translators, article names and authors."""
from fastapi import APIRouter, Depends, Query

from api.deps import get_dataset
from core.catalog import search
from core.dataset import DatasetSnapshot
from models.journal import SearchResults

router = APIRouter()


@router.get("/search", response_model=SearchResults)
def search_collection(q: str = Query("", description="Search term"), dataset: DatasetSnapshot = Depends(get_dataset)):
    return search(dataset.rows, q)
