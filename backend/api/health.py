"""GET /api/health — dataset availability check."""
import logging
from fastapi import APIRouter, Depends

from api.deps import get_dataset
from core.dataset import DatasetSnapshot

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check(dataset: DatasetSnapshot = Depends(get_dataset)):
    dataset_status = _dataset_status(dataset)
    return {
        "status": "ok" if dataset.loaded else "degraded",
        "dataset": dataset_status,
    }


def _dataset_status(dataset: DatasetSnapshot) -> dict:
    return {
        "loaded": dataset.loaded,
        "rows": len(dataset.rows),
        "source": dataset.source,
        "error": dataset.error,
    }
