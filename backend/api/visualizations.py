"""GET /api/visualizations — aggregates for the decade/country/author/language charts."""
from fastapi import APIRouter, Depends

from api.deps import get_dataset
from core.catalog import visualization_data
from core.dataset import DatasetSnapshot
from models.visualization import VisualizationData

router = APIRouter()


@router.get("/visualizations", response_model=VisualizationData)
def get_visualizations(dataset: DatasetSnapshot = Depends(get_dataset)):
    return visualization_data(dataset.rows)
