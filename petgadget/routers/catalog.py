from typing import List

from fastapi import APIRouter

from petgadget.models.catalog import ExpertProduct, ProductFeature
from petgadget.services.catalog import EXPERT_PRODUCTS, FEATURES

router = APIRouter(prefix="/catalog")


@router.get("/features", response_model=List[ProductFeature], summary="Landing-page feature tiles")
async def list_features() -> List[ProductFeature]:
    return FEATURES


@router.get("/experts", response_model=List[ExpertProduct], summary="Expert product picks")
async def list_experts() -> List[ExpertProduct]:
    return EXPERT_PRODUCTS
