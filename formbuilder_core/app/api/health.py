from typing import Any

from fastapi import APIRouter

from formbuilder_core.app import schemas

router = APIRouter()


@router.get("/health", response_model=schemas.HealthResponse)
def get_health() -> Any:
    return schemas.HealthResponse()
