"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from petclinic.presentation.api.v1.endpoints.health import router as health_router
from petclinic.presentation.api.v1.endpoints.vets import router as vets_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(vets_router)
