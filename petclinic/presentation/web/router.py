"""Server-rendered page router — aggregates the HTML controllers."""

from fastapi import APIRouter

from petclinic.presentation.web.owners_controller import router as owners_router
from petclinic.presentation.web.vets_controller import router as vets_router
from petclinic.presentation.web.visits_controller import router as visits_router

router = APIRouter()
router.include_router(owners_router)
router.include_router(visits_router)
router.include_router(vets_router)
