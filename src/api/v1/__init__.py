"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.profile import router as profile_router
from api.v1.routes.scan import router as scan_router

router = APIRouter()
router.include_router(profile_router)
router.include_router(scan_router)
