"""API v1 router aggregation."""

from fastapi import APIRouter

from jobportal.api.v1.jobs import router as jobs_router
from jobportal.api.v1.applications import router as applications_router
from jobportal.api.v1.saved_jobs import router as saved_jobs_router
from jobportal.api.v1.notifications import router as notifications_router
from jobportal.api.v1.users import router as users_router
from jobportal.api.v1.reference import router as reference_router

router = APIRouter(prefix="/api/v1")

router.include_router(jobs_router)
router.include_router(applications_router)
router.include_router(saved_jobs_router)
router.include_router(notifications_router)
router.include_router(users_router)
router.include_router(reference_router)
