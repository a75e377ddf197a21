from fastapi import APIRouter

from hr_admin.api.v1 import admins, applicants, auth, health, reports

api_v1_router = APIRouter()
api_v1_router.include_router(health.router)
api_v1_router.include_router(auth.router)
api_v1_router.include_router(admins.router)
# Fixed /applicants/... paths must be matched before /applicants/{applicant_id}
api_v1_router.include_router(reports.router)
api_v1_router.include_router(applicants.router)
