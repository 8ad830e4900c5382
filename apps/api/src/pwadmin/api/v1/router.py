from fastapi import APIRouter

from pwadmin.api.v1.health import router as health_router
from pwadmin.api.v1.organization_members import router as organization_members_router
from pwadmin.api.v1.schema import router as schema_router
from pwadmin.api.v1.users import router as users_router

router = APIRouter()

router.include_router(health_router)
router.include_router(schema_router)
router.include_router(organization_members_router)
router.include_router(users_router)
