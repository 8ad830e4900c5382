from fastapi import APIRouter

from pwadmin.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"ok": True, "service": settings.APP_NAME}
