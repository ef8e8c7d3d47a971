from fastapi import APIRouter

from ba.api.v1.auth import router as auth_router
from ba.api.v1.containers import boards_router, spaces_router
from ba.api.v1.health import router as health_router
from ba.api.v1.users import router as users_router

router = APIRouter()

# Public
router.include_router(health_router)
router.include_router(auth_router)

# Protected (auth enforced per-endpoint)
router.include_router(users_router)
router.include_router(boards_router)
router.include_router(spaces_router)
