from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ba.api.v1.router import router as v1_router
from ba.core.config import settings
from ba.core.exceptions import (
    AccessControlException,
    ConflictException,
    InvalidStateError,
    NotFoundException,
    PermissionException,
)
from ba.core.logging import configure_logging

configure_logging()

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_BY_EXCEPTION: dict[type[AccessControlException], int] = {
    PermissionException: 403,
    NotFoundException: 404,
    ConflictException: 409,
    InvalidStateError: 409,
}


async def access_control_exception_handler(
    request: Request, exc: AccessControlException
) -> JSONResponse:
    """Render a service-layer exception with the status its class maps to."""
    status_code = next(
        (code for cls, code in _STATUS_BY_EXCEPTION.items() if isinstance(exc, cls)),
        400,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


app.exception_handler(AccessControlException)(access_control_exception_handler)

app.include_router(v1_router, prefix="/api/v1")
