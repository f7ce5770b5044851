from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from marketplace.config import settings
from marketplace.db.session import Store
from marketplace.dependencies import DB
from marketplace.exceptions import DomainError, NotFoundError
from marketplace.logging import get_logger
from marketplace.middleware import RequestIDMiddleware
from marketplace.routers import hotels, intentions, offers, users
from marketplace.schemas.error import error_body

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Code before yield runs on startup, after yield on shutdown.

    Startup: open the store, apply migrations, seed demo data.
    Shutdown: close database connections gracefully.
    """
    store = Store.from_settings(settings)
    await store.init()
    app.state.store = store
    logger.info("startup_complete")
    yield
    await store.dispose()


app = FastAPI(title="Lodging Marketplace", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)

api = APIRouter(prefix="/api")
api.include_router(users.router)
api.include_router(hotels.router)
api.include_router(intentions.router)
api.include_router(offers.router)
app.include_router(api)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Return 404 with the entity details."""
    return JSONResponse(status_code=404, content=error_body(exc.code, exc.message))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for negotiation rule violations."""
    logger.warning("domain_error", code=exc.code, error=exc.message)
    return JSONResponse(status_code=400, content=error_body(exc.code, exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 for malformed bodies and path parameters."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content=error_body("invalid_request", message))


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log persistence failures and return 500 without leaking SQL."""
    logger.error("storage_failure", error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_body("storage_failure", "Storage failure"),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for failures raised outside RequestIDMiddleware.

    Errors from routes are already turned into a 500 by the middleware, which
    also tags the response with its request id.
    """
    logger.exception("unhandled_exception")
    return JSONResponse(
        status_code=500,
        content=error_body("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check: 200 only if the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}


def run() -> None:
    """Console entry point: serve the app with uvicorn using our logging setup."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
