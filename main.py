# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Member Search Service
=====================
Read-only search over members and the teams they belong to: sparse filters
(username, team name, age range), offset/limit paging, and page totals that
skip the COUNT query whenever the first page already holds every match.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.controllers import member_controller, system_controller
from app.core.config import settings
from app.core.dependencies import get_member_repo
from app.core.exceptions import InvalidPageRequest, QueryExecutionFailure
from app.core.logging import get_logger
from app.middleware import MetricsMiddleware, RequestIDMiddleware
from app.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    try:
        get_member_repo().verify_connection()
        logger.info("Database reachable")
    except Exception:
        logger.warning("Could not reach database — DB may not be ready yet")
    yield
    get_member_repo().dispose()
    logger.info("Shutting down — connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Member Search Service",
    description="Filtered, paginated search over members and their teams.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid page request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {"model": ErrorResponse, "description": "Query execution failure"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(InvalidPageRequest)
async def invalid_page_handler(request: Request, exc: InvalidPageRequest):
    return JSONResponse(status_code=400, content={"error": "invalid_page_request", "detail": str(exc)})


@app.exception_handler(QueryExecutionFailure)
async def query_failure_handler(request: Request, exc: QueryExecutionFailure):
    return JSONResponse(status_code=503, content={"error": "query_execution_failure", "detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(member_controller.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.SERVICE_PORT)
