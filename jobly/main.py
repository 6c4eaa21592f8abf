# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.config import build_sqlalchemy_db_url, settings
from jobly.database import create_schema
from jobly.db.queries import DatabaseConnectionError, DatabaseQueryError
from jobly.errors import JoblyError
from jobly.middleware.auth import AuthenticateJWTMiddleware
from jobly.routers import auth, companies, health, jobs, users


logger = logging.getLogger(__name__)


def _register_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(JoblyError)
    async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": errors})

    @application.exception_handler(DatabaseConnectionError)
    async def db_connection_error_handler(request: Request, exc: DatabaseConnectionError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})

    @application.exception_handler(DatabaseQueryError)
    async def db_query_error_handler(request: Request, exc: DatabaseQueryError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Avoid accidental schema changes in shared databases; sqlite is created on demand.
        if build_sqlalchemy_db_url(settings).startswith("sqlite"):
            create_schema()
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        AuthenticateJWTMiddleware,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(application)

    application.include_router(health.router)
    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(companies.router, prefix="/companies", tags=["companies"])
    application.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    return application


app = create_app()
