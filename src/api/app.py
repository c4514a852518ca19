import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.app.repositories.errors import PersistenceFailure

from .error import FLAT_ERROR_CODES, ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {
        "code": exc.base_error.code,
        "message": exc.base_error.message,
        **exc.base_error.details,
    }
    logger.warning(f"Client error: {error_dict['code']} on {request.url.path}")
    content = {"error": error_dict}
    if exc.base_error.code in FLAT_ERROR_CODES:
        content = {
            "message": exc.base_error.message,
            **exc.base_error.details,
            **content,
        }
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
        for err in exc.errors()
    ]
    error_dict = {"code": "VALIDATION_ERROR", "message": "Invalid data", "fields": fields}
    logger.warning(f"Validation error on {request.url.path}: {len(fields)} field(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict}
    )


async def handle_persistence_error(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Persistence error on {request.url.path}")
    error_dict = {"code": "PERSISTENCE_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_persistence_failure(request: Request, exc: PersistenceFailure):
    logger.error(f"Persistence failure on {request.url.path}: {exc.detail}")
    error_dict = {"code": "PERSISTENCE_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({elapsed_ms:.1f} ms)"
    )
    return response


def build_lifespan(ApplicationConfig):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.adapter.database import create_tables
        from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
        from src.app.use_cases.admin import EnsureDefaultAdminUseCase
        from src.depends import AsyncSessionLocal, engine

        if ApplicationConfig.AUTO_CREATE_TABLES:
            await create_tables(engine)

        async with AsyncSessionLocal() as session:
            use_case = EnsureDefaultAdminUseCase(SqlAlchemyUnitOfWork(session))
            await use_case.execute(
                ApplicationConfig.DEFAULT_ADMIN_USERNAME,
                ApplicationConfig.DEFAULT_ADMIN_PASSWORD,
            )

        yield

        await engine.dispose()

    return lifespan


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="CineForum API", version="0.1.0", lifespan=build_lifespan(ApplicationConfig)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import attendance, auth, films, health_check, members, proposals

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(members.router, tags=["Members"])
    app.include_router(films.router, tags=["Films"])
    app.include_router(proposals.router, tags=["Proposals"])
    app.include_router(attendance.router, tags=["Attendance"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_persistence_error)
    app.add_exception_handler(PersistenceFailure, handle_persistence_failure)

    return app
