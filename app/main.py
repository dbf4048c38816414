import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.router import api_router
from app.core.config import Settings, settings as default_settings
from app.core.errors import DomainError, ErrorCode, SeatConflictError
from app.db.init_db import create_database, init_db
from app.db.session import build_engine, build_session_factory
from app.schemas.common import ErrorResponse, SeatConflictErrorResponse

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, SeatConflictError):
        body = SeatConflictErrorResponse(
            error=exc.code.value, message=exc.message, unavailable_seats=exc.seats
        )
    else:
        body = ErrorResponse(error=exc.code.value, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    body = ErrorResponse(
        error=ErrorCode.STORAGE_FAILURE.value,
        message="The operation could not be completed, please try again",
    )
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: Ensure DB exists and create tables
        create_database(settings)
        init_db(engine)
        yield
        # Shutdown: release pooled connections
        engine.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Set all CORS enabled origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)

    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def read_root():
        return {"Hello": "Starlight Cinema"}

    return app


app = create_app()
