# tutorhub/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tutorhub import __version__
from tutorhub.api import auth, review, session, users
from tutorhub.config import settings
from tutorhub.database import Base, engine
from tutorhub.errors import StoreError, TutorHubError, ValidationError
from tutorhub.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TutorHubError)
    async def tutorhub_error_handler(request: Request, exc: TutorHubError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(_format_validation_errors(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Store error on %s %s", request.method, request.url.path)
        error = StoreError("Store error, please retry")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Store connected: %s", engine.url.render_as_string(hide_password=True))

    app = FastAPI(title="TutorHub API", version=__version__)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # API routers
    app.include_router(auth.router, prefix=settings.API_PREFIX)      # /register, /login, /me
    app.include_router(users.router, prefix=settings.API_PREFIX)     # /tutors/*
    app.include_router(session.router, prefix=settings.API_PREFIX)   # /sessions/*, /my-sessions
    app.include_router(review.router, prefix=settings.API_PREFIX)    # /reviews

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "message": "TutorHub API is running",
            "version": __version__,
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("tutorhub.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
