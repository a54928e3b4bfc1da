from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

from direcional.config.settings import settings
from direcional.core.exceptions import DirecionalError
from direcional.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

def setup_logging():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # CORS (painel React)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

def setup_exception_handlers(app: FastAPI):
    """Falhas de negócio viram ErrorResponse com código e mensagem"""

    @app.exception_handler(DirecionalError)
    async def handle_domain_error(request: Request, exc: DirecionalError):
        body = ErrorResponse(
            message=exc.message,
            error_code=exc.error_code,
            details=exc.details
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(mode="json")
        )
