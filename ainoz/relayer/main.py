# ainoz/relayer/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ainoz import __version__
from ainoz.core import config
from ainoz.core.logging_setup import setup_logging
from ainoz.relayer.api.routers.generate import router as generate_router
from ainoz.relayer.api.routers.health import router as health_router
from ainoz.schemas.generate import ErrorResponse

logger = logging.getLogger(__name__)


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON or wrongly typed fields; keep the relayer's {"error": ...} shape instead of FastAPI's 422
    logger.info("rejected body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=ErrorResponse(error="Invalid request body").model_dump())


def create_app() -> FastAPI:
    app = FastAPI(title="AINOZ Relayer", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body)

    # Routers
    app.include_router(health_router)
    app.include_router(generate_router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    setup_logging(config.LOG_LEVEL)
    base = f"http://localhost:{config.PORT}"
    logger.info("AINOZ Relayer running on %s (provider=%s)", base, config.PROVIDER)
    logger.info("endpoints: POST %s/v1/generate, POST %s/v1/generate/stream, GET %s/health", base, base, base)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    run()
