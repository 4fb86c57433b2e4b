from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from trivia_api.api.v1 import api_router
from trivia_api.core import config
from trivia_api.core.database import close_db, init_db
from trivia_api.core.exceptions import InvalidRequest, TriviaError

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    await init_db()
    try:
        yield
    finally:
        close_db()
        logger.info("Stop Server")


async def trivia_error_handler(_: Request, exc: TriviaError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(_: Request, exc: RequestValidationError):
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    error = InvalidRequest(f"Missing or malformed fields: {', '.join(fields)}")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def make_app():
    app = FastAPI(title="Trivia Score API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TriviaError, trivia_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/")
    async def root():
        return {"message": "Welcome to the API"}

    app.include_router(
        api_router,
    )

    os.makedirs(config.UPLOAD_DIR, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=config.UPLOAD_DIR), name="uploads")
    return app


app = make_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=True,
        timeout_graceful_shutdown=360,
        proxy_headers=True,
        forwarded_allow_ips="*"
    )
