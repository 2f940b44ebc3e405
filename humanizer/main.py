import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables at the very beginning
load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from humanizer.api import humanize, synonyms, system, tools  # noqa: E402
from humanizer.core.dependencies import get_aggregator  # noqa: E402
from humanizer.integrations import http_client, redis_client  # noqa: E402
from humanizer.integrations.gemini import client as gemini_client  # noqa: E402

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    await http_client.initialize()
    redis_client.initialize()
    gemini_client.initialize()
    get_aggregator()
    if os.getenv("TESTING") != "true":
        logger.info("[STARTUP] Human AI Summarizer ready")

    yield

    await http_client.close()
    logger.info("[SHUTDOWN] Shared resources released")


app = FastAPI(title="Human AI Summarizer API", lifespan=lifespan)


# HTTP errors always carry CORS headers so the browser can read the JSON body.
@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(getattr(exc, "headers", None) or {})
    headers.update(CORS_HEADERS)

    logger.info(f"[ERROR HANDLER] {request.method} {request.url.path} → {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"[ERROR HANDLER] {request.method} {request.url.path} → 400: invalid request body")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request format", "errors": jsonable_encoder(exc.errors())},
        headers=CORS_HEADERS,
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(humanize.router)
app.include_router(tools.router)
app.include_router(synonyms.router)
