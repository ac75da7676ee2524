"""LLM Gateway Application.

This is the main entry point for the gateway service, a thin HTTP facade
over the OpenAI API.  Every route makes at most one upstream call and
reshapes the result into an explicit JSON contract.

Modules:
    - chat: chat completion, legacy text completion and model listing
    - embeddings: single/batch embeddings and cosine similarity
    - provider: upstream LLM client (OpenAI)
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gateway.chat.router import router as chat_router
from gateway.config import AppConfig, get_config
from gateway.embeddings.router import router as embeddings_router
from gateway.errors import GatewayError, error_response
from gateway.provider import OpenAIProvider, set_provider

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# httpx/httpcore log every TCP connection; the openai SDK logs each request.
for _noisy in (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
    "openai",
):
    logging.getLogger(_noisy).setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

ROUTES = (
    ("GET ", "/", "Health check"),
    ("POST", "/api/chat", "Chat completion"),
    ("POST", "/api/completion", "Text completion"),
    ("GET ", "/api/models", "List OpenAI models"),
    ("POST", "/api/embedding", "Single text embedding"),
    ("POST", "/api/embeddings/batch", "Batch text embeddings"),
    ("POST", "/api/embeddings/similarity", "Compare embedding similarity"),
)


def configure_logging(config: AppConfig) -> None:
    """Apply the configured log level to the root logger."""
    level = getattr(logging, config.logging.level.upper(), None)
    if level is not None:
        logging.getLogger().setLevel(level)
        logger.info("Root logger level set to %s", config.logging.level.upper())
    else:
        logger.warning("Unknown log level %r, keeping INFO", config.logging.level)


def build_provider(config: AppConfig) -> OpenAIProvider:
    """Create the process-wide OpenAI provider from config."""
    openai_cfg = config.secrets.openai
    return OpenAIProvider(
        api_key=openai_cfg.api_key,
        base_url=openai_cfg.base_url,
        organization=openai_cfg.organization,
        timeout=config.provider.timeout_seconds,
        log_payloads=config.logging.log_payloads,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    config = get_config()
    configure_logging(config)

    if not config.has_api_key:
        logger.warning("OPENAI_API_KEY not found in environment variables")
        logger.warning("Please add your OpenAI API key to the .env file")

    set_provider(build_provider(config))

    logger.info(
        "Server running on http://%s:%s", config.server.host, config.server.port
    )
    logger.info("Available routes:")
    for method, path, description in ROUTES:
        logger.info("   %s %-28s - %s", method, path, description)

    yield  # Application runs here

    # Shutdown
    set_provider(None)
    logger.info("Application shutdown complete")


# Create FastAPI application with metadata
app = FastAPI(
    title="LLM Gateway",
    description="HTTP facade for OpenAI chat, completion and embedding APIs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().server.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(chat_router)
app.include_router(embeddings_router)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Return ``{error}`` with the error's status code."""
    logger.info("[%s %s] rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def schema_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report a request body that does not match the route's schema as 400."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.info("[%s %s] invalid body: %s", request.method, request.url.path, errors)
    return error_response("Invalid request body", 400, details=errors)


@app.get("/")
async def status() -> dict:
    """Health check endpoint.

    Returns:
        dict: Status message and the current UTC time in ISO-8601.
    """
    return {
        "message": "LLM Gateway is running!",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "gateway.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
    )


if __name__ == "__main__":
    run()
