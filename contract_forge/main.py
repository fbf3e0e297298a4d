from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.errors import register_error_handlers
from .routers import compilation, contracts, generation

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    base_url = f"http://localhost:{settings.PORT}"
    logger.info(f"🚀 Backend server running on port {settings.PORT}")
    logger.info(f"📡 Health check: {base_url}/health")
    logger.info(f"🤖 AI Contract Generation: POST {base_url}/api/generate-contract")
    logger.info(f"🔨 Contract Compilation: POST {base_url}/api/compile-contract")

    if not settings.OPENAI_API_KEY:
        logger.warning("⚠️  OPENAI_API_KEY not set. AI features will not work.")

    yield

    logger.info("Shutting down contract forge backend...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="AI-assisted Solidity contract generation and Hardhat compilation",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(generation.router, prefix="/api", tags=["generation"])
app.include_router(compilation.router, prefix="/api", tags=["compilation"])
app.include_router(contracts.router, prefix="/api", tags=["contracts"])


@app.get("/health")
def health_check():
    """Health check endpoint; reports OK regardless of configuration."""
    return {"status": "OK", "message": "Contract Forge Backend is running"}
