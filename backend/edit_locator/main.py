import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from edit_locator.api.routes import router
from edit_locator.api.locate_routes import router as locate_router
from edit_locator.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

settings = get_settings()

# Package log level is configurable (DEBUG shows resolver decisions)
logging.getLogger("edit_locator").setLevel(settings.log_level.upper())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Edit Locator API")
    logger.info(f"Search plan: {'llm' if settings.locator_use_llm_plan else 'heuristic'} "
                f"(model={settings.model_search_plan}, base_url={settings.llm_base_url})")
    logger.info(f"Projects path: {settings.projects_base_path}")
    yield


app = FastAPI(
    title="Edit Locator API",
    description="API for resolving natural language edit requests to files and lines of a React project",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routes
app.include_router(router, prefix="/api/v1", tags=["edit-intent"])
app.include_router(locate_router, prefix="/api/v1/locate", tags=["locate"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "search_plan": "llm" if settings.locator_use_llm_plan else "heuristic",
        "models": {
            "search_plan": settings.model_search_plan
        }
    }
