from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI

from app import settings
from app.deps import get_repository
from app.platform_client import CreatorClient
from app.profiles import load_profiles
from app.repositories import JobRepository
from app.routers.jobs import router as jobs_router
from app.routers.detail import router as detail_router
from app.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(settings.LOG_LEVEL) # Init Logging

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    Builds the shared platform client, the read-only category profiles
    and the job repository. Jobs are fetched lazily on the first request.
    """
    app.state.profiles = load_profiles(settings.PROFILES_PATH)
    app.state.client = CreatorClient()
    app.state.repository = JobRepository(app.state.client)

    # Hand control back to FastAPI to serve requests
    yield

    app.state.client.session.close()

# Create the FastAPI app instance
app = FastAPI(title="Job Design Dashboard", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health(repo: JobRepository = Depends(get_repository)):
    """
    Simple health check for monitoring.
    Returns:
      - ok: static True if the app is alive
      - snapshot_loaded: True once the job report has been fetched
      - generation: how many times the job snapshot has been (re)loaded
      - fetched_at: ISO-8601 UTC time of that load, null before the first one
    """
    snap = repo.snapshot()
    return {
        "ok": True,
        "service": "job-dashboard",
        "version": 1,
        "snapshot_loaded": snap is not None,
        "generation": snap.generation if snap else 0,
        "fetched_at": snap.fetched_at.isoformat() if snap else None,
    }

# Register API routers:
app.include_router(jobs_router)
app.include_router(detail_router)
