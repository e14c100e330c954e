import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.deps import get_repository
from app.platform_client import PlatformError
from app.repositories import JobRepository, JobSnapshot, filter_jobs, job_row

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["jobs"])


def load_snapshot(repo: JobRepository) -> JobSnapshot:
    """Current snapshot, fetching it on first use."""
    try:
        return repo.get_or_load()
    except PlatformError as e:
        raise HTTPException(502, f"Error fetching records: {e}")


# -------------------------------------------------------------------
# List endpoints
# -------------------------------------------------------------------
@router.get("/jobs")
def list_jobs(
    job_no: Optional[str] = Query(None, description="Job No contains, case-insensitive"),
    client: Optional[str] = Query(None, description="Client name contains, case-insensitive"),
    industry: Optional[str] = Query(None, description="Exact industry match"),
    limit: int = Query(500, ge=1, le=5000),
    offset: int = Query(0, ge=0),
    repo: JobRepository = Depends(get_repository),
) -> List[Dict[str, str]]:
    """
    List jobs from the cached snapshot with optional filters:
      - job_no substring
      - client name substring
      - industry (exact, as offered by /industries)
    """
    snap = load_snapshot(repo)
    rows = filter_jobs(snap.records, job_no=job_no, client=client, industry=industry)
    log.debug("jobs filter job_no=%r client=%r industry=%r -> %d", job_no, client, industry, len(rows))
    return [job_row(r) for r in rows[offset:offset + limit]]


@router.get("/industries")
def list_industries(repo: JobRepository = Depends(get_repository)) -> List[str]:
    """Sorted distinct industries of the cached jobs."""
    return list(load_snapshot(repo).industries)


@router.post("/jobs/refresh")
def refresh_jobs(repo: JobRepository = Depends(get_repository)) -> Dict[str, Any]:
    """
    Re-fetch every page of the job report and replace the snapshot.

    Response JSON:
      {"ok": True, "records": <count>, "industries": <count>, "generation": <n>}
    """
    try:
        snap = repo.refresh()
    except PlatformError as e:
        raise HTTPException(502, f"Error fetching records: {e}")
    return {
        "ok": True,
        "records": len(snap.records),
        "industries": len(snap.industries),
        "generation": snap.generation,
    }
