from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from app.deps import get_client, get_profiles, get_repository
from app.platform_client import CreatorClient
from app.profiles import ProfileRegistry
from app.projection import NoData, Projection
from app.repositories import JobRepository, find_job, load_job_detail
from app.routers.jobs import load_snapshot

router = APIRouter(prefix="", tags=["detail"])

# -------------------------------------------------------------------
# Helper serializers
# -------------------------------------------------------------------
def _projection_to_dict(p: Projection) -> Dict[str, Any]:
    """A detail section as either a table or an empty/error state."""
    if isinstance(p, NoData):
        return {"status": "error" if p.error else "no_data", "message": p.message}
    return {
        "status": "ok",
        "columns": [{"field": f.field, "label": f.label} for f in p.fields],
        "rows": p.rows(),
    }


# Job numbers may contain slashes (e.g. "JB/24/001")
@router.get("/jobs/{job_no:path}")
def get_job(
    job_no: str,
    repo: JobRepository = Depends(get_repository),
    client: CreatorClient = Depends(get_client),
    profiles: ProfileRegistry = Depends(get_profiles),
) -> Dict[str, Any]:
    """
    Detail view of one job.

    Response JSON:
      {
        "summary": [{"label": "Job No", "value": "..."}, ...],
        "category": "Tensile" | "Roll Door" | null,
        "industry_text": "...",
        "products":    {"status": "ok", "columns": [...], "rows": [[...], ...]},
        "consumption": {"status": "no_data", "message": "..."}
      }
    """
    record = find_job(load_snapshot(repo).records, job_no)
    if record is None:
        raise HTTPException(404, "Job not found")

    detail = load_job_detail(client, record, profiles)
    return {
        "summary": detail.summary,
        "category": detail.category,
        "industry_text": detail.industry_text,
        "products": _projection_to_dict(detail.products),
        "consumption": _projection_to_dict(detail.consumption),
    }
