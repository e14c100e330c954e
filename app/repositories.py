import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from app import settings
from app.industry import classify, industry_text
from app.normalizers import Record, display_value, get_default_normalizer
from app.platform_client import CreatorClient, PlatformError
from app.profiles import CategoryProfile
from app.projection import PLACEHOLDER, NoData, Projection, project

log = logging.getLogger(__name__)

# Columns of the main job table
JOB_ROW_FIELDS = ("Job_No", "Client_Name", "Job_Type", "Industry", "Global_Status")

# (label, field) pairs of the detail header
SUMMARY_FIELDS = (
    ("Job No", "Job_No"),
    ("Client Name", "Client_Name"),
    ("Industry", "Industry"),
    ("Job Type", "Job_Type"),
    ("Delivery Date", "Requested_Delivery_Date"),
    ("Job Stage", "Job_Stage"),
    ("Status", "Global_Status"),
)


@dataclass(frozen=True)
class JobSnapshot:
    """Everything one full fetch of the job report produced."""
    records: Tuple[Record, ...]
    industries: Tuple[str, ...]
    generation: int = 0
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class JobDetail:
    summary: List[Dict[str, str]]
    category: Optional[str]
    industry_text: str
    products: Projection
    consumption: Projection


# -------------------------------------------------------------------
# Job list
# -------------------------------------------------------------------
def collect_industries(records: Iterable[Record]) -> Tuple[str, ...]:
    """Distinct non-empty industries, sorted for the filter dropdown."""
    return tuple(sorted({i for i in (display_value(r.get("Industry")) for r in records) if i}))


def fetch_job_snapshot(
    client: CreatorClient,
    report: str = settings.JOBS_REPORT,
    criteria: str = settings.JOBS_CRITERIA,
    page_size: int = settings.PAGE_SIZE,
    generation: int = 0,
) -> JobSnapshot:
    records = client.get_all_records(report, criteria=criteria, page_size=page_size)
    snap = JobSnapshot(
        records=tuple(records),
        industries=collect_industries(records),
        generation=generation,
    )
    log.info("job snapshot #%d: %d record(s), %d industries",
             generation, len(snap.records), len(snap.industries))
    return snap


class JobRepository:
    """
    Owns the current JobSnapshot. Refreshes are serialized and swap in a
    whole new snapshot, so a reader always sees one complete fetch.
    """
    def __init__(self, client: CreatorClient):
        self.client = client
        self._lock = threading.Lock()
        self._snapshot: Optional[JobSnapshot] = None

    def snapshot(self) -> Optional[JobSnapshot]:
        return self._snapshot

    def refresh(self) -> JobSnapshot:
        with self._lock:
            return self._refresh_locked()

    def get_or_load(self) -> JobSnapshot:
        snap = self._snapshot
        if snap is not None:
            return snap
        with self._lock:
            # another request may have loaded it while we waited
            if self._snapshot is not None:
                return self._snapshot
            return self._refresh_locked()

    def _refresh_locked(self) -> JobSnapshot:
        current = self._snapshot.generation if self._snapshot else 0
        snap = fetch_job_snapshot(self.client, generation=current + 1)
        self._snapshot = snap
        return snap


def job_row(record: Record) -> Dict[str, str]:
    row = {f: display_value(record.get(f)) or PLACEHOLDER for f in JOB_ROW_FIELDS}
    row["record_id"] = display_value(record.get("ID"))
    return row


def filter_jobs(
    records: Iterable[Record],
    job_no: Optional[str] = None,
    client: Optional[str] = None,
    industry: Optional[str] = None,
) -> List[Record]:
    """
    Job No and client are case-insensitive substring matches,
    industry must match exactly. Blank filters match everything.
    """
    job_q = (job_no or "").strip().lower()
    client_q = (client or "").strip().lower()
    industry_q = (industry or "").strip()

    out = []
    for r in records:
        if job_q and job_q not in display_value(r.get("Job_No")).lower():
            continue
        if client_q and client_q not in display_value(r.get("Client_Name")).lower():
            continue
        if industry_q and display_value(r.get("Industry")) != industry_q:
            continue
        out.append(r)
    return out


def find_job(records: Iterable[Record], job_no: str) -> Optional[Record]:
    for r in records:
        if display_value(r.get("Job_No")) == job_no:
            return r
    return None


def job_summary(record: Record) -> List[Dict[str, str]]:
    return [
        {"label": label, "value": display_value(record.get(f)) or PLACEHOLDER}
        for label, f in SUMMARY_FIELDS
    ]


# -------------------------------------------------------------------
# Job detail
# -------------------------------------------------------------------
def _project_section(
    future: Optional[Future],
    category: Optional[str],
    profiles: Mapping[str, CategoryProfile],
    what: str,
) -> Projection:
    if future is None:
        return NoData(f"No {what} found")
    try:
        raw = future.result()
    except PlatformError:
        log.exception("loading %s failed", what)
        return NoData(f"Error loading {what}", error=True)
    if not raw:
        return NoData(f"No {what} found")

    normalizer = get_default_normalizer()
    records = [normalizer.normalize_record(r) for r in raw]
    return project(category, records, profiles, empty_message=f"No {what} available")


def load_job_detail(
    client: CreatorClient,
    parent: Record,
    profiles: Mapping[str, CategoryProfile],
) -> JobDetail:
    """
    Build the detail view of one job: header summary, product lines
    projected by the job's industry category, and consumption lines
    with every field that carries data.
    """
    text = industry_text(parent)
    category = classify(text)
    log.info("job %s: industry %r -> category %s",
             display_value(parent.get("Job_No")), text, category or "unknown")

    record_id = display_value(parent.get("ID"))
    prod_f = cons_f = None
    if not record_id:
        log.warning("job %s has no record ID; skipping related reports",
                    display_value(parent.get("Job_No")))
    else:
        # Both related reports are independent; fetch them side by side.
        with ThreadPoolExecutor(max_workers=2) as pool:
            prod_f = pool.submit(
                client.get_records, settings.PRODUCT_REPORT,
                f"({settings.PRODUCT_LINK_FIELD} == {record_id})", 1, settings.DETAIL_PAGE_SIZE,
            )
            cons_f = pool.submit(
                client.get_records, settings.CONSUMPTION_REPORT,
                f"({settings.CONSUMPTION_LINK_FIELD} == {record_id})", 1, settings.DETAIL_PAGE_SIZE,
            )
    products = _project_section(prod_f, category, profiles, "product details")
    consumption = _project_section(cons_f, None, profiles, "consumption details")

    return JobDetail(
        summary=job_summary(parent),
        category=category,
        industry_text=text,
        products=products,
        consumption=consumption,
    )
