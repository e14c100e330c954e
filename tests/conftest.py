# tests/conftest.py
import re
import pytest
from fastapi.testclient import TestClient

from app import settings
from app.main import app
from app.deps import get_client, get_profiles, get_repository
from app.platform_client import CreatorClient
from app.profiles import load_profiles
from app.repositories import JobRepository


# --- Sample platform data ---
SAMPLE_JOBS = [
    {
        "ID": "1001",
        "Job_No": "JB-001",
        "Client_Name": {"display_value": "Acme Tents", "ID": "55"},
        "Job_Type": "Fabrication",
        "Industry": {"display_value": "Tensile Fabric Orders", "ID": "9"},
        "Global_Status": "Open",
        "Requested_Delivery_Date": "12-Nov-2026",
        "Job_Stage": "Design",
    },
    {
        "ID": "1002",
        "Job_No": "JB-002",
        "Client_Name": "Harbor Logistics",
        "Job_Type": "Roll-up Door Systems",
        "Industry": "",
        "Global_Status": "Open",
    },
    {
        "ID": "1003",
        "Job_No": "SG-003",
        "Client_Name": "Bright Signs",
        "Job_Type": "Print",
        "Industry": "Signage",
        "Global_Status": "On Hold",
    },
]

PRODUCTS = {
    "1001": [
        {
            "ID": "1",
            "Product_Name": {"display_value": "Awning", "ID": "77"},
            "RM": "",
            "W_m": 0,
            "L_m": 4.5,
            "Fabric_Color": [{"display_value": "White"}, {"display_value": "Grey"}],
            "Remarks2": "N/A",
            "Color_Code": "RED",
            "Product_Details": {"Color_Code": "BLUE", "GSM": 650},
            "Added_User": "designer@acme",
        },
        {
            "ID": "2",
            "Product_Name": {"display_value": "Canopy"},
            "RM": {"display_value": "FAB-100"},
            "W_m": 3,
            "L_m": None,
        },
    ],
    "1003": [
        {"ID": "9", "Sign_Type": "LED", "Width": 2},
    ],
}

CONSUMPTION = {
    "1001": [
        {"ID": "c1", "Material": {"display_value": "PVC 650"}, "Qty": 12, "Unit": "m"},
        {"ID": "c2", "Material": "Thread", "Qty": 0, "Wastage": ""},
    ],
}


def _by_parent(table):
    """Report rows filtered by the parent ID in '(Link_Field == <id>)'."""
    def rows(criteria):
        m = re.search(r"==\s*(\w+)\)", criteria or "")
        return table.get(m.group(1), []) if m else []
    return rows


# --- Fake HTTP layer under the real CreatorClient ---
class FakeResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self.body, Exception):
            raise self.body
        return self.body


class FakeSession:
    """
    Serves report pages from in-memory lists, honouring `from`/`limit`.
    `failures` maps report name -> number of calls that should fail first
    (-1 = fail forever).
    """
    def __init__(self, reports=None, failures=None):
        self.reports = reports or {}
        self.failures = dict(failures or {})
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        params = dict(params or {})
        report = url.rsplit("/", 1)[-1]
        self.calls.append((report, params))

        left = self.failures.get(report, 0)
        if left:
            self.failures[report] = left - 1 if left > 0 else left
            return FakeResponse({"code": 2945, "message": "Internal error"}, 500)

        data = self.reports.get(report, [])
        if callable(data):
            data = data(params.get("criteria"))
        start = params.get("from", 1) - 1
        page = data[start:start + params.get("limit", 200)]
        if not page:
            return FakeResponse({"code": 9280, "message": "No records found"})
        return FakeResponse({"code": 3000, "data": page})

    def close(self):
        pass


@pytest.fixture
def make_platform():
    """Factory: CreatorClient over a FakeSession, no real sleeping."""
    def _make(reports=None, failures=None, retries=2):
        session = FakeSession(reports, failures)
        return CreatorClient(
            base_url="https://platform.test/api/v2",
            owner="acme",
            app_name="zoma",
            retries=retries,
            retry_delay=0,
            session=session,
            sleep=lambda s: None,
        )
    return _make


@pytest.fixture
def sample_reports():
    return {
        settings.JOBS_REPORT: SAMPLE_JOBS,
        settings.PRODUCT_REPORT: _by_parent(PRODUCTS),
        settings.CONSUMPTION_REPORT: _by_parent(CONSUMPTION),
    }


@pytest.fixture
def platform(make_platform, sample_reports):
    return make_platform(sample_reports)


@pytest.fixture
def repository(platform):
    return JobRepository(platform)


# --- Override FastAPI's dependencies with the fakes ---
@pytest.fixture(autouse=True)
def override_deps(platform, repository):
    profiles = load_profiles()
    app.dependency_overrides[get_client] = lambda: platform
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_profiles] = lambda: profiles
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
