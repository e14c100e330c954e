import os, requests
from urllib.parse import quote
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Accept":"application/json"})

def healthz():    r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def jobs(**p):    r=S.get(f"{API}/jobs",params=p,timeout=120); r.raise_for_status(); return r.json()
def industries(): r=S.get(f"{API}/industries",timeout=120); r.raise_for_status(); return r.json()
def refresh():    r=S.post(f"{API}/jobs/refresh",timeout=300); r.raise_for_status(); return r.json()

def job(job_no: str):
    # keep slashes: the service routes /jobs/{job_no:path}
    r = S.get(f"{API}/jobs/{quote(job_no, safe='/')}", timeout=60)
    r.raise_for_status()
    return r.json()
