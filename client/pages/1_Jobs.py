# client/pages/1_Jobs.py
import streamlit as st
import api as API
from components import show_table

st.title("📋 Jobs")

ALL = "All Industries"

c1, c2, c3, c4 = st.columns([2, 2, 2, 1])
with c1:
    job_no = st.text_input("Job No", placeholder="Search by Job No", key="jobs_job_no")
with c2:
    client = st.text_input("Client", placeholder="Search by client", key="jobs_client")
with c3:
    try:
        options = [ALL] + API.industries()
    except Exception as e:
        st.error(f"Error fetching industries: {e}")
        options = [ALL]
    industry = st.selectbox("Industry", options, key="jobs_industry")
with c4:
    st.write("")
    if st.button("🔄 Refresh", key="btn_refresh"):
        try:
            res = API.refresh()
            st.success(f"Loaded {res['records']} job(s)")
        except Exception as e:
            st.error(e)

params = {}
if job_no.strip(): params["job_no"] = job_no.strip()
if client.strip(): params["client"] = client.strip()
if industry != ALL: params["industry"] = industry

try:
    rows = API.jobs(**params)
except Exception as e:
    st.error(f"Error fetching records: {e}")
    rows = []

if not rows:
    st.caption("No records found")
else:
    show_table(rows, caption=f"{len(rows)} job(s)", hide=("record_id",))

    pick = st.selectbox("Open job", [r["Job_No"] for r in rows if r["Job_No"] != "-"], key="jobs_pick")
    if st.button("🔎 Show details", key="btn_details") and pick:
        st.session_state.selected_job = pick
        st.switch_page("pages/2_Job_Detail.py")
