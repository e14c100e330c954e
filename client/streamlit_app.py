# client/streamlit_app.py
import streamlit as st
import api as API

st.set_page_config(page_title="Job Design Dashboard", layout="wide")
st.title("🧵 Job Design Dashboard")

st.markdown("""
Jobs currently **under design**, read from the platform's `All_Orders_Design` report.

Use the **sidebar Pages** to open:
- **📋 Jobs** — Filter by Job No, client and industry. Pick a job to open its details.
- **🔎 Job Detail** — Job summary plus product and consumption lines. Product columns follow the job's industry (Tensile / Roll Door); other industries show every field that has data.
""")

with st.sidebar:
    st.header("Service")
    st.text_input("API Base URL (from env)", value=API.API, disabled=True)
    if st.button("Health check"):
        try:
            h = API.healthz()
            if h.get("snapshot_loaded"):
                st.success(f"OK, job snapshot #{h['generation']} loaded at {h['fetched_at']}")
            else:
                st.success("OK, jobs not fetched yet")
        except Exception as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `streamlit run client/streamlit_app.py`.")
