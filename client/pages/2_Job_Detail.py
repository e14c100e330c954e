# client/pages/2_Job_Detail.py
import streamlit as st
import api as API
from components import divider, show_section, show_summary

st.title("🔎 Job Detail")

if st.button("← Back to jobs", key="btn_back"):
    st.switch_page("pages/1_Jobs.py")

job_no = st.text_input("Job No", value=st.session_state.get("selected_job", ""), key="detail_job_no")

if job_no:
    with st.spinner("Loading product and consumption details..."):
        try:
            res = API.job(job_no)
        except Exception as e:
            st.error(e)
            st.stop()

    show_summary(res["summary"])
    st.caption(f"Industry profile: {res['category'] or 'unknown'} (from “{res['industry_text'] or '-'}”)")
    divider()
    show_section(res["products"], "Product Details")
    divider()
    show_section(res["consumption"], "Consumption Details")
else:
    st.info("Pick a job on the Jobs page or type a Job No.")
