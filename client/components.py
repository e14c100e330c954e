# client/components.py
import streamlit as st
import pandas as pd

def show_table(rows, caption: str | None = None, hide: tuple = ()):
    """Render a list[dict] as a dataframe; otherwise show JSON."""
    if caption:
        st.caption(caption)
    if isinstance(rows, list):
        if rows and isinstance(rows[0], dict):
            df = pd.DataFrame(rows)
            st.dataframe(df.drop(columns=[c for c in hide if c in df.columns]),
                         hide_index=True, use_container_width=True)
        else:
            st.write(rows)
    else:
        st.write(rows)

def show_section(section: dict, title: str):
    """A detail section from /jobs/{job_no}: table, empty state or error."""
    st.subheader(title)
    status = section.get("status")
    if status == "ok":
        labels = [c["label"] for c in section["columns"]]
        st.dataframe(pd.DataFrame(section["rows"], columns=labels),
                     hide_index=True, use_container_width=True)
    elif status == "error":
        st.error(section.get("message") or "Error loading details")
    else:
        st.caption(section.get("message") or "No data available")

def show_summary(items: list[dict], per_row: int = 4):
    for i in range(0, len(items), per_row):
        cols = st.columns(per_row)
        for col, item in zip(cols, items[i:i + per_row]):
            col.metric(label=item["label"], value=item["value"])

def divider(label: str = ""):
    st.markdown(f"---\n**{label}**" if label else "---")
