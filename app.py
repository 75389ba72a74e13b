# app.py
import streamlit as st

from esg_impact.config import SETTINGS
from esg_impact.logging_setup import configure_logging

configure_logging()
st.set_page_config(page_title=SETTINGS.report_title, layout="wide")

if __name__ == "__main__":
    try:
        st.switch_page("pages/1_Dashboard.py")
    except Exception:
        st.title(SETTINGS.report_title)
        st.page_link("pages/1_Dashboard.py", label="Dashboard", icon="📊")
