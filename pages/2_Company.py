# pages/2_Company.py
import streamlit as st

from esg_impact.charts import timeseries_chart
from esg_impact.errors import DatasetError
from esg_impact.io import get_all_company_summaries, get_companies_timeseries
from esg_impact.logging_setup import configure_logging
from esg_impact.metrics import grade_for, score_badge, share_pct, timeseries_frame
from esg_impact.ui import BADGE_COLORS, fmt_int, fmt_pct, render_banner, render_footer

configure_logging()
st.set_page_config(page_title="Company", layout="wide")
render_banner()
st.title("Company detail")

# ---------- helpers ----------
def get_query_params():
    return {k: (v[0] if isinstance(v, list) else v) for k, v in st.query_params.items()}

def set_query_params(**kwargs):
    st.query_params.update(kwargs)

# ---------- load data ----------
try:
    companies = {c.id: c for c in get_all_company_summaries()}
    series = get_companies_timeseries()
except DatasetError as e:
    st.error(f"Could not load the metrics dataset: {e}")
    st.stop()

cid = get_query_params().get("id")

# ---------- fallback UX if id missing ----------
if not cid or cid not in companies:
    st.info("Pick a company to view its detail page.")
    names = {f"{c.logo} {c.name}".strip(): c.id for c in sorted(companies.values(), key=lambda c: c.name)}
    choice = st.selectbox("Company", list(names))
    if st.button("Open", type="primary") and choice:
        set_query_params(id=names[choice])
        st.rerun()
    st.stop()

company = companies[cid]
perf = company.performance

# ---------- header ----------
st.subheader(f"{company.logo} {company.name}")
grade = grade_for(company.esg_score)
badge = BADGE_COLORS[score_badge(company.esg_score)]
st.markdown(
    f"ESG score <span style='color:{badge}; font-weight:700'>{company.esg_score}</span> · "
    f"<span style='color:{grade.color}; font-weight:600'>{grade.grade}</span> · "
    f"{company.total_participations} participations",
    unsafe_allow_html=True,
)

# ---------- KPI tiles ----------
k1, k2, k3, k4 = st.columns(4)
k1.metric("Participants", fmt_int(perf.participants))
k2.metric("Total collection (kg)", fmt_int(perf.collection_amount))
k3.metric("CO₂ reduction (t)", f"{perf.co2_reduction:.2f}")
k4.metric("Plastic share", fmt_pct(share_pct(perf.waste_breakdown.plastic, perf.collection_amount)))

c1, c2 = st.columns(2)
c1.metric("Plastic", f"{fmt_int(perf.waste_breakdown.plastic)} kg", f"{perf.co2_detail.plastic:.2f} t CO₂", delta_color="off")
c2.metric("Toys", f"{fmt_int(perf.waste_breakdown.toys)} kg", f"{perf.co2_detail.toys:.2f} t CO₂", delta_color="off")

st.divider()

# ---------- trend ----------
st.markdown("### Quarterly trend")
points = series.get(cid)
if points:
    st.plotly_chart(timeseries_chart(timeseries_frame(points)), use_container_width=True)
else:
    st.caption("No time series recorded for this company.")

st.page_link("pages/1_Dashboard.py", label="Back to dashboard", icon="📊")

render_footer()
