# pages/1_Dashboard.py
import streamlit as st

from esg_impact.charts import composition_chart, timeseries_chart, waste_type_chart
from esg_impact.config import SETTINGS
from esg_impact.errors import DatasetError, InsufficientDataError
from esg_impact.io import get_all_company_summaries, get_companies_timeseries
from esg_impact.logging_setup import configure_logging
from esg_impact.metrics import (
    SORT_OPTIONS,
    comparison_frame,
    compute_average_score,
    compute_totals,
    equivalences,
    grade_for,
    rank_companies,
    ranking_table,
    share_pct,
    timeseries_by_company,
    timeseries_frame,
    waste_type_frame,
)
from esg_impact.ui import (
    BADGE_COLORS,
    fmt_int,
    fmt_pct,
    render_banner,
    render_export_buttons,
    render_footer,
    render_grade_card,
    render_industry_filter,
)

configure_logging()
st.set_page_config(page_title="ESG Dashboard", layout="wide")
render_banner()

# ---- Header + export placeholders
head, actions = st.columns([0.6, 0.4])
with head:
    st.title("📊 ESG Impact Dashboard")
    st.caption("ESG performance across all participating companies, broken down by waste type.")
with actions:
    render_export_buttons("top")

render_industry_filter()

# ---- Load data
@st.cache_data(show_spinner=False)
def get_companies():
    return get_all_company_summaries()

@st.cache_data(show_spinner=False)
def get_timeseries():
    return dict(get_companies_timeseries())

try:
    companies = get_companies()
    series = get_timeseries()
except DatasetError as e:
    st.error(f"Could not load the metrics dataset: {e}")
    st.stop()

try:
    avg_score = compute_average_score(companies)
except InsufficientDataError:
    st.info("No company data yet. Add companies to the dataset to see the dashboard.")
    st.stop()

totals = compute_totals(companies)
grade = grade_for(avg_score)

# ---- Tier 3: combined ESG impact score
st.header("🎯 ESG impact score")
render_grade_card(avg_score, grade)

k1, k2, k3, k4 = st.columns(4)
k1.metric("Companies", f"{len(companies)}")
k2.metric("Total participants", fmt_int(totals.participants))
k3.metric("Total collection (kg)", fmt_int(totals.collection))
k4.metric("Total CO₂ reduction (t)", f"{totals.co2:.1f}")

st.divider()

# ---- Waste type breakdown
st.header("🗑️ Performance by waste type")
plastic, toys = st.columns(2)

with plastic.container(border=True):
    st.subheader("🧶 Plastic fibre upcycling")
    st.caption("Vests, gloves, eco bags and more")
    st.metric("Total collection", f"{fmt_int(totals.plastic_total)} kg")
    st.write(f"Share of collection: **{fmt_pct(share_pct(totals.plastic_total, totals.collection))}**")
    st.metric("CO₂ reduction", f"{totals.plastic_co2:.2f} tonnes")
    st.write(f"Share of CO₂: **{fmt_pct(share_pct(totals.plastic_co2, totals.co2))}**")
    st.caption("✓ UF coefficient 2.5 applied · ✓ PET bottles, HDPE containers")

with toys.container(border=True):
    st.subheader("🧸 Toy reuse and recycling")
    st.caption("Reuse, upcycling, recycling")
    st.metric("Total collection", f"{fmt_int(totals.toys_total)} kg")
    st.write(f"Share of collection: **{fmt_pct(share_pct(totals.toys_total, totals.collection))}**")
    st.metric("CO₂ reduction", f"{totals.toys_co2:.2f} tonnes")
    st.write(f"Share of CO₂: **{fmt_pct(share_pct(totals.toys_co2, totals.co2))}**")
    st.caption("✓ Reuse (RBF 3.0) · ✓ Upcycling (UF 2.5) · ✓ Recycling (base 1.0)")

st.plotly_chart(waste_type_chart(waste_type_frame(totals)), use_container_width=True)

st.divider()

# ---- Ranking
title_col, sort_col = st.columns([0.7, 0.3])
title_col.header("🏆 Company ranking")
sort_options = list(SORT_OPTIONS)
sort_by = sort_col.selectbox(
    "Sort by",
    options=sort_options,
    index=sort_options.index(SETTINGS.default_sort) if SETTINGS.default_sort in sort_options else 0,
    format_func=lambda k: SORT_OPTIONS[k][1],
)

ranked = rank_companies(companies, sort_by)
table = ranking_table(ranked)
table["details"] = table["id"].map(lambda cid: f"./Company?id={cid}")

def _badge_style(col):
    return [f"color: {BADGE_COLORS.get(b, '#374151')}; font-weight: 600" for b in table["badge"]]

st.dataframe(
    table.drop(columns=["id", "badge"]).style.apply(_badge_style, subset=["esg_score"]),
    use_container_width=True,
    hide_index=True,
    column_config={
        "rank": st.column_config.TextColumn("Rank"),
        "company": st.column_config.TextColumn("Company"),
        "plastic_kg": st.column_config.NumberColumn("Plastic (kg)", format="%,.0f"),
        "toys_kg": st.column_config.NumberColumn("Toys (kg)", format="%,.0f"),
        "collection_kg": st.column_config.NumberColumn("Total collection (kg)", format="%,.0f"),
        "co2_tonnes": st.column_config.NumberColumn("CO₂ reduction (t)", format="%.2f"),
        "participants": st.column_config.NumberColumn("Participants", format="%,.0f"),
        "esg_score": st.column_config.NumberColumn("ESG score", format="%d"),
        "details": st.column_config.LinkColumn("", display_text="Details"),
    },
)

# ---- Per-company composition
st.header("📊 Waste composition by company")
st.plotly_chart(composition_chart(comparison_frame(ranked)), use_container_width=True)

st.divider()

# ---- Time series
st.header("📈 Quarterly trends")
for company, points in timeseries_by_company(companies, series):
    with st.container(border=True):
        st.markdown(f"**{company.logo} {company.name}** · {company.total_participations} participations")
        st.plotly_chart(timeseries_chart(timeseries_frame(points)), use_container_width=True, key=f"trend_{company.id}")

st.divider()

# ---- Equivalences
st.header("🌍 Environmental impact equivalents")
eq = equivalences(totals.co2)
e1, e2, e3 = st.columns(3)
e1.metric("🌲 Pine trees", f"{eq.trees:,}", help="CO₂ absorbed by one pine tree in a year")
e2.metric("🚗 Cars off the road", f"{eq.car_years:.1f}", help="Passenger cars not driven for a year")
e3.metric("🧊 Arctic ice preserved", f"{eq.ice_area_m2:,} m²")

st.divider()

# ---- Export section (placeholders)
st.header("📥 Export data")
st.caption("Download the report in several formats for internal reporting and disclosure.")
render_export_buttons("bottom")

render_footer()
