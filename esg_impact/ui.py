# esg_impact/ui.py
from __future__ import annotations
from pathlib import Path
import streamlit as st

from .config import SETTINGS, ROOT_DIR
from .metrics import round_half_up
from .models import ESGGrade

# What each placeholder button would do in a real build. Nothing is generated.
EXPORT_PLACEHOLDERS = {
    "pdf": (
        "📄 PDF report",
        [
            "Render the full dashboard to a PDF document",
            "Include company logos and branding",
            "Append automatically generated analysis notes",
        ],
    ),
    "excel": (
        "📊 Excel export",
        [
            "Write every figure on this page to an Excel workbook",
            "Embed the charts and graphs",
            "Add a ready-made sheet for pivot-table analysis",
        ],
    ),
    "png": (
        "🖼️ Save as image",
        [
            "Save the whole dashboard or a selected area as PNG",
            "Sized for slides and written reports",
        ],
    ),
}

INDUSTRIES = ["All", "IT/Tech", "Energy", "Manufacturing", "Finance"]

BADGE_COLORS = {"success": "#10B981", "info": "#3B82F6", "warning": "#F59E0B"}


def _banner_source() -> str | None:
    """
    Returns a valid image source or None if not found.
    Accepts: http(s) URLs or a path relative to the project root.
    """
    src = SETTINGS.brand_banner
    if not src:
        return None
    if src.startswith("http://") or src.startswith("https://"):
        return src
    p = Path(src)
    if not p.is_absolute():
        p = ROOT_DIR / p
    return str(p) if p.exists() else None


def render_banner() -> None:
    src = _banner_source()
    if src:
        st.image(src, use_container_width=True)


def render_footer() -> None:
    """
    Subtle, grey, footnote-style footer. Keep it small and out of the way.
    """
    note = SETTINGS.footer_note or (
        f"Figures are pre-computed collection results for {SETTINGS.report_period}. "
        "CO₂ values in tonnes, collection in kg."
    )
    st.markdown(
        f"""
        <div style="
            margin-top: 1rem;
            padding-top: .5rem;
            border-top: 1px solid rgba(0,0,0,.08);
            color: #6b7280;
            font-size: 12px;
            line-height: 1.3;
        ">
            {note}
        </div>
        """,
        unsafe_allow_html=True,
    )


def fmt_int(x) -> str:
    return f"{int(round_half_up(x)):,}" if x is not None else "—"


def fmt_pct(x: int | None) -> str:
    return f"{x}%" if x is not None else "—"


def render_grade_card(avg_score: int, grade: ESGGrade) -> None:
    st.markdown(
        f"""
        <div style="
            background: linear-gradient(135deg, #10B981 0%, #3B82F6 100%);
            color: white; text-align: center;
            padding: 1.5rem; border-radius: .75rem;
        ">
            <div style="font-size: 1.25rem;">Combined average ESG score</div>
            <div style="font-size: 3.5rem; font-weight: 700;">{avg_score}</div>
            <span style="
                background: white; color: {grade.color};
                font-size: 1.4rem; font-weight: 600;
                padding: .35rem 1.25rem; border-radius: 999px;
            ">{grade.grade}</span>
            <div style="margin-top: .75rem; opacity: .95;">{grade.description}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _placeholder_dialog(kind: str) -> None:
    title, bullets = EXPORT_PLACEHOLDERS[kind]

    @st.dialog(f"{title} (demo)")
    def _show():
        st.write("This button is a placeholder. A real implementation would:")
        st.markdown("\n".join(f"- {b}" for b in bullets))

    _show()


def render_export_buttons(key_prefix: str) -> None:
    cols = st.columns(len(EXPORT_PLACEHOLDERS))
    for col, kind in zip(cols, EXPORT_PLACEHOLDERS):
        if col.button(EXPORT_PLACEHOLDERS[kind][0], key=f"{key_prefix}_{kind}", use_container_width=True):
            _placeholder_dialog(kind)


def render_industry_filter() -> None:
    """Industry chips; demo only, selection does not filter anything."""
    with st.container(border=True):
        st.markdown("**🔍 Filter by industry** · _demo: a real build would compare against the industry average_")
        cols = st.columns(len(INDUSTRIES))
        for col, name in zip(cols, INDUSTRIES):
            if col.button(name, key=f"industry_{name}", type="primary" if name == "All" else "secondary"):
                if name != "All":
                    st.toast(f"Industry filter is a demo; '{name}' shows all companies.")
