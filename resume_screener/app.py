"""
Resume Screening System – Streamlit frontend.
No business logic in layout; extraction, ranking and analytics live in the engine.
"""

from datetime import date
from typing import List

import streamlit as st

from resume_screener.analytics.aggregator import summarize
from resume_screener.config import SUPPORTED_EXTENSIONS
from resume_screener.schemas.analytics import AnalyticsSnapshot
from resume_screener.schemas.match_result import MatchResult
from resume_screener.services.corpus import Corpus
from resume_screener.services.export_service import export_results_csv, format_score
from resume_screener.services.ingestion_service import ingest_files
from resume_screener.services.search_service import search_corpus

SKILL_BADGES_PREVIEW = 5


def _init_state() -> None:
    """Session state: one Corpus handle, last results."""
    if "corpus" not in st.session_state:
        st.session_state["corpus"] = Corpus()
    if "results" not in st.session_state:
        st.session_state["results"] = []
    if "searched" not in st.session_state:
        st.session_state["searched"] = False


def _badges(skills, limit: int = 0) -> str:
    shown = list(skills)[:limit] if limit else list(skills)
    text = " ".join(f"`{s}`" for s in shown)
    if limit and len(skills) > limit:
        text += f" +{len(skills) - limit} more"
    return text


def _render_upload(corpus: Corpus, snapshot: AnalyticsSnapshot) -> None:
    st.subheader("Upload Resumes")
    uploaded = st.file_uploader(
        "Upload resumes (PDF, DOCX or TXT)",
        type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
        accept_multiple_files=True,
        key="uploader",
    )
    if st.button("Process Resumes", type="primary", key="process_btn", disabled=not uploaded):
        files = [(f.name, f.getvalue()) for f in uploaded]
        with st.spinner(f"Processing {len(files)} resumes…"):
            added = ingest_files(files, corpus)
        skipped = len(files) - len(added)
        if added:
            st.success(f"Processed {len(added)} resumes successfully.")
        if skipped:
            st.warning(f"{skipped} file(s) could not be read and were skipped.")
        snapshot = summarize(corpus)

    c1, c2, c3 = st.columns(3)
    c1.metric("Total Resumes", snapshot.total_documents)
    c2.metric("Avg Skills/Resume", f"{snapshot.avg_skills_per_document:.1f}")
    c3.metric("Unique Skills", snapshot.unique_skills)

    if len(corpus):
        hcol, bcol = st.columns([4, 1])
        hcol.markdown("### Processed Resumes")
        if bcol.button("Clear All", key="clear_btn"):
            corpus.clear()
            st.session_state["results"] = []
            st.session_state["searched"] = False
            st.rerun()
        for doc in corpus:
            with st.container():
                st.markdown(f"**{doc.name}**")
                st.caption(doc.experience_bucket)
                if doc.skills:
                    st.markdown(_badges(doc.skills, SKILL_BADGES_PREVIEW))


def _render_search(corpus: Corpus) -> None:
    st.subheader("Search Candidates")
    job_description = st.text_area(
        "Job Description (Optional)",
        placeholder="Paste job description here…",
        key="job_description",
    )
    search_query = st.text_input(
        "Or Search by Skills/Keywords",
        placeholder="e.g. python machine learning, react developer, java spring boot",
        key="search_query",
    )
    if st.button("Run Search", type="primary", key="search_btn", disabled=not len(corpus)):
        st.session_state["results"] = search_corpus(corpus, search_query, job_description)
        st.session_state["searched"] = True
    if not len(corpus):
        st.info("Upload resumes first.")


def _render_results(results: List[MatchResult]) -> None:
    st.subheader(f"Results ({len(results)})")
    if not results:
        if st.session_state.get("searched"):
            st.warning("No candidates scored above the threshold. Try different keywords.")
        else:
            st.info("Run a search to rank candidates.")
        return
    st.download_button(
        "Export Results",
        data=export_results_csv(results),
        file_name=f"Resume_Results_{date.today().isoformat()}.csv",
        mime="text/csv",
        key="export_csv",
    )
    for idx, r in enumerate(results, start=1):
        with st.container():
            st.markdown("---")
            col_a, col_b = st.columns([4, 1])
            with col_a:
                st.markdown(f"### #{idx} {r.name}")
                st.caption(r.experience_bucket)
                if r.matched_skills:
                    st.markdown("**Matched Skills:** " + " ".join(f"✓ `{s}`" for s in r.matched_skills))
                if r.skills:
                    st.markdown("**All Skills:** " + _badges(r.skills))
            with col_b:
                st.metric("Match", format_score(r.score))


def _render_analytics(snapshot: AnalyticsSnapshot, results_count: int) -> None:
    st.subheader("Analytics")
    if not snapshot.total_documents:
        st.info("Upload resumes to see analytics.")
        return
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Top Skills in Database**")
        for skill, count in snapshot.skill_frequency.items():
            st.caption(f"{skill} ({count} candidates)")
            st.progress(count / snapshot.total_documents)
    with col2:
        st.markdown("**Experience Level Distribution**")
        for level, count in snapshot.experience_distribution.items():
            st.caption(f"{level}: {count}")
            st.progress(count / snapshot.total_documents)
    st.markdown("**Database Overview**")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Total Candidates", snapshot.total_documents)
    m2.metric("Unique Skills", snapshot.unique_skills)
    m3.metric("Avg Skills/Resume", f"{snapshot.avg_skills_per_document:.1f}")
    m4.metric("Matched Results", results_count)


def render_layout() -> None:
    """Streamlit page layout."""
    st.set_page_config(page_title="Resume Screening System", layout="wide")
    st.title("Resume Screening System")
    st.markdown("*TF-IDF matching · Skill extraction · Experience detection · Analytics*")
    st.divider()

    _init_state()
    corpus: Corpus = st.session_state["corpus"]

    upload_tab, search_tab, results_tab, analytics_tab = st.tabs(
        ["Upload Resumes", "Search", "Results", "Analytics"]
    )
    with upload_tab:
        _render_upload(corpus, summarize(corpus))
    with search_tab:
        _render_search(corpus)
    results: List[MatchResult] = st.session_state.get("results") or []
    with results_tab:
        _render_results(results)
    with analytics_tab:
        _render_analytics(summarize(corpus), len(results))


if __name__ == "__main__":
    render_layout()
